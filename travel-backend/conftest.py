"""
Root conftest - shared pytest configuration and fixtures.
Ensures app package is discoverable when running pytest from travel-backend/.
"""
import sys
from pathlib import Path

# Ensure travel-backend root is in path for 'from app...' imports
_root = Path(__file__).resolve().parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))
