"""
Travel Journal Backend Application root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain logic and infrastructure (MongoDB repositories, local image storage)
for the travel journal: accounts, image uploads and travel stories.
"""
