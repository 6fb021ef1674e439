"""Security headers middleware.

Adds the usual hardening headers to every response. Development mode relaxes
the content security policy so preview tooling can inject its scripts.
"""
from typing import Callable, Dict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

PRODUCTION_CSP = (
    "default-src 'self'; base-uri 'self'; font-src 'self' https: data:; "
    "form-action 'self'; frame-ancestors 'self'; img-src 'self' data:; "
    "object-src 'none'; script-src 'self'; script-src-attr 'none'; "
    "style-src 'self' https: 'unsafe-inline'; upgrade-insecure-requests"
)
DEVELOPMENT_CSP = "default-src 'self'; script-src 'self' https://vercel.live; object-src 'none'"


def build_security_headers(development: bool) -> Dict[str, str]:
    """Return the header set for the given environment mode."""
    return {
        "Content-Security-Policy": DEVELOPMENT_CSP if development else PRODUCTION_CSP,
        "Cross-Origin-Resource-Policy": "cross-origin",
        "Referrer-Policy": "no-referrer",
        "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "SAMEORIGIN",
    }


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Set security headers on responses that do not already carry them."""

    def __init__(self, app, development: bool = False):
        super().__init__(app)
        self.headers = build_security_headers(development)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        for name, value in self.headers.items():
            response.headers.setdefault(name, value)
        return response
