"""Security headers middleware for FastAPI"""
from fastapi import Request
from fastapi.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware

# Header set of helmet() defaults
DEFAULT_HEADERS = {
    "Content-Security-Policy": (
        "default-src 'self'; "
        "base-uri 'self'; "
        "font-src 'self' https: data:; "
        "form-action 'self'; "
        "frame-ancestors 'self'; "
        "img-src 'self' data:; "
        "object-src 'none'; "
        "script-src 'self'; "
        "script-src-attr 'none'; "
        "style-src 'self' https: 'unsafe-inline'; "
        "upgrade-insecure-requests"
    ),
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses"""

    def __init__(self, app, headers: dict = None):
        super().__init__(app)
        self.headers = dict(DEFAULT_HEADERS)
        if headers:
            self.headers.update(headers)

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)

        for name, value in self.headers.items():
            response.headers.setdefault(name, value)

        # Never advertise the server stack
        if "x-powered-by" in response.headers:
            del response.headers["x-powered-by"]

        return response
