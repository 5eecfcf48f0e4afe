"""HTTP middleware: security headers and request timeout"""
from .security_headers import DEFAULT_HEADERS, SecurityHeadersMiddleware
from .timeout import CustomTimeoutMiddleware

__all__ = ["DEFAULT_HEADERS", "SecurityHeadersMiddleware", "CustomTimeoutMiddleware"]
