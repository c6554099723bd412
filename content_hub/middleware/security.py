"""Security headers middleware."""

from fastapi import Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.types import ASGIApp

SECURITY_HEADERS: dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Strict-Transport-Security": "max-age=31536000",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses.

    Admin pages and admin API responses are additionally marked
    ``Cache-Control: no-store`` so that shared caches never keep them.
    """

    def __init__(self, app: ASGIApp, admin_prefixes: tuple[str, ...] = ()) -> None:
        """
        Initialize middleware.

        Args:
        ----
            app: The ASGI application
            admin_prefixes: Path prefixes whose responses must not be cached
        """
        super().__init__(app)
        self.security_headers = dict(SECURITY_HEADERS)
        self.admin_prefixes = admin_prefixes

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)

        for header_name, header_value in self.security_headers.items():
            response.headers.setdefault(header_name, header_value)

        if self.admin_prefixes and request.url.path.startswith(self.admin_prefixes):
            response.headers["Cache-Control"] = "no-store"

        return response
