"""
Security middleware for request filtering
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from phrasegen.config import settings
from phrasegen.middleware.rate_limit import rate_limiter
from phrasegen.logging_config import log_rate_limited
from phrasegen.services.telemetry import RATE_LIMITED_REQUESTS, increment_counter
from phrasegen.utils.network import get_client_ip


class SecurityMiddleware(BaseHTTPMiddleware):
    """
    Middleware that runs before route handlers
    - Applies rate limiting per client IP (proxy headers only from trusted proxies)
    - Adds security headers so passphrases are never cached
    """

    # Paths that skip rate limiting
    BYPASS_PATHS = {"/health", "/health/ready"}

    def __init__(self, app, limiter=None, active_settings=None):
        super().__init__(app)
        self.limiter = limiter or rate_limiter
        self.settings = active_settings or settings

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path in self.BYPASS_PATHS:
            response = await call_next(request)
            return self._add_security_headers(response)

        client_ip = get_client_ip(request, self.settings)
        allowed = self.limiter.is_allowed(client_ip)
        self.limiter.maybe_cleanup()

        if not allowed:
            log_rate_limited(client_ip)
            increment_counter(RATE_LIMITED_REQUESTS)
            return self._add_security_headers(JSONResponse(
                status_code=429,
                content={"error": "rate_limited", "message": "Too many requests"}
            ))

        response = await call_next(request)
        return self._add_security_headers(response)

    def _add_security_headers(self, response: Response) -> Response:
        """Add security headers to response"""
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate"
        response.headers["Pragma"] = "no-cache"
        response.headers["Content-Security-Policy"] = "default-src 'self'"
        return response
