# Phrasegen Middleware
from phrasegen.middleware.security import SecurityMiddleware
from phrasegen.middleware.rate_limit import RateLimiter, rate_limiter

__all__ = ["SecurityMiddleware", "RateLimiter", "rate_limiter"]
