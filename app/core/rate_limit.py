"""Application-wide rate limiter instance.

Lives in its own module so route modules can decorate endpoints with
``limiter.limit`` without importing ``app.main``.
"""

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import settings


def client_ip(request: Request) -> str:
    if settings.TRUST_PROXY_HEADERS:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()
        real_ip = request.headers.get("x-real-ip")
        if real_ip:
            return real_ip.strip()
    return get_remote_address(request)


def recommend_limit() -> str:
    return settings.RECOMMEND_RATE_LIMIT


limiter = Limiter(key_func=client_ip)
