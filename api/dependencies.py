"""FastAPI dependencies shared by the route modules.

Provides the rate limiter and client IP resolution.
Includes trusted proxy validation to prevent X-Forwarded-For spoofing.
"""

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from core.config import RATE_LIMIT, TRUSTED_PROXIES


# Rate limiter configuration
# Uses client IP for rate limit tracking
limiter = Limiter(key_func=get_remote_address, default_limits=[RATE_LIMIT])


def get_client_ip(request: Request) -> str:
    """Extract client IP from request with trusted proxy validation.

    SECURITY: Only trusts X-Forwarded-For header if the direct connection
    comes from a configured trusted proxy. This prevents clients from
    spoofing their IP address in the event log.

    Configure trusted proxies via TRUSTED_PROXIES environment variable.
    Example: TRUSTED_PROXIES=10.0.0.1,172.17.0.1

    Args:
        request: FastAPI request object

    Returns:
        Client IP address (from X-Forwarded-For if trusted proxy, else direct)
    """
    direct_ip = request.client.host if request.client else "unknown"

    if TRUSTED_PROXIES and direct_ip in TRUSTED_PROXIES:
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            # Take the first IP in the chain (original client)
            client_ip = forwarded.split(",")[0].strip()
            if client_ip and ("." in client_ip or ":" in client_ip):
                return client_ip

    return direct_ip
