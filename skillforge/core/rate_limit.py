"""Rate limiting for the skill endpoints."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from skillforge.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def invoke_rate_limit() -> str:
    """Limit applied to skill invocations, resolved per request."""
    return get_settings().SKILL_INVOKE_RATE_LIMIT
