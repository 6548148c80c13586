"""
Per-application slowapi rate limiter, keyed by client address.

The limit comes from ``Settings.rate_limit`` and is applied to every
route as a default limit through ``SlowAPIMiddleware``, so each app built
by ``create_app`` enforces its own settings.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from ridewise.config import Settings


def build_limiter(settings: Settings) -> Limiter:
    return Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
