"""Per-client request limits (slowapi).

``RATE_LIMIT_DEFAULT`` applies to every route through ``SlowAPIMiddleware``;
the tracking routes carry their own, looser ``TRACKING_RATE_LIMIT`` because
the mobile tracker posts on a timer.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from hrdesk.config import Settings, settings


def build_limiter(config: Settings) -> Limiter:
    """Limiter keyed on client address, counting in ``RATE_LIMIT_STORAGE_URI``."""
    return Limiter(
        key_func=get_remote_address,
        default_limits=[config.RATE_LIMIT_DEFAULT],
        storage_uri=config.RATE_LIMIT_STORAGE_URI,
        enabled=config.RATE_LIMIT_ENABLED,
    )


limiter = build_limiter(settings)
