"""Error reporting for the HTTP clients.

The library never initialises Sentry on import. A host service that wants
client failures reported calls :func:`init_sentry` during startup; with no
``SENTRY_DSN`` configured that call returns ``False`` and reporting stays off.
The HTTP helper hands every request that never got an answer to
:func:`sentry_capture`, tagged with the method and URL.

Usage
-----
```python
from core_contracts.sentry import init_sentry

init_sentry(release="device-virtual@2.0.0")
client = EventClient("http://core-data:59880")
```
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional

import sentry_sdk

from core_contracts.config import get_settings

__all__ = ["init_sentry", "sentry_capture"]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def init_sentry(*, release: str | None = None, env: str | None = None) -> bool:
    """Initialise sentry-sdk from the settings; ``False`` when no DSN is set."""
    settings = get_settings()
    if not settings.sentry_dsn:
        return False

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        release=release,
        environment=env or settings.env,
        max_value_length=4_096,
    )
    return True


def sentry_capture(exc: BaseException, *, extras: Optional[dict[str, Any]] = None) -> None:
    """Report *exc* with *extras* attached; a no-op until Sentry is initialised."""
    if not sentry_sdk.is_initialized():
        return

    with sentry_sdk.new_scope() as scope:
        for key, value in (extras or {}).items():
            scope.set_extra(key, value)
        sentry_sdk.capture_exception(exc)
