"""Logging setup for mayacal entry points.

The level comes from :class:`~mayacal.runtime_config.RuntimeSettings`
(``LOG_LEVEL``); this module never reads the environment itself.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from mayacal.runtime_config import RuntimeSettings

__all__ = ["configure_logging", "resolve_level"]

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"
_FALLBACK_LEVEL = logging.WARNING


def resolve_level(value: str | int | None) -> int:
    """Map a level name (any case) or number to a :mod:`logging` level.

    Blank or unknown names resolve to ``WARNING``, the CLI's quiet default.
    """

    if isinstance(value, int):
        return value
    candidate = (value or "").strip()
    if candidate.isdigit():
        return int(candidate)
    resolved = logging.getLevelName(candidate.upper()) if candidate else None
    return resolved if isinstance(resolved, int) else _FALLBACK_LEVEL


def configure_logging(settings: RuntimeSettings | None = None) -> int:
    """Point the root logger at stderr using the configured level.

    Without ``settings`` the environment is resolved through
    :func:`mayacal.runtime_config.load_settings`. Returns the applied level.
    """

    if settings is None:
        from mayacal.runtime_config import load_settings

        settings = load_settings()

    level = resolve_level(settings.log_level)
    logging.basicConfig(level=level, format=_FORMAT, datefmt=_DATEFMT, force=True)
    logging.getLogger("mayacal").debug("Logging configured at %s", logging.getLevelName(level))
    return level
