"""Process-level settings read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Final

logger = logging.getLogger(__name__)

DISABLE_ARRAY_PACKING_ENV: Final[str] = "HOF_JAX_DISABLE_ARRAY_PACKING"

_FLAG_VALUES: Final[dict[str, bool]] = {"0": False, "1": True}


@dataclass(frozen=True)
class Settings:
    pack_arrays: bool = True


def _read_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = _FLAG_VALUES.get(raw.strip())
    if value is None:
        logger.warning("Ignoring %s=%r; expected '0' or '1'", name, raw)
        return default
    return value


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Read settings once; call ``load_settings.cache_clear()`` to re-read."""
    return Settings(pack_arrays=not _read_flag(DISABLE_ARRAY_PACKING_ENV, False))
