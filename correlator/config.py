"""
Matching configuration with environment variable overrides.

- Precedence: environment > built-in defaults
- Keys:
  - ARTIST_THRESHOLD: float, minimum score for two artist names to match
  - TITLE_THRESHOLD: float, minimum score for two album titles to match
  - DUPLICATE_THRESHOLD: float, applied to both artist and title when
    looking for duplicate entries in the collection
  - DEFAULT_SCORER: str, registry name used when a caller names none
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "ARTIST_THRESHOLD": 0.8,
    "TITLE_THRESHOLD": 0.9,
    "DUPLICATE_THRESHOLD": 0.85,
    "DEFAULT_SCORER": "osa_ratio",
}

ENV_MAP = {
    "ARTIST_THRESHOLD": "CATALOG_ARTIST_THRESHOLD",
    "TITLE_THRESHOLD": "CATALOG_TITLE_THRESHOLD",
    "DUPLICATE_THRESHOLD": "CATALOG_DUPLICATE_THRESHOLD",
    "DEFAULT_SCORER": "CATALOG_DEFAULT_SCORER",
}

_THRESHOLD_KEYS = ("ARTIST_THRESHOLD", "TITLE_THRESHOLD", "DUPLICATE_THRESHOLD")


def _parse_threshold(env_name: str, raw: str) -> Optional[float]:
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number", env_name, raw)
        return None
    if not 0.0 <= value <= 1.0:
        logger.warning("Ignoring %s=%r: threshold must be within [0, 1]", env_name, raw)
        return None
    return value


def _apply_env_overrides(cfg: Dict[str, Any], environ: Mapping[str, str]) -> Dict[str, Any]:
    out = dict(cfg)
    for key, env_name in ENV_MAP.items():
        val = environ.get(env_name)
        if val is None:
            continue
        if key in _THRESHOLD_KEYS:
            parsed = _parse_threshold(env_name, val)
            if parsed is not None:
                out[key] = parsed
        elif val.strip():
            out[key] = val.strip()
        else:
            logger.warning("Ignoring empty %s", env_name)
    return out


def load_config(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Load effective config: env > defaults."""
    if environ is None:
        environ = os.environ
    return _apply_env_overrides(DEFAULTS, environ)


config = load_config()
