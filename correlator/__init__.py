"""
Fuzzy correlation of artist and album labels for a music catalog.

Exposes `similarity` / `are_similar`, the normalizer, and `SCORER_REGISTRY`.
Scorer modules are imported here for side-effect registration.
"""

import logging

from .registry import SCORER_REGISTRY, available_scorers  # noqa: F401

# Import modules that register themselves in the registry on import.
from . import osa_ratio  # noqa: F401  # side-effect: registers 'osa_ratio'
from . import token_set_ratio  # noqa: F401  # side-effect: registers 'token_set_ratio'

from .config import DEFAULTS, config
from .normalize import normalize  # noqa: F401
from .similarity import are_similar, get_scorer, similarity  # noqa: F401

logger = logging.getLogger(__name__)

try:
    from . import tfidf_char_cosine  # noqa: F401  # side-effect: registers 'tfidf_char_cosine'
except ImportError as e:  # pragma: no cover - environment without scikit-learn
    logger.debug("tfidf_char_cosine scorer unavailable: %s", e)

if config["DEFAULT_SCORER"] not in SCORER_REGISTRY:
    logger.warning(
        "Unknown default scorer %r; falling back to %r",
        config["DEFAULT_SCORER"],
        DEFAULTS["DEFAULT_SCORER"],
    )
    config["DEFAULT_SCORER"] = DEFAULTS["DEFAULT_SCORER"]
