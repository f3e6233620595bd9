"""
Global scorer registry.

`SCORER_REGISTRY` maps a scorer name to a callable
`(text_a: str, text_b: str) -> float` returning a similarity in [0.0, 1.0].
Scorer modules add themselves with `@register("<name>")` when imported.
"""

import logging
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)

Scorer = Callable[[str, str], float]

SCORER_REGISTRY: Dict[str, Scorer] = {}


def register(name: str) -> Callable[[Scorer], Scorer]:
    """Decorator adding a scorer under `name`; a later registration wins."""

    def decorator(func: Scorer) -> Scorer:
        if name in SCORER_REGISTRY and SCORER_REGISTRY[name] is not func:
            logger.debug("Replacing scorer %r", name)
        SCORER_REGISTRY[name] = func
        return func

    return decorator


def available_scorers() -> List[str]:
    return sorted(SCORER_REGISTRY)
