"""
Pairwise correlation of free-text labels.

`similarity` normalizes both labels and scores them with a registered scorer;
`are_similar` thresholds that score. Both are pure: no state is kept between
calls and no input is mutated, so they can be called from any thread.

Thresholds in use across the catalog: 0.8 for artist names, 0.9 for album
titles (titles vary more and a false "already owned" hides a missing album).
"""

from __future__ import annotations

from typing import Callable, Optional

from .config import config
from .normalize import comparable
from .registry import SCORER_REGISTRY


def get_scorer(name: Optional[str] = None) -> Callable[[str, str], float]:
    """Return the registered scorer `name`, or the configured default.

    Raises KeyError for a name that is not registered.
    """
    key = name or config["DEFAULT_SCORER"]
    try:
        return SCORER_REGISTRY[key]
    except KeyError:
        raise KeyError(
            f"Unknown scorer {key!r}; available: {sorted(SCORER_REGISTRY)}"
        ) from None


def similarity(text_a: Optional[str], text_b: Optional[str], scorer: Optional[str] = None) -> float:
    """Score how closely two labels agree after normalization.

    Returns a float in [0.0, 1.0]. Two labels that are both empty (or only
    whitespace) score 1.0; exactly one empty scores 0.0. A label of pure
    punctuation is not empty: see `normalize.comparable`. Callers that must
    not match on a blank field should use `are_similar(..., allow_empty=False)`.
    """
    a = comparable(text_a)
    b = comparable(text_b)
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    if a == b:
        return 1.0
    # Fixed argument order keeps every scorer exactly symmetric.
    a, b = sorted((a, b))
    score = float(get_scorer(scorer)(a, b))
    return max(0.0, min(1.0, score))


def are_similar(
    text_a: Optional[str],
    text_b: Optional[str],
    threshold: float = 0.8,
    *,
    scorer: Optional[str] = None,
    allow_empty: bool = True,
) -> bool:
    """True when `similarity(text_a, text_b) >= threshold`.

    With `allow_empty=False` a blank label never matches, not even another
    blank one.
    """
    if not allow_empty and (not comparable(text_a) or not comparable(text_b)):
        return False
    return similarity(text_a, text_b, scorer=scorer) >= threshold
