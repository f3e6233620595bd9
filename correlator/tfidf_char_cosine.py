"""
TF-IDF character n-gram cosine similarity.

Summary:
- Builds TF-IDF vectors over character n-grams (3-5 by default, word-boundary
  aware) with L2 normalization and returns the cosine similarity of the two
  labels.

Pros:
- Tolerant to typos, small insertions/deletions and partial word reordering.

Cons:
- Fits a vectorizer per pair, which is slow when scanning a whole wantlist
  against a discography. Requires scikit-learn.
- `char_wb` pads each word with spaces, so even a one-letter word yields one
  3-gram; with `ngram_low` above a word's padded length that word yields
  none, and a pair with no n-grams at all makes scikit-learn raise ValueError.

Score range:
- Returns a float in [0.0, 1.0]. Both empty -> 1.0; exactly one empty -> 0.0.
"""

from __future__ import annotations

from typing import cast

try:
    from sklearn.feature_extraction.text import TfidfVectorizer
    from sklearn.metrics.pairwise import cosine_similarity
except ImportError as e:  # pragma: no cover - environment without dependency
    raise ImportError(
        "scikit-learn is required for 'tfidf_char_cosine'. "
        "Install with: pip install scikit-learn"
    ) from e

from .registry import register


@register("tfidf_char_cosine")
def score_tfidf_char_cosine(
    text_a: str,
    text_b: str,
    ngram_low: int = 3,
    ngram_high: int = 5,
) -> float:
    """Compute cosine similarity over TF-IDF character n-grams.

    Method: vectorize both labels with a `char_wb` analyzer over
    `ngram_low`..`ngram_high` grams (L2 norm), then take the cosine of the two
    rows.

    Returns a Python float in [0.0, 1.0].
    """
    a = (text_a or "").strip().lower()
    b = (text_b or "").strip().lower()

    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    if a == b:
        return 1.0

    vec = TfidfVectorizer(
        analyzer="char_wb", ngram_range=(ngram_low, ngram_high), lowercase=False, norm="l2"
    )
    X = vec.fit_transform([a, b])
    sim = cosine_similarity(X[0], X[1])[0, 0]
    return float(max(0.0, min(1.0, cast(float, sim))))
