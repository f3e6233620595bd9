"""
Normalized edit-distance ratio (RapidFuzz OSA).

Summary:
- Computes `1 - OSA(a, b) / max(len(a), len(b))`, where OSA is the optimal
  string alignment distance: Levenshtein insertions, deletions and
  substitutions plus adjacent transpositions, each costing one edit.

When to use:
- Default scorer for artist and album names. A single typo or swapped pair of
  letters ("Raidohead") costs one edit, so a nine-letter name still scores
  about 0.89.

Limitations:
- Order-sensitive: "Canada Boards of" scores low against "Boards of Canada".
  Use `token_set_ratio` when word order varies.

Score range:
- Returns a float in [0.0, 1.0]. Both empty -> 1.0; exactly one empty -> 0.0.
"""

from rapidfuzz.distance import OSA

from .registry import register


@register("osa_ratio")
def score_osa_ratio(text_a: str, text_b: str) -> float:
    a = (text_a or "").strip()
    b = (text_b or "").strip()
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    return float(OSA.normalized_similarity(a, b))
