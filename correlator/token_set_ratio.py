"""
Token Set Ratio scorer (RapidFuzz).

Summary:
- Order-insensitive word matching with duplicate handling. Uses
  `rapidfuzz.fuzz.token_set_ratio` and maps the percentage to [0, 1].

When to use:
- Labels whose word order differs between sources, e.g. "Canada, Boards of"
  from a sorted catalog export vs. "Boards of Canada" typed by hand.

Limitations:
- A label that is a word subset of the other scores 1.0 ("Live" vs
  "Live at Leeds"), so it is too loose for album titles on its own.

Score range:
- Returns a float in [0.0, 1.0]. Both empty -> 1.0; exactly one empty -> 0.0.
"""

from rapidfuzz import fuzz

from .registry import register


@register("token_set_ratio")
def score_token_set_ratio(text_a: str, text_b: str) -> float:
    a = (text_a or "").strip()
    b = (text_b or "").strip()
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    return fuzz.token_set_ratio(a, b) / 100.0
