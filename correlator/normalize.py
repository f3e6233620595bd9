"""
Label normalization for artist and album names.

`normalize` turns a free-text label into the canonical form every scorer
compares:

- compatibility decomposition (NFKD) with combining marks dropped, so
  "Björk" and "Bjork" agree;
- case folding;
- "&" and "+" spelled out as "and";
- bracketed qualifiers removed entirely: "(Remastered)", "[Deluxe Edition]",
  "{Bonus}";
- any other non-alphanumeric character replaced by a space;
- whitespace collapsed and trimmed.

The steps repeat until the text stops changing, which makes the function
idempotent: `normalize(normalize(x)) == normalize(x)`.

`comparable` is what the correlator actually scores. It is `normalize` except
for labels made only of punctuation or brackets ("!!!", Sigur Rós's "( )"),
which keep a lighter form (accents dropped, case folded, whitespace
collapsed) instead of collapsing to the empty string.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Optional

_OPENERS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = {")": "(", "]": "[", "}": "{"}
_AND_RE = re.compile(r"\s*[&+]\s*")
_NON_ALNUM_RE = re.compile(r"[\W_]+")
_SPACES_RE = re.compile(r"\s+")


def strip_accents(text: str) -> str:
    """Remove combining marks after NFKD decomposition."""
    nfkd = unicodedata.normalize("NFKD", text)
    return "".join(c for c in nfkd if not unicodedata.combining(c))


def strip_bracketed(text: str) -> str:
    """Drop every balanced `()`, `[]`, `{}` group, nested ones included.

    Single pass: a closer cuts the output back to its nearest matching opener.
    Unmatched brackets are kept as ordinary characters.
    """
    out = []
    stack = []  # (opener, index in out)
    open_counts = {opener: 0 for opener in _OPENERS}
    for ch in text:
        if ch in _OPENERS:
            stack.append((ch, len(out)))
            open_counts[ch] += 1
            out.append(ch)
        elif ch in _CLOSERS and open_counts[_CLOSERS[ch]]:
            opener = _CLOSERS[ch]
            while True:
                top, pos = stack.pop()
                open_counts[top] -= 1
                if top == opener:
                    break
            del out[pos:]
            out.append(" ")
        else:
            out.append(ch)
    return "".join(out)


def _normalize_once(text: str) -> str:
    text = strip_accents(text).casefold()
    text = _AND_RE.sub(" and ", text)
    text = strip_bracketed(text)
    text = _NON_ALNUM_RE.sub(" ", text)
    return _SPACES_RE.sub(" ", text).strip()


def normalize(text: Optional[str]) -> str:
    if not text:
        return ""
    prev = None
    while text != prev:
        prev = text
        text = _normalize_once(text)
    return text


def comparable(text: Optional[str]) -> str:
    """`normalize(text)`, or a lighter form when that would erase the label."""
    full = normalize(text)
    if full or not text:
        return full
    return " ".join(strip_accents(text).casefold().split())
