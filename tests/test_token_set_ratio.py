try:
    from rapidfuzz import fuzz  # noqa: F401
    RAPIDFUZZ_OK = True
except Exception:  # pragma: no cover - environment without rapidfuzz
    RAPIDFUZZ_OK = False

import pytest
from correlator import SCORER_REGISTRY


@pytest.mark.skipif(not RAPIDFUZZ_OK, reason="rapidfuzz not installed")
def test_same_tokens_different_order():
    f = SCORER_REGISTRY["token_set_ratio"]
    s = f("canada boards of", "boards of canada")
    assert s > 0.9


@pytest.mark.skipif(not RAPIDFUZZ_OK, reason="rapidfuzz not installed")
def test_duplicates_still_high():
    f = SCORER_REGISTRY["token_set_ratio"]
    s = f("live live at leeds", "live at leeds")
    assert s > 0.85


@pytest.mark.skipif(not RAPIDFUZZ_OK, reason="rapidfuzz not installed")
def test_unrelated_low():
    f = SCORER_REGISTRY["token_set_ratio"]
    s = f("aphex twin", "sigur ros")
    assert s < 0.3


@pytest.mark.skipif(not RAPIDFUZZ_OK, reason="rapidfuzz not installed")
def test_empty_sides():
    f = SCORER_REGISTRY["token_set_ratio"]
    assert f("", "") == 1.0
    assert f("kid a", "") == 0.0
