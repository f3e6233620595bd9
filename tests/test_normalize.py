import pytest

from correlator.normalize import comparable, normalize, strip_accents, strip_bracketed


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("  Sigur   Rós ", "sigur ros"),
        ("Geogaddi (Remastered)", "geogaddi"),
        ("Kid A [Collector's Edition]", "kid a"),
        ("((Nested) Edition) Album", "album"),
        ("Simon & Garfunkel", "simon and garfunkel"),
        ("AC/DC", "ac dc"),
        ("Mötley Crüe", "motley crue"),
        ("Tomorrow's Harvest", "tomorrow s harvest"),
        ("snake_case_title", "snake case title"),
        ("Unbalanced (paren", "unbalanced paren"),
    ],
)
def test_normalize_examples(raw, expected):
    assert normalize(raw) == expected


def test_empty_and_none():
    assert normalize("") == ""
    assert normalize(None) == ""
    assert normalize("   \t\n ") == ""
    assert normalize("(Remastered)") == ""


def test_combining_characters_fold_to_base_letter():
    assert normalize("Bjo\u0308rk") == normalize("Bj\u00f6rk") == "bjork"


@pytest.mark.parametrize(
    "raw",
    [
        "Radiohead",
        "  Boards   of Canada  ",
        "Straße",
        "İstanbul",
        "ℌello",  # script capital H
        "ﬁre",
        "((a) b) c",
        "Tom & Jerry + Friends",
        "é́",
        "\ud800broken",
        "日本語 アルバム",
    ],
)
def test_normalize_is_idempotent(raw):
    once = normalize(raw)
    assert normalize(once) == once


def test_strip_accents():
    assert strip_accents("Beyoncé") == "Beyonce"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("kid a (live)", "kid a  "),
        ("a ((b) c) d", "a   d"),
        ("a (b [c) d] e", "a   d] e"),
        ("no brackets", "no brackets"),
        ("stray ) closer (", "stray ) closer ("),
    ],
)
def test_strip_bracketed(raw, expected):
    assert strip_bracketed(raw) == expected


def test_deeply_nested_brackets():
    deep = "(" * 20000 + "a" + ")" * 20000
    assert normalize(deep + " Geogaddi") == "geogaddi"
    assert normalize(deep) == ""


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Geogaddi (Remastered)", "geogaddi"),
        ("!!!", "!!!"),
        ("  ( )  ", "( )"),
        ("¡Ñ!", "n"),
        ("", ""),
        (None, ""),
        ("   ", ""),
    ],
)
def test_comparable_keeps_punctuation_only_labels(raw, expected):
    assert comparable(raw) == expected
