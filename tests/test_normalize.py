"""Tests for the building blocks — normalizer, stretch expander, FilterSet."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from word_filter import normalize, expand, FilterSet, Mode, InvalidInput, InvalidPattern
from word_filter.normalize import space_punctuation, strip_accents
from word_filter.stretch import runs


# ── Normalizer ───────────────────────────────────────────────────────

def test_leetspeak_table():
    assert normalize("l3mm3 g3t 5um 4elp") == "lemme get sum help"


def test_every_substitution():
    assert normalize("!@$3816¡5047 9") == "iasebibisoht g"


def test_accents_stripped():
    assert normalize("café") == normalize("cafe") == "cafe"
    assert normalize("ÀÉÎÕÜ") == "aeiou"


def test_case_insensitive():
    for s in ["You Are BAD", "Straße", "ÉCOLE 3", "mIxEd CaSe!"]:
        assert normalize(s) == normalize(s.upper())


def test_idempotent():
    for s in ["a -- b", "  lots   of    space  ", "x.y,z", "b@d w0rd!!", "naïve 100%"]:
        once = normalize(s)
        assert normalize(once) == once


def test_output_is_letters_and_single_spaces():
    out = normalize("Hey!!  you -- 2 the   #max ☺")
    assert set(out) <= set("abcdefghijklmnopqrstuvwxyz ")
    assert "  " not in out


def test_punctuation_splits_words():
    assert normalize("bad.word") == "bad word"
    assert normalize("bad,word") == "bad word"
    assert space_punctuation("a.b, c") == "a. b, c"


def test_empty_input():
    assert normalize("") == ""


def test_strip_accents_keeps_base_letters():
    assert strip_accents("ñandú") == "nandu"


# ── Stretch expander ─────────────────────────────────────────────────

def test_runs():
    assert runs("sooob") == ["s", "ooo", "b"]
    assert runs("") == []


def test_expand_single_run():
    assert set(expand("sooob", 0)) == {"soob", "sob"}


def test_expand_no_repeats():
    assert expand("abc", 0) == ("abc",)


def test_expand_two_runs():
    assert set(expand("aabb", 0)) == {"aabb", "aab", "abb", "ab"}


def test_expand_keeps_run_order():
    variants = expand("ssaa", 0)
    assert all(v.startswith("s") and v.endswith("a") for v in variants)
    assert len(variants) == len(set(variants)) == 4


def test_expand_short_word_skipped():
    assert expand("soo", 3) == ("soo",)
    assert expand("sooo", 3) == ("soo", "so")


def test_expand_bounded_by_max_runs():
    word = "aabbccdd"
    assert expand(word, 0, max_runs=3) == (word,)
    assert len(expand(word, 0, max_runs=4)) == 16


# ── FilterSet ────────────────────────────────────────────────────────

def test_dictionary_exact_match():
    fs = FilterSet.build(["bad"])
    assert fs.mode is Mode.DICTIONARY
    assert fs.is_match("bad")
    assert not fs.is_match("badly")
    assert not fs.is_match("bbad")


def test_min_term_length():
    assert FilterSet.build(["hello", "bad", "dumbo"]).min_term_length == 3
    assert FilterSet.build([]).min_term_length == 0
    assert FilterSet.build(["bad"], use_regex=True).min_term_length == 0


def test_empty_filter_set_matches_nothing():
    fs = FilterSet.build([])
    assert not fs.is_match("")
    assert not fs.is_match("anything")


def test_pattern_search_not_anchored():
    fs = FilterSet.build([r"b+a+d"], use_regex=True)
    assert fs.mode is Mode.PATTERN
    assert fs.is_match("sobaaad")
    assert fs.is_match("BAD")
    assert not fs.is_match("good")


def test_invalid_pattern_rejected_at_build():
    with pytest.raises(InvalidPattern) as exc:
        FilterSet.build(["ok", "(unclosed"], use_regex=True)
    assert exc.value.source == "(unclosed"
    assert isinstance(exc.value, ValueError)


def test_non_string_term_rejected():
    with pytest.raises(InvalidInput):
        FilterSet.build(["bad", 3])
    with pytest.raises(InvalidInput):
        FilterSet.build("bad")
