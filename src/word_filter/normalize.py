"""Text normalization — undo the cheap tricks people use to dodge a filter.

Casefolds, strips accents, maps leetspeak digits/symbols back to letters
and drops everything that is not an ASCII letter or a space:

    normalize("Y0u  @re CAFÉ b4d!")   # "you are cafe bhdi"
"""

from __future__ import annotations
import re
import unicodedata

# (pattern, replacement) — no replacement is itself a target, so order is free
_SUBSTITUTIONS: tuple[tuple[re.Pattern, str], ...] = (
    (re.compile(r"!"), "i"),
    (re.compile(r"@"), "a"),
    (re.compile(r"\$"), "s"),
    (re.compile(r"3"), "e"),
    (re.compile(r"8"), "b"),
    (re.compile(r"1"), "i"),
    (re.compile(r"¡"), "i"),
    (re.compile(r"5"), "s"),
    (re.compile(r"0"), "o"),
    (re.compile(r"4"), "h"),
    (re.compile(r"7"), "t"),
    (re.compile(r"9"), "g"),
    (re.compile(r"6"), "b"),
)

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_PUNCT_GLUE = re.compile(r"([,.])(?=\w)")
_SPACE_RUN = re.compile(r" {2,}")
_NON_LETTER = re.compile(r"[^a-zA-Z ]")


def space_punctuation(text: str) -> str:
    """Put a space after ``,``/``.`` glued to the next word ("a.b" → "a. b")."""
    return _PUNCT_GLUE.sub(r"\1 ", text)


def strip_accents(text: str) -> str:
    return _COMBINING_MARKS.sub("", unicodedata.normalize("NFD", text))


def normalize(text: str) -> str:
    """Return the NormalizedText form of ``text``.

    The result holds only ASCII letters and single spaces.  Leading and
    trailing spaces are kept.
    """
    text = strip_accents(text.casefold())
    text = space_punctuation(text)
    for pattern, replacement in _SUBSTITUTIONS:
        text = pattern.sub(replacement, text)
    text = _SPACE_RUN.sub(" ", text)
    text = _NON_LETTER.sub("", text)
    # stripping can leave fresh neighbours ("a -- b")
    return _SPACE_RUN.sub(" ", text)
