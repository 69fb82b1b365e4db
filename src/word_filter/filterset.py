"""FilterSet — the terms a Filter matches against, and the matcher itself.

A FilterSet is either a set of literal words (dictionary mode, exact
match) or a tuple of compiled regexes (pattern mode, non-anchored
search).  The mode is picked once when the set is built.
"""

from __future__ import annotations
import enum
import re
from dataclasses import dataclass
from typing import Iterable

from .types import InvalidInput, InvalidPattern


class Mode(enum.Enum):
    DICTIONARY = "dictionary"
    PATTERN = "pattern"


@dataclass(frozen=True, slots=True)
class FilterSet:
    """Immutable collection of filter terms."""
    mode: Mode
    terms: frozenset[str] = frozenset()
    patterns: tuple[re.Pattern, ...] = ()
    min_term_length: int = 0   # 0 disables the short-word shortcut

    @classmethod
    def build(cls, terms: Iterable[str], *, use_regex: bool = False) -> FilterSet:
        """Build a FilterSet from raw terms.

        Raises InvalidInput for non-string terms and InvalidPattern for a
        regex that does not compile.
        """
        if isinstance(terms, str):
            raise InvalidInput("terms must be a sequence of strings, not a single str")
        sources = list(terms)
        for term in sources:
            if not isinstance(term, str):
                raise InvalidInput(f"filter term must be str, got {type(term).__name__}")

        if use_regex:
            return cls(mode=Mode.PATTERN, patterns=tuple(_compile(s) for s in sources))

        # empty strings would match tokens that normalize to nothing
        words = frozenset(t for t in sources if t)
        shortest = min((len(t) for t in words), default=0)
        return cls(mode=Mode.DICTIONARY, terms=words, min_term_length=shortest)

    def is_match(self, word: str) -> bool:
        if self.mode is Mode.PATTERN:
            return any(p.search(word) for p in self.patterns)
        return word in self.terms

    def __len__(self) -> int:
        if self.mode is Mode.PATTERN:
            return len(self.patterns)
        return len(self.terms)


def _compile(source: str) -> re.Pattern:
    try:
        return re.compile(source, re.IGNORECASE)
    except re.error as e:
        raise InvalidPattern(source, str(e)) from e
