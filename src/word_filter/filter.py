"""Filter — the main API.  Normalize, expand, match, censor.

Usage:
    from word_filter import Filter, FilterConfig

    f = Filter(FilterConfig(terms=["bad", "dumb"]))

    f.is_unclean("you are sooo dummmb")        # True
    f.find_unclean_positions("b@d to the b0ne")   # [0]
    f.clean("You are bad at this")            # "You are *** at this"

Pattern mode takes regex sources instead of words:

    f = Filter(FilterConfig(terms=[r"^d+u+m+b+$"], use_regex=True))
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field
from typing import Iterator

from .filterset import FilterSet
from .normalize import normalize, space_punctuation
from .stretch import DEFAULT_MAX_STRETCH_RUNS, expand
from .types import Diagnostics, InvalidConfig, InvalidInput, require_text
from .wordlists import load_default_terms

logger = logging.getLogger(__name__)


@dataclass
class FilterConfig:
    """Configuration for the Filter."""
    terms: list[str] | None = None    # None = bundled list for `language`
    use_regex: bool = False           # terms are regex sources, slower
    clean_with: str | list[str] = "*"  # list = random pick per character
    language: str = "en"
    max_stretch_runs: int = DEFAULT_MAX_STRETCH_RUNS
    extra_terms: list[str] = field(default_factory=list)  # appended to `terms`


class Filter:
    """Detects and censors filtered words in free text.

    Each space-separated token is normalized on its own, expanded into
    its de-stretched variants, and flagged when any variant matches the
    FilterSet.  Positions are token indexes in the original text.
    """

    def __init__(
        self,
        config: FilterConfig | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or FilterConfig()
        self.clean_with = _check_clean_with(self.config.clean_with)
        if self.config.max_stretch_runs < 1:
            raise InvalidConfig("max_stretch_runs must be positive")
        self._rng = rng or random.Random()

        terms = self.config.terms
        if terms is None:
            terms = load_default_terms(self.config.language)
        self.set_filter_set(
            _term_list(terms, "terms") + _term_list(self.config.extra_terms, "extra_terms")
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def use_regex(self) -> bool:
        return self.config.use_regex

    @property
    def filter_set(self) -> FilterSet:
        return self._filter_set

    @property
    def min_term_length(self) -> int:
        return self._filter_set.min_term_length

    def set_filter_set(self, terms: list[str]) -> None:
        """Replace the filter terms wholesale, keeping the current mode."""
        self._filter_set = FilterSet.build(terms, use_regex=self.config.use_regex)
        logger.debug(
            "filter set: %d %s terms, min length %d",
            len(self._filter_set), self._filter_set.mode.value,
            self._filter_set.min_term_length,
        )

    # ------------------------------------------------------------------
    # Building blocks
    # ------------------------------------------------------------------

    def normalize(self, text: str) -> str:
        return normalize(require_text(text))

    def expand(self, word: str) -> tuple[str, ...]:
        """De-stretched spellings of an already normalized word."""
        return expand(
            require_text(word, "word"),
            self.min_term_length,
            max_runs=self.config.max_stretch_runs,
        )

    def tokenize(self, text: str) -> list[str]:
        """Split text the way clean() rewrites it: punctuation-spaced, on spaces.

        Tabs and newlines stay inside their token and are dropped when the
        token is normalized.
        """
        return [tok for tok in space_punctuation(require_text(text)).split(" ") if tok]

    def variants(self, text: str) -> list[tuple[str, ...]]:
        """Candidate spellings for every token of ``text``, by position."""
        return [self.expand(word) for word in self._normalized_tokens(text)]

    def is_word_unclean(self, word: str) -> bool:
        """Match one normalized word as-is, without expansion."""
        return self._filter_set.is_match(require_text(word, "word"))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def find_unclean_positions(self, text: str) -> list[int]:
        """Token positions of every filtered word, ascending, no duplicates."""
        return list(self._iter_unclean(text))

    get_unclean_word_indexes = find_unclean_positions

    def is_unclean(self, text: str) -> bool:
        """True if ``text`` contains at least one filtered word."""
        return next(self._iter_unclean(text), None) is not None

    def clean(self, text: str) -> str:
        """Mask every filtered word with ``clean_with``, keeping its length.

        Untouched tokens keep their original casing and accents.  Tokens are
        rejoined with single spaces.
        """
        tokens = self.tokenize(text)
        flagged = set(self._iter_unclean(text))
        return " ".join(
            self._mask(tok) if i in flagged else tok
            for i, tok in enumerate(tokens)
        )

    def clean_messages(
        self,
        messages: list[dict],
        *,
        content_key: str = "content",
    ) -> list[dict]:
        """Clean a list of chat-style message dicts.

        Returns new dicts; the originals are not mutated.  Non-string or
        empty content is passed through.
        """
        out: list[dict] = []
        for msg in messages:
            content = msg.get(content_key)
            if isinstance(content, str) and content:
                out.append({**msg, content_key: self.clean(content)})
            else:
                out.append(msg)
        return out

    def diagnostics(self, text: str) -> Diagnostics:
        positions = self.find_unclean_positions(text)
        return Diagnostics(
            normalized=self.normalize(text),
            is_unclean=bool(positions),
            positions=positions,
            cleaned=self.clean(text),
            tokens=self._normalized_tokens(text),
            variants=self.variants(text),
        )

    def debug(self, text: str) -> Diagnostics:
        """Log the diagnostics for ``text`` at INFO and return them."""
        report = self.diagnostics(text)
        logger.info("normalized: %s", report.normalized)
        logger.info("is_unclean: %s", report.is_unclean)
        logger.info("unclean positions: %s", report.positions)
        logger.info("cleaned: %s", report.cleaned)
        logger.info("tokens: %s", report.tokens)
        logger.info("variants: %s", report.variants)
        return report

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _normalized_tokens(self, text: str) -> list[str]:
        return [normalize(tok) for tok in self.tokenize(text)]

    def _iter_unclean(self, text: str) -> Iterator[int]:
        match = self._filter_set.is_match
        for i, word in enumerate(self._normalized_tokens(text)):
            if not word:
                continue
            if any(match(v) for v in self.expand(word)):
                yield i

    def _mask(self, token: str) -> str:
        if isinstance(self.clean_with, str):
            return self.clean_with * len(token)
        return "".join(self._rng.choice(self.clean_with) for _ in token)


def _check_clean_with(value: object) -> str | list[str]:
    if isinstance(value, str):
        if len(value) != 1:
            raise InvalidConfig(f"clean_with must be a single character, got {value!r}")
        return value
    if isinstance(value, (list, tuple)):
        chars = list(value)
        if not chars:
            raise InvalidConfig("clean_with list must not be empty")
        for c in chars:
            if not isinstance(c, str) or len(c) != 1:
                raise InvalidConfig(f"clean_with entries must be single characters, got {c!r}")
        return chars
    raise InvalidConfig(f"clean_with must be a character or list of characters, got {type(value).__name__}")


def _term_list(value: object, name: str) -> list[str]:
    if isinstance(value, str):
        raise InvalidInput(f"{name} must be a sequence of strings, not a single str")
    return list(value)
