"""Core types and errors."""

from __future__ import annotations
from dataclasses import dataclass, field


class WordFilterError(Exception):
    """Base class for every error raised by word_filter."""


class InvalidInput(WordFilterError, TypeError):
    """A text operation or term list got something that is not a string."""


class InvalidPattern(WordFilterError, ValueError):
    """A pattern-mode term failed to compile."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"invalid pattern {source!r}: {reason}")
        self.source = source
        self.reason = reason


class InvalidConfig(WordFilterError, ValueError):
    """Filter options that cannot be honoured."""


def require_text(value: object, name: str = "text") -> str:
    if not isinstance(value, str):
        raise InvalidInput(f"{name} must be str, got {type(value).__name__}")
    return value


@dataclass(frozen=True, slots=True)
class Diagnostics:
    """Everything the filter computed for one input."""
    normalized: str
    is_unclean: bool
    positions: list[int]
    cleaned: str
    tokens: list[str] = field(default_factory=list)  # normalized, by position
    variants: list[tuple[str, ...]] = field(default_factory=list)  # per token

    def as_dict(self) -> dict:
        return {
            "normalized": self.normalized,
            "is_unclean": self.is_unclean,
            "positions": list(self.positions),
            "cleaned": self.cleaned,
            "tokens": list(self.tokens),
            "variants": [list(v) for v in self.variants],
        }
