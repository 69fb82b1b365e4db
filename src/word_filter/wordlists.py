"""Bundled default word lists, one JSON file per language under filtersets/."""

from __future__ import annotations
import json
import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path

from .types import InvalidConfig

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _load(language: str) -> tuple[str, ...]:
    resource = resources.files(__package__).joinpath("filtersets").joinpath(f"{language}.json")
    if not resource.is_file():
        raise InvalidConfig(f"no default word list for language {language!r}")
    data = json.loads(resource.read_text(encoding="utf-8"))
    terms = tuple(data["filter"])
    logger.debug("loaded %d default terms for %s", len(terms), language)
    return terms


def load_default_terms(language: str = "en") -> list[str]:
    """Return the bundled filter list for ``language`` (a fresh list each call)."""
    return list(_load(language))


def available_languages() -> list[str]:
    root = resources.files(__package__).joinpath("filtersets")
    return sorted(Path(entry.name).stem for entry in root.iterdir() if entry.name.endswith(".json"))


def read_terms_file(path: str | Path) -> list[str]:
    """Read a newline-separated term list.  Blank lines and ``#`` comments are skipped."""
    with open(path, encoding="utf-8") as f:
        return [
            line.strip() for line in f
            if line.strip() and not line.lstrip().startswith("#")
        ]
