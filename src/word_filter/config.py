"""YAML/dict config loader for word-filter.

Supports loading from a YAML file or a plain dict (for embedding in a
larger application config).  Both snake_case keys and the original
option names (``list``, ``useRegex``, ``cleanWith``) are accepted.

Example YAML:

    word_filter:
      enabled: true
      language: en
      use_regex: false
      clean_with: ["#", "$", "@", "!"]
      terms_file: ~/.word-filter/terms.txt   # replaces the default list
      extra_terms:
        - darn
      max_stretch_runs: 16
"""

from __future__ import annotations
import random
from pathlib import Path
from typing import Any

from .filter import Filter, FilterConfig
from .stretch import DEFAULT_MAX_STRETCH_RUNS
from .normalize import normalize, space_punctuation
from .types import Diagnostics, InvalidConfig, require_text
from .wordlists import read_terms_file


class _NoopFilter:
    """Pass-through filter when filtering is disabled."""
    min_term_length = 0
    def normalize(self, text: str) -> str:
        return normalize(require_text(text))
    def expand(self, word: str) -> tuple[str, ...]:
        return (require_text(word, "word"),)
    def tokenize(self, text: str) -> list[str]:
        return [tok for tok in space_punctuation(require_text(text)).split(" ") if tok]
    def variants(self, text: str) -> list[tuple[str, ...]]:
        return [(normalize(tok),) for tok in self.tokenize(text)]
    def is_word_unclean(self, word: str) -> bool:
        require_text(word, "word")
        return False
    def set_filter_set(self, terms: list[str]) -> None:
        pass
    def find_unclean_positions(self, text: str) -> list[int]:
        require_text(text)
        return []
    get_unclean_word_indexes = find_unclean_positions
    def is_unclean(self, text: str) -> bool:
        require_text(text)
        return False
    def clean(self, text: str) -> str:
        return require_text(text)
    def clean_messages(self, messages: list[dict], **kwargs: Any) -> list[dict]:
        return list(messages)
    def diagnostics(self, text: str) -> Diagnostics:
        return Diagnostics(
            normalized=self.normalize(text),
            is_unclean=False,
            positions=[],
            cleaned=text,
            tokens=[normalize(tok) for tok in self.tokenize(text)],
            variants=self.variants(text),
        )
    debug = diagnostics


def _pick(data: dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return default


def _terms(value: Any, key: str) -> list[str] | None:
    if value is None:
        return None
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise InvalidConfig(f"{key} must be a list of strings, got {type(value).__name__}")
    return list(value)


def _positive_int(value: Any, key: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise InvalidConfig(f"{key} must be an integer, got {value!r}") from e
    if number < 1:
        raise InvalidConfig(f"{key} must be positive, got {number}")
    return number


def load_config(data: dict[str, Any]) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    if not isinstance(data, dict):
        raise InvalidConfig(f"config must be a mapping, got {type(data).__name__}")
    # Support nested under "word_filter" key or flat
    if "word_filter" in data:
        data = data["word_filter"]
        if not isinstance(data, dict):
            raise InvalidConfig("word_filter section must be a mapping")

    terms = _terms(_pick(data, "terms", "list"), "terms")
    terms_file = data.get("terms_file")
    if terms is None and terms_file:
        terms = read_terms_file(Path(terms_file).expanduser())

    return {
        "enabled": data.get("enabled", True),
        "terms": terms,
        "use_regex": bool(_pick(data, "use_regex", "useRegex", default=False)),
        "clean_with": _pick(data, "clean_with", "cleanWith", default="*"),
        "language": data.get("language", "en"),
        "extra_terms": _terms(data.get("extra_terms"), "extra_terms") or [],
        "max_stretch_runs": _positive_int(
            data.get("max_stretch_runs", DEFAULT_MAX_STRETCH_RUNS), "max_stretch_runs"
        ),
    }


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    import yaml
    with open(path) as f:
        return load_config(yaml.safe_load(f) or {})


def create_filter(
    config: dict[str, Any],
    *,
    rng: random.Random | None = None,
) -> Filter | _NoopFilter:
    """Create a fully configured Filter from a config dict."""
    cfg = load_config(config)  # raw or already loaded

    if not cfg["enabled"]:
        return _NoopFilter()

    filter_config = FilterConfig(
        terms=cfg["terms"],
        use_regex=cfg["use_regex"],
        clean_with=cfg["clean_with"],
        language=cfg["language"],
        max_stretch_runs=cfg["max_stretch_runs"],
        extra_terms=cfg["extra_terms"],
    )
    return Filter(filter_config, rng=rng)
