"""word-filter — detect and censor filtered words through leetspeak, accents and stretching."""

from .filter import Filter, FilterConfig
from .filterset import FilterSet, Mode
from .normalize import normalize
from .stretch import expand
from .config import create_filter, load_config, load_from_yaml
from .wordlists import load_default_terms
from .types import (
    Diagnostics,
    WordFilterError, InvalidInput, InvalidPattern, InvalidConfig,
)

__all__ = [
    "Filter", "FilterConfig",
    "FilterSet", "Mode",
    "normalize", "expand",
    "create_filter", "load_config", "load_from_yaml",
    "load_default_terms",
    "Diagnostics",
    "WordFilterError", "InvalidInput", "InvalidPattern", "InvalidConfig",
]
__version__ = "0.1.0"
