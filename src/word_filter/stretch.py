"""Stretch expansion — de-stretch "sooo dummmb" into candidate spellings.

Collapsing every run to one letter would miss terms that really contain a
double letter ("pass"), so each run of 2+ contributes both its doubled and
its single form, and the candidates are the product across runs:

    expand("sooob")   # ("soob", "sob")
    expand("aabb")    # ("aabb", "aab", "abb", "ab")
"""

from __future__ import annotations
import logging
import re
from itertools import groupby

logger = logging.getLogger(__name__)

DEFAULT_MAX_STRETCH_RUNS = 16

_REPEAT = re.compile(r"(.)\1")


def runs(word: str) -> list[str]:
    """Split a word into maximal runs of one character ("sooob" → s, ooo, b)."""
    return ["".join(group) for _, group in groupby(word)]


def _candidates(run: str) -> tuple[str, ...]:
    if len(run) >= 2:
        return (run[0] * 2, run[0])
    return (run,)


def expand(
    word: str,
    min_term_length: int = 0,
    *,
    max_runs: int = DEFAULT_MAX_STRETCH_RUNS,
) -> tuple[str, ...]:
    """Return every de-stretched spelling of ``word``, in run order.

    Words without a repeated character, or no longer than the shortest
    filter term, come back unchanged as a one-element tuple.  So does a
    word with more than ``max_runs`` stretched runs, since the candidate
    count doubles with every run.
    """
    if not _REPEAT.search(word) or len(word) <= min_term_length:
        return (word,)

    segments = runs(word)
    stretched = sum(1 for s in segments if len(s) >= 2)
    if stretched > max_runs:
        logger.debug("not expanding %r: %d stretched runs > %d", word, stretched, max_runs)
        return (word,)

    variants = [""]
    for seg in segments:
        variants = [prefix + c for prefix in variants for c in _candidates(seg)]
    return tuple(variants)
