"""CLI interface for word-filter.

Usage:
    # Censor text (stdin: text, stdout: cleaned text)
    echo 'you are sooo dummmb' | python -m word_filter.cli clean

    # Verdict and positions as JSON
    echo 'you are sooo dummmb' | python -m word_filter.cli check

    # Clean chat messages (stdin: JSON array of messages, stdout: JSON)
    echo '[{"role":"user","content":"b@d idea"}]' | \
        python -m word_filter.cli --terms-file terms.txt clean-messages

    # Everything the filter computed, as JSON
    echo 'l3mm3 g3t 5um 4elp' | python -m word_filter.cli debug
"""

from __future__ import annotations
import argparse
import json
import logging
import random
import sys

from .config import create_filter, load_config, load_from_yaml
from .types import WordFilterError

logger = logging.getLogger(__name__)


def _build_filter(args: argparse.Namespace):
    cfg = load_from_yaml(args.config) if args.config else load_config({})
    if args.terms_file:
        cfg = load_config({**cfg, "terms": None, "terms_file": args.terms_file})
    if args.regex:
        cfg["use_regex"] = True
    if args.clean_with:
        chars = args.clean_with.split(",")
        cfg["clean_with"] = chars[0] if len(chars) == 1 else chars
    if args.language:
        cfg["language"] = args.language
    rng = random.Random(args.seed) if args.seed is not None else None
    return create_filter(cfg, rng=rng)


def _read() -> str:
    return sys.stdin.read().rstrip("\n")


def _dump(data) -> None:
    json.dump(data, sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")


def cmd_clean(args: argparse.Namespace) -> None:
    """Censor filtered words in plain text on stdin."""
    f = _build_filter(args)
    # one line at a time; newlines are not token separators
    sys.stdout.write("\n".join(f.clean(line) for line in _read().split("\n")))
    sys.stdout.write("\n")


def cmd_check(args: argparse.Namespace) -> None:
    """Report whether stdin contains filtered words."""
    f = _build_filter(args)
    positions = f.find_unclean_positions(_read())
    _dump({"unclean": bool(positions), "positions": positions})


def cmd_indexes(args: argparse.Namespace) -> None:
    """Print the positions of filtered words."""
    f = _build_filter(args)
    _dump(f.find_unclean_positions(_read()))


def cmd_normalize(args: argparse.Namespace) -> None:
    f = _build_filter(args)
    sys.stdout.write(f.normalize(_read()))
    sys.stdout.write("\n")


def cmd_debug(args: argparse.Namespace) -> None:
    """Dump the full diagnostics record as JSON."""
    f = _build_filter(args)
    _dump(f.debug(_read()).as_dict())


def cmd_clean_messages(args: argparse.Namespace) -> None:
    """Clean OpenAI-format messages on stdin."""
    f = _build_filter(args)
    messages = json.loads(_read())
    _dump(f.clean_messages(messages))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="word_filter",
        description="Detect and censor filtered words",
    )
    parser.add_argument("--config", default="", help="YAML config file")
    parser.add_argument("--terms-file", default="", help="Newline-separated term list")
    parser.add_argument("--regex", action="store_true", help="Treat terms as regex patterns")
    parser.add_argument("--clean-with", default="", help="Mask character, or comma-separated characters")
    parser.add_argument("--language", default="", help="Language of the default list")
    parser.add_argument("--seed", type=int, default=None, help="Seed for random masking")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("clean", help="Censor plain text (stdin)")
    sub.add_parser("check", help="Verdict and positions as JSON (stdin)")
    sub.add_parser("indexes", help="Positions of filtered words (stdin)")
    sub.add_parser("normalize", help="Print normalized text (stdin)")
    sub.add_parser("debug", help="Diagnostics as JSON (stdin)")
    sub.add_parser("clean-messages", help="Clean OpenAI messages (JSON stdin)")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    cmds = {
        "clean": cmd_clean,
        "check": cmd_check,
        "indexes": cmd_indexes,
        "normalize": cmd_normalize,
        "debug": cmd_debug,
        "clean-messages": cmd_clean_messages,
    }
    try:
        cmds[args.command](args)
    except WordFilterError as e:
        logger.error("%s", e)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
