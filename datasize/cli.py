"""
Datasize CLI Tools

Formats byte counts from the command line or stdin, one result per line:

    $ datasize 2000000 950
    1.9 MiB
    950 B
    $ du -sb * | cut -f1 | datasize --decimal
"""

# Standard library -----------------------------------------------------------------------------------------------------
import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Iterable, Sequence, TextIO

# Local ----------------------------------------------------------------------------------------------------------------
from .config import ConfigError, FormatOptions, load_options
from .suffixes import UnitSuffixes

logger = logging.getLogger(__name__)


# Methods --------------------------------------------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="datasize",
        description="Format byte counts as human-readable sizes, e.g. 2000000 -> 1.9 MiB.",
    )
    parser.add_argument(
        "values",
        nargs="*",
        metavar="VALUE",
        help="Byte counts to format. Reads whitespace-separated values from stdin if omitted.",
    )
    base = parser.add_mutually_exclusive_group()
    base.add_argument("-b", "--binary", dest="use_binary", action="store_const", const=True,
                      help="Use 1024-based units (default).")
    base.add_argument("-d", "--decimal", dest="use_binary", action="store_const", const=False,
                      help="Use 1000-based units.")
    parser.add_argument(
        "--suffixes",
        choices=sorted(UnitSuffixes.PRESETS),
        help="Suffixes preset. Defaults to iso80000 for binary and si for decimal units.",
    )
    parser.add_argument("--separator", help="Decimal separator (default: locale decimal point).")
    parser.add_argument("--config", type=Path, help="TOML file with a [datasize] table.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def resolve_options(args: argparse.Namespace) -> FormatOptions:
    """
    Merge config file options with command line flags, flags win.

    Suffixes chosen by neither --suffixes nor the config file follow the final
    base, see FormatOptions.unit_suffixes.
    """
    options = load_options(args.config) if args.config else FormatOptions()
    logger.debug("Options from %s: %s", args.config or "defaults", options)

    if args.use_binary is not None:
        options = replace(options, use_binary=args.use_binary)
    if args.suffixes is not None:
        options = replace(options, suffixes=UnitSuffixes.preset(args.suffixes))
    if args.separator is not None:
        options = replace(options, decimal_separator=args.separator)
    return options


def format_values(tokens: Iterable[str], options: FormatOptions, out: TextIO) -> int:
    """
    Write one formatted line per token, return the number of tokens that failed.
    """
    failures = 0
    for token in tokens:
        try:
            out.write(options.format(int(token)) + "\n")
        except (TypeError, ValueError) as e:
            failures += 1
            logger.error("Cannot format %r: %s", token, e)
    return failures


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    try:
        options = resolve_options(args)
    except (ConfigError, OSError) as e:
        logger.error("Cannot load configuration: %s", e)
        return 1

    tokens = args.values or _read_tokens(sys.stdin)
    failures = format_values(tokens, options, sys.stdout)
    if failures:
        logger.debug("%d value(s) failed", failures)
    return 1 if failures else 0


# Private Methods ------------------------------------------------------------------------------------------------------

def _read_tokens(stream: TextIO) -> Iterable[str]:
    for line in stream:
        yield from line.split()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
    )


if __name__ == "__main__":
    sys.exit(main())
