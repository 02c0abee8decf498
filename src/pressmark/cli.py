"""Command-line entry point.

    pressmark [-o OUT] [--font PATH] [--config FILE] [INPUT]

Reads markup from INPUT (``-`` or omitted for stdin) and writes the
PostScript program to stdout or OUT. Exit status is 0 on success, 1 on a
markup or rendering error and 2 when configuration, font or input cannot
be loaded.
"""

from __future__ import annotations

import argparse
import dataclasses
import sys
import tomllib
from pathlib import Path

from pressmark import Typesetter, __version__
from pressmark.config import PROFILES, LayoutConfig, load_config_file
from pressmark.errors import EmitError, ResourceError, SourceError
from pressmark.layout import load_font
from pressmark.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

STDIN = "-"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pressmark",
        description="Typeset pressmark markup as a PostScript program.",
    )
    parser.add_argument(
        "input", nargs="?", default=STDIN, help="markup file to read (default: - for stdin)"
    )
    parser.add_argument("-o", "--output", help="write the program here instead of stdout")
    parser.add_argument("--font", help="TrueType/OpenType font for the PostScript name and kerning")
    parser.add_argument("--font-name", help="logical font name when no --font is given")
    parser.add_argument("--config", help="TOML file with layout settings")
    parser.add_argument(
        "--profile", choices=sorted(PROFILES), help="paragraph spacing profile"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _load_config(args: argparse.Namespace) -> LayoutConfig:
    config = load_config_file(args.config) if args.config else LayoutConfig()
    overrides = {}
    if args.profile:
        overrides["profile"] = args.profile
    if args.font_name:
        overrides["font_name"] = args.font_name
    return dataclasses.replace(config, **overrides)


def _read_source(name: str) -> str:
    if name == STDIN:
        return sys.stdin.read()
    return Path(name).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    """Run the command line.

    Returns:
        Exit code
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = _load_config(args)
    except (OSError, tomllib.TOMLDecodeError, ValueError, TypeError) as e:
        print(f"pressmark: bad configuration: {e}", file=sys.stderr)
        return 2

    font = None
    if args.font:
        try:
            font = load_font(args.font, config.body_size)
        except ResourceError as e:
            print(f"pressmark: {e}", file=sys.stderr)
            return 2

    try:
        source = _read_source(args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"pressmark: cannot read {args.input}: {e}", file=sys.stderr)
        return 2

    typesetter = Typesetter(config, font=font)
    try:
        program = typesetter(source, source_file=args.input)
    except SourceError as e:
        print(e, file=sys.stderr)
        return 1
    except EmitError as e:
        print(f"{args.input}: {e}", file=sys.stderr)
        return 1

    # Escaped text and validated names keep the program ASCII
    if args.output:
        Path(args.output).write_text(program, encoding="ascii")
        logger.debug("wrote %s", args.output)
    else:
        sys.stdout.write(program)
        sys.stdout.flush()
    return 0
