"""Command line interface for trying out markup and templates."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from colorama import Fore, Style

from barparse._logging import setup_logging
from barparse.core.markup import parse_markup
from barparse.core.template import parse_template
from barparse.exceptions import ConfigError
from barparse.io.config import BarConfig, load_config
from barparse.types import Segment


def format_segment(segment: Segment) -> str:
    """Describe a segment on a single tab-separated line."""
    widget, color, font, actions = segment
    kind = type(widget).__name__.lower()
    bindings = ", ".join(map(str, actions)) or "-"
    return f"{kind}\t{str(widget)!r}\t{color}\tfn={font}\t{bindings}"


def _get_config(args: argparse.Namespace) -> BarConfig:
    if args.config is None:
        return BarConfig()
    try:
        return load_config(args.config)
    except (ConfigError, OSError) as err:
        print(
            f"{Fore.RED}Could not load config {Style.BRIGHT}{args.config}"
            f"{Style.RESET_ALL}{Fore.RED}: {err}{Fore.RESET}",
            file=sys.stderr,
        )
        sys.exit(1)


def show_markup(args: argparse.Namespace) -> None:
    """Implement the ``barparse markup`` command."""
    config = _get_config(args)
    color = config.fg_color if args.color is None else args.color
    for segment in parse_markup(color, args.text):
        print(format_segment(segment))


def show_template(args: argparse.Namespace) -> None:
    """Implement the ``barparse template`` command."""
    config = _get_config(args)
    sep = config.sep_char if args.sep is None else args.sep
    if len(sep) != 1:
        print(
            f"{Fore.RED}Separator must be a single character, got "
            f"{Style.BRIGHT}{sep!r}{Fore.RESET}{Style.RESET_ALL}",
            file=sys.stderr,
        )
        sys.exit(1)
    template = config.template if args.template is None else args.template
    for command, prefix, suffix in parse_template(sep, config.commands, template):
        name = " ".join([command.program, *command.args])
        known = command in config.commands
        marker = "" if known else f" {Fore.YELLOW}(unknown){Fore.RESET}"
        print(f"{prefix!r}\t{name}{marker}\t{suffix!r}")


def gen_parser() -> argparse.ArgumentParser:
    """Generate the CLI parser for ``barparse``."""
    parser = argparse.ArgumentParser(
        description="Show how status text and bar templates are parsed."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log parser fallbacks."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML or JSON bar config supplying colors, separator and commands.",
    )
    subparsers = parser.add_subparsers(required=True, dest="command")

    parser_markup = subparsers.add_parser(
        "markup", help="Print the segments of a marked-up status string."
    )
    parser_markup.add_argument("text")
    parser_markup.add_argument(
        "--color", help="Default text color. Overrides the config."
    )
    parser_markup.set_defaults(func=show_markup)

    parser_template = subparsers.add_parser(
        "template", help="Print the command slots of a bar template."
    )
    parser_template.add_argument(
        "template", nargs="?", default=None, help="Defaults to the config template."
    )
    parser_template.add_argument(
        "--sep", help="Separator enclosing command aliases. Overrides the config."
    )
    parser_template.set_defaults(func=show_template)

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Invoke barparse CLI."""
    parser = gen_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    args.func(args)
