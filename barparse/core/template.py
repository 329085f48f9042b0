"""Splitting of bar templates into literal text and command references."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Tuple, TypeVar, Union

from barparse.commands import Command, Runnable, command_registry, resolve_command
from barparse.exceptions import TemplateParseError

_logger = logging.getLogger(__name__)

__all__ = ["parse_template", "split_alignment", "split_template"]

_R = TypeVar("_R", bound=Runnable)

TemplateTriple = Tuple[str, str, str]
"""``(command_ref, prefix, suffix)``"""


def _check_sep(sep_char: str) -> None:
    if len(sep_char) != 1:
        msg = f"separator must be a single character, got {sep_char!r}"
        raise ValueError(msg)


def _iter_groups(sep_char: str, template: str) -> Iterator[TemplateTriple]:
    """Yield ``prefix SEP command SEP suffix`` groups from the template.

    Raises
    ------
    TemplateParseError
        If the template ends inside a group
    """
    length = len(template)
    pos = 0
    while pos < length:
        open_ = template.find(sep_char, pos)
        if open_ == -1:
            raise TemplateParseError(template, length, sep_char)
        close = template.find(sep_char, open_ + 1)
        if close == -1:
            raise TemplateParseError(template, length, sep_char)
        suffix_end = template.find(sep_char, close + 1)
        suffix_end = length if suffix_end == -1 else suffix_end
        command = template[open_ + 1 : close]
        yield command, template[pos:open_], template[close + 1 : suffix_end]
        pos = suffix_end


def split_template(sep_char: str, template: str) -> list[TemplateTriple]:
    """Split a template into ``(command_ref, prefix, suffix)`` triples.

    Each command reference is enclosed by a pair of ``sep_char``. Text before it
    (back to the previous group) is its prefix, and text after it up to the next
    separator is its suffix. A template that does not divide into such groups
    is returned whole as the prefix of a triple with a blank command reference.

    >>> split_template("%", "A %cmd1% B")
    [('cmd1', 'A ', ' B')]
    >>> split_template("%", "no commands")
    [('', 'no commands', '')]
    """
    _check_sep(sep_char)
    try:
        return list(_iter_groups(sep_char, template))
    except TemplateParseError as err:
        _logger.warning("%s; showing template as plain text", err)
        return [("", template, "")]


def parse_template(
    sep_char: str,
    commands: Mapping[str, _R] | Iterable[_R],
    template: str,
) -> list[tuple[Union[_R, Command], str, str]]:
    """Split a template and resolve each command reference.

    Parameters
    ----------
    sep_char
        Single character delimiting command references
    commands
        Commands that may be referenced, either keyed by alias or as an iterable of
        objects with an ``alias``
    template
        Template to parse

    Returns
    -------
    list[tuple[Runnable, str, str]]
        ``(command, prefix, suffix)`` for each reference, in template order.
        References to unknown aliases get :meth:`Command.default`.
    """
    registry = command_registry(commands)
    return [
        (resolve_command(registry, ref), prefix, suffix)
        for ref, prefix, suffix in split_template(sep_char, template)
    ]


def split_alignment(align_sep: str, template: str) -> tuple[str, str, str]:
    """Split a template into left, center and right aligned parts.

    The left part runs up to the first character of ``align_sep`` and the center
    part from there up to the next occurrence of its last character. Templates
    lacking either character are entirely left aligned.

    >>> split_alignment("}{", "left }center{ right")
    ('left ', 'center', ' right')
    """
    if not align_sep:
        return template, "", ""
    left, found, rest = template.partition(align_sep[0])
    if not found:
        return template, "", ""
    center, found, right = rest.partition(align_sep[-1])
    if not found:
        return template, "", ""
    return left, center, right
