"""Parser for the tag markup of status-line text.

The grammar is a sequence of regions, each of which is one of::

    text                        anything up to a reserved tag
    <icon=PATH/>
    <raw=LEN:DATA/>             DATA is exactly LEN characters, taken verbatim
    <action=CMD[ button=B]>...</action>
    <fn=N>...</fn>
    <fc=COLOR>...</fc>

Alternatives are tried in that order at every position, and every tagged region
recurses into the same alternation for its body. A failing alternative rewinds to
where it started, so the next one sees the same input.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import Final, Iterable, List, Sequence, Tuple

import attrs

from barparse.actions import Action, to_buttons
from barparse.exceptions import MarkupEncodeError, MarkupParseError
from barparse.types import Icon, Segment, Text

_logger = logging.getLogger(__name__)

__all__ = ["dump_markup", "parse_markup"]

RESERVED: Final = (
    "fc=",
    "fn=",
    "action=",
    "/action>",
    "icon=",
    "raw=",
    "/fn>",
    "/fc>",
)
"""Text following ``<`` that ends a plain text run"""

_COLOR = r"(?:[^\W_]|[,#])+"
_COLOR_TOKEN = re.compile(_COLOR)
_FONT_OPEN = re.compile(rf"<fn=({_COLOR})>")
_COLOR_OPEN = re.compile(rf"<fc=({_COLOR})>")
_RAW_LENGTH = re.compile(r"([0-9]+):")
_BUTTONS = re.compile(r"\s+button=([1-5]+)>")
_UNQUOTED_WITH_BUTTONS = re.compile(r"([^>\s]+)\s+button=([1-5]+)>")

_Parsed = Tuple[List[Segment], int]

_MAX_DIGITS: Final = len(str(sys.maxsize))


class _Mismatch(Exception):
    """An alternative did not match; the caller rewinds and tries the next."""


def _native_int(digits: str) -> int | None:
    """Convert ASCII digits, or return None if the value exceeds a native int."""
    digits = digits.lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        return None
    value = int(digits)
    return value if value <= sys.maxsize else None


@attrs.frozen
class _Context:
    color: str
    font: int = 0
    actions: Tuple[Action, ...] = ()

    def segment(self, widget: Text | Icon) -> Segment:
        return Segment(widget, self.color, self.font, self.actions)


class _MarkupParser:
    def __init__(self, text: str) -> None:
        self.text = text

    def parse(self, default_color: str) -> list[Segment]:
        segments, _ = self._regions(0, _Context(default_color), None)
        return segments

    def _regions(self, pos: int, ctx: _Context, closing: str | None) -> _Parsed:
        """Parse regions until ``closing`` (or end of input if ``None``)."""
        text = self.text
        segments: list[Segment] = []
        while True:
            if closing is None:
                if pos == len(text):
                    return segments, pos
            elif text.startswith(closing, pos):
                return segments, pos + len(closing)
            parsed, pos = self._region(pos, ctx)
            segments.extend(parsed)

    def _region(self, pos: int, ctx: _Context) -> _Parsed:
        for alternative in (
            self._text,
            self._icon,
            self._raw,
            self._action,
            self._font,
            self._color,
        ):
            try:
                return alternative(pos, ctx)
            except _Mismatch:
                continue
        raise _Mismatch

    def _text(self, pos: int, ctx: _Context) -> _Parsed:
        text = self.text
        length = len(text)
        end = pos
        while end < length:
            bracket = text.find("<", end)
            if bracket == -1:
                end = length
            elif text.startswith(RESERVED, bracket + 1):
                end = bracket
                break
            else:
                end = bracket + 1
        if end == pos:
            raise _Mismatch
        return [ctx.segment(Text(text[pos:end]))], end

    def _icon(self, pos: int, ctx: _Context) -> _Parsed:
        if not self.text.startswith("<icon=", pos):
            raise _Mismatch
        start = pos + len("<icon=")
        # the path cannot contain ">", so only the first one can close the tag
        close = self.text.find(">", start)
        if close <= start or self.text[close - 1] != "/":
            raise _Mismatch
        return [ctx.segment(Icon(self.text[start : close - 1]))], close + 1

    def _raw(self, pos: int, ctx: _Context) -> _Parsed:
        if not self.text.startswith("<raw=", pos):
            raise _Mismatch
        match = _RAW_LENGTH.match(self.text, pos + len("<raw="))
        if match is None:
            raise _Mismatch
        length = _native_int(match.group(1))
        if length is None:
            raise _Mismatch
        start = match.end()
        end = start + length
        if end > len(self.text) or not self.text.startswith("/>", end):
            raise _Mismatch
        return [ctx.segment(Text(self.text[start:end]))], end + 2

    def _action(self, pos: int, ctx: _Context) -> _Parsed:
        if not self.text.startswith("<action=", pos):
            raise _Mismatch
        command, buttons, pos = self._action_binding(pos + len("<action="))
        action = Action(to_buttons(buttons), command)
        inner = attrs.evolve(ctx, actions=(action, *ctx.actions))
        return self._regions(pos, inner, "</action>")

    def _action_binding(self, pos: int) -> tuple[str, str, int]:
        """Parse the command and buttons of an action tag, up to its ``>``."""
        text = self.text
        if text.startswith("`", pos):
            close = text.find("`", pos + 1)
            if close <= pos + 1:
                raise _Mismatch
            command = text[pos + 1 : close]
            pos = close + 1
            if text.startswith(">", pos):
                return command, "1", pos + 1
            match = _BUTTONS.match(text, pos)
            if match is None:
                raise _Mismatch
            return command, match.group(1), match.end()

        match = _UNQUOTED_WITH_BUTTONS.match(text, pos)
        if match is not None:
            return match.group(1), match.group(2), match.end()
        close = text.find(">", pos)
        if close <= pos:
            raise _Mismatch
        return text[pos:close], "1", close + 1

    def _font(self, pos: int, ctx: _Context) -> _Parsed:
        match = _FONT_OPEN.match(self.text, pos)
        if match is None:
            raise _Mismatch
        index = match.group(1)
        font = _native_int(index) if index.isascii() and index.isdigit() else None
        if font is None:
            # Not a backtracking point: a bad index spoils the whole string
            raise MarkupParseError(self.text, pos, f"invalid font index {index!r}")
        return self._regions(match.end(), attrs.evolve(ctx, font=font), "</fn>")

    def _color(self, pos: int, ctx: _Context) -> _Parsed:
        match = _COLOR_OPEN.match(self.text, pos)
        if match is None:
            raise _Mismatch
        return self._regions(
            match.end(), attrs.evolve(ctx, color=match.group(1)), "</fc>"
        )


def parse_markup(default_color: str, text: str) -> list[Segment]:
    """Split a status string into attributed segments.

    Parameters
    ----------
    default_color
        Color of text not enclosed by any ``<fc>`` tag
    text
        The markup to parse

    Returns
    -------
    list[Segment]
        Segments in the order they appear in ``text``. If ``text`` cannot be
        parsed, a single segment in ``default_color`` whose text reports the
        failure and repeats the input.
    """
    try:
        return _MarkupParser(text).parse(default_color)
    except (_Mismatch, MarkupParseError, RecursionError) as err:
        _logger.debug("Could not parse %r: %s", text, str(err) or "no region matched")
    return [Segment(Text(f"Could not parse string: {text}"), default_color)]


def _check_color(color: str) -> str:
    if not _COLOR_TOKEN.fullmatch(color):
        msg = f"color {color!r} cannot be expressed in an <fc> tag"
        raise MarkupEncodeError(msg)
    return color


def _open_action(action: Action) -> str:
    if not action.command or "`" in action.command:
        msg = f"command {action.command!r} cannot be quoted in an <action> tag"
        raise MarkupEncodeError(msg)
    buttons = "".join(map(str, sorted(action.buttons)))
    return f"<action=`{action.command}` button={buttons}>"


def _dump_widget(widget: Text | Icon) -> str:
    if isinstance(widget, Icon):
        if ">" in widget.path:
            msg = f"icon path {widget.path!r} cannot contain '>'"
            raise MarkupEncodeError(msg)
        return f"<icon={widget.path}/>"
    return f"<raw={len(widget.content)}:{widget.content}/>"


def _dump_segment(segment: Segment, default_color: str) -> Iterable[str]:
    closing: list[str] = []
    # outermost action is last in the list
    for action in reversed(segment.actions):
        yield _open_action(action)
        closing.append("</action>")
    if segment.font < 0:
        msg = f"font index {segment.font} cannot be negative"
        raise MarkupEncodeError(msg)
    if segment.font:
        yield f"<fn={segment.font}>"
        closing.append("</fn>")
    if segment.color != default_color:
        yield f"<fc={_check_color(segment.color)}>"
        closing.append("</fc>")
    yield _dump_widget(segment.widget)
    yield from reversed(closing)


def dump_markup(segments: Sequence[Segment], default_color: str) -> str:
    """Write segments out as markup that parses back into equal segments.

    Every segment is written independently, so
    ``parse_markup(default_color, dump_markup(segments, default_color))``
    returns ``segments`` unchanged. Text is always wrapped in ``<raw>`` tags to
    keep its content and the boundaries between segments intact.

    Raises
    ------
    MarkupEncodeError
        If a color, font index, icon path or action command has no markup
        representation
    """
    return "".join(
        part for segment in segments for part in _dump_segment(segment, default_color)
    )
