"""Value types shared by the markup and template parsers."""

from __future__ import annotations

from typing import Iterator, Tuple, Union

import attrs
from typing_extensions import TypeAlias

from barparse.actions import Action


@attrs.frozen
class Text:
    """A run of text to display."""

    content: str

    def __str__(self) -> str:
        return self.content


@attrs.frozen
class Icon:
    """An icon, referenced by path or name."""

    path: str

    def __str__(self) -> str:
        return self.path


Widget: TypeAlias = Union[Text, Icon]


def _to_actions(actions: Tuple[Action, ...] | None) -> Tuple[Action, ...]:
    if actions is None:
        return ()
    return tuple(actions)


@attrs.frozen
class Segment:
    """A widget together with the display attributes in effect around it.

    Unpacks as the 4-tuple ``(widget, color, font, actions)``.

    Attributes
    ----------
    widget
        The :class:`Text` or :class:`Icon` to display
    color
        Foreground color, hex or named. Not validated.
    font
        Index into the font table of the renderer. ``0`` is the default font.
    actions
        Click bindings enclosing the widget, innermost first. Empty when the
        widget is not clickable.
    """

    widget: Widget
    color: str
    font: int = 0
    actions: Tuple[Action, ...] = attrs.field(default=(), converter=_to_actions)

    def __iter__(self) -> Iterator[object]:
        return iter((self.widget, self.color, self.font, self.actions))

    @property
    def clickable(self) -> bool:
        return bool(self.actions)
