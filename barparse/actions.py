"""Mouse button bindings attached to regions of the status line."""

from __future__ import annotations

import re
from typing import AbstractSet, Final, Iterable

import attrs

BUTTONS: Final = frozenset(range(1, 6))
"""Mouse buttons that may be bound: left, middle, right, scroll up, scroll down"""

_ACTION_TAG = re.compile(r"<action=`?([^>`]*)`?( +button=[12345]+)?>(.+)</action>")


def _validate_buttons(
    instance: Action, attribute: attrs.Attribute[AbstractSet[int]], value: AbstractSet[int]
) -> None:
    if not value:
        msg = f"{attribute.name} must contain at least one mouse button"
        raise ValueError(msg)
    if not value <= BUTTONS:
        msg = (
            f"{attribute.name} may only contain buttons 1 to 5, got "
            f"{sorted(value - BUTTONS)}"
        )
        raise ValueError(msg)


@attrs.frozen
class Action:
    """A command spawned when one of ``buttons`` is clicked."""

    buttons: frozenset[int] = attrs.field(
        converter=frozenset, validator=_validate_buttons
    )
    command: str

    def __str__(self) -> str:
        buttons = "".join(map(str, sorted(self.buttons)))
        return f"{self.command} [{buttons}]"

    def triggered_by(self, button: int) -> bool:
        return button in self.buttons


def to_buttons(digits: Iterable[str]) -> frozenset[int]:
    """Convert a string of button digits into a set of buttons.

    >>> sorted(to_buttons("13"))
    [1, 3]
    """
    return frozenset(int(digit) for digit in digits)


def strip_actions(text: str) -> str:
    """Neutralize ``<action>`` tags so that text cannot bind commands to clicks.

    Each tag pair is rewritten into square brackets, keeping the command, the
    button specification and the enclosed text visible, e.g.
    ``<action=`cmd` button=1>x</action>`` becomes ``[action=cmd button=1]x[/action]``.
    Nested pairs are rewritten from the outside in until none remain.
    """
    while _ACTION_TAG.search(text):
        text = _ACTION_TAG.sub(r"[action=\1\2]\3[/action]", text)
    return text
