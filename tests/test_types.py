from __future__ import annotations

import attrs
import pytest

from barparse.actions import Action
from barparse.types import Icon, Segment, Text


class TestSegment:
    def test_defaults(self):
        segment = Segment(Text("a"), "white")
        assert segment.font == 0
        assert segment.actions == ()
        assert not segment.clickable

    def test_unpacks_as_tuple(self):
        action = Action({1}, "cmd")
        widget, color, font, actions = Segment(Icon("x"), "red", 2, [action])
        assert (widget, color, font, actions) == (Icon("x"), "red", 2, (action,))

    def test_none_actions_means_no_actions(self):
        assert Segment(Text("a"), "white", 0, None).actions == ()

    def test_immutable(self):
        segment = Segment(Text("a"), "white")
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            segment.color = "red"  # type: ignore

    def test_text_and_icon_are_distinct(self):
        assert Text("a") != Icon("a")
        assert str(Text("a")) == str(Icon("a")) == "a"
