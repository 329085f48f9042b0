from __future__ import annotations

import pytest
from hypothesis import given

import tests.strategies as bp_st
from barparse.commands import (
    DEFAULT_INTERVAL,
    Command,
    command_registry,
    resolve_command,
)


class TestCommand:
    def test_alias_defaults_to_program(self):
        assert Command("uname").alias == "uname"

    def test_name_overrides_alias(self):
        assert Command("date", name="clock").alias == "clock"

    def test_default_command_is_inert(self):
        command = Command.default("cpu")
        assert command.program == "cpu"
        assert command.args == ()
        assert command.env == ()
        assert command.interval == DEFAULT_INTERVAL == 10

    def test_env_is_hashable_and_order_independent(self):
        first = Command("a", env={"X": "1", "Y": "2"})
        second = Command("a", env={"Y": "2", "X": "1"})
        assert first == second
        assert hash(first) == hash(second)

    def test_args_become_tuple(self):
        assert Command("a", ["-s", "-r"]).args == ("-s", "-r")


class TestRegistry:
    @given(command=bp_st.commands())
    def test_registry_keys_are_aliases(self, command: Command):
        assert command_registry([command]) == {command.alias: command}

    def test_mapping_returned_unchanged(self):
        registry = {"x": Command("y")}
        assert command_registry(registry) is registry

    def test_resolve_hit(self):
        command = Command("uname")
        assert resolve_command({"uname": command}, "uname") is command

    def test_resolve_miss_logs(self, barparse_logs: pytest.LogCaptureFixture):
        assert resolve_command({}, "nope") == Command.default("nope")
        assert "No command registered for alias 'nope'" in barparse_logs.text
