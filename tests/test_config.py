from __future__ import annotations

import json
from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st

import tests.strategies as bp_st
from barparse.actions import Action
from barparse.commands import Command
from barparse.exceptions import ConfigError
from barparse.io.config import (
    BarConfig,
    aligned_templates,
    config_from_dict,
    load_config,
    parse_config_template,
    parse_string,
    write_config,
)
from barparse.types import Segment, Text

YAML_CONFIG = """\
fg_color: "#aaaaaa"
sep_char: "$"
template: "$cpu$ }{ <fc=red>$clock$</fc>"
commands:
  - program: date
    args: ["+%H:%M"]
    interval: 600
    alias: clock
  - program: cpu
    env:
      LANG: C
"""


class TestLoadConfig:
    def test_load_yaml(self, tmp_path: Path):
        path = tmp_path / "bar.yaml"
        path.write_text(YAML_CONFIG)
        config = load_config(path)
        assert config.fg_color == "#aaaaaa"
        assert config.sep_char == "$"
        assert config.align_sep == "}{"
        assert config.commands == (
            Command("date", ("+%H:%M",), {}, 600, "clock"),
            Command("cpu", env={"LANG": "C"}),
        )

    def test_load_json(self, tmp_path: Path):
        path = tmp_path / "bar.json"
        path.write_text(json.dumps({"fg_color": "white", "commands": []}))
        assert load_config(path) == BarConfig(fg_color="white")

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "bar.yaml"
        path.write_text("")
        assert load_config(path) == BarConfig()

    def test_top_level_must_be_mapping(self, tmp_path: Path):
        path = tmp_path / "bar.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping at the top level"):
            load_config(path)

    @pytest.mark.parametrize(
        ("name", "contents"),
        [("bar.yaml", "fg_color: [unclosed\n"), ("bar.json", "{not json")],
    )
    def test_syntax_error_is_config_error(
        self, tmp_path: Path, name: str, contents: str
    ):
        path = tmp_path / name
        path.write_text(contents)
        with pytest.raises(ConfigError, match="could not be parsed"):
            load_config(path)

    @pytest.mark.parametrize(
        ("data", "match"),
        [
            ({"colour": "red"}, "Unrecognized config keys: colour"),
            ({"fg_color": 1}, "fg_color must be a string"),
            ({"sep_char": "%%"}, "sep_char must be a single character"),
            ({"commands": {}}, "commands must be a list"),
            ({"commands": ["date"]}, r"commands\[0\] must be a mapping"),
            ({"commands": [{"args": []}]}, r"commands\[0\] is missing 'program'"),
            ({"commands": [{"program": "a", "rate": 1}]}, "unrecognized keys: rate"),
            ({"commands": [{"program": "a", "args": "-s"}]}, "args must be a list"),
            ({"commands": [{"program": "a", "env": []}]}, "env must be a mapping"),
            ({"commands": [{"program": "a", "interval": 0}]}, "positive integer"),
            ({"commands": [{"program": "a", "interval": True}]}, "positive integer"),
        ],
    )
    def test_invalid_config(self, data: dict[str, object], match: str):
        with pytest.raises(ConfigError, match=match):
            config_from_dict(data)


class TestWriteConfig:
    @pytest.mark.parametrize("suffix", [".yaml", ".json"])
    @given(
        commands=st.lists(bp_st.commands(bp_st.config_texts()), max_size=3),
        color=bp_st.colors(),
    )
    def test_written_config_loads_back(
        self,
        tmp_path_factory: pytest.TempPathFactory,
        suffix: str,
        commands: list[Command],
        color: str,
    ):
        path = tmp_path_factory.mktemp("config") / f"bar{suffix}"
        config = BarConfig(fg_color=color, commands=commands)
        write_config(path, config)
        assert load_config(path) == config

    @pytest.mark.parametrize("suffix", [".yaml", ".json"])
    def test_written_commands_keep_alias_and_env(self, tmp_path: Path, suffix: str):
        path = tmp_path / f"bar{suffix}"
        config = BarConfig(
            sep_char="$",
            commands=[Command("date", ("+%H",), {"TZ": "UTC"}, 600, "clock")],
        )
        write_config(path, config)
        assert load_config(path) == config


class TestConfigParsing:
    def test_parse_string_uses_fg_color(self):
        config = BarConfig(fg_color="#123456")
        assert parse_string(config, "<fc=red>a</fc>b") == [
            Segment(Text("a"), "red"),
            Segment(Text("b"), "#123456"),
        ]

    def test_parse_string_fallback_uses_fg_color(self):
        config = BarConfig(fg_color="#123456")
        [segment] = parse_string(config, "<fc=red>a")
        assert segment.color == "#123456"

    def test_parse_config_template(self):
        clock = Command("date", name="clock")
        config = BarConfig(sep_char="$", template="<$clock$>", commands=[clock])
        assert parse_config_template(config) == [(clock, "<", ">")]

    def test_parse_explicit_template(self):
        config = BarConfig()
        assert parse_config_template(config, "%x% y") == [
            (Command.default("x"), "", " y")
        ]

    def test_aligned_templates(self):
        config = BarConfig(template="%a% }%b%{ %c%")
        assert aligned_templates(config) == ("%a% ", "%b%", " %c%")

    def test_action_markup_in_template_output(self):
        config = BarConfig()
        [(_, prefix, _)] = parse_config_template(
            config, "<action=`xterm`>term</action>%date%"
        )
        [segment] = parse_string(config, prefix)
        assert segment.actions == (Action({1}, "xterm"),)
