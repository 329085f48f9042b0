"""Reading of bar configuration files and config-driven parsing."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final, Tuple

import attrs
from ruamel.yaml import YAMLError

from barparse.commands import DEFAULT_INTERVAL, Command
from barparse.core.markup import parse_markup
from barparse.core.template import parse_template, split_alignment
from barparse.exceptions import ConfigError
from barparse.io.yaml import get_yaml_io
from barparse.types import Segment

if TYPE_CHECKING:
    from _typeshed import StrPath

_logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE: Final = (
    "%StdinReader% }{ <fc=#00FF00>%uname%</fc> * <fc=#FFFF00>%date%</fc>"
)

_COMMAND_KEYS: Final = {"program", "args", "env", "interval", "alias"}


def _validate_sep(instance: BarConfig, attribute: attrs.Attribute[str], value: str):
    if len(value) != 1:
        msg = f"{attribute.name} must be a single character, got {value!r}"
        raise ConfigError(msg)


@attrs.frozen
class BarConfig:
    """Settings consumed by the parsers.

    Attributes
    ----------
    fg_color
        Color of text outside any ``<fc>`` tag
    sep_char
        Character enclosing command aliases in ``template``
    align_sep
        Two characters splitting ``template`` into left, center and right parts
    template
        Layout of the bar
    commands
        Commands available to ``template``
    """

    fg_color: str = "grey"
    sep_char: str = attrs.field(default="%", validator=_validate_sep)
    align_sep: str = "}{"
    template: str = DEFAULT_TEMPLATE
    commands: Tuple[Command, ...] = attrs.field(default=(), converter=tuple)


def _as_str(where: str, value: Any) -> str:
    if not isinstance(value, str):
        msg = f"{where} must be a string, got {value!r}"
        raise ConfigError(msg)
    return value


def _command_from_config(index: int, entry: Any) -> Command:
    where = f"commands[{index}]"
    if not isinstance(entry, Mapping):
        msg = f"{where} must be a mapping, got {entry!r}"
        raise ConfigError(msg)
    if unknown := set(entry) - _COMMAND_KEYS:
        msg = f"{where} has unrecognized keys: {', '.join(sorted(map(str, unknown)))}"
        raise ConfigError(msg)
    if "program" not in entry:
        msg = f"{where} is missing 'program'"
        raise ConfigError(msg)

    args = entry.get("args", [])
    if not isinstance(args, list):
        msg = f"{where}.args must be a list, got {args!r}"
        raise ConfigError(msg)
    env = entry.get("env", {})
    if not isinstance(env, Mapping):
        msg = f"{where}.env must be a mapping, got {env!r}"
        raise ConfigError(msg)
    interval = entry.get("interval", DEFAULT_INTERVAL)
    if isinstance(interval, bool) or not isinstance(interval, int) or interval < 1:
        msg = f"{where}.interval must be a positive integer, got {interval!r}"
        raise ConfigError(msg)

    return Command(
        _as_str(f"{where}.program", entry["program"]),
        tuple(_as_str(f"{where}.args", arg) for arg in args),
        {
            _as_str(f"{where}.env", key): _as_str(f"{where}.env.{key}", value)
            for key, value in env.items()
        },
        interval,
        _as_str(f"{where}.alias", entry.get("alias", "")),
    )


def config_from_dict(data: Mapping[str, Any]) -> BarConfig:
    """Build a :class:`BarConfig` from deserialized config data.

    Raises
    ------
    ConfigError
        If keys are unrecognized or values have the wrong type
    """
    fields = {field.name for field in attrs.fields(BarConfig)}
    if unknown := set(data) - fields:
        msg = f"Unrecognized config keys: {', '.join(sorted(map(str, unknown)))}"
        raise ConfigError(msg)

    kwargs: dict[str, Any] = {
        key: _as_str(key, value) for key, value in data.items() if key != "commands"
    }
    commands = data.get("commands", [])
    if not isinstance(commands, list):
        msg = f"commands must be a list, got {commands!r}"
        raise ConfigError(msg)
    kwargs["commands"] = [
        _command_from_config(i, entry) for i, entry in enumerate(commands)
    ]
    return BarConfig(**kwargs)


def load_config(config_file: StrPath) -> BarConfig:
    """Read a bar config from a yaml or json file.

    Input type is decided based on file suffix: .json -> JSON, anything else -> YAML

    Raises
    ------
    ConfigError
        If the file is not valid JSON or YAML, or does not describe a config
    """
    config_file = Path(config_file)
    _logger.debug("Reading config from %s", config_file)
    try:
        if config_file.suffix == ".json":
            with open(config_file, encoding="utf-8") as f:
                data = json.load(f)
        else:
            data = get_yaml_io().load(config_file)
    except (YAMLError, json.JSONDecodeError) as err:
        msg = f"'{config_file}' could not be parsed: {err}"
        raise ConfigError(msg) from err

    if data is None:
        return BarConfig()
    if not isinstance(data, Mapping):
        msg = f"'{config_file}' must contain a mapping at the top level"
        raise ConfigError(msg)
    return config_from_dict(data)


def write_config(config_file: StrPath, config: BarConfig) -> None:
    """Write config as yaml or json, depending on the suffix of the path."""
    config_file = Path(config_file)
    data = attrs.asdict(config)
    for command, entry in zip(config.commands, data["commands"]):
        entry["env"] = dict(command.env)
        entry["alias"] = entry.pop("name")

    if config_file.suffix == ".json":
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=4)
            return
    get_yaml_io().dump(data, config_file)


def parse_string(config: BarConfig, text: str) -> list[Segment]:
    """Parse status text using the foreground color of ``config``."""
    return parse_markup(config.fg_color, text)


def parse_config_template(config: BarConfig, template: str | None = None):
    """Parse ``template`` (by default the config's own) against its commands."""
    return parse_template(
        config.sep_char,
        config.commands,
        config.template if template is None else template,
    )


def aligned_templates(config: BarConfig) -> tuple[str, str, str]:
    """Return the left, center and right parts of the config's template."""
    return split_alignment(config.align_sep, config.template)
