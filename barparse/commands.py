"""Descriptions of the commands that feed text into template slots.

Running the commands is left to the caller; this module only names them and looks
them up by alias.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Final, Protocol, Tuple, TypeVar, Union

import attrs

_logger = logging.getLogger(__name__)

DEFAULT_INTERVAL: Final = 10
"""Refresh interval, in tenths of a second, of commands built for unknown aliases"""


class Runnable(Protocol):
    """Anything that can be referenced from a template by its alias."""

    @property
    def alias(self) -> str: ...


_R = TypeVar("_R", bound=Runnable)


def _freeze_env(env: Mapping[str, str]) -> Tuple[Tuple[str, str], ...]:
    return tuple(sorted(dict(env).items()))


@attrs.frozen
class Command:
    """An external program polled every ``interval`` ticks.

    Attributes
    ----------
    program
        Program to run
    args
        Arguments passed to ``program``
    env
        Extra environment variables, stored as sorted ``(name, value)`` pairs
    interval
        Polling interval in tenths of a second
    name
        Alias used in templates. Defaults to ``program`` when blank.
    """

    program: str
    args: Tuple[str, ...] = attrs.field(default=(), converter=tuple)
    env: Tuple[Tuple[str, str], ...] = attrs.field(default=(), converter=_freeze_env)
    interval: int = DEFAULT_INTERVAL
    name: str = ""

    @property
    def alias(self) -> str:
        return self.name or self.program

    @classmethod
    def default(cls, alias: str) -> Command:
        """Return the inert command substituted for an unknown alias."""
        return cls(alias, (), {}, DEFAULT_INTERVAL)


def command_registry(
    commands: Mapping[str, _R] | Iterable[_R],
) -> Mapping[str, Union[_R, Command]]:
    """Index commands by alias.

    Mappings are returned unchanged. For other iterables, a command sharing its
    alias with an earlier one replaces it.
    """
    if isinstance(commands, Mapping):
        return commands
    return {command.alias: command for command in commands}


def resolve_command(registry: Mapping[str, _R], alias: str) -> Union[_R, Command]:
    """Look up ``alias``, falling back to :meth:`Command.default` when absent.

    Lookup is exact and case-sensitive.
    """
    try:
        return registry[alias]
    except KeyError:
        _logger.debug("No command registered for alias %r, using default", alias)
        return Command.default(alias)
