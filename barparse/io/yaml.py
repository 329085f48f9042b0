from __future__ import annotations

from pathlib import Path, PosixPath, WindowsPath
from typing import Any

from ruamel.yaml import YAML, Dumper


def get_yaml_io(typ: str = "safe"):
    """Return yaml loader/dumper configured for bar configs.

    Tuples, as used by :class:`~barparse.Command`, are written as plain lists and
    paths as strings, so dumped configs load back without custom tags.
    """
    yaml = YAML(typ=typ, pure=True)
    yaml.default_flow_style = False

    def path2str(dumper: Dumper, data: Path):
        return dumper.represent_scalar("tag:yaml.org,2002:str", str(data))  # type: ignore

    def tuple2list(dumper: Dumper, data: tuple[Any, ...]):
        return dumper.represent_list(list(data))  # type: ignore

    yaml.representer.add_representer(PosixPath, path2str)
    yaml.representer.add_representer(WindowsPath, path2str)
    yaml.representer.add_representer(tuple, tuple2list)
    return yaml
