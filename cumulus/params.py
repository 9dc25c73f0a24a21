"""Reading and writing ``name [value]`` parameter files."""

from __future__ import annotations

import os
import re
from typing import Mapping, Sequence, Union

from cumulus.platform import load_lines_from_file, write_to_file

ParamValue = Union[int, float, tuple]

_NAME = re.compile(r"\s*(\S+)")
_VALUE = re.compile(r"\s*\[([^\]]+)")


def parse_param_line(line: str) -> tuple[str, str]:
    """Split a ``name [value]`` line into its name and raw value text."""
    name_match = _NAME.match(line)
    if not name_match:
        raise ValueError(f"no parameter name in line {line!r}")
    value_match = _VALUE.match(line, name_match.end())
    if not value_match:
        raise ValueError(f"no bracketed value in line {line!r}")
    return name_match.group(1), value_match.group(1)


def _parse_value(text: str) -> ParamValue:
    parts = [part.strip() for part in text.split(",")]
    if len(parts) == 1:
        try:
            return int(parts[0])
        except ValueError:
            return float(parts[0])
    return tuple(float(part) for part in parts)


def format_param(name: str, value: ParamValue) -> str:
    """Render one parameter as a ``name [value]`` line.

    Integers must be non-negative; vectors must have two or three components.
    """
    if isinstance(value, (int, bool)):
        if value < 0:
            raise ValueError(f"integer parameter {name!r} must not be negative")
        text = str(int(value))
    elif isinstance(value, float):
        text = f"{value:f}"
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if len(value) not in (2, 3):
            raise ValueError(f"vector parameter {name!r} must have 2 or 3 components")
        text = ", ".join(f"{float(component):f}" for component in value)
    else:
        raise TypeError(f"unsupported parameter type {type(value).__name__} for {name!r}")
    return f"{name} [{text}]\n"


def load_parameters_from_file(filepath: str | os.PathLike) -> dict[str, ParamValue]:
    """Read every non-empty line of a parameter file into a dictionary."""
    params: dict[str, ParamValue] = {}
    for line in load_lines_from_file(filepath):
        if not line:
            continue
        name, raw = parse_param_line(line)
        params[name] = _parse_value(raw)
    return params


def write_parameters_to_file(filepath: str | os.PathLike, params: Mapping[str, ParamValue]) -> None:
    """Write all parameters to a file, replacing its contents."""
    data = "".join(format_param(name, value) for name, value in params.items())
    write_to_file(filepath, data, append=False)