"""File helpers: reading, writing and resource path handling."""

from __future__ import annotations

import os

RESOURCES_PATH = "res"
FILE_PATH_DELIM = "/"


def load_text_from_file(filepath: str | os.PathLike) -> str:
    """Return the whole text of a file; an empty file is an error."""
    with open(filepath, "r", encoding="utf-8", newline="") as handle:
        text = handle.read()
    if not text:
        raise ValueError(f"file [{os.fspath(filepath)}] is empty")
    return text


def load_lines_from_file(filepath: str | os.PathLike) -> list[str]:
    """Return every newline-terminated line of a file, without the newline.

    Trailing text that is not followed by a newline is not counted as a line.
    """
    with open(filepath, "r", encoding="utf-8", newline="") as handle:
        text = handle.read()
    return text.split("\n")[: text.count("\n")]


def load_file(filepath: str | os.PathLike) -> bytes:
    """Return all bytes of a file; an empty file is an error."""
    with open(filepath, "rb") as handle:
        data = handle.read()
    if not data:
        raise ValueError(f"file [{os.fspath(filepath)}] is empty")
    return data


def write_to_file(filepath: str | os.PathLike, data: bytes | str, append: bool = False) -> None:
    """Write (or append) ``data`` to a file."""
    payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    with open(filepath, "ab" if append else "wb") as handle:
        handle.write(payload)


def get_file_extension(filepath: str) -> str | None:
    """Return the text from the last '.' onwards, or None if there is no '.'."""
    index = filepath.rfind(".")
    return None if index < 0 else filepath[index:]


def get_res_path(filename: str, resources_path: str = RESOURCES_PATH) -> str:
    """Prefix ``filename`` with the resources directory."""
    return f"{resources_path}{FILE_PATH_DELIM}{filename}"