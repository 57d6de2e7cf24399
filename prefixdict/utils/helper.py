import enum
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import platformdirs
from msgspec import json, msgpack

from prefixdict.utils.format import human_join

platformdir = platformdirs.PlatformDirs("prefixdict", "prefixdict", roaming=False)


class PathMode(enum.IntEnum):
    FILE = 0o600
    DIR = 0o700


class SourceFormat(enum.StrEnum):
    JSON = ".json"
    MSGPACK = ".msgpack"


def _resolve_path_with_links(path: Path, mode: PathMode) -> Path:
    try:
        return path.resolve(strict=True)
    except FileNotFoundError:
        path = resolve_folder_with_links(path.parent) / path.name
        path.mkdir(mode.value) if mode == PathMode.DIR else path.touch(mode.value)
        return path.resolve(strict=True)


def resolve_folder_with_links(folder: Path) -> Path:
    return _resolve_path_with_links(folder, PathMode.DIR)


def resolve_file_with_links(file: Path) -> Path:
    return _resolve_path_with_links(file, PathMode.FILE)


def source_format(path: Path) -> SourceFormat:
    try:
        return SourceFormat(path.suffix.lower())
    except ValueError:
        expected = human_join([f"`{fmt.value}`" for fmt in SourceFormat])
        msg = f"Unsupported file type {path.suffix or path.name!r}, expected {expected}."
        raise ValueError(msg) from None


def load_mapping(path: Path) -> Mapping[str, Any]:
    """Decode a file holding a single object with string keys."""
    data = path.read_bytes()
    match source_format(path):
        case SourceFormat.JSON:
            return json.decode(data, type=dict[str, Any])
        case SourceFormat.MSGPACK:
            return msgpack.decode(data, type=dict[str, Any])


def dump_value(obj: object, /) -> str:
    return json.encode(obj).decode()
