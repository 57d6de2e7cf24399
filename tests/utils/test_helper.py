import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from msgspec import DecodeError, json, msgpack

from prefixdict.utils import helper


@pytest.fixture
def temp_dir() -> Generator[Path]:
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


def test_existing_file(temp_dir: Path) -> None:
    file_path = temp_dir / "existing_file.txt"
    file_path.touch()
    assert helper.resolve_file_with_links(file_path) == file_path.resolve()


def test_existing_folder(temp_dir: Path) -> None:
    folder_path = temp_dir / "existing_folder"
    folder_path.mkdir()
    assert helper.resolve_folder_with_links(folder_path) == folder_path.resolve()


def test_non_existing_folder(temp_dir: Path) -> None:
    folder_path = temp_dir / "non_existing_folder"
    resolved_path = helper.resolve_folder_with_links(folder_path)
    assert resolved_path.exists()
    assert resolved_path.is_dir()


def test_nested_non_existing_path(temp_dir: Path) -> None:
    nested_path = temp_dir / "a" / "b" / "c" / "file.txt"
    resolved_path = helper.resolve_file_with_links(nested_path)
    assert resolved_path.exists()
    assert resolved_path.is_file()
    assert all(p.exists() for p in resolved_path.parents if str(p) != resolved_path.root)


def test_load_json_mapping(temp_dir: Path) -> None:
    source = temp_dir / "words.json"
    source.write_bytes(json.encode({"car": 1, "cat": [2, 3], "dog": None}))
    assert helper.load_mapping(source) == {"car": 1, "cat": [2, 3], "dog": None}


def test_load_msgpack_mapping(temp_dir: Path) -> None:
    source = temp_dir / "words.MSGPACK"
    source.write_bytes(msgpack.encode({"car": "red"}))
    assert helper.load_mapping(source) == {"car": "red"}


def test_load_rejects_unknown_suffix(temp_dir: Path) -> None:
    source = temp_dir / "words.yaml"
    source.write_text("car: 1")
    with pytest.raises(ValueError, match="Unsupported file type '.yaml', expected `.json` or `.msgpack`"):
        helper.load_mapping(source)


def test_load_rejects_non_object(temp_dir: Path) -> None:
    source = temp_dir / "words.json"
    source.write_bytes(json.encode([1, 2, 3]))
    with pytest.raises(DecodeError):
        helper.load_mapping(source)


def test_dump_value() -> None:
    assert helper.dump_value({"a": [1, None]}) == '{"a":[1,null]}'
    assert helper.dump_value("text") == '"text"'
