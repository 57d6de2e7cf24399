from pathlib import Path
from typing import Any

import pytest
from msgspec import json

from prefixdict import cli

WORDS = {"car": 1, "cat": 2, "Cab": 3, "dog": {"legs": 4}}


@pytest.fixture
def source(tmp_path: Path) -> Path:
    path = tmp_path / "words.json"
    path.write_bytes(json.encode(WORDS))
    return path


def run(*argv: Any) -> int:
    return cli.main(["--case-sensitive", "--no-log-file", *map(str, argv)])


def test_get(source: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run(source, "--get", "dog") == 0
    assert capsys.readouterr().out == '{"legs":4}\n'


def test_get_missing(source: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run(source, "--get", "cow") == 1
    assert capsys.readouterr().out == ""


def test_prefix(source: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run(source, "--prefix", "ca") == 0
    assert sorted(capsys.readouterr().out.split()) == ["1", "2"]


def test_prefix_ignore_case(source: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main([str(source), "--prefix", "CA", "--ignore-case", "--no-log-file"]) == 0
    assert sorted(capsys.readouterr().out.split()) == ["1", "2", "3"]


def test_keys(source: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run(source, "--keys", "--prefix", "c") == 0
    assert sorted(capsys.readouterr().out.split()) == ["car", "cat"]


def test_everything_by_default(source: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run(source, "--keys") == 0
    assert sorted(capsys.readouterr().out.split()) == sorted(WORDS)


def test_count(source: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run(source, "--count") == 0
    assert capsys.readouterr().out == "4\n"


def test_missing_source(tmp_path: Path) -> None:
    assert run(tmp_path / "missing.json", "--count") == 1


def test_unsupported_source(tmp_path: Path) -> None:
    path = tmp_path / "words.txt"
    path.write_text("car")
    assert run(path, "--count") == 1


def test_queries_are_exclusive(source: Path) -> None:
    with pytest.raises(SystemExit):
        run(source, "--get", "car", "--count")
