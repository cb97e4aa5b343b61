"""
Test the command line
"""

import json
from pathlib import Path

import pytest

from urlfields.cli import main


def write_json(path: Path, data) -> str:
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_encode(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    params = write_json(
        tmp_path / "params.json", {"b": [1, 2], "a": True, "c": None}
    )
    assert main(["--paramsfile", params]) == 0
    assert capsys.readouterr().out == "a=1&b[]=1&b[]=2\n"


def test_base(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    params = write_json(tmp_path / "params.json", {"a": 2})
    assert main(["--paramsfile", params, "--base", "http://x.com?z=1"]) == 0
    assert capsys.readouterr().out == "http://x.com?z=1&a=2\n"


def test_base_from_config(
    tmp_path: Path, capsys: pytest.CaptureFixture
) -> None:
    params = write_json(tmp_path / "params.json", {"a": 2})
    config = write_json(
        tmp_path / "config.json",
        {"loglevel": "DEBUG", "base": "https://example.com/api"},
    )
    assert main(["--paramsfile", params, "--configfile", config]) == 0
    assert capsys.readouterr().out == "https://example.com/api?a=2\n"


def test_template(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    params = write_json(tmp_path / "params.json", {"id": 7, "x": None})
    assert main(["--paramsfile", params, "--template", "/u/{id}/{x}"]) == 0
    assert capsys.readouterr().out == "/u/7/{x}\n"


def test_bad_base(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    params = write_json(tmp_path / "params.json", {"a": 2})
    assert main(["--paramsfile", params, "--base", "http://x.com:abc"]) == 1
    assert capsys.readouterr().out == ""


def test_not_an_object(tmp_path: Path) -> None:
    params = write_json(tmp_path / "params.json", [1, 2])
    assert main(["--paramsfile", params]) == 1
