from __future__ import annotations

import json
from pathlib import Path

import pytest

from simple_unicode_normalization_forms.records import (
    format_records,
    pair_records,
    read_records,
    write_records,
)


def test_read_records_keeps_blank_lines(tmp_path: Path) -> None:
    p = tmp_path / "in.txt"
    p.write_text("a\r\n\r\nb\n", encoding="utf-8")
    assert read_records(p) == ["a", "", "b"]


def test_read_records_empty_file(tmp_path: Path) -> None:
    p = tmp_path / "in.txt"
    p.write_text("", encoding="utf-8")
    assert read_records(p) == []


def test_pair_records_length_mismatch() -> None:
    with pytest.raises(ValueError):
        pair_records(["a"], [])


def test_format_records_plain_and_json() -> None:
    assert format_records(["x", "y"]) == "x\ny"
    assert json.loads(format_records(["x"], as_json=True, inputs=["X"])) == [{"input": "X", "output": "x"}]


def test_write_records_adds_trailing_newline(tmp_path: Path) -> None:
    out = tmp_path / "sub" / "out.txt"
    write_records("x\ny", out)
    assert out.read_text(encoding="utf-8") == "x\ny\n"
    write_records("", out)
    assert out.read_text(encoding="utf-8") == ""
