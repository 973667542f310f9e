"""Unit tests for input text loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from hanzi_reader.io.text_io import read_pdf_text, read_text


def test_read_text_keeps_line_breaks(tmp_path: Path) -> None:
    path = tmp_path / "input.txt"
    path.write_text("你好\n\n再见\n", encoding="utf-8")

    assert read_text(path) == "你好\n\n再见\n"


def test_missing_inputs_raise(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_text(tmp_path / "missing.txt")
    with pytest.raises(FileNotFoundError, match="PDF not found"):
        read_pdf_text(tmp_path / "missing.pdf")
