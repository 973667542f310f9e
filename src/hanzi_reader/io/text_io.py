"""Input text loading from plain files and PDF documents."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pdfplumber


def read_text(path: Path) -> str:
    """Read a UTF-8 text file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """

    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    return path.read_text(encoding="utf-8")


def extract_text_lines(
    pdf_path: Path,
    page_start: int | None,
    page_end: int | None,
) -> Iterator[str]:
    """Yield text lines from selected pages of a PDF.

    The function opens the PDF once and converts one page at a time to plain
    text. Page boundaries are inclusive and 1-based to match human page
    references used in CLI arguments. Lines are kept as extracted, including
    blank ones, so paragraph structure survives.

    Args:
        pdf_path: Path to the source PDF.
        page_start: 1-based start page, inclusive; ``None`` means first page.
        page_end: 1-based end page, inclusive; ``None`` means last page.

    Yields:
        Page text lines without their line terminators.
    """

    with pdfplumber.open(pdf_path) as pdf:
        total_pages = len(pdf.pages)
        start_idx = 0 if page_start is None else max(page_start - 1, 0)
        end_idx = total_pages - 1 if page_end is None else min(page_end - 1, total_pages - 1)

        for page_idx in range(start_idx, end_idx + 1):
            text = pdf.pages[page_idx].extract_text(x_tolerance=1, y_tolerance=1)
            if not text:
                continue
            yield from text.splitlines()


def read_pdf_text(pdf_path: Path, page_start: int | None = None, page_end: int | None = None) -> str:
    """Extract a page range of a PDF as newline-joined text.

    Raises:
        FileNotFoundError: If ``pdf_path`` does not exist.
    """

    if not pdf_path.exists():
        raise FileNotFoundError(f"PDF not found: {pdf_path}")
    return "\n".join(extract_text_lines(pdf_path, page_start, page_end))
