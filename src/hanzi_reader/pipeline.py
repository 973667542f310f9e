"""Top-level orchestration: load input text and a dictionary, then segment."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from hanzi_reader.cedict.repository import CedictRepository
from hanzi_reader.io.text_io import read_pdf_text, read_text
from hanzi_reader.models import ChineseSegment, Segment
from hanzi_reader.segmenter import Dictionary, segment
from hanzi_reader.stats import Stats

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReaderResult:
    """Result bundle returned by :func:`run_pipeline`.

    Attributes:
        segments: Segmented text.
        stats: HSK statistics of the segmentation pass.
    """

    segments: tuple[Segment, ...]
    stats: Stats


def load_input_text(
    text_path: Path | None = None,
    pdf_path: Path | None = None,
    page_start: int | None = None,
    page_end: int | None = None,
) -> str:
    """Read the input text from a UTF-8 file or from a PDF page range.

    Raises:
        ValueError: If neither or both sources are given.
    """

    if (text_path is None) == (pdf_path is None):
        raise ValueError("Exactly one of text_path or pdf_path is required.")
    if pdf_path is not None:
        return read_pdf_text(pdf_path, page_start=page_start, page_end=page_end)
    return read_text(text_path)


def run_reader(text: str, dictionary: Dictionary) -> ReaderResult:
    """Segment ``text`` against ``dictionary`` and bundle the result."""

    segments, stats = segment(text, dictionary)
    recognised = sum(1 for item in segments if isinstance(item, ChineseSegment))
    logger.info(
        "Segmented %d characters into %d segments (%d words, %d unique)",
        len(text),
        len(segments),
        recognised,
        stats.unique_words,
    )
    return ReaderResult(segments=tuple(segments), stats=stats)


def run_pipeline(
    cedict_path: Path,
    levels_path: Path | None = None,
    text_path: Path | None = None,
    pdf_path: Path | None = None,
    page_start: int | None = None,
    page_end: int | None = None,
) -> ReaderResult:
    """Execute loading and segmentation from input files to segments and stats.

    Args:
        cedict_path: CC-CEDICT file path.
        levels_path: Optional HSK level TSV path.
        text_path: UTF-8 input text path.
        pdf_path: Input PDF path, used instead of ``text_path``.
        page_start: 1-based inclusive start page for PDF input.
        page_end: 1-based inclusive end page for PDF input, or ``None``.

    Returns:
        ``ReaderResult`` with the segments and their statistics.
    """

    text = load_input_text(text_path, pdf_path, page_start, page_end)
    dictionary = CedictRepository(cedict_path, levels_path=levels_path)
    return run_reader(text, dictionary)
