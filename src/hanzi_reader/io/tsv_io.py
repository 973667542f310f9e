"""TSV read/write helpers for level tables and token output."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Sequence

from hanzi_reader.models import ChineseSegment, Segment

TSV_HEADER = [
    "token_index",
    "word",
    "traditional",
    "pinyin_numbered",
    "pinyin",
    "level",
    "definition",
]

LEVEL_RE = re.compile(r"^(\d+)")


def parse_level(label: str) -> int:
    """Convert a level label such as ``3`` or ``7-9`` to its leading number.

    Raises:
        ValueError: If the label does not start with a number.
    """

    match = LEVEL_RE.match(label.strip())
    if not match:
        raise ValueError(f"Invalid HSK level '{label}'")
    return int(match.group(1))


def read_levels_tsv(path: Path) -> dict[str, int]:
    """Load an HSK word list as a word -> level mapping.

    The reader accepts a header row with ``word`` and ``level`` columns, such
    as the HSK syllabus TSV export, or plain two-column ``word<TAB>level``
    rows. Words listed at several levels keep the lowest one.

    Args:
        path: TSV file path.

    Returns:
        Mapping keyed by simplified word.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If a level cell is malformed.
    """

    if not path.exists():
        raise FileNotFoundError(f"HSK level file not found: {path}")

    with path.open("r", encoding="utf-8") as handle:
        raw_lines = [line.rstrip("\n") for line in handle]

    lines = [line for line in raw_lines if line.strip() and not line.lstrip().startswith("#")]
    if not lines:
        return {}

    header_cells = [cell.strip() for cell in lines[0].split("\t")]
    if {"word", "level"}.issubset(set(header_cells)):
        idx_word = header_cells.index("word")
        idx_level = header_cells.index("level")
        data_lines = lines[1:]
    else:
        idx_word = 0
        idx_level = 1
        data_lines = lines

    levels: dict[str, int] = {}
    for line_no, line in enumerate(data_lines, start=1):
        cells = [cell.strip() for cell in line.split("\t")]
        if len(cells) <= max(idx_word, idx_level):
            continue
        word = cells[idx_word]
        if not word:
            continue
        try:
            level = parse_level(cells[idx_level])
        except ValueError as exc:
            raise ValueError(f"{path}: row {line_no}: {exc}") from exc
        levels[word] = min(level, levels.get(word, level))
    return levels


def write_tsv(segments: Sequence[Segment], output_path: Path, include_header: bool = True) -> None:
    """Write one row per recognised word using its preferred reading.

    Args:
        segments: Segments produced by the segmenter.
        output_path: Destination TSV file path.
        include_header: Whether to include a header row.
    """

    with output_path.open("w", encoding="utf-8") as handle:
        if include_header:
            handle.write("\t".join(TSV_HEADER))
            handle.write("\n")
        words = [item for item in segments if isinstance(item, ChineseSegment)]
        for idx, word in enumerate(words, start=1):
            entry = word.preferred
            handle.write(
                "\t".join(
                    [
                        str(idx),
                        entry.simplified,
                        entry.traditional,
                        entry.pinyin_numbers,
                        entry.pinyin_marks,
                        str(entry.level),
                        entry.english[0] if entry.english else "",
                    ]
                )
            )
            handle.write("\n")
