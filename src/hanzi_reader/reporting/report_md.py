"""Markdown report generation for reading-statistics summaries."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from hanzi_reader.models import PlainSegment, Segment
from hanzi_reader.segmenter import split_han_runs
from hanzi_reader.stats import Stats


def _markdown_table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    """Render a deterministic GitHub-flavored markdown table.

    Args:
        headers: Table header labels.
        rows: Table body rows as string sequences.

    Returns:
        Markdown table text.
    """

    line_header = "| " + " | ".join(headers) + " |"
    line_sep = "| " + " | ".join("---" for _ in headers) + " |"
    body = ["| " + " | ".join(row) + " |" for row in rows]
    return "\n".join([line_header, line_sep, *body])


def collect_unknown_words(segments: Sequence[Segment]) -> dict[str, int]:
    """Count Han chunks that were left as plain text for lack of an entry."""

    counter: Counter[str] = Counter()
    for item in segments:
        if not isinstance(item, PlainSegment):
            continue
        for run, is_han in split_han_runs(item.text):
            if is_han:
                counter[run] += 1
    return dict(counter)


def build_report_md(segments: Sequence[Segment], stats: Stats) -> str:
    """Build the markdown statistics report for one segmentation pass.

    Args:
        segments: Segments of the pass.
        stats: Statistics of the same pass.

    Returns:
        Full markdown content with summary tables.
    """

    level_rows = [
        (row.label, str(row.occurrences), str(row.unique), f"{row.share:.0f}%")
        for row in stats.rows()
    ]

    unknown = collect_unknown_words(segments)
    unknown_rows = [
        (word, str(unknown[word]))
        for word in sorted(unknown, key=lambda item: (-unknown[item], item))
    ]

    sections = [
        "# Reading Report",
        "",
        f"Words total/unique: {stats.total_words}/{stats.unique_words}",
        f"Average HSK level: {stats.average_level:.2f}",
        "",
        "## Words per HSK level",
        _markdown_table(["level", "occurrences", "unique", "share"], level_rows),
        "",
        "## Words without dictionary entry",
        _markdown_table(["word", "count"], unknown_rows),
    ]

    return "\n".join(sections) + "\n"
