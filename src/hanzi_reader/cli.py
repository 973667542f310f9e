"""CLI entrypoint for annotating Chinese text with hints and HSK statistics."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from hanzi_reader.config import ReaderConfig
from hanzi_reader.hints import HintMode
from hanzi_reader.io.tsv_io import write_tsv
from hanzi_reader.pipeline import run_pipeline
from hanzi_reader.reporting.render_text import render_glossary, render_segments
from hanzi_reader.reporting.report_md import build_report_md
from hanzi_reader.stats import Stats


def _resolve_default_cedict_path() -> Path:
    """Resolve default CC-CEDICT path from project layout.

    Returns:
        Preferred dictionary path, favoring ``data/cedict_ts.u8`` when present
        and falling back to project-root ``cedict_ts.u8``.
    """

    cwd_data = Path("data") / "cedict_ts.u8"
    if cwd_data.exists():
        return cwd_data
    return Path("cedict_ts.u8")


def _format_table(headers: Sequence[str], data_rows: Sequence[Sequence[str]]) -> str:
    """Format rows as an ASCII table for terminal output.

    Args:
        headers: Table headers.
        data_rows: Row values.

    Returns:
        Monospace table string.
    """

    widths = [len(header) for header in headers]
    for row in data_rows:
        for idx, value in enumerate(row):
            widths[idx] = max(widths[idx], len(value))

    header_line = " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers))
    separator_line = "-+-".join("-" * width for width in widths)
    body_lines = [
        " | ".join(value.ljust(widths[idx]) for idx, value in enumerate(row)) for row in data_rows
    ]
    return "\n".join([header_line, separator_line, *body_lines])


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser for the reader command.
    """

    parser = argparse.ArgumentParser(
        description="Segment Chinese text and annotate it with pronunciation hints."
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", type=Path, help="Path to a UTF-8 input text file.")
    source.add_argument("--pdf", type=Path, help="Path to an input PDF.")
    parser.add_argument("--page-start", type=int, default=1, help="1-based start page (inclusive).")
    parser.add_argument("--page-end", type=int, default=None, help="1-based end page (inclusive).")
    parser.add_argument(
        "--cedict",
        type=Path,
        default=_resolve_default_cedict_path(),
        help="Path to CC-CEDICT .u8 file.",
    )
    parser.add_argument(
        "--levels",
        type=Path,
        default=None,
        help="HSK word list TSV with word and level columns.",
    )
    parser.add_argument(
        "--hint",
        type=HintMode,
        choices=list(HintMode),
        default=HintMode.PINYIN,
        metavar="{" + ",".join(mode.value for mode in HintMode) + "}",
        help="Hint shown after each character (default: pinyin).",
    )
    parser.add_argument(
        "--traditional", action="store_true", help="Show traditional characters."
    )
    parser.add_argument(
        "--no-tone-color",
        action="store_true",
        help="Do not report per-character tones (tone hints show 99).",
    )
    parser.add_argument(
        "--no-word-space", action="store_true", help="Do not put spaces between words."
    )
    parser.add_argument(
        "--no-level",
        action="store_true",
        help="Hide HSK levels of words (level hints show 99).",
    )
    parser.add_argument(
        "--glossary",
        action="store_true",
        help="Print every candidate reading of each distinct word after the text.",
    )
    parser.add_argument("--output", type=Path, default=None, help="Per-word TSV output path.")
    parser.add_argument("--report", type=Path, default=None, help="Markdown report output path.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def config_from_args(args: argparse.Namespace) -> ReaderConfig:
    """Build the immutable display configuration from parsed arguments."""

    return ReaderConfig(
        hint=args.hint,
        tone_color=not args.no_tone_color,
        simplified=not args.traditional,
        word_space=not args.no_word_space,
        show_level=not args.no_level,
    )


def _print_stats(stats: Stats) -> None:
    """Print the word totals and the per-level table.

    Args:
        stats: Statistics of the segmentation pass.
    """

    summary = f"Words tot/uniq: {stats.total_words}/{stats.unique_words}"
    if stats.total_words > 0:
        summary += f", avg HSK: {stats.average_level:.2f}"
    print(summary)

    rows = [
        [row.label, str(row.occurrences), str(row.unique), f"{row.share:.0f}%"]
        for row in stats.rows()
    ]
    if rows:
        print()
        print(_format_table(["level", "occurrences", "unique", "share"], rows))


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI workflow from arguments through output generation.

    Returns:
        Zero exit status on success.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    source = args.pdf if args.pdf is not None else args.text
    if not source.exists():
        raise SystemExit(f"Input not found: {source}")
    if not args.cedict.exists():
        raise SystemExit(f"CC-CEDICT file not found: {args.cedict}")

    result = run_pipeline(
        cedict_path=args.cedict,
        levels_path=args.levels,
        text_path=args.text,
        pdf_path=args.pdf,
        page_start=args.page_start,
        page_end=args.page_end,
    )

    print(render_segments(result.segments, config_from_args(args)))
    print()
    if args.glossary:
        glossary = render_glossary(result.segments)
        if glossary:
            print(glossary)
            print()
    _print_stats(result.stats)

    if args.output is not None:
        write_tsv(result.segments, output_path=args.output)
        print(f"Wrote word list to {args.output}")
    if args.report is not None:
        args.report.write_text(build_report_md(result.segments, result.stats), encoding="utf-8")
        print(f"Wrote report to {args.report}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
