"""Plain-text rendering of segmented text with per-character hints."""

from __future__ import annotations

from typing import Sequence

from hanzi_reader.annotate import WordAnnotation, annotate_segment
from hanzi_reader.config import ReaderConfig
from hanzi_reader.models import BreakSegment, ChineseSegment, PlainSegment, Segment


def render_word(word: WordAnnotation) -> str:
    """Render a word as ``字(hint)`` pairs; characters without a hint stay bare."""

    return "".join(
        f"{item.char}({item.hint})" if item.hint is not None else item.char
        for item in word.characters
    )


def render_segments(segments: Sequence[Segment], config: ReaderConfig) -> str:
    """Render segments as annotated text.

    Plain text is copied without its trailing newline; the line break is
    emitted for the following :class:`BreakSegment` instead. Adjacent words
    are separated by a space when ``config.word_space`` is set.

    Args:
        segments: Segments produced by the segmenter.
        config: Display configuration.

    Returns:
        Rendered text.
    """

    parts: list[str] = []
    previous_word = False
    for item in segments:
        if isinstance(item, ChineseSegment):
            if previous_word and config.word_space:
                parts.append(" ")
            parts.append(render_word(annotate_segment(item, config)))
            previous_word = True
            continue
        previous_word = False
        if isinstance(item, BreakSegment):
            parts.append("\n")
        elif isinstance(item, PlainSegment):
            parts.append(item.text[:-1] if item.text.endswith("\n") else item.text)
    return "".join(parts)


def render_readings(word: ChineseSegment) -> str:
    """List every candidate reading of ``word`` with numbered glosses.

    Readings keep their ranked order. Each block has the form
    ``(n) simplified marks [trad. traditional]:`` followed by one indented
    numbered line per gloss; the preferred reading also names its HSK level
    when it has one.

    Args:
        word: Recognised word segment.

    Returns:
        Reading blocks separated by blank lines.
    """

    blocks: list[str] = []
    for idx, entry in enumerate(word.entries, start=1):
        level = f" (HSK {entry.level})" if idx == 1 and entry.level > 0 else ""
        header = f"({idx}) {entry.simplified} {entry.pinyin_marks} [trad. {entry.traditional}]"
        lines = [f"{header}{level}:"]
        lines.extend(
            f"  {gloss_idx}. {gloss}" for gloss_idx, gloss in enumerate(entry.english, start=1)
        )
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def render_glossary(segments: Sequence[Segment]) -> str:
    """Render the readings of each distinct word, in order of first appearance."""

    seen: set[ChineseSegment] = set()
    blocks: list[str] = []
    for item in segments:
        if not isinstance(item, ChineseSegment) or item in seen:
            continue
        seen.add(item)
        blocks.append(render_readings(item))
    return "\n\n".join(blocks)
