"""Reader display options, passed explicitly to annotation and rendering."""

from __future__ import annotations

from dataclasses import dataclass

from hanzi_reader.hints import HintMode


@dataclass(frozen=True)
class ReaderConfig:
    """Immutable display configuration.

    Attributes:
        hint: Hint shown above each character.
        tone_color: Whether tones are reported per character; when off every
            character gets the unknown tone ``99``.
        simplified: Show simplified characters, otherwise traditional ones.
        word_space: Separate rendered words with a space.
        show_level: Whether words carry their HSK level; when off every word
            reports the hidden level ``99``.
    """

    hint: HintMode = HintMode.PINYIN
    tone_color: bool = True
    simplified: bool = True
    word_space: bool = True
    show_level: bool = True
