"""Per-character annotation of recognised words."""

from __future__ import annotations

from dataclasses import dataclass

from hanzi_reader.config import ReaderConfig
from hanzi_reader.hints import generate_hint
from hanzi_reader.models import ChineseSegment
from hanzi_reader.phonetic.syllable import FALLBACK_SYLLABLE, parse_syllable
from hanzi_reader.phonetic.tones import UNKNOWN_TONE

HIDDEN_LEVEL = 99


@dataclass(frozen=True)
class CharacterAnnotation:
    """One displayed character with its hint and tone class."""

    char: str
    hint: str | None
    tone: int


@dataclass(frozen=True)
class WordAnnotation:
    """Annotated characters of one word plus its preferred entry's level."""

    text: str
    level: int
    characters: tuple[CharacterAnnotation, ...]


def annotate_segment(word: ChineseSegment, config: ReaderConfig) -> WordAnnotation:
    """Pair each character of the preferred reading with its hint.

    Characters come from the simplified or traditional spelling depending on
    ``config``. With ``config.show_level`` off the word reports
    :data:`HIDDEN_LEVEL` instead of its HSK level. Syllables that fail to
    parse fall back to :data:`FALLBACK_SYLLABLE` so a bad dictionary reading
    degrades the hint instead of aborting the word.

    Args:
        word: Recognised word segment.
        config: Display configuration.

    Returns:
        The word's annotation.
    """

    entry = word.preferred
    level = entry.level if config.show_level else HIDDEN_LEVEL
    text = entry.simplified if config.simplified else entry.traditional
    characters: list[CharacterAnnotation] = []
    for char, numbered, marked, tone in zip(
        text,
        entry.pinyin_numbers.split(),
        entry.pinyin_marks.split(),
        entry.tone_marks,
    ):
        if not config.tone_color:
            tone = UNKNOWN_TONE
        syllable = parse_syllable(numbered) or FALLBACK_SYLLABLE
        hint = generate_hint(config.hint, syllable, tone, level, marked)
        characters.append(CharacterAnnotation(char=char, hint=hint, tone=tone))
    return WordAnnotation(text=text, level=level, characters=tuple(characters))
