"""Hint strings displayed above each Han character."""

from __future__ import annotations

from enum import Enum

from hanzi_reader.phonetic.finals import render_final
from hanzi_reader.phonetic.initials import Initial, render_initial
from hanzi_reader.phonetic.notation import Notation
from hanzi_reader.phonetic.syllable import Syllable, render_syllable


class HintMode(Enum):
    """What to show above a character. Values are the user-facing labels."""

    OFF = "off"
    PINYIN = "pinyin"
    PINYIN_INITIAL = "pinyin-initial"
    PINYIN_FINAL = "pinyin-final"
    ZHUYIN = "zhuyin"
    IPA = "ipa"
    RAW = "raw"
    TONE = "tone"
    LEVEL = "level"
    PINYIN_MARKS = "pinyin-marks"

    @classmethod
    def from_index(cls, index: int) -> HintMode:
        """Map a position in the option list to a mode; unknown positions are ``OFF``."""

        members = list(cls)
        if 0 <= index < len(members):
            return members[index]
        return cls.OFF


def _raw_label(syllable: Syllable) -> str:
    onset = "" if syllable.initial is Initial.NONE else syllable.initial.name
    return f"{onset}{syllable.final.name}".lower()


def generate_hint(
    mode: HintMode,
    syllable: Syllable,
    tone: int,
    level: int,
    literal: str,
) -> str | None:
    """Build the hint for one character.

    Args:
        mode: Selected hint mode.
        syllable: Parsed syllable of the character.
        tone: Tone number (1-5, or 99 when tones are not shown).
        level: HSK level of the word the character belongs to.
        literal: The tone-marked pinyin syllable from the dictionary.

    Returns:
        The hint text, or ``None`` when hints are switched off.
    """

    if mode is HintMode.OFF:
        return None
    if mode is HintMode.PINYIN:
        return render_syllable(syllable, Notation.PINYIN)
    if mode is HintMode.PINYIN_INITIAL:
        if syllable.initial is not Initial.NONE:
            return render_initial(syllable.initial, Notation.PINYIN)
        return render_final(syllable.final, syllable.initial, Notation.PINYIN)[:1]
    if mode is HintMode.PINYIN_FINAL:
        spelling = render_final(syllable.final, syllable.initial, Notation.PINYIN)
        if syllable.initial is Initial.NONE and spelling.startswith(("y", "w")):
            spelling = spelling[1:]
        return spelling
    if mode is HintMode.ZHUYIN:
        return render_syllable(syllable, Notation.ZHUYIN)
    if mode is HintMode.IPA:
        return render_syllable(syllable, Notation.IPA)
    if mode is HintMode.RAW:
        return _raw_label(syllable)
    if mode is HintMode.TONE:
        return str(tone)
    if mode is HintMode.LEVEL:
        return str(level)
    return literal
