"""Composition of onset and final parsing into whole syllables."""

from __future__ import annotations

from dataclasses import dataclass

from hanzi_reader.phonetic.finals import Final, parse_final, render_final
from hanzi_reader.phonetic.initials import Initial, parse_initial, render_initial
from hanzi_reader.phonetic.notation import Notation


@dataclass(frozen=True, order=True)
class Syllable:
    """One parsed Mandarin syllable. Tone is carried separately by callers."""

    initial: Initial
    final: Final

    def render(self, notation: Notation = Notation.PINYIN) -> str:
        """Spell the syllable in ``notation``."""

        return render_syllable(self, notation)

    @property
    def pinyin(self) -> str:
        return render_syllable(self, Notation.PINYIN)

    @property
    def zhuyin(self) -> str:
        return render_syllable(self, Notation.ZHUYIN)

    @property
    def ipa(self) -> str:
        return render_syllable(self, Notation.IPA)


FALLBACK_SYLLABLE = Syllable(Initial.NONE, Final.A)


def parse_syllable(text: str) -> Syllable | None:
    """Parse one pinyin syllable such as ``zhong1``, ``lü4`` or ``r5``.

    The onset is parsed first and its spelling length sliced off; the rest is
    decoded as a final in the context of that onset. A lone ``r`` (the erhua
    suffix) parses as onset ``r`` with the rhotacized final, which is really a
    bare ``er`` syllable, so it is returned with no onset.

    Args:
        text: Pinyin syllable, optionally with a trailing tone digit.

    Returns:
        The parsed syllable, or ``None`` when ``text`` is not valid pinyin.
    """

    text = text.lstrip()
    initial = parse_initial(text, Notation.PINYIN)
    if initial is None:
        return None

    onset_length = len(render_initial(initial, Notation.PINYIN))
    remainder = text[onset_length:] if len(text) > onset_length else ""
    final = parse_final(remainder, initial)
    if final is None:
        return None

    if initial is Initial.R and final is Final.ER:
        initial = Initial.NONE
    return Syllable(initial, final)


def render_syllable(syllable: Syllable, notation: Notation = Notation.PINYIN) -> str:
    """Concatenate the onset and final spellings of ``syllable`` in ``notation``."""

    return render_initial(syllable.initial, notation) + render_final(
        syllable.final, syllable.initial, notation
    )
