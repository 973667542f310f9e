"""Mandarin syllable onsets and their spellings in each notation.

The enum order is significant: the apical/retroflex group used by final parsing
is the contiguous member range ``Z`` through ``R``.
"""

from __future__ import annotations

from enum import Enum

from hanzi_reader.phonetic.notation import Notation, check_table, is_zhuyin_char


class Initial(Enum):
    """The 21 consonant onsets plus ``NONE`` for a zero-onset syllable."""

    NONE = 0
    B = 1
    P = 2
    M = 3
    F = 4
    D = 5
    T = 6
    N = 7
    L = 8
    Z = 9
    C = 10
    S = 11
    ZH = 12
    CH = 13
    SH = 14
    R = 15
    J = 16
    Q = 17
    X = 18
    G = 19
    K = 20
    H = 21

    @property
    def is_apical(self) -> bool:
        """Whether a bare ``i`` after this onset is the apical vowel."""

        return Initial.Z.value <= self.value <= Initial.R.value

    @property
    def is_palatal(self) -> bool:
        """Whether orthographic ``u`` after this onset stands for ``ü``."""

        return self in (Initial.J, Initial.Q, Initial.X)


PINYIN_INITIALS: dict[Initial, str] = {
    Initial.NONE: "",
    Initial.B: "b",
    Initial.P: "p",
    Initial.M: "m",
    Initial.F: "f",
    Initial.D: "d",
    Initial.T: "t",
    Initial.N: "n",
    Initial.L: "l",
    Initial.Z: "z",
    Initial.C: "c",
    Initial.S: "s",
    Initial.ZH: "zh",
    Initial.CH: "ch",
    Initial.SH: "sh",
    Initial.R: "r",
    Initial.J: "j",
    Initial.Q: "q",
    Initial.X: "x",
    Initial.G: "g",
    Initial.K: "k",
    Initial.H: "h",
}

ZHUYIN_INITIALS: dict[Initial, str] = {
    Initial.NONE: "",
    Initial.B: "ㄅ",
    Initial.P: "ㄆ",
    Initial.M: "ㄇ",
    Initial.F: "ㄈ",
    Initial.D: "ㄉ",
    Initial.T: "ㄊ",
    Initial.N: "ㄋ",
    Initial.L: "ㄌ",
    Initial.Z: "ㄗ",
    Initial.C: "ㄘ",
    Initial.S: "ㄙ",
    Initial.ZH: "ㄓ",
    Initial.CH: "ㄔ",
    Initial.SH: "ㄕ",
    Initial.R: "ㄖ",
    Initial.J: "ㄐ",
    Initial.Q: "ㄑ",
    Initial.X: "ㄒ",
    Initial.G: "ㄍ",
    Initial.K: "ㄎ",
    Initial.H: "ㄏ",
}

IPA_INITIALS: dict[Initial, str] = {
    Initial.NONE: "",
    Initial.B: "p",
    Initial.P: "pʰ",
    Initial.M: "m",
    Initial.F: "f",
    Initial.D: "t",
    Initial.T: "tʰ",
    Initial.N: "n",
    Initial.L: "l",
    Initial.Z: "ts",
    Initial.C: "tsʰ",
    Initial.S: "s",
    Initial.ZH: "tʂ",
    Initial.CH: "tʂʰ",
    Initial.SH: "ʂ",
    Initial.R: "ʐ",
    Initial.J: "tɕ",
    Initial.Q: "tɕʰ",
    Initial.X: "ɕ",
    Initial.G: "k",
    Initial.K: "kʰ",
    Initial.H: "x",
}

INITIAL_TABLES: dict[Notation, dict[Initial, str]] = {
    Notation.PINYIN: PINYIN_INITIALS,
    Notation.ZHUYIN: ZHUYIN_INITIALS,
    Notation.IPA: IPA_INITIALS,
}

for _notation, _table in INITIAL_TABLES.items():
    check_table(f"{_notation.value} initial", Initial, _table)

# Digraphs first so "zh" never parses as "z".
_PINYIN_LOOKUP = sorted(
    ((spelling, initial) for initial, spelling in PINYIN_INITIALS.items() if spelling),
    key=lambda item: len(item[0]),
    reverse=True,
)
_ZHUYIN_LOOKUP = {spelling: initial for initial, spelling in ZHUYIN_INITIALS.items() if spelling}
_IPA_LOOKUP = sorted(
    ((spelling, initial) for initial, spelling in IPA_INITIALS.items() if spelling),
    key=lambda item: len(item[0]),
    reverse=True,
)


def _parse_pinyin_initial(text: str) -> Initial | None:
    lowered = text.lower()
    if not lowered or not lowered[0].isalpha():
        return None
    for spelling, initial in _PINYIN_LOOKUP:
        if lowered.startswith(spelling):
            return initial
    return Initial.NONE


def _parse_zhuyin_initial(text: str) -> Initial | None:
    if not text or not is_zhuyin_char(text[0]):
        return None
    return _ZHUYIN_LOOKUP.get(text[0], Initial.NONE)


def _parse_ipa_initial(text: str) -> Initial | None:
    if not text:
        return None
    for spelling, initial in _IPA_LOOKUP:
        if text.startswith(spelling):
            return initial
    return Initial.NONE


def parse_initial(text: str, notation: Notation = Notation.PINYIN) -> Initial | None:
    """Identify the onset at the start of ``text``.

    Pinyin matching is greedy so the retroflex digraphs ``zh``/``ch``/``sh``
    win over their one-letter prefixes; any other leading letter (a vowel or
    the glides ``y``/``w``) means the syllable has no onset. Zhuyin looks at
    the first Bopomofo symbol, IPA takes the longest matching onset symbol.

    Args:
        text: Syllable text starting at the onset.
        notation: Notation ``text`` is written in.

    Returns:
        The parsed onset, ``Initial.NONE`` when the leading symbol is not an
        onset, or ``None`` when ``text`` is empty or does not start with a
        symbol of the notation at all.
    """

    if notation is Notation.ZHUYIN:
        return _parse_zhuyin_initial(text)
    if notation is Notation.IPA:
        return _parse_ipa_initial(text)
    return _parse_pinyin_initial(text)


def render_initial(initial: Initial, notation: Notation = Notation.PINYIN) -> str:
    """Return the canonical spelling of ``initial`` in ``notation``."""

    return INITIAL_TABLES[notation][initial]
