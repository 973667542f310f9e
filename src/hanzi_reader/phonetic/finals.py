"""Mandarin syllable finals (nucleus plus coda) and their context-sensitive parsing.

Pinyin spells several finals differently depending on the onset: zero-onset
syllables use the ``y-``/``w-`` glide spellings, ``ü`` keeps its umlaut only
after ``n``/``l``, and the apical vowel after ``z c s zh ch sh r`` is written
as a plain ``i``. Parsing therefore always takes the already parsed onset.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from hanzi_reader.phonetic.initials import Initial
from hanzi_reader.phonetic.notation import Notation, check_table

MAX_FINAL_CHARS = 16


class Final(Enum):
    """The 37 finals. ``IR`` is the apical vowel, ``V*`` the front-rounded series."""

    A = 0
    AI = 1
    AO = 2
    AN = 3
    ANG = 4
    E = 5
    EI = 6
    EN = 7
    ENG = 8
    ER = 9
    O = 10
    OU = 11
    ONG = 12
    I = 13
    IR = 14
    IA = 15
    IAO = 16
    IE = 17
    IOU = 18
    IAN = 19
    IANG = 20
    IN = 21
    ING = 22
    IONG = 23
    U = 24
    UA = 25
    UAI = 26
    UEI = 27
    UO = 28
    UAN = 29
    UANG = 30
    UEN = 31
    UENG = 32
    V = 33
    VE = 34
    VAN = 35
    VN = 36


PINYIN_FINALS_NO_INITIAL: dict[Final, str] = {
    Final.A: "a",
    Final.AI: "ai",
    Final.AO: "ao",
    Final.AN: "an",
    Final.ANG: "ang",
    Final.E: "e",
    Final.EI: "ei",
    Final.EN: "en",
    Final.ENG: "eng",
    Final.ER: "er",
    Final.O: "o",
    Final.OU: "ou",
    Final.ONG: "ong",
    Final.I: "yi",
    Final.IR: "yir",
    Final.IA: "ya",
    Final.IAO: "yao",
    Final.IE: "ye",
    Final.IOU: "you",
    Final.IAN: "yan",
    Final.IANG: "yang",
    Final.IN: "yin",
    Final.ING: "ying",
    Final.IONG: "yong",
    Final.U: "wu",
    Final.UA: "wa",
    Final.UAI: "wai",
    Final.UEI: "wei",
    Final.UO: "wo",
    Final.UAN: "wan",
    Final.UANG: "wang",
    Final.UEN: "wen",
    Final.UENG: "weng",
    Final.V: "yu",
    Final.VE: "yue",
    Final.VAN: "yuan",
    Final.VN: "yun",
}

PINYIN_FINALS: dict[Final, str] = {
    Final.A: "a",
    Final.AI: "ai",
    Final.AO: "ao",
    Final.AN: "an",
    Final.ANG: "ang",
    Final.E: "e",
    Final.EI: "ei",
    Final.EN: "en",
    Final.ENG: "eng",
    Final.ER: "er",
    Final.O: "o",
    Final.OU: "ou",
    Final.ONG: "ong",
    Final.I: "i",
    Final.IR: "i",
    Final.IA: "ia",
    Final.IAO: "iao",
    Final.IE: "ie",
    Final.IOU: "iu",
    Final.IAN: "ian",
    Final.IANG: "iang",
    Final.IN: "in",
    Final.ING: "ing",
    Final.IONG: "iong",
    Final.U: "u",
    Final.UA: "ua",
    Final.UAI: "uai",
    Final.UEI: "ui",
    Final.UO: "uo",
    Final.UAN: "uan",
    Final.UANG: "uang",
    Final.UEN: "un",
    Final.UENG: "eng",
    Final.V: "u",
    Final.VE: "ue",
    Final.VAN: "uan",
    Final.VN: "un",
}

# After n/l the umlaut is the only thing telling nü from nu.
PINYIN_FINALS_UMLAUT: dict[Final, str] = {
    Final.V: "ü",
    Final.VE: "üe",
}

ZHUYIN_FINALS: dict[Final, str] = {
    Final.A: "ㄚ",
    Final.AI: "ㄞ",
    Final.AO: "ㄠ",
    Final.AN: "ㄢ",
    Final.ANG: "ㄤ",
    Final.E: "ㄜ",
    Final.EI: "ㄟ",
    Final.EN: "ㄣ",
    Final.ENG: "ㄥ",
    Final.ER: "ㄦ",
    Final.O: "ㄛ",
    Final.OU: "ㄡ",
    Final.ONG: "ㄨㄥ",
    Final.I: "ㄧ",
    Final.IR: "",
    Final.IA: "ㄧㄚ",
    Final.IAO: "ㄧㄠ",
    Final.IE: "ㄧㄝ",
    Final.IOU: "ㄧㄡ",
    Final.IAN: "ㄧㄢ",
    Final.IANG: "ㄧㄤ",
    Final.IN: "ㄧㄣ",
    Final.ING: "ㄧㄥ",
    Final.IONG: "ㄩㄥ",
    Final.U: "ㄨ",
    Final.UA: "ㄨㄚ",
    Final.UAI: "ㄨㄞ",
    Final.UEI: "ㄨㄟ",
    Final.UO: "ㄨㄛ",
    Final.UAN: "ㄨㄢ",
    Final.UANG: "ㄨㄤ",
    Final.UEN: "ㄨㄣ",
    Final.UENG: "ㄨㄥ",
    Final.V: "ㄩ",
    Final.VE: "ㄩㄝ",
    Final.VAN: "ㄩㄢ",
    Final.VN: "ㄩㄣ",
}

IPA_FINALS: dict[Final, str] = {
    Final.A: "ɑ",
    Final.AI: "aɪ̯",
    Final.AO: "ɑʊ̯",
    Final.AN: "an",
    Final.ANG: "ɑŋ",
    Final.E: "ɯ̯ʌ",
    Final.EI: "eɪ̯",
    Final.EN: "ən",
    Final.ENG: "əŋ",
    Final.ER: "ɑɻ",
    Final.O: "ɔ",
    Final.OU: "ɤʊ̯",
    Final.ONG: "ʊŋ",
    Final.I: "i",
    Final.IR: "ɿ",
    Final.IA: "i̯ɑ",
    Final.IAO: "i̯ɑʊ̯",
    Final.IE: "iɛ",
    Final.IOU: "i̯ɤʊ̯",
    Final.IAN: "iɛn",
    Final.IANG: "i̯ɑŋ",
    Final.IN: "in",
    Final.ING: "iŋ",
    Final.IONG: "i̯ʊŋ",
    Final.U: "u",
    Final.UA: "u̯ɑ",
    Final.UAI: "u̯aɪ̯",
    Final.UEI: "u̯eɪ̯",
    Final.UO: "u̯ɔ",
    Final.UAN: "u̯an",
    Final.UANG: "u̯ɑŋ",
    Final.UEN: "u̯ən",
    Final.UENG: "u̯əŋ",
    Final.V: "y",
    Final.VE: "y̯œ",
    Final.VAN: "y̯ɛn",
    Final.VN: "yn",
}

check_table("pinyin zero-onset final", Final, PINYIN_FINALS_NO_INITIAL)
check_table("pinyin final", Final, PINYIN_FINALS)
check_table("zhuyin final", Final, ZHUYIN_FINALS)
check_table("ipa final", Final, IPA_FINALS)

_GLIDES = {"y": "i", "w": "u"}


def _next(chars: Iterator[str]) -> str:
    return next(chars, "")


def _parse_i_family(chars: Iterator[str], zero_onset: bool) -> Final | None:
    second = _next(chars)
    if second == "a":
        third = _next(chars)
        if third == "o":
            return Final.IAO
        if third == "n":
            return Final.IANG if _next(chars) == "g" else Final.IAN
        return Final.IA
    if second == "e":
        return Final.IE
    if second == "u":
        if not zero_onset:
            return Final.IOU
        # yu, yue, yuan, yun
        third = _next(chars)
        if third == "e":
            return Final.VE
        if third == "a":
            return Final.VAN if _next(chars) == "n" else None
        if third == "n":
            return Final.VN
        return Final.V
    if second == "o":
        third = _next(chars)
        if third == "u" and zero_onset:
            return Final.IOU
        if third == "n":
            return Final.IONG if _next(chars) == "g" else None
        return None
    if second == "n":
        return Final.ING if _next(chars) == "g" else Final.IN
    if second == "i" and zero_onset:
        # yi, yin, ying
        if _next(chars) == "n":
            return Final.ING if _next(chars) == "g" else Final.IN
        return Final.I
    return Final.I


def _parse_palatal_u(chars: Iterator[str]) -> Final | None:
    second = _next(chars)
    if second == "a":
        return Final.VAN if _next(chars) == "n" else None
    if second == "e":
        return Final.VE
    if second == "n":
        return Final.VN
    return Final.V


def _parse_u_family(chars: Iterator[str], zero_onset: bool) -> Final | None:
    second = _next(chars)
    if second == "u" and zero_onset:
        return Final.U
    if second == "e" and zero_onset:
        # wei, wen, weng
        third = _next(chars)
        if third == "i":
            return Final.UEI
        if third == "n":
            return Final.UENG if _next(chars) == "g" else Final.UEN
        return None
    if second == "a":
        third = _next(chars)
        if third == "i":
            return Final.UAI
        if third == "n":
            return Final.UANG if _next(chars) == "g" else Final.UAN
        return Final.UA
    if second == "n":
        return Final.UEN
    if second == "o":
        return Final.UO
    if second == "i":
        return Final.UEI
    return Final.U


def parse_final(text: str, initial: Initial) -> Final | None:
    """Decode the pinyin final in ``text`` given the onset already parsed.

    Only the first ``MAX_FINAL_CHARS`` characters are examined; tone digits and
    other non-letters are skipped. Under a zero onset the glides ``y``/``w``
    are rewritten to the ``i``/``u`` families they stand for; after the
    apical onsets a bare ``i`` is the apical vowel; after ``j``/``q``/``x`` an
    orthographic ``u`` is ``ü``. An ``r`` onset with nothing after it is the
    rhotacized final.

    Args:
        text: Remainder of the syllable after the onset spelling (the whole
            syllable for zero-onset syllables).
        initial: Onset that preceded ``text``.

    Returns:
        The parsed final, or ``None`` if the remainder is not a valid final.
    """

    chars = iter([ch.lower() for ch in text[:MAX_FINAL_CHARS] if ch.isalpha()])
    zero_onset = initial is Initial.NONE
    first = _next(chars)
    if zero_onset:
        if not first:
            return None
        first = _GLIDES.get(first, first)

    if first == "i":
        if initial.is_apical:
            return Final.IR
        return _parse_i_family(chars, zero_onset)
    if first in ("ü", "v"):
        return Final.VE if _next(chars) == "e" else Final.V
    if first == "u":
        if initial.is_palatal:
            return _parse_palatal_u(chars)
        return _parse_u_family(chars, zero_onset)
    if first == "a":
        second = _next(chars)
        if second == "i":
            return Final.AI
        if second == "o":
            return Final.AO
        if second == "n":
            return Final.ANG if _next(chars) == "g" else Final.AN
        return Final.A
    if first == "e":
        second = _next(chars)
        if second == "i":
            return Final.EI
        if second == "r" and zero_onset:
            return Final.ER
        if second == "n":
            return Final.ENG if _next(chars) == "g" else Final.EN
        return Final.E
    if first == "o":
        second = _next(chars)
        if second == "u":
            return Final.OU
        if second == "n":
            return Final.ONG if _next(chars) == "g" else None
        return Final.O
    if initial is Initial.R:
        return Final.ER
    return None


def render_final(final: Final, initial: Initial, notation: Notation = Notation.PINYIN) -> str:
    """Return the spelling of ``final`` in ``notation``.

    Only pinyin depends on ``initial``; zhuyin and IPA spell finals the same
    way after every onset.
    """

    if notation is Notation.ZHUYIN:
        return ZHUYIN_FINALS[final]
    if notation is Notation.IPA:
        return IPA_FINALS[final]
    if initial is Initial.NONE:
        return PINYIN_FINALS_NO_INITIAL[final]
    if initial in (Initial.N, Initial.L) and final in PINYIN_FINALS_UMLAUT:
        return PINYIN_FINALS_UMLAUT[final]
    return PINYIN_FINALS[final]
