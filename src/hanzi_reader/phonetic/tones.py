"""Tone digit handling for numbered pinyin syllables."""

from __future__ import annotations

NEUTRAL_TONE = 5
UNKNOWN_TONE = 99

TONE_MARKS = {
    "a": ("ā", "á", "ǎ", "à"),
    "e": ("ē", "é", "ě", "è"),
    "i": ("ī", "í", "ǐ", "ì"),
    "o": ("ō", "ó", "ǒ", "ò"),
    "u": ("ū", "ú", "ǔ", "ù"),
    "ü": ("ǖ", "ǘ", "ǚ", "ǜ"),
    "m": ("m̄", "ḿ", "m̌", "m̀"),
    "n": ("n̄", "ń", "ň", "ǹ"),
}


def split_tone(token: str) -> tuple[str, int]:
    """Split a numbered syllable into its letters and tone number.

    Args:
        token: Syllable such as ``hao3`` or ``ma``.

    Returns:
        ``(base, tone)`` where a missing tone digit counts as the neutral tone.
    """

    if token and token[-1] in "12345":
        return token[:-1], int(token[-1])
    return token, NEUTRAL_TONE


def _mark_position(base: str) -> int | None:
    """Locate the letter carrying the tone mark using the standard pinyin rule.

    ``a`` and ``e`` always take the mark, ``ou`` marks the ``o``, otherwise the
    last vowel is marked. Syllabic ``m``/``n`` carry it when there is no vowel.
    """

    lowered = base.lower()
    for vowel in ("a", "e"):
        idx = lowered.find(vowel)
        if idx >= 0:
            return idx
    idx = lowered.find("ou")
    if idx >= 0:
        return idx
    for idx in range(len(lowered) - 1, -1, -1):
        if lowered[idx] in "iouü":
            return idx
    for idx, ch in enumerate(lowered):
        if ch in "mn":
            return idx
    return None


def mark_syllable(token: str) -> str:
    """Convert a numbered syllable to its diacritic form, e.g. ``lü4`` to ``lǜ``.

    The case of the first letter is preserved so proper-noun readings such as
    ``Bei3`` become ``Běi``. Neutral-tone and unmarkable syllables are returned
    without their digit.
    """

    base, tone = split_tone(token)
    base = base.replace("u:", "ü").replace("U:", "Ü").replace("v", "ü").replace("V", "Ü")
    if tone == NEUTRAL_TONE:
        return base
    position = _mark_position(base)
    if position is None:
        return base
    letter = base[position]
    marked = TONE_MARKS[letter.lower()][tone - 1]
    if letter.isupper():
        marked = marked[0].upper() + marked[1:]
    return base[:position] + marked + base[position + 1 :]


def mark_syllables(pinyin_numbers: str) -> str:
    """Apply :func:`mark_syllable` to every whitespace-separated syllable."""

    return " ".join(mark_syllable(token) for token in pinyin_numbers.split())
