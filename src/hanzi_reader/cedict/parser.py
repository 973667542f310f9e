"""Parsing utilities for CC-CEDICT dictionary files."""

from __future__ import annotations

import logging
import re
from typing import Iterable, Mapping

from hanzi_reader.models import DictionaryEntry
from hanzi_reader.phonetic.tones import mark_syllables, split_tone

logger = logging.getLogger(__name__)

CEDICT_ENTRY_RE = re.compile(r"^(\S+)\s+(\S+)\s+\[([^]]+)]\s*/(.*)/\s*$")
NUMBERED_SYLLABLE_RE = re.compile(r"[A-Za-zÜü]+[1-5]")


def normalize_cedict_syllable(token: str) -> str | None:
    """Normalize one CC-CEDICT pinyin token, keeping its capitalisation.

    CC-CEDICT writes ``ü`` as ``u:``. The function substitutes it and
    validates the token shape.

    Args:
        token: Raw token from the pinyin bracket payload.

    Returns:
        A normalized token such as ``lü4`` or ``Bei3``, or ``None`` when the
        token is not a pinyin syllable (letters, punctuation, ``xx5``).
    """

    token = token.strip()
    if not token:
        return None
    token = token.replace("u:", "ü").replace("U:", "Ü")
    if not NUMBERED_SYLLABLE_RE.fullmatch(token):
        return None
    return token


def _parse_pinyin_tokens(payload: str) -> tuple[str, ...] | None:
    """Parse bracketed pinyin payload into normalized numbered tokens.

    Args:
        payload: Raw pinyin string inside ``[...]`` from a CEDICT line.

    Returns:
        Tuple of normalized numbered syllables, or ``None`` if any token fails.
    """

    tokens: list[str] = []
    for token in payload.split():
        normalized = normalize_cedict_syllable(token)
        if normalized is None:
            return None
        tokens.append(normalized)
    if not tokens:
        return None
    return tuple(tokens)


def parse_cedict_lines(
    lines: Iterable[str],
    levels: Mapping[str, int] | None = None,
) -> list[DictionaryEntry]:
    """Parse CC-CEDICT lines into dictionary entries.

    Comments and malformed lines are skipped, as are entries whose syllable
    count does not match the character count of both spellings. Entries are
    numbered in file order, which makes ``word_id`` stable for a given file.

    Args:
        lines: Iterator of raw dictionary lines.
        levels: Optional HSK level by simplified word.

    Returns:
        Entries in file order.
    """

    levels = levels or {}
    entries: list[DictionaryEntry] = []
    skipped = 0
    for line in lines:
        if not line or line.startswith("#"):
            continue
        match = CEDICT_ENTRY_RE.match(line.strip())
        if not match:
            skipped += 1
            continue

        trad, simp, pinyin_field, definition_payload = match.groups()
        tokens = _parse_pinyin_tokens(pinyin_field)
        if tokens is None or len(tokens) != len(simp) or len(tokens) != len(trad):
            logger.debug("Skipping CC-CEDICT entry with unaligned pinyin: %s", line.strip())
            skipped += 1
            continue

        pinyin_numbers = " ".join(tokens)
        glosses = tuple(part.strip() for part in definition_payload.split("/") if part.strip())
        entries.append(
            DictionaryEntry(
                word_id=len(entries),
                simplified=simp,
                traditional=trad,
                pinyin_numbers=pinyin_numbers,
                pinyin_marks=mark_syllables(pinyin_numbers),
                tone_marks=tuple(split_tone(token)[1] for token in tokens),
                level=levels.get(simp, 0),
                english=glosses,
            )
        )

    if skipped:
        logger.debug("Skipped %d malformed or unaligned CC-CEDICT lines", skipped)
    return entries
