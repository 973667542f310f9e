"""Notations a syllable can be parsed from or rendered into."""

from __future__ import annotations

from enum import Enum


class Notation(Enum):
    """Spelling systems supported by the onset/final tables."""

    PINYIN = "pinyin"
    ZHUYIN = "zhuyin"
    IPA = "ipa"


def is_zhuyin_char(char: str) -> bool:
    """Return whether ``char`` lies in the Bopomofo or Bopomofo Extended blocks."""

    return "\u3100" <= char <= "\u312f" or "\u31a0" <= char <= "\u31bf"


def check_table(name: str, members: type[Enum], table: dict) -> None:
    """Verify a spelling table has exactly one entry per enum member.

    Args:
        name: Table label used in the error message.
        members: Enum class the table is keyed by.
        table: Spelling table to check.

    Raises:
        RuntimeError: If the table keys differ from the enum members.
    """

    missing = [member.name for member in members if member not in table]
    extra = [key for key in table if not isinstance(key, members)]
    if missing or extra or len(table) != len(members):
        raise RuntimeError(
            f"{name} table out of sync with {members.__name__}: "
            f"missing={missing}, extra={extra}"
        )
