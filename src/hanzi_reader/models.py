"""Data models shared by the dictionary, the segmenter and the renderers.

Dictionary entries are owned immutable values identified by an integer
``word_id``; segments are the tagged union produced by
:func:`hanzi_reader.segmenter.segment`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class DictionaryEntry:
    """One dictionary reading of a word.

    The romanization fields hold one whitespace-separated syllable per
    character of ``simplified``/``traditional``. ``pinyin_numbers`` keeps the
    source capitalisation, which marks proper nouns and irregular readings.
    ``level`` is the HSK level of the word, ``0`` when the word is unranked.
    """

    word_id: int
    simplified: str
    traditional: str
    pinyin_numbers: str
    pinyin_marks: str
    tone_marks: tuple[int, ...]
    level: int = 0
    english: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, eq=False)
class ChineseSegment:
    """A recognised Han word with its candidate readings, preferred first.

    Two segments are equal when their candidates have the same ``word_id``
    sequence, regardless of how the word is spelled.
    """

    entries: tuple[DictionaryEntry, ...]

    @property
    def preferred(self) -> DictionaryEntry:
        return self.entries[0]

    @property
    def word_ids(self) -> tuple[int, ...]:
        return tuple(entry.word_id for entry in self.entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChineseSegment):
            return NotImplemented
        return self.word_ids == other.word_ids

    def __hash__(self) -> int:
        return hash(self.word_ids)


@dataclass(frozen=True)
class PlainSegment:
    """Literal text, either non-Han or a Han chunk without a dictionary entry."""

    text: str


@dataclass(frozen=True)
class BreakSegment:
    """Line break marker following a plain segment that ends in ``\\n``."""


BREAK = BreakSegment()

Segment = Union[ChineseSegment, PlainSegment, BreakSegment]
