"""Unit tests for text segmentation with an in-memory dictionary."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from hanzi_reader.models import BREAK, ChineseSegment, DictionaryEntry, PlainSegment
from hanzi_reader.segmenter import (
    is_demoted,
    plain_text,
    rank_candidates,
    segment,
    split_han_runs,
)


def _entry(
    word_id: int,
    simplified: str,
    traditional: str | None = None,
    pinyin: str = "a1",
    level: int = 0,
    english: tuple[str, ...] = ("gloss",),
) -> DictionaryEntry:
    return DictionaryEntry(
        word_id=word_id,
        simplified=simplified,
        traditional=traditional or simplified,
        pinyin_numbers=pinyin,
        pinyin_marks=pinyin,
        tone_marks=(1,),
        level=level,
        english=english,
    )


@dataclass
class FakeDictionary:
    """Character-by-character dictionary used to isolate the segmenter."""

    entries: list[DictionaryEntry] = field(default_factory=list)

    def tokenize(self, text: str) -> list[str]:
        return list(text)

    def query_by_simplified(self, word: str) -> list[DictionaryEntry]:
        return [entry for entry in self.entries if entry.simplified == word]

    def query_by_traditional(self, word: str) -> list[DictionaryEntry]:
        return [entry for entry in self.entries if entry.traditional == word]

    def is_traditional(self, word: str) -> bool:
        simplified = {char for entry in self.entries for char in entry.simplified}
        return any(char not in simplified for char in word)


def test_segment_words_and_trailing_punctuation() -> None:
    dictionary = FakeDictionary([_entry(0, "你", level=1), _entry(1, "好", level=2)])

    segments, stats = segment("你好!", dictionary)

    assert segments == [
        ChineseSegment((dictionary.entries[0],)),
        ChineseSegment((dictionary.entries[1],)),
        PlainSegment("!"),
    ]
    assert stats.total_words == 2
    assert stats.counts[0] == 1
    assert stats.counts[1] == 1


def test_segment_emits_break_after_each_newline() -> None:
    segments, stats = segment("a\nb", FakeDictionary())
    assert segments == [PlainSegment("a\n"), BREAK, PlainSegment("b")]
    assert stats.total_words == 0

    segments, _ = segment("x\n\ny\r\n", FakeDictionary())
    assert segments == [
        PlainSegment("x\n"),
        BREAK,
        PlainSegment("\n"),
        BREAK,
        PlainSegment("y\r\n"),
        BREAK,
    ]


def test_segment_unknown_han_stays_plain() -> None:
    dictionary = FakeDictionary([_entry(0, "好")])
    segments, stats = segment("好猫", dictionary)
    assert segments == [ChineseSegment((dictionary.entries[0],)), PlainSegment("猫")]
    assert stats.total_words == 1


def test_segment_falls_back_to_traditional_spelling() -> None:
    entry = _entry(0, "说", traditional="說", level=2)
    segments, stats = segment("說", FakeDictionary([entry]))
    assert segments == [ChineseSegment((entry,))]
    assert stats.counts[1] == 1


def test_plain_text_keeps_non_han_text_and_unknown_chunks() -> None:
    dictionary = FakeDictionary([_entry(0, "中"), _entry(1, "文")])
    text = "Hello, 中文 world!\nBye 猫."
    segments, _ = segment(text, dictionary)
    assert plain_text(segments) == "Hello,  world!\nBye 猫."


def test_split_han_runs_alternates() -> None:
    assert list(split_han_runs("ab中文。c〇")) == [
        ("ab", False),
        ("中文", True),
        ("。c", False),
        ("〇", True),
    ]


def test_is_demoted() -> None:
    assert not is_demoted(_entry(0, "个", english=("individual",)))
    assert is_demoted(_entry(0, "个", english=()))
    assert is_demoted(_entry(0, "张", pinyin="Zhang1", english=("surname Zhang",)))
    assert is_demoted(_entry(0, "个", english=("old variant of 個|个[ge4]",)))
    assert is_demoted(_entry(0, "个", english=("Archaic variant of 個",)))
    assert is_demoted(_entry(0, "个", english=("to sew (archaic)",)))
    assert not is_demoted(_entry(0, "个", english=("variant of 個|个[ge4]",)))


def test_rank_candidates_is_stable_partition() -> None:
    glossless = _entry(0, "x", english=())
    first = _entry(1, "x", english=("first",))
    second = _entry(2, "x", english=("second",))
    archaic = _entry(3, "x", english=("archaic variant of y",))

    ranked = rank_candidates([glossless, first, second, archaic])

    assert [entry.word_id for entry in ranked] == [1, 2, 0, 3]


def test_stats_follow_preferred_reading() -> None:
    proper = _entry(0, "张", pinyin="Zhang1", level=5, english=("surname Zhang",))
    common = _entry(1, "张", pinyin="zhang1", level=2, english=("sheet",))

    segments, stats = segment("张", FakeDictionary([proper, common]))

    assert segments[0].preferred is common
    assert segments[0].word_ids == (1, 0)
    assert stats.counts[1] == 1
    assert stats.counts[4] == 0


def test_chinese_segment_equality_uses_word_ids() -> None:
    entry = _entry(4, "话")
    same_id = replace(entry, simplified="話", english=("other",))
    other = _entry(5, "话")

    assert ChineseSegment((entry,)) == ChineseSegment((same_id,))
    assert hash(ChineseSegment((entry,))) == hash(ChineseSegment((same_id,)))
    assert ChineseSegment((entry,)) != ChineseSegment((entry, other))
    assert ChineseSegment((entry,)) != ChineseSegment((other,))
    assert ChineseSegment((entry,)) != PlainSegment("话")


def test_split_han_runs_covers_late_extensions() -> None:
    for codepoint in (0x20000, 0x2EBF0, 0x2EE5D, 0x30000, 0x31350, 0x323AF):
        char = chr(codepoint)
        assert list(split_han_runs(f"a{char}b")) == [("a", False), (char, True), ("b", False)]


@dataclass
class SimplifiedOnlyDictionary(FakeDictionary):
    """Dictionary that never treats a chunk as traditional."""

    def is_traditional(self, word: str) -> bool:
        return False


def test_segment_skips_traditional_lookup_for_non_traditional_chunk() -> None:
    entry = _entry(0, "说", traditional="說", level=2)
    dictionary = SimplifiedOnlyDictionary([entry])
    assert dictionary.query_by_traditional("說") == [entry]

    segments, stats = segment("說", dictionary)

    assert segments == [PlainSegment("說")]
    assert stats.total_words == 0
