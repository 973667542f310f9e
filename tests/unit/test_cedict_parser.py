"""Unit tests for CC-CEDICT parsing behavior."""

from __future__ import annotations

from hanzi_reader.cedict.parser import normalize_cedict_syllable, parse_cedict_lines


def test_parse_cedict_lines_builds_entries_in_file_order() -> None:
    entries = parse_cedict_lines(
        iter(
            [
                "# comment line\n",
                "籃 篮 [lan2] /basket (receptacle)/basket (in basketball)/\n",
                "中國 中国 [Zhong1 guo2] /China/\n",
            ]
        )
    )

    assert [entry.word_id for entry in entries] == [0, 1]
    basket, china = entries
    assert basket.traditional == "籃"
    assert basket.simplified == "篮"
    assert basket.english == ("basket (receptacle)", "basket (in basketball)")
    assert basket.tone_marks == (2,)
    assert basket.level == 0
    assert china.pinyin_numbers == "Zhong1 guo2"
    assert china.pinyin_marks == "Zhōng guó"
    assert china.tone_marks == (1, 2)


def test_parse_cedict_lines_normalizes_umlaut_and_neutral_tone() -> None:
    entries = parse_cedict_lines(
        iter(["女兒 女儿 [nu:3 er2] /daughter/\n", "一點兒 一点儿 [yi1 dian3 r5] /a little/\n"])
    )

    daughter, little = entries
    assert daughter.pinyin_numbers == "nü3 er2"
    assert daughter.pinyin_marks == "nǚ ér"
    assert little.pinyin_marks == "yī diǎn r"
    assert little.tone_marks == (1, 3, 5)


def test_parse_cedict_lines_skips_malformed_and_unaligned_lines() -> None:
    entries = parse_cedict_lines(
        iter(
            [
                "not a dictionary line\n",
                "AA制 AA制 [A A zhi4] /to split the bill/\n",
                "你好 你好 [ni3] /hello/\n",
                "\n",
                "好 好 [hao3] /good/\n",
            ]
        )
    )

    assert [entry.simplified for entry in entries] == ["好"]
    assert entries[0].word_id == 0


def test_parse_cedict_lines_attaches_levels_by_simplified_word() -> None:
    entries = parse_cedict_lines(
        iter(["說話 说话 [shuo1 hua4] /to speak/\n", "話 话 [hua4] /speech/\n"]),
        levels={"说话": 2},
    )
    assert [entry.level for entry in entries] == [2, 0]


def test_normalize_cedict_syllable() -> None:
    assert normalize_cedict_syllable("lu:4") == "lü4"
    assert normalize_cedict_syllable("Lu:4") == "Lü4"
    assert normalize_cedict_syllable("Bei3") == "Bei3"
    assert normalize_cedict_syllable("xx") is None
    assert normalize_cedict_syllable("，") is None
    assert normalize_cedict_syllable("") is None
