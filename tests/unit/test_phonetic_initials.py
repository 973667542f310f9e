"""Unit tests for onset parsing and rendering."""

from __future__ import annotations

import pytest

from hanzi_reader.phonetic.initials import INITIAL_TABLES, Initial, parse_initial, render_initial
from hanzi_reader.phonetic.notation import Notation


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("zhong1", Initial.ZH),
        ("zong4", Initial.Z),
        ("chi1", Initial.CH),
        ("ci2", Initial.C),
        ("shui3", Initial.SH),
        ("si4", Initial.S),
        ("Zhang1", Initial.ZH),
        ("nü3", Initial.N),
    ],
)
def test_parse_initial_prefers_retroflex_digraphs(text: str, expected: Initial) -> None:
    assert parse_initial(text) is expected


@pytest.mark.parametrize("text", ["a1", "er2", "yu2", "wo3", "ou1"])
def test_parse_initial_vowels_and_glides_have_no_onset(text: str) -> None:
    assert parse_initial(text) is Initial.NONE


@pytest.mark.parametrize("text", ["", "3", "-ba"])
def test_parse_initial_rejects_non_letters(text: str) -> None:
    assert parse_initial(text) is None


@pytest.mark.parametrize("initial", list(Initial))
def test_zhuyin_initial_round_trip(initial: Initial) -> None:
    text = render_initial(initial, Notation.ZHUYIN) + "ㄚ"
    assert parse_initial(text, Notation.ZHUYIN) is initial


def test_zhuyin_initial_requires_bopomofo_first_char() -> None:
    assert parse_initial("ba", Notation.ZHUYIN) is None
    assert parse_initial("", Notation.ZHUYIN) is None


@pytest.mark.parametrize("initial", list(Initial))
def test_ipa_initial_round_trip_uses_longest_symbol(initial: Initial) -> None:
    text = render_initial(initial, Notation.IPA) + "a"
    assert parse_initial(text, Notation.IPA) is initial


def test_initial_groups() -> None:
    assert [item for item in Initial if item.is_apical] == [
        Initial.Z,
        Initial.C,
        Initial.S,
        Initial.ZH,
        Initial.CH,
        Initial.SH,
        Initial.R,
    ]
    assert [item for item in Initial if item.is_palatal] == [Initial.J, Initial.Q, Initial.X]


def test_every_notation_spells_every_initial() -> None:
    for table in INITIAL_TABLES.values():
        assert set(table) == set(Initial)
    assert render_initial(Initial.NONE, Notation.PINYIN) == ""
    assert render_initial(Initial.Q, Notation.IPA) == "tɕʰ"
