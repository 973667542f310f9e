"""Unit tests for context-sensitive final parsing."""

from __future__ import annotations

import pytest

from hanzi_reader.phonetic.finals import (
    IPA_FINALS,
    PINYIN_FINALS,
    PINYIN_FINALS_NO_INITIAL,
    ZHUYIN_FINALS,
    Final,
    parse_final,
    render_final,
)
from hanzi_reader.phonetic.initials import Initial
from hanzi_reader.phonetic.notation import Notation


@pytest.mark.parametrize(
    ("text", "initial", "expected"),
    [
        ("yu", Initial.NONE, Final.V),
        ("yue", Initial.NONE, Final.VE),
        ("yuan", Initial.NONE, Final.VAN),
        ("yun", Initial.NONE, Final.VN),
        ("u", Initial.J, Final.V),
        ("ue", Initial.X, Final.VE),
        ("uan", Initial.Q, Final.VAN),
        ("un", Initial.J, Final.VN),
        ("ü", Initial.L, Final.V),
        ("üe", Initial.N, Final.VE),
        ("v", Initial.L, Final.V),
    ],
)
def test_parse_final_recovers_umlaut(text: str, initial: Initial, expected: Final) -> None:
    assert parse_final(text, initial) is expected


@pytest.mark.parametrize("initial", [Initial.Z, Initial.C, Initial.S, Initial.ZH, Initial.CH, Initial.SH, Initial.R])
def test_parse_final_apical_i(initial: Initial) -> None:
    assert parse_final("i", initial) is Final.IR


def test_parse_final_plain_i_after_other_onsets() -> None:
    assert parse_final("i", Initial.B) is Final.I
    assert parse_final("i", Initial.J) is Final.I


@pytest.mark.parametrize(
    ("text", "expected"),
    [("yi", Final.I), ("yin", Final.IN), ("ying", Final.ING), ("you", Final.IOU), ("yong", Final.IONG)],
)
def test_parse_final_y_syllables(text: str, expected: Final) -> None:
    assert parse_final(text, Initial.NONE) is expected


@pytest.mark.parametrize(
    ("text", "initial", "expected"),
    [
        ("iu", Initial.L, Final.IOU),
        ("ui", Initial.D, Final.UEI),
        ("un", Initial.D, Final.UEN),
        ("weng", Initial.NONE, Final.UENG),
        ("wen", Initial.NONE, Final.UEN),
        ("ong", Initial.G, Final.ONG),
        ("er", Initial.NONE, Final.ER),
        ("ao3", Initial.H, Final.AO),
    ],
)
def test_parse_final_compressed_spellings(text: str, initial: Initial, expected: Final) -> None:
    assert parse_final(text, initial) is expected


def test_parse_final_rhotic_after_bare_r() -> None:
    assert parse_final("", Initial.R) is Final.ER
    assert parse_final("5", Initial.R) is Final.ER


@pytest.mark.parametrize(
    ("text", "initial"),
    [("", Initial.NONE), ("", Initial.B), ("on", Initial.G), ("123", Initial.NONE), ("xyz", Initial.NONE)],
)
def test_parse_final_invalid(text: str, initial: Initial) -> None:
    assert parse_final(text, initial) is None


def test_parse_final_ignores_characters_past_limit() -> None:
    assert parse_final("a" + "-" * 15 + "ng", Initial.B) is Final.A


def test_render_final_pinyin_depends_on_onset() -> None:
    assert render_final(Final.V, Initial.NONE) == "yu"
    assert render_final(Final.V, Initial.J) == "u"
    assert render_final(Final.V, Initial.L) == "ü"
    assert render_final(Final.VE, Initial.N) == "üe"
    assert render_final(Final.IOU, Initial.NONE) == "you"
    assert render_final(Final.IOU, Initial.L) == "iu"
    assert render_final(Final.UEI, Initial.D) == "ui"


def test_render_final_zhuyin_and_ipa() -> None:
    assert render_final(Final.IR, Initial.ZH, Notation.ZHUYIN) == ""
    assert render_final(Final.VE, Initial.X, Notation.ZHUYIN) == "ㄩㄝ"
    assert render_final(Final.ONG, Initial.G, Notation.IPA) == "ʊŋ"


def test_final_tables_cover_every_final() -> None:
    assert len(Final) == 37
    for table in (PINYIN_FINALS, PINYIN_FINALS_NO_INITIAL, ZHUYIN_FINALS, IPA_FINALS):
        assert set(table) == set(Final)
