"""Mandarin transliteration and dictionary-driven text segmentation."""

from .hints import HintMode, generate_hint
from .models import BreakSegment, ChineseSegment, DictionaryEntry, PlainSegment, Segment
from .segmenter import segment
from .stats import Stats

__all__ = [
    "BreakSegment",
    "ChineseSegment",
    "DictionaryEntry",
    "HintMode",
    "PlainSegment",
    "Segment",
    "Stats",
    "generate_hint",
    "segment",
]
