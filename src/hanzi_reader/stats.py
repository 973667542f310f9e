"""HSK level histogram collected while segmenting text."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Hashable

MAX_LEVEL_BUCKETS = 16
OTHER_BUCKET = MAX_LEVEL_BUCKETS - 1


def _empty_words() -> list[Counter]:
    return [Counter() for _ in range(MAX_LEVEL_BUCKETS)]


def _empty_counts() -> list[int]:
    return [0] * MAX_LEVEL_BUCKETS


@dataclass(frozen=True)
class StatsRow:
    """Summary of one non-empty bucket for reports."""

    label: str
    occurrences: int
    unique: int
    share: float


@dataclass
class Stats:
    """Per-level word tallies.

    Bucket ``n - 1`` holds HSK level ``n`` for ``1 <= n < MAX_LEVEL_BUCKETS``;
    the last bucket collects unranked words (level ``0``) and anything above
    the supported range. Each bucket counts occurrences per word key, so the
    bucket's keys are its unique words and ``counts`` its total occurrences.
    """

    words: list[Counter] = field(default_factory=_empty_words)
    counts: list[int] = field(default_factory=_empty_counts)

    @staticmethod
    def bucket_index(level: int) -> int:
        """Map an HSK level to its bucket index."""

        if level <= 0 or level >= MAX_LEVEL_BUCKETS:
            return OTHER_BUCKET
        return level - 1

    def update(self, key: Hashable, level: int) -> None:
        """Record one occurrence of word ``key`` at HSK ``level``."""

        idx = self.bucket_index(level)
        self.words[idx][key] += 1
        self.counts[idx] += 1

    def reset(self) -> None:
        """Clear every bucket back to the freshly constructed state."""

        self.words = _empty_words()
        self.counts = _empty_counts()

    @property
    def total_words(self) -> int:
        return sum(self.counts)

    @property
    def unique_words(self) -> int:
        return sum(len(bucket) for bucket in self.words)

    @property
    def average_level(self) -> float:
        """Mean bucket number over unique words, ``0.0`` when nothing was counted."""

        unique = self.unique_words
        if unique == 0:
            return 0.0
        weighted = sum((idx + 1) * len(bucket) for idx, bucket in enumerate(self.words))
        return weighted / unique

    @staticmethod
    def bucket_label(idx: int) -> str:
        return "other" if idx == OTHER_BUCKET else f"HSK {idx + 1}"

    def rows(self) -> list[StatsRow]:
        """Summaries of the buckets that saw at least one word, in level order.

        ``share`` is the bucket's percentage of all unique words.
        """

        unique_total = self.unique_words
        rows: list[StatsRow] = []
        for idx, (bucket, count) in enumerate(zip(self.words, self.counts)):
            if count == 0:
                continue
            rows.append(
                StatsRow(
                    label=self.bucket_label(idx),
                    occurrences=count,
                    unique=len(bucket),
                    share=len(bucket) * 100.0 / unique_total,
                )
            )
        return rows
