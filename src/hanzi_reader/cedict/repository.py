"""Repository utilities for querying CC-CEDICT data structures."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path

from hanzi_reader.cedict.parser import parse_cedict_lines
from hanzi_reader.io.tsv_io import read_levels_tsv
from hanzi_reader.models import DictionaryEntry

logger = logging.getLogger(__name__)


def _index(entries: tuple[DictionaryEntry, ...], attr: str) -> dict[str, tuple[DictionaryEntry, ...]]:
    mapping: dict[str, list[DictionaryEntry]] = {}
    for entry in entries:
        mapping.setdefault(getattr(entry, attr), []).append(entry)
    return {word: tuple(items) for word, items in mapping.items()}


@dataclass(frozen=True)
class CedictRepository:
    """Read-only dictionary service backed by a CC-CEDICT ``.u8`` file.

    The repository parses the file once on first use and builds indices for
    simplified and traditional lookups and for longest-match tokenization.
    An optional HSK level TSV attaches proficiency levels to entries by their
    simplified spelling. Instances are path-scoped and deterministic, so a
    small fixture file can stand in for the full dictionary.
    """

    path: Path
    levels_path: Path | None = None

    @cached_property
    def levels(self) -> dict[str, int]:
        """Load and cache HSK levels keyed by simplified word."""

        if self.levels_path is None:
            return {}
        return read_levels_tsv(self.levels_path)

    @cached_property
    def entries(self) -> tuple[DictionaryEntry, ...]:
        """Load and cache entries from disk.

        Returns:
            Immutable tuple of parsed entries in file order.

        Raises:
            FileNotFoundError: If the configured CEDICT file path does not exist.
        """

        if not self.path.exists():
            raise FileNotFoundError(f"CC-CEDICT file not found: {self.path}")

        with self.path.open("r", encoding="utf-8") as handle:
            parsed = parse_cedict_lines(handle, levels=self.levels)

        logger.info("Loaded %d dictionary entries from %s", len(parsed), self.path)
        return tuple(parsed)

    @cached_property
    def entries_by_simplified(self) -> dict[str, tuple[DictionaryEntry, ...]]:
        """Simplified spelling -> entries, in file order."""

        return _index(self.entries, "simplified")

    @cached_property
    def entries_by_traditional(self) -> dict[str, tuple[DictionaryEntry, ...]]:
        """Traditional spelling -> entries, in file order."""

        return _index(self.entries, "traditional")

    @cached_property
    def traditional_only_chars(self) -> frozenset[str]:
        """Characters that occur in traditional spellings but never in simplified ones."""

        simplified_chars = {char for word in self.entries_by_simplified for char in word}
        traditional_chars = {char for word in self.entries_by_traditional for char in word}
        return frozenset(traditional_chars - simplified_chars)

    @cached_property
    def max_word_length(self) -> int:
        words = [*self.entries_by_simplified, *self.entries_by_traditional]
        return max((len(word) for word in words), default=1)

    def query_by_simplified(self, word: str) -> list[DictionaryEntry]:
        """Return entries whose simplified spelling is ``word``; empty when absent."""

        return list(self.entries_by_simplified.get(word, ()))

    def query_by_traditional(self, word: str) -> list[DictionaryEntry]:
        """Return entries whose traditional spelling is ``word``; empty when absent."""

        return list(self.entries_by_traditional.get(word, ()))

    def is_traditional(self, word: str) -> bool:
        """Whether ``word`` contains a character only used in traditional spellings."""

        return any(char in self.traditional_only_chars for char in word)

    def tokenize(self, text: str) -> list[str]:
        """Split a Han run into dictionary words by forward longest match.

        Both simplified and traditional spellings count as words. Characters
        that start no known word become single-character chunks, so the chunks
        always concatenate back to ``text``.

        Args:
            text: Run of Han characters.

        Returns:
            Ordered word chunks.
        """

        simplified = self.entries_by_simplified
        traditional = self.entries_by_traditional
        chunks: list[str] = []
        idx = 0
        while idx < len(text):
            end = min(len(text), idx + self.max_word_length)
            while end > idx + 1:
                candidate = text[idx:end]
                if candidate in simplified or candidate in traditional:
                    break
                end -= 1
            chunks.append(text[idx:end])
            idx = end
        return chunks
