"""Split text into dictionary words, plain runs and line breaks."""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Protocol, Sequence

from hanzi_reader.models import (
    BREAK,
    ChineseSegment,
    DictionaryEntry,
    PlainSegment,
    Segment,
)
from hanzi_reader.stats import Stats

# Han script: radicals, iteration/numeral marks, Ext A, URO, compatibility
# ideographs and the supplementary-plane extensions.
HAN_CHARS = (
    "\u2e80-\u2e99\u2e9b-\u2ef3\u2f00-\u2fd5"
    "\u3005\u3007\u3021-\u3029\u3038-\u303b"
    "\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufa6d\ufa70-\ufad9"
    "\U00020000-\U0002a6df\U0002a700-\U0002ee5d\U0002f800-\U0002fa1f"
    "\U00030000-\U000323af"
)
HAN_RUN_RE = re.compile(f"([{HAN_CHARS}]+)|([^{HAN_CHARS}]+)", re.DOTALL)
LINE_RE = re.compile(r"[^\n]*\n|[^\n]+")
DEMOTED_GLOSS_RE = re.compile(
    r"^\s*(?:archaic|old)\s+variant\s+|\(archaic\)\s*$",
    re.IGNORECASE,
)


class Dictionary(Protocol):
    """Lookup service the segmenter relies on."""

    def tokenize(self, text: str) -> list[str]:
        """Split a Han run into word-sized chunks that concatenate back to it."""
        ...

    def query_by_simplified(self, word: str) -> list[DictionaryEntry]:
        """Entries whose simplified spelling is ``word``."""
        ...

    def query_by_traditional(self, word: str) -> list[DictionaryEntry]:
        """Entries whose traditional spelling is ``word``."""
        ...

    def is_traditional(self, word: str) -> bool:
        """Whether ``word`` is written in traditional characters."""
        ...


def split_han_runs(text: str) -> Iterator[tuple[str, bool]]:
    """Yield maximal ``(run, is_han)`` pieces of ``text`` in order."""

    for match in HAN_RUN_RE.finditer(text):
        han, other = match.groups()
        if han is not None:
            yield han, True
        else:
            yield other, False


def is_demoted(entry: DictionaryEntry) -> bool:
    """Whether ``entry`` is a poor default reading.

    Entries without glosses, readings starting with an upper-case letter
    (proper nouns, irregular variants) and entries whose first gloss marks
    them as an archaic or old variant are demoted.
    """

    if not entry.english:
        return True
    if entry.pinyin_numbers[:1].isupper():
        return True
    return DEMOTED_GLOSS_RE.search(entry.english[0]) is not None


def rank_candidates(entries: Iterable[DictionaryEntry]) -> tuple[DictionaryEntry, ...]:
    """Move demoted entries behind the others, keeping relative order in both groups.

    This is a heuristic tie-break, not a full ordering: the first non-demoted
    entry becomes the preferred reading, or the first entry when all of them
    are demoted.
    """

    return tuple(sorted(entries, key=is_demoted))


def _lookup(chunk: str, dictionary: Dictionary) -> list[DictionaryEntry]:
    entries = dictionary.query_by_simplified(chunk)
    if not entries and dictionary.is_traditional(chunk):
        entries = dictionary.query_by_traditional(chunk)
    return entries


def _split_lines(run: str) -> list[Segment]:
    segments: list[Segment] = []
    for piece in LINE_RE.findall(run):
        if piece.endswith("\n"):
            segments.append(PlainSegment(piece))
            segments.append(BREAK)
        else:
            segments.append(PlainSegment(piece))
    return segments


def segment(text: str, dictionary: Dictionary) -> tuple[list[Segment], Stats]:
    """Segment ``text`` into Chinese words, plain text and line breaks.

    Han runs are tokenized by the dictionary; each chunk becomes a
    :class:`ChineseSegment` with ranked candidates, or a :class:`PlainSegment`
    when the dictionary has no entry in either script. Non-Han runs become
    plain segments split after each newline, with a :class:`BreakSegment`
    following every newline-terminated piece. Every recognised word updates
    the returned :class:`Stats` with its preferred reading.

    Args:
        text: Input text.
        dictionary: Lookup service used for tokenization and entries.

    Returns:
        The segment sequence and the statistics for this pass.
    """

    stats = Stats()
    segments: list[Segment] = []
    for run, is_han in split_han_runs(text):
        if not is_han:
            segments.extend(_split_lines(run))
            continue
        for chunk in dictionary.tokenize(run):
            entries = _lookup(chunk, dictionary)
            if not entries:
                segments.append(PlainSegment(chunk))
                continue
            word = ChineseSegment(rank_candidates(entries))
            stats.update(word.preferred.word_id, word.preferred.level)
            segments.append(word)
    return segments, stats


def plain_text(segments: Sequence[Segment]) -> str:
    """Concatenate the plain segments.

    The result holds every non-Han character of the input plus the Han chunks
    the dictionary had no entry for.
    """

    return "".join(item.text for item in segments if isinstance(item, PlainSegment))
