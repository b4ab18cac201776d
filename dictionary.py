"""Dictionary index: a membership set plus words grouped by length."""

from __future__ import annotations

import logging
from collections import defaultdict
from pathlib import Path
from typing import Callable, Iterable, Iterator

from models import DictionaryLoadResult
from utils import normalize_word

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]

FALLBACK_WORDS: tuple[str, ...] = ("soul", "mate")

UNDECODABLE = "\ufffd"


def read_words(path: str | Path, progress_callback: ProgressCallback | None = None) -> tuple[list[str], int]:
    """
    Read one word per line from a text file.

    Returns the normalized non-blank words and the total number of lines read.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Dictionary file not found: {path}")

    total_bytes = max(path.stat().st_size, 1)
    total_lines = 0
    words: list[str] = []

    with path.open("rb") as handle:
        bytes_processed = 0
        for raw_line in handle:
            bytes_processed += len(raw_line)
            total_lines += 1

            word = normalize_word(raw_line.decode("utf-8", errors="replace"))
            if word and UNDECODABLE not in word:
                words.append(word)

            if progress_callback and total_lines % 5000 == 0:
                progress_callback(min(bytes_processed / total_bytes, 1.0))

    if progress_callback:
        progress_callback(1.0)

    return words, total_lines


class DictionaryIndex:
    """
    Read-only word index answering membership and length queries.

    Words are normalized and de-duplicated on construction. Each length bucket
    keeps first-seen order, which fixes the order neighbours are explored in.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        members: set[str] = set()
        by_length: dict[int, list[str]] = defaultdict(list)

        for raw_word in words:
            word = normalize_word(raw_word)
            if not word or word in members:
                continue
            members.add(word)
            by_length[len(word)].append(word)

        self._words: frozenset[str] = frozenset(members)
        self._by_length: dict[int, tuple[str, ...]] = {
            length: tuple(bucket) for length, bucket in by_length.items()
        }

    @classmethod
    def from_file(cls, path: str | Path, progress_callback: ProgressCallback | None = None) -> DictionaryIndex:
        words, _ = read_words(path, progress_callback)
        return cls(words)

    def contains(self, word: str | None) -> bool:
        return normalize_word(word) in self._words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        for length in sorted(self._by_length):
            yield from self._by_length[length]

    def words_of_length(self, length: int) -> tuple[str, ...]:
        """All indexed words of the given length, in first-seen order."""
        return self._by_length.get(length, ())

    def lengths(self) -> list[int]:
        return sorted(self._by_length)


def load_dictionary(
    path: str | Path,
    fallback_words: Iterable[str] = FALLBACK_WORDS,
    progress_callback: ProgressCallback | None = None,
) -> tuple[DictionaryIndex, DictionaryLoadResult]:
    """
    Load a dictionary file, substituting the fallback words when it cannot be used.

    An unreadable file or one that yields no words is logged and replaced, so the
    returned index is never empty.
    """
    words: list[str] = []
    total_lines = 0
    try:
        words, total_lines = read_words(path, progress_callback)
    except OSError:
        logger.exception("Failed reading dictionary %s; using fallback words", path)
    else:
        if not words:
            logger.warning("Dictionary %s contained no words; using fallback words", path)

    used_fallback = not words
    index = DictionaryIndex(fallback_words if used_fallback else words)
    if not used_fallback:
        logger.info("Loaded %d words from %s", len(index), path)

    return index, DictionaryLoadResult(
        source=str(path),
        total_lines=total_lines,
        accepted_words=len(words),
        unique_words=len(index),
        used_fallback=used_fallback,
    )
