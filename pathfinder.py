"""Breadth-first shortest word ladder over the one-letter-difference graph."""

from __future__ import annotations

import logging
import string
from collections import deque
from typing import Iterator

from dictionary import DictionaryIndex
from utils import normalize_word

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_lowercase


def neighbours(word: str, index: DictionaryIndex) -> Iterator[str]:
    """
    Yield dictionary words one letter away from word.

    Order is position by position, then 'a' to 'z' within a position.
    """
    letters = list(word)
    for pos, original in enumerate(letters):
        for letter in ALPHABET:
            if letter == original:
                continue
            letters[pos] = letter
            candidate = "".join(letters)
            if index.contains(candidate):
                yield candidate
        letters[pos] = original


def find_shortest_path(index: DictionaryIndex, start: str, target: str) -> list[str]:
    """
    Shortest ladder from start to target, excluding start and ending with target.

    Returns an empty list when the words are equal, the index is empty, or no
    ladder connects them. Among equally short ladders the first one discovered
    wins, following neighbours() order.
    """
    start = normalize_word(start)
    target = normalize_word(target)
    if not len(index) or start == target or len(start) != len(target):
        return []

    frontier: deque[str] = deque([start])
    visited: set[str] = {start}
    parents: dict[str, str] = {}

    while frontier:
        current = frontier.popleft()
        for word in neighbours(current, index):
            if word in visited:
                continue
            visited.add(word)
            parents[word] = current
            if word == target:
                return _rebuild_path(parents, start, target)
            frontier.append(word)

    logger.debug("No ladder from %s to %s after visiting %d words", start, target, len(visited))
    return []


def _rebuild_path(parents: dict[str, str], start: str, target: str) -> list[str]:
    path: list[str] = []
    word = target
    while word != start:
        path.append(word)
        word = parents[word]
    path.reverse()
    return path
