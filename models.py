"""Data models for word-ladder games and dictionary loading metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from utils import differs_by_one_letter


class MoveOutcome(Enum):
    """Result of checking a candidate word against the current game."""

    ACCEPTED = "accepted"
    TOO_SHORT = "too_short"
    NOT_IN_DICTIONARY = "not_in_dictionary"
    ALREADY_USED = "already_used"
    MULTIPLE_LETTERS = "multiple_letters"
    SAME_AS_PREVIOUS = "same_as_previous"

    @property
    def accepted(self) -> bool:
        return self is MoveOutcome.ACCEPTED


@dataclass(slots=True)
class GameOptions:
    """Mode flags read by front ends plus the fixed fallback word pair."""

    use_random_words: bool = False
    show_path: bool = False
    show_error_messages: bool = True
    default_start_word: str = "soul"
    default_target_word: str = "mate"


@dataclass(slots=True)
class GameState:
    """
    Start word, target word and the ordered list of accepted attempts.

    The constructor and append() refuse to produce a state that breaks the
    ladder rules. Dictionary membership is checked by the caller.
    """

    start_word: str
    target_word: str
    attempts: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.start_word or not self.target_word:
            raise ValueError("Start and target words must be non-empty")
        if len(self.start_word) != len(self.target_word):
            raise ValueError(
                f"Start and target words must have equal length: '{self.start_word}', '{self.target_word}'"
            )
        if self.start_word == self.target_word:
            raise ValueError(f"Start and target words must differ: '{self.start_word}'")

        attempts = list(self.attempts)
        self.attempts = []
        for word in attempts:
            self.append(word)

    @property
    def working_length(self) -> int:
        return len(self.start_word)

    @property
    def previous_word(self) -> str:
        """Last accepted attempt, or the start word before any attempt."""
        return self.attempts[-1] if self.attempts else self.start_word

    @property
    def is_won(self) -> bool:
        return bool(self.attempts) and self.attempts[-1] == self.target_word

    def append(self, word: str) -> None:
        if len(word) != self.working_length:
            raise ValueError(f"Attempt must be {self.working_length} letters, got '{word}'")
        if not differs_by_one_letter(self.previous_word, word):
            raise ValueError(f"'{word}' does not differ by one letter from '{self.previous_word}'")
        self.attempts.append(word)

    def clear(self) -> None:
        self.attempts.clear()


@dataclass(slots=True)
class DictionaryLoadResult:
    """Summary returned after loading a dictionary source."""

    source: str
    total_lines: int
    accepted_words: int
    unique_words: int
    used_fallback: bool
