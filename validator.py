"""Move validation: classify a candidate word without touching game state."""

from __future__ import annotations

from dictionary import DictionaryIndex
from models import GameState, MoveOutcome
from utils import differs_by_one_letter, normalize_word

__all__ = ["classify_move", "describe_outcome", "differs_by_one_letter"]


def classify_move(candidate: str | None, state: GameState, index: DictionaryIndex) -> MoveOutcome:
    """
    Classify a raw candidate against the current game.

    Checks run in a fixed order and the first failing one is reported:
    1) length, 2) dictionary membership, 3) reuse of an earlier attempt,
    4) repeat of the previous word, 5) exactly one changed letter.
    """
    word = normalize_word(candidate)
    if not word or len(word) != state.working_length:
        return MoveOutcome.TOO_SHORT

    if not index.contains(word):
        return MoveOutcome.NOT_IN_DICTIONARY

    if word in state.attempts:
        return MoveOutcome.ALREADY_USED

    previous = state.previous_word
    if word == previous:
        return MoveOutcome.SAME_AS_PREVIOUS

    if not differs_by_one_letter(previous, word):
        return MoveOutcome.MULTIPLE_LETTERS

    return MoveOutcome.ACCEPTED


def describe_outcome(outcome: MoveOutcome, candidate: str | None, state: GameState) -> str:
    """Human-readable message for a rejected move; empty for an accepted one."""
    word = normalize_word(candidate)
    if outcome is MoveOutcome.TOO_SHORT:
        return f"Please enter a {state.working_length}-letter word"
    if outcome is MoveOutcome.NOT_IN_DICTIONARY:
        return f"'{word}' is not a valid word in the dictionary"
    if outcome is MoveOutcome.ALREADY_USED:
        return f"You've already used the word '{word}'"
    if outcome is MoveOutcome.MULTIPLE_LETTERS:
        return f"'{word}' differs by more than one letter from '{state.previous_word}'"
    if outcome is MoveOutcome.SAME_AS_PREVIOUS:
        return "Please enter a different word"
    return ""
