"""Game controller: state transitions, observers, and mode flags."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Any, Callable

from dictionary import FALLBACK_WORDS, DictionaryIndex, load_dictionary
from models import GameOptions, GameState, MoveOutcome
from pathfinder import find_shortest_path
from utils import DEFAULT_DICTIONARY_PATH, load_config, normalize_word, save_config, setup_logging
from validator import classify_move, describe_outcome

logger = logging.getLogger(__name__)

Listener = Callable[[], None]

_BOOL_OPTIONS = ("use_random_words", "show_path", "show_error_messages")
_WORD_OPTIONS = ("default_start_word", "default_target_word")


def options_from_config(config: dict[str, Any]) -> GameOptions:
    """Build GameOptions from a config dict, ignoring unknown or mistyped values."""
    options = GameOptions()
    for key in _BOOL_OPTIONS:
        if isinstance(config.get(key), bool):
            setattr(options, key, config[key])
    for key in _WORD_OPTIONS:
        value = config.get(key)
        if isinstance(value, str) and value.strip():
            setattr(options, key, normalize_word(value))
    return options


def options_to_config(options: GameOptions) -> dict[str, Any]:
    return {key: getattr(options, key) for key in _BOOL_OPTIONS + _WORD_OPTIONS}


def fallback_words(options: GameOptions) -> tuple[str, ...]:
    """Built-in words for an unusable dictionary, led by the configured default pair."""
    return (options.default_start_word, options.default_target_word) + FALLBACK_WORDS


class LadderGame:
    """
    Word-ladder engine consumed by front ends.

    Listeners are called synchronously, with no arguments, after every
    successful mutation and are expected to re-read state through the
    query methods.
    """

    def __init__(
        self,
        index: DictionaryIndex,
        options: GameOptions | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.index = index
        self.options = options or GameOptions()
        self._rng = rng or random.Random()
        self._listeners: list[Listener] = []
        self.state = self._select_state(self.options.use_random_words, index)

    @classmethod
    def from_config(cls, config: dict[str, Any] | None = None, rng: random.Random | None = None) -> LadderGame:
        """Create a game from saved config, loading the configured dictionary with fallback."""
        setup_logging()
        if config is None:
            config = load_config()
        path = config.get("dictionary_path")
        if not isinstance(path, str) or not path.strip():
            path = DEFAULT_DICTIONARY_PATH
        options = options_from_config(config)
        index, _ = load_dictionary(path, fallback_words(options))
        return cls(index, options, rng=rng)

    def save_options(self, dictionary_path: str | Path | None = None) -> None:
        config = load_config()
        config.update(options_to_config(self.options))
        if dictionary_path is not None:
            config["dictionary_path"] = str(dictionary_path)
        save_config(config)

    # Observers

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    # Moves

    def validate_word(self, candidate: str | None) -> MoveOutcome:
        """Preview the outcome of try_word without changing anything."""
        return classify_move(candidate, self.state, self.index)

    def try_word(self, candidate: str | None) -> MoveOutcome:
        outcome = self.validate_word(candidate)
        if not outcome.accepted:
            logger.debug("Rejected %r: %s", candidate, outcome.value)
            return outcome

        self.state.append(normalize_word(candidate))
        logger.debug("Accepted %s (%d attempts)", self.state.previous_word, len(self.state.attempts))
        self._notify()
        return outcome

    def error_message(self, outcome: MoveOutcome, candidate: str | None) -> str:
        """Message for a rejected move, or "" when error messages are switched off."""
        if not self.options.show_error_messages:
            return ""
        return describe_outcome(outcome, candidate, self.state)

    # Game lifecycle

    def reset_game(self) -> None:
        self.state.clear()
        logger.info("Reset game %s -> %s", self.state.start_word, self.state.target_word)
        self._notify()

    def new_game(self, use_random: bool | None = None) -> None:
        if use_random is None:
            use_random = self.options.use_random_words
        self.state = self._select_state(use_random, self.index)
        self._notify()

    def reload_dictionary(self, path: str | Path) -> None:
        """
        Replace the dictionary from a file and start a new game on it.

        Raises ValueError, leaving the current game untouched, when the file lacks
        two words of the working length.
        """
        index, result = load_dictionary(path, fallback_words(self.options))
        state = self._select_state(self.options.use_random_words, index)
        self.index, self.state = index, state
        logger.info("Reloaded dictionary from %s (fallback=%s)", result.source, result.used_fallback)
        self._notify()

    def _select_state(self, use_random: bool, index: DictionaryIndex) -> GameState:
        length = len(self.options.default_start_word)
        candidates = index.words_of_length(length)

        if use_random and len(candidates) >= 2:
            start = self._rng.choice(candidates)
            target = self._rng.choice(candidates)
            while target == start:
                target = self._rng.choice(candidates)
        else:
            start, target = self._default_pair(candidates, index)

        logger.info("New game %s -> %s", start, target)
        return GameState(start_word=start, target_word=target)

    def _default_pair(self, candidates: tuple[str, ...], index: DictionaryIndex) -> tuple[str, str]:
        start = normalize_word(self.options.default_start_word)
        target = normalize_word(self.options.default_target_word)
        if (
            start != target
            and len(start) == len(target)
            and index.contains(start)
            and index.contains(target)
        ):
            return start, target

        if len(candidates) < 2:
            raise ValueError(f"Dictionary needs at least two {len(start)}-letter words to start a game")
        logger.warning("Default words %s/%s unusable; using %s/%s", start, target, candidates[0], candidates[1])
        return candidates[0], candidates[1]

    # Queries

    @property
    def start_word(self) -> str:
        return self.state.start_word

    @property
    def target_word(self) -> str:
        return self.state.target_word

    @property
    def attempts(self) -> tuple[str, ...]:
        return tuple(self.state.attempts)

    def has_won(self) -> bool:
        return self.state.is_won

    def is_valid_word(self, word: str | None) -> bool:
        return self.index.contains(word)

    def letter_status(self, word: str) -> tuple[bool, ...]:
        """Per position, whether the letter matches the target at the same position."""
        word = normalize_word(word)
        target = self.state.target_word
        return tuple(pos < len(target) and letter == target[pos] for pos, letter in enumerate(word))

    def calculate_path(self) -> list[str]:
        """Shortest ladder from the start word to the target, ignoring the player's attempts."""
        return find_shortest_path(self.index, self.state.start_word, self.state.target_word)

    # Mode flags

    @property
    def use_random_words(self) -> bool:
        return self.options.use_random_words

    @use_random_words.setter
    def use_random_words(self, value: bool) -> None:
        self.options.use_random_words = value
        self._notify()

    @property
    def show_path(self) -> bool:
        return self.options.show_path

    @show_path.setter
    def show_path(self, value: bool) -> None:
        self.options.show_path = value
        self._notify()

    @property
    def show_error_messages(self) -> bool:
        return self.options.show_error_messages

    @show_error_messages.setter
    def show_error_messages(self, value: bool) -> None:
        self.options.show_error_messages = value
        self._notify()
