import random
from pathlib import Path

import pytest

import utils
from dictionary import DictionaryIndex
from game import LadderGame, options_from_config, options_to_config
from models import GameOptions, MoveOutcome
from utils import differs_by_one_letter, load_config


def sample_wordlist_path() -> Path:
    return Path(__file__).resolve().parent.parent / "sample_data" / "wordlist_small.txt"


def sample_game(start: str, target: str, **options) -> LadderGame:
    index = DictionaryIndex.from_file(sample_wordlist_path())
    return LadderGame(index, GameOptions(default_start_word=start, default_target_word=target, **options))


def test_default_game_uses_configured_words() -> None:
    game = sample_game("game", "date")

    assert game.start_word == "game"
    assert game.target_word == "date"
    assert game.attempts == ()
    assert not game.has_won()


def test_game_to_date_scenario() -> None:
    game = sample_game("game", "date")

    path = game.calculate_path()
    assert path[-1] == "date"
    assert all(differs_by_one_letter(a, b) for a, b in zip(["game"] + path, path))

    assert game.try_word("fame") is MoveOutcome.ACCEPTED
    assert game.try_word("fate") is MoveOutcome.ACCEPTED
    assert not game.has_won()
    assert game.try_word("date") is MoveOutcome.ACCEPTED
    assert game.has_won()
    assert game.attempts == ("fame", "fate", "date")


def test_care_to_dare_scenario() -> None:
    game = sample_game("care", "dare")

    assert game.try_word("xare") is MoveOutcome.NOT_IN_DICTIONARY
    assert game.try_word("cares") is MoveOutcome.TOO_SHORT
    assert game.try_word("dare") is MoveOutcome.ACCEPTED
    assert game.has_won()
    assert game.try_word("fate") is MoveOutcome.MULTIPLE_LETTERS


def test_rejected_moves_leave_attempts_unchanged() -> None:
    game = sample_game("game", "date")
    game.try_word("fame")

    for candidate in (None, "", "fames", "xxxx", "fame", "date"):
        before = game.attempts
        outcome = game.try_word(candidate)
        assert not outcome.accepted
        assert game.attempts == before


def test_accepted_move_is_normalized_and_grows_attempts_by_one() -> None:
    game = sample_game("game", "date")

    assert game.try_word("  FAME ") is MoveOutcome.ACCEPTED
    assert game.attempts == ("fame",)


def test_validate_word_does_not_mutate() -> None:
    game = sample_game("game", "date")
    notified: list[int] = []
    game.subscribe(lambda: notified.append(1))

    assert game.validate_word("fame") is MoveOutcome.ACCEPTED
    assert game.attempts == ()
    assert notified == []


def test_listeners_fire_once_per_successful_mutation() -> None:
    game = sample_game("game", "date")
    calls: list[str] = []

    def listener() -> None:
        calls.append("changed")

    game.subscribe(listener)
    game.subscribe(listener)

    game.try_word("xxxx")
    assert calls == []

    game.try_word("fame")
    game.reset_game()
    game.new_game()
    game.show_path = True
    assert calls == ["changed"] * 4

    game.unsubscribe(listener)
    game.try_word("fame")
    assert len(calls) == 4


def test_reset_keeps_words_and_clears_attempts() -> None:
    game = sample_game("game", "date")
    game.try_word("fame")
    game.try_word("fate")

    game.reset_game()

    assert game.attempts == ()
    assert game.start_word == "game"
    assert game.target_word == "date"
    assert not game.has_won()


def test_random_new_game_picks_distinct_dictionary_words() -> None:
    index = DictionaryIndex.from_file(sample_wordlist_path())
    game = LadderGame(index, GameOptions(use_random_words=True), rng=random.Random(7))

    for _ in range(20):
        game.new_game()
        assert game.start_word != game.target_word
        assert len(game.start_word) == len(game.target_word) == 4
        assert game.is_valid_word(game.start_word)
        assert game.is_valid_word(game.target_word)
        assert game.attempts == ()


def test_random_game_with_two_words_terminates() -> None:
    game = LadderGame(DictionaryIndex(["soul", "mate"]), rng=random.Random(1))
    game.new_game(use_random=True)

    assert {game.start_word, game.target_word} == {"soul", "mate"}


def test_unusable_defaults_fall_back_to_first_words_of_length() -> None:
    index = DictionaryIndex(["care", "dare", "fare"])
    game = LadderGame(index, GameOptions(default_start_word="soul", default_target_word="mate"))

    assert (game.start_word, game.target_word) == ("care", "dare")


def test_dictionary_without_two_words_of_length_is_rejected() -> None:
    with pytest.raises(ValueError):
        LadderGame(DictionaryIndex(["soul", "cares"]))


def test_letter_status_is_positional_only() -> None:
    game = sample_game("game", "date")

    assert game.letter_status("fate") == (False, True, True, True)
    assert game.letter_status("tade") == (False, True, False, True)
    assert game.letter_status("DATE") == (True, True, True, True)
    assert game.letter_status("dates") == (True, True, True, True, False)


def test_calculate_path_ignores_attempts() -> None:
    game = sample_game("game", "date")
    before = game.calculate_path()
    game.try_word("fame")

    assert game.calculate_path() == before
    assert game.attempts == ("fame",)


def test_error_message_respects_flag() -> None:
    game = sample_game("care", "dare")
    outcome = game.try_word("xare")

    assert game.error_message(outcome, "xare") == "'xare' is not a valid word in the dictionary"
    game.show_error_messages = False
    assert game.error_message(outcome, "xare") == ""


def test_reload_dictionary_starts_new_game(tmp_path) -> None:
    game = sample_game("game", "date")
    game.try_word("fame")
    calls: list[int] = []
    game.subscribe(lambda: calls.append(1))

    words = tmp_path / "words.txt"
    words.write_text("game\ngate\ndate\n", encoding="utf-8")
    game.reload_dictionary(words)

    assert calls == [1]
    assert game.attempts == ()
    assert game.calculate_path() == ["gate", "date"]
    assert not game.is_valid_word("fame")


def test_options_config_mapping_ignores_bad_values() -> None:
    options = options_from_config(
        {"show_path": True, "use_random_words": "yes", "default_start_word": " Care ", "extra": 1}
    )

    assert options.show_path
    assert not options.use_random_words
    assert options.default_start_word == "care"
    assert options_to_config(options)["show_path"] is True


def test_from_config_and_save_options(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(utils, "CONFIG_PATH", tmp_path / "config.json")
    config = {
        "dictionary_path": str(sample_wordlist_path()),
        "default_start_word": "care",
        "default_target_word": "dare",
        "show_error_messages": False,
    }

    game = LadderGame.from_config(config)
    assert (game.start_word, game.target_word) == ("care", "dare")
    assert not game.show_error_messages

    game.use_random_words = True
    game.save_options(dictionary_path=sample_wordlist_path())

    saved = load_config()
    assert saved["use_random_words"] is True
    assert saved["default_start_word"] == "care"
    assert saved["dictionary_path"] == str(sample_wordlist_path())


def test_from_config_with_missing_dictionary_uses_fallback(tmp_path) -> None:
    game = LadderGame.from_config({"dictionary_path": str(tmp_path / "missing.txt")})

    assert (game.start_word, game.target_word) == ("soul", "mate")
    assert game.calculate_path() == []


def test_reload_without_working_length_words_keeps_current_game(tmp_path) -> None:
    game = sample_game("game", "date")
    game.try_word("fame")
    calls: list[int] = []
    game.subscribe(lambda: calls.append(1))

    words = tmp_path / "five.txt"
    words.write_text("house\nmouse\n", encoding="utf-8")
    with pytest.raises(ValueError):
        game.reload_dictionary(words)

    assert calls == []
    assert (game.start_word, game.target_word) == ("game", "date")
    assert game.attempts == ("fame",)
    assert game.is_valid_word(game.start_word)
    assert game.is_valid_word(game.target_word)
    assert all(game.is_valid_word(word) for word in game.attempts)


def test_missing_dictionary_falls_back_to_configured_word_length(tmp_path) -> None:
    game = LadderGame.from_config(
        {
            "dictionary_path": str(tmp_path / "missing.txt"),
            "default_start_word": "house",
            "default_target_word": "mouse",
        }
    )

    assert (game.start_word, game.target_word) == ("house", "mouse")
    assert game.calculate_path() == ["mouse"]
    assert game.try_word("mouse") is MoveOutcome.ACCEPTED
    assert game.has_won()


def test_reload_missing_file_falls_back_to_configured_words(tmp_path) -> None:
    game = sample_game("care", "dare")
    game.reload_dictionary(tmp_path / "missing.txt")

    assert (game.start_word, game.target_word) == ("care", "dare")
    assert game.attempts == ()
    assert game.is_valid_word("care")


def test_non_string_dictionary_path_uses_bundled_dictionary() -> None:
    game = LadderGame.from_config({"dictionary_path": 123})

    assert (game.start_word, game.target_word) == ("soul", "mate")
    assert game.calculate_path()
