"""Tests for the game session state machine."""

import itertools

import pytest

from conftest import WORDS, type_word
from wordmania.models.game import LetterState, SessionStatus
from wordmania.services.game_session import GameSession
from wordmania.services.word_source import WordSource

LOSING_GUESSES = ["crane", "cigar", "rebut", "humph", "blush", "focal"]


def snapshot(session):
    return (
        session.status,
        session.current_row,
        session.current_col,
        [(list(a.letters), list(a.states)) for a in session.attempts],
    )


class TestStart:

    def test_initial_state(self, session):
        assert session.secret == "allow"
        assert session.status is SessionStatus.IN_PROGRESS
        assert (session.current_row, session.current_col) == (0, 0)
        assert len(session.attempts) == 1
        assert session.attempts[0].states == [LetterState.BLANK] * 5
        assert session.absent_letters == frozenset()
        assert session.message == ""
        assert not session.play_again_available

    def test_start_resets_everything(self, session):
        type_word(session, "crane")
        session.key_press("b")
        session.start("llama")

        assert session.secret == "llama"
        assert len(session.attempts) == 1
        assert (session.current_row, session.current_col) == (0, 0)
        assert session.absent_letters == frozenset()

    def test_explicit_secret(self, word_source):
        assert GameSession(word_source, secret="CRANE").secret == "crane"

    @pytest.mark.parametrize("secret", ["", "abc", "toolong", "ab1de"])
    def test_invalid_secret_raises(self, session, secret):
        with pytest.raises(ValueError):
            session.start(secret)

    def test_play_again_uses_injected_random_index(self):
        picks = itertools.cycle([0, 1])
        source = WordSource(WORDS, rand_index=lambda count: next(picks))
        session = GameSession(source)
        assert session.secret == "allow"

        type_word(session, "allow")
        session.play_again()

        assert session.secret == "llama"
        assert session.status is SessionStatus.IN_PROGRESS
        assert session.message == ""


class TestLetterEntry:

    def test_input_letter_writes_uppercase_and_advances(self, session):
        session.input_letter("c")
        assert session.attempts[0].letters[0] == "C"
        assert session.attempts[0].states[0] is LetterState.GUESSED
        assert session.current_col == 1

    @pytest.mark.parametrize("letter", ["ab", "1", "", " ", "?", None])
    def test_input_letter_ignores_anything_but_one_letter(self, session, letter):
        before = snapshot(session)
        session.input_letter(letter)
        assert snapshot(session) == before

    def test_input_letter_keeps_row_five_letters_wide(self, session):
        session.input_letter("ab")
        session.input_letter("1")
        type_word(session, "crane", enter=False)

        assert session.attempts[0].letters == ["C", "R", "A", "N", "E"]
        assert session.attempts[0].guess_text == "crane"

    def test_input_past_last_column_is_ignored(self, session):
        type_word(session, "crane", enter=False)
        before = snapshot(session)

        session.input_letter("x")

        assert snapshot(session) == before
        assert session.attempts[0].guess_text == "crane"

    def test_delete_at_first_column_is_ignored(self, session):
        before = snapshot(session)
        session.delete_letter()
        assert snapshot(session) == before

    def test_delete_clears_previous_slot(self, session):
        type_word(session, "cr", enter=False)
        session.delete_letter()

        assert session.current_col == 1
        assert session.attempts[0].letters[1] == ""
        assert session.attempts[0].states[1] is LetterState.BLANK
        assert session.attempts[0].states[0] is LetterState.GUESSED

    def test_can_submit_only_on_full_row(self, session):
        type_word(session, "cran", enter=False)
        assert not session.can_submit
        session.key_press("e")
        assert session.can_submit


class TestKeyPress:

    def test_control_tokens(self, session):
        session.key_press("c")
        session.key_press("DEL")
        assert session.current_col == 0

        session.key_press("c")
        session.key_press("Delete")
        assert session.current_col == 0

    @pytest.mark.parametrize("token", ["", "1", "SHIFT", "ab", " ", None])
    def test_unknown_tokens_are_ignored(self, session, token):
        before = snapshot(session)
        session.key_press(token)
        assert snapshot(session) == before

    def test_key_press_clears_message(self, session):
        type_word(session, "zzzzz")
        assert session.message
        session.key_press("DELETE")
        assert session.message == ""
        assert session.rejected_word is None


class TestSubmit:

    def test_incomplete_row_is_not_submitted(self, session):
        type_word(session, "cra", enter=False)
        before = snapshot(session)

        assert session.submit() is None
        assert snapshot(session) == before

    def test_unknown_word_is_rejected(self, session):
        type_word(session, "zzzzz", enter=False)
        before = snapshot(session)

        assert session.submit() is None

        assert snapshot(session) == before
        assert session.message == "ZZZZZ not a real word"
        assert session.rejected_word == "zzzzz"
        assert session.attempts[0].states == [LetterState.GUESSED] * 5

    def test_rejected_row_stays_editable(self, session):
        type_word(session, "zzzzz")
        session.key_press("DELETE")
        session.key_press("DELETE")
        session.key_press("DELETE")
        session.key_press("DELETE")
        session.key_press("DELETE")
        type_word(session, "crane")

        assert session.current_row == 1
        assert session.attempts[0].guess_text == "crane"

    def test_valid_guess_is_evaluated_and_advances(self, session):
        evaluation = session.submit()
        assert evaluation is None

        type_word(session, "crane", enter=False)
        evaluation = session.submit()

        assert evaluation is not None
        assert session.attempts[0].states == [
            LetterState.ABSENT, LetterState.ABSENT, LetterState.PRESENT,
            LetterState.ABSENT, LetterState.ABSENT,
        ]
        assert session.absent_letters == frozenset("CRNE")
        assert (session.current_row, session.current_col) == (1, 0)
        assert len(session.attempts) == 2
        assert session.status is SessionStatus.IN_PROGRESS

    def test_absent_letters_accumulate(self, session):
        type_word(session, "crane")
        type_word(session, "humph")
        assert session.absent_letters == frozenset("CRNEHUMP")

    @pytest.mark.parametrize("misses", range(5))
    def test_early_win(self, session, misses):
        for guess in LOSING_GUESSES[:misses]:
            type_word(session, guess)
        type_word(session, "allow")

        assert session.status is SessionStatus.WON
        assert session.message == "You did it!"
        assert session.play_again_available
        assert len(session.attempts) == misses + 1
        assert session.current_row == misses

    def test_win_on_last_attempt(self, session):
        for guess in LOSING_GUESSES[:5]:
            type_word(session, guess)
        type_word(session, "allow")
        assert session.status is SessionStatus.WON

    def test_loss_after_six_attempts(self, session):
        for guess in LOSING_GUESSES:
            type_word(session, guess)

        assert session.status is SessionStatus.LOST
        assert session.message == "The word was ALLOW"
        assert len(session.attempts) == 6
        assert (session.current_row, session.current_col) == (5, 5)

    @pytest.mark.parametrize("finish", [LOSING_GUESSES, ["allow"]])
    def test_no_input_after_game_over(self, session, finish):
        for guess in finish:
            type_word(session, guess)
        before = snapshot(session)

        session.input_letter("a")
        session.delete_letter()
        assert session.submit() is None
        type_word(session, "llama")

        assert snapshot(session) == before


class TestQueries:

    def test_letters_and_colors(self, session):
        type_word(session, "crane")
        type_word(session, "ll", enter=False)

        assert session.get_letter(0, 2) == "A"
        assert session.get_letter_state(0, 2) is LetterState.PRESENT
        assert session.get_letter_color(0, 2) == "orange"
        assert session.get_letter_color(0, 0) == "gray"
        assert session.get_letter(1, 1) == "L"
        assert session.get_letter_color(1, 1) == "white"
        assert session.get_letter(1, 2) == ""

    def test_rows_not_created_yet_are_blank(self, session):
        assert session.get_letter(4, 0) == ""
        assert session.get_letter_state(4, 0) is LetterState.BLANK
        assert session.get_letter_color(4, 0) == "white"
        assert session.get_letter(10, 10) == ""

    def test_correct_cell_color(self, session):
        type_word(session, "llama")
        assert session.get_letter_color(0, 1) == "lightblue"


class TestKeyboardState:

    def test_untouched_letter_is_blank(self, session):
        assert session.key_state("w") is LetterState.BLANK
        assert session.key_color("w") == "#555"

    def test_entered_but_unsubmitted_letters_are_blank(self, session):
        type_word(session, "allow", enter=False)
        assert session.key_state("a") is LetterState.BLANK

    def test_strongest_state_within_an_attempt(self, session):
        type_word(session, "llama")

        assert session.key_state("L") is LetterState.CORRECT
        assert session.key_state("a") is LetterState.PRESENT
        assert session.key_state("m") is LetterState.ABSENT
        assert session.key_color("L") == "blue"
        assert session.key_color("A") == "brown"
        assert session.key_color("M") == "black"

    def test_latest_attempt_wins(self, session):
        type_word(session, "llama")
        type_word(session, "focal")

        # L was correct in LLAMA but only misplaced in FOCAL
        assert session.key_state("l") is LetterState.PRESENT

    def test_absent_accumulator_overrides(self, session):
        type_word(session, "crane")
        type_word(session, "cigar")
        assert session.key_state("c") is LetterState.ABSENT
        assert session.key_state("a") is LetterState.PRESENT

    def test_queries_are_idempotent(self, session):
        type_word(session, "llama")
        type_word(session, "crane")

        first = {letter: session.key_color(letter) for letter in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"}
        second = {letter: session.key_color(letter) for letter in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"}

        assert first == second
        assert session.current_row == 2
