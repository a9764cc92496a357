"""
Game Session

Turn-based state machine for a single game: the grid of attempts, the
cursor, dictionary validation and win/lose detection.
"""

from typing import FrozenSet, List, Optional, Set, Tuple

from ..config.game_settings import (
    DELETE_ALIASES, ENTER_KEY, KEY_COLORS, LETTER_COLORS, MAX_ATTEMPTS, WORD_LENGTH
)
from ..models.game import Attempt, LetterState, SessionStatus
from .evaluator import Evaluation, evaluate_guess
from .word_source import WordSource


class GameSession:
    """
    One player's game against one secret word.

    Out-of-range input (deleting at column 0, typing past the last column,
    anything after the game is over) is ignored rather than raised, since
    the display layer should already prevent it.
    """

    def __init__(self, word_source: WordSource, secret: Optional[str] = None):
        self.word_source = word_source
        self.start(secret if secret is not None else word_source.random_word())

    def start(self, secret: str) -> None:
        """Reset all state and begin a new game against ``secret``."""
        secret = secret.strip().lower()
        if len(secret) != WORD_LENGTH or not secret.isalpha():
            raise ValueError(f"Secret must be a {WORD_LENGTH}-letter word, got '{secret}'")

        self._secret = secret
        self._attempts: List[Attempt] = [Attempt()]
        self._row = 0
        self._col = 0
        self._absent: Set[str] = set()
        self.status = SessionStatus.IN_PROGRESS
        self.message = ""
        self.rejected_word: Optional[str] = None

    def play_again(self) -> None:
        self.start(self.word_source.random_word())

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def attempts(self) -> Tuple[Attempt, ...]:
        return tuple(self._attempts)

    @property
    def current_row(self) -> int:
        return self._row

    @property
    def current_col(self) -> int:
        return self._col

    @property
    def absent_letters(self) -> FrozenSet[str]:
        return frozenset(self._absent)

    @property
    def in_progress(self) -> bool:
        return self.status is SessionStatus.IN_PROGRESS

    @property
    def game_over(self) -> bool:
        return not self.in_progress

    @property
    def play_again_available(self) -> bool:
        return self.game_over

    @property
    def can_submit(self) -> bool:
        return self.in_progress and self._col == WORD_LENGTH

    # Input

    def key_press(self, token: str) -> None:
        """
        Single entry point for the display layer.

        ``token`` is a letter, ``ENTER`` or ``DELETE``; anything else is
        ignored. The status message is cleared on every key press.
        """
        self.message = ""
        self.rejected_word = None
        key = (token or "").strip().upper()

        if key in DELETE_ALIASES:
            self.delete_letter()
        elif key == ENTER_KEY:
            self.submit()
        elif len(key) == 1 and key.isalpha():
            self.input_letter(key)

    def input_letter(self, letter: str) -> None:
        if not self.in_progress or self._col >= WORD_LENGTH:
            return
        if not isinstance(letter, str) or len(letter) != 1 or not letter.isalpha():
            return
        self._attempts[self._row].set_letter(self._col, letter)
        self._col += 1

    def delete_letter(self) -> None:
        if not self.in_progress or self._col <= 0:
            return
        self._col -= 1
        self._attempts[self._row].clear_letter(self._col)

    def submit(self) -> Optional[Evaluation]:
        """
        Evaluate the current row.

        Returns:
            The evaluation, or None if nothing was submitted (incomplete row,
            game over, or the guess is not in the word list)
        """
        if not self.can_submit:
            return None

        attempt = self._attempts[self._row]
        guess = attempt.guess_text
        if guess not in self.word_source:
            self.rejected_word = guess
            self.message = f"{guess.upper()} not a real word"
            return None

        evaluation = evaluate_guess(self._secret, guess)
        attempt.apply_states(evaluation.states)
        self._absent |= evaluation.absent_letters

        if evaluation.solved:
            self.status = SessionStatus.WON
            self.message = "You did it!"
        elif self._row == MAX_ATTEMPTS - 1:
            self.status = SessionStatus.LOST
            self.message = f"The word was {self._secret.upper()}"
        else:
            self._attempts.append(Attempt())
            self._row += 1
            self._col = 0

        return evaluation

    # Queries

    def _cell_state(self, row: int, col: int) -> LetterState:
        if 0 <= row < len(self._attempts) and 0 <= col < WORD_LENGTH:
            return self._attempts[row].states[col]
        return LetterState.BLANK

    def get_letter(self, row: int, col: int) -> str:
        if self._cell_state(row, col) is LetterState.BLANK:
            return ""
        return self._attempts[row].letters[col]

    def get_letter_state(self, row: int, col: int) -> LetterState:
        return self._cell_state(row, col)

    def get_letter_color(self, row: int, col: int) -> str:
        return LETTER_COLORS[self._cell_state(row, col).value]

    def key_state(self, letter: str) -> LetterState:
        """
        Best-known feedback for a keyboard letter, derived from the history.

        Letters ruled out entirely are ABSENT. Otherwise each evaluated
        attempt containing the letter contributes its strongest positional
        state and the latest such attempt wins.
        """
        letter = letter.upper()
        if letter in self._absent:
            return LetterState.ABSENT

        known = LetterState.BLANK
        for attempt in self._attempts:
            if not attempt.is_evaluated:
                continue
            seen = [state for ch, state in zip(attempt.letters, attempt.states) if ch == letter]
            best = max(seen, key=lambda state: state.rank, default=None)
            if best in (LetterState.PRESENT, LetterState.CORRECT):
                known = best
        return known

    def key_color(self, letter: str) -> str:
        return KEY_COLORS[self.key_state(letter).value]
