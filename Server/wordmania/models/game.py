"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from ..config.game_settings import WORD_LENGTH


class LetterState(Enum):
    """State of a single grid cell."""
    BLANK = "blank"        # not entered
    GUESSED = "guessed"    # entered, not evaluated yet
    ABSENT = "absent"      # not in the word
    PRESENT = "present"    # in the word, wrong position
    CORRECT = "correct"    # right letter, right position

    @property
    def is_evaluated(self) -> bool:
        return self in (LetterState.ABSENT, LetterState.PRESENT, LetterState.CORRECT)

    @property
    def rank(self) -> int:
        """Feedback precedence used when merging states for the keyboard."""
        return _RANKS[self]


_RANKS = {
    LetterState.BLANK: 0,
    LetterState.GUESSED: 0,
    LetterState.ABSENT: 1,
    LetterState.PRESENT: 2,
    LetterState.CORRECT: 3,
}


class SessionStatus(Enum):
    """Game state machine; WON and LOST are terminal."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class Attempt:
    """
    One row of the grid.

    Letters are stored upper-case for display; ``guess_text`` is the
    lower-case word used for dictionary lookups and evaluation.
    """

    def __init__(self, length: int = WORD_LENGTH):
        self.letters: List[str] = [""] * length
        self.states: List[LetterState] = [LetterState.BLANK] * length

    def __len__(self) -> int:
        return len(self.letters)

    @property
    def guess_text(self) -> str:
        return "".join(self.letters).lower()

    @property
    def is_evaluated(self) -> bool:
        return all(state.is_evaluated for state in self.states)

    def set_letter(self, index: int, letter: str) -> None:
        self.letters[index] = letter.upper()
        self.states[index] = LetterState.GUESSED

    def clear_letter(self, index: int) -> None:
        self.letters[index] = ""
        self.states[index] = LetterState.BLANK

    def apply_states(self, states: List[LetterState]) -> None:
        self.states = list(states)

    def __repr__(self) -> str:
        return f"Attempt({self.guess_text!r}, {[s.value for s in self.states]})"


@dataclass
class GameSnapshot:
    """Everything the display layer may read about a session, JSON-ready."""
    game_id: str
    status: str
    current_row: int
    current_col: int
    max_attempts: int
    word_length: int
    letters: List[List[str]]
    states: List[List[str]]
    colors: List[List[str]]
    key_colors: Dict[str, str]
    message: str
    play_again: bool
    can_submit: bool
    rejected_word: Optional[str] = None  # Set when the last ENTER was not a dictionary word
    answer: Optional[str] = None  # Only included when game is over
