"""
Guess Evaluator

Implements the Wordle letter evaluation algorithm as a pure function.
"""

from collections import Counter
from dataclasses import dataclass
from typing import FrozenSet, List, Optional

from ..models.game import LetterState


@dataclass(frozen=True)
class Evaluation:
    """Per-position feedback for one guess plus letters ruled out entirely."""
    states: List[LetterState]
    absent_letters: FrozenSet[str]

    @property
    def solved(self) -> bool:
        return all(state is LetterState.CORRECT for state in self.states)


def evaluate_guess(secret: str, guess: str) -> Evaluation:
    """
    Evaluates ``guess`` against ``secret``.

    Exact positions are matched first so that a letter occurring once in the
    secret can't be reported as present in two places. Letters are compared
    case-insensitively; absent letters are returned upper-case.

    Args:
        secret: The word being guessed
        guess: A dictionary word of the same length

    Returns:
        Evaluation with one state per position

    Raises:
        ValueError: If the words differ in length
    """
    secret = secret.upper()
    guess = guess.upper()
    if len(secret) != len(guess):
        raise ValueError(f"Guess '{guess}' must be {len(secret)} letters long")

    states: List[Optional[LetterState]] = [None] * len(guess)

    # Letters of the secret not yet claimed by a match
    pool = Counter(secret)

    # First pass: exact position matches
    for i, (s, g) in enumerate(zip(secret, guess)):
        if g == s:
            states[i] = LetterState.CORRECT
            pool[g] -= 1

    # Second pass: misplaced letters and misses
    absent = set()
    for i, letter in enumerate(guess):
        if states[i] is not None:
            continue
        if pool[letter] > 0:
            states[i] = LetterState.PRESENT
            pool[letter] -= 1
        else:
            states[i] = LetterState.ABSENT
            if letter not in secret:
                absent.add(letter)

    return Evaluation(states=list(states), absent_letters=frozenset(absent))
