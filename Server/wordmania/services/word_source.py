"""
Word Source

Loads the newline-delimited word list once at startup and serves it as both
the pool of secrets and the dictionary used to validate guesses.
"""

import random
from pathlib import Path
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Union

from ..config.game_settings import WORD_LENGTH


class WordListError(RuntimeError):
    """The word list is missing or unusable; no game can be started."""


def validate_word_list_integrity(words: List[str], word_length: int = WORD_LENGTH) -> bool:
    """
    Validates the integrity and consistency of the word database.

    This function performs validation to ensure:
    1. Length validation: All words are exactly word_length characters
    2. Character validation: Only alphabetic characters allowed
    3. Format validation: Consistent lowercase formatting

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        WordListError: If any validation check fails with detailed error message
    """
    if not words:
        raise WordListError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != word_length:
            raise WordListError(
                f"Word at index {index} '{word}' is not {word_length} characters long"
            )

        if not word.isalpha():
            raise WordListError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise WordListError(f"Word at index {index} '{word}' is not in lowercase format")

    return True


def get_word_statistics(words: Iterable[str]) -> dict:
    """
    Analyzes word list and returns statistical information for game balancing.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in database
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: The five most frequent letters
    """
    words = list(words)
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    # Calculate letter frequency distribution
    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


class WordSource:
    """
    Fixed collection of lowercase words, all WORD_LENGTH letters long.

    ``rand_index`` picks the secret: it receives the number of words and
    returns an index below it. Tests pass a deterministic function.
    """

    def __init__(self, words: Iterable[str], rand_index: Optional[Callable[[int], int]] = None):
        # Keep first-seen order so rand_index stays reproducible
        cleaned = list(dict.fromkeys(word.strip().lower() for word in words if word.strip()))
        validate_word_list_integrity(cleaned)

        self._words: List[str] = cleaned
        self._lookup: FrozenSet[str] = frozenset(cleaned)
        self._rand_index = rand_index or random.randrange

    @property
    def word_length(self) -> int:
        return len(self._words[0])

    @property
    def words(self) -> List[str]:
        return list(self._words)

    def random_word(self) -> str:
        """Select a secret word using the injected random-index source."""
        index = self._rand_index(len(self._words))
        return self._words[index]

    def contains(self, word: str) -> bool:
        return word.strip().lower() in self._lookup

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return len(self._words)


def load_word_source(path: Union[str, Path],
                     rand_index: Optional[Callable[[int], int]] = None) -> WordSource:
    """
    Load the word list from a newline-delimited text file.

    Raises:
        WordListError: If the file can't be read or its contents are invalid
    """
    word_file = Path(path)
    try:
        with open(word_file, 'r', encoding='utf-8') as f:
            lines = f.read().splitlines()
    except OSError as e:
        raise WordListError(f"Word list file not available: {word_file} ({e})") from e

    return WordSource(lines, rand_index=rand_index)
