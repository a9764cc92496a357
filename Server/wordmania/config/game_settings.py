"""
Game Configuration Constants Module

Board dimensions, the key-press control tokens, the on-screen keyboard layout
and the lookup tables the display layer uses to turn letter states into colours.
"""

from typing import Dict, Final, List, Tuple

# Core Game Configuration Constants
MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of guess attempts (grid rows) allowed per game.
"""

WORD_LENGTH: Final[int] = 5
"""
Number of letters in every word, and so the number of grid columns.
"""

# Control tokens accepted by key_press alongside single letters
DELETE_KEY: Final[str] = "DELETE"
ENTER_KEY: Final[str] = "ENTER"
DELETE_ALIASES: Final[Tuple[str, ...]] = (DELETE_KEY, "DEL", "BACKSPACE")

KEYBOARD_ROWS: Final[List[str]] = ["QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM"]

# Grid cell background per letter state
LETTER_COLORS: Final[Dict[str, str]] = {
    "blank": "white",
    "guessed": "white",
    "absent": "gray",
    "present": "orange",
    "correct": "lightblue",
}

# On-screen keyboard key colour per derived letter state
KEY_COLORS: Final[Dict[str, str]] = {
    "blank": "#555",
    "guessed": "#555",
    "absent": "black",
    "present": "brown",
    "correct": "blue",
}
