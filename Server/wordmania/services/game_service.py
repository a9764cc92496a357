"""
Game Service

Hosts the game sessions of every connected browser.
"""

import uuid
from typing import Dict, Optional

from ..config.game_settings import KEYBOARD_ROWS, MAX_ATTEMPTS, WORD_LENGTH
from ..models.game import GameSnapshot
from .game_session import GameSession
from .word_source import WordSource


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Secret selection through the shared word source
    - Forwarding key presses to the right session
    - Building snapshots without exposing answers to clients
    """

    def __init__(self, word_source: WordSource):
        self.word_source = word_source
        self.games: Dict[str, GameSession] = {}  # Store active games by game_id

    def create_new_game(self) -> str:
        """
        Creates a new game session with a randomly selected word.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        self.games[game_id] = GameSession(self.word_source)
        return game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameSnapshot]:
        """
        Returns the current game state for a session (without revealing the answer).

        Args:
            game_id: Unique game identifier

        Returns:
            GameSnapshot object or None if game not found
        """
        session = self.games.get(game_id)
        if session is None:
            return None

        rows = range(MAX_ATTEMPTS)
        cols = range(WORD_LENGTH)
        keys = [letter for row in KEYBOARD_ROWS for letter in row]

        return GameSnapshot(
            game_id=game_id,
            status=session.status.value,
            current_row=session.current_row,
            current_col=session.current_col,
            max_attempts=MAX_ATTEMPTS,
            word_length=WORD_LENGTH,
            letters=[[session.get_letter(r, c) for c in cols] for r in rows],
            states=[[session.get_letter_state(r, c).value for c in cols] for r in rows],
            colors=[[session.get_letter_color(r, c) for c in cols] for r in rows],
            key_colors={letter: session.key_color(letter) for letter in keys},
            message=session.message,
            play_again=session.play_again_available,
            can_submit=session.can_submit,
            rejected_word=session.rejected_word,
            answer=session.secret.upper() if session.game_over else None
        )

    def key_press(self, game_id: str, key: str) -> Optional[GameSnapshot]:
        """
        Forwards one key press to a session.

        Args:
            game_id: Unique game identifier
            key: A letter, ENTER or DELETE

        Returns:
            Updated GameSnapshot or None if game not found
        """
        session = self.games.get(game_id)
        if session is None:
            return None

        session.key_press(key)
        return self.get_game_state(game_id)

    def play_again(self, game_id: str) -> Optional[GameSnapshot]:
        """Restart a session with a fresh secret word."""
        session = self.games.get(game_id)
        if session is None:
            return None

        session.play_again()
        return self.get_game_state(game_id)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_source: WordSource) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(word_source)
    return _game_service
