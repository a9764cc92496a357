"""
Services Package

Contains all business logic and service classes.
"""

from .evaluator import Evaluation, evaluate_guess
from .game_session import GameSession
from .game_service import GameService, get_game_service, initialize_game_service
from .word_source import WordListError, WordSource, load_word_source

__all__ = [
    'Evaluation', 'evaluate_guess',
    'GameSession',
    'GameService', 'get_game_service', 'initialize_game_service',
    'WordListError', 'WordSource', 'load_word_source'
]
