"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import Attempt, GameSnapshot, LetterState, SessionStatus

__all__ = ['Attempt', 'GameSnapshot', 'LetterState', 'SessionStatus']
