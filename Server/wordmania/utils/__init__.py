"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_game_service, websocket_game_service_required
from .helpers import get_user_identity
from .game_logger import game_logger

__all__ = ['require_game_service', 'websocket_game_service_required', 'get_user_identity', 'game_logger']
