"""
WebSocket Event Handlers

Real-time key press channel for the browser client. Every state change is
pushed to the ``game_<id>`` room so other tabs on the same game stay in sync.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..controllers.game_controller import log_key_outcome
from ..utils.decorators import websocket_game_service_required
from ..utils.game_logger import game_logger


def game_room(game_id):
    return f"game_{game_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('new_game')
    @websocket_game_service_required
    def handle_new_game(data=None, game_service=None):
        """Create a game and join its room."""
        game_logger.log_user_action(request, 'ws_new_game')

        game_id = game_service.create_new_game()
        join_room(game_room(game_id))
        emit('game_state', asdict(game_service.get_game_state(game_id)))

    @socketio.on('join_game')
    @websocket_game_service_required
    def handle_join_game(data=None, game_service=None):
        """Join an existing game's room and receive its current state."""
        game_id = (data or {}).get('game_id')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        state = game_service.get_game_state(game_id)
        if state is None:
            emit('error', {'error': 'Game not found'})
            return

        game_logger.log_user_action(request, 'ws_join_game', game_id)
        join_room(game_room(game_id))
        emit('game_state', asdict(state))

    @socketio.on('leave_game')
    def handle_leave_game(data=None):
        game_id = (data or {}).get('game_id')
        if game_id:
            leave_room(game_room(game_id))

    @socketio.on('key_press')
    @websocket_game_service_required
    def handle_key_press(data=None, game_service=None):
        """Forward a key press and broadcast the resulting state."""
        data = data or {}
        game_id = data.get('game_id')
        key = data.get('key')
        if not game_id or not isinstance(key, str) or not key:
            emit('error', {'error': 'Game ID and key required'})
            return

        session = game_service.get_session(game_id)
        if session is None:
            emit('error', {'error': 'Game not found'})
            return

        game_logger.log_user_action(request, 'ws_key_press', game_id, key=key)

        try:
            previous_status = session.status
            state = game_service.key_press(game_id, key)
        except Exception as e:
            game_logger.log_error(request, e, 'ws_key_press', game_id)
            emit('error', {'error': str(e)})
            return

        log_key_outcome(game_id, request.remote_addr, key, previous_status, state)

        join_room(game_room(game_id))
        socketio.emit('game_state', asdict(state), room=game_room(game_id))

    @socketio.on('play_again')
    @websocket_game_service_required
    def handle_play_again(data=None, game_service=None):
        """Restart a finished game with a new secret word."""
        game_id = (data or {}).get('game_id')
        state = game_service.play_again(game_id) if game_id else None
        if state is None:
            emit('error', {'error': 'Game not found'})
            return

        game_logger.log_user_action(request, 'ws_play_again', game_id)
        join_room(game_room(game_id))
        socketio.emit('game_state', asdict(state), room=game_room(game_id))
