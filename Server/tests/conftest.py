import pytest

from wordmania import create_app
from wordmania.config import TestingConfig
from wordmania.services import game_service as game_service_module
from wordmania.services.game_session import GameSession
from wordmania.services.word_source import WordSource

WORDS = [
    "allow", "llama", "crane", "cigar", "rebut", "humph", "blush", "focal",
    "bench", "stink", "sissy", "model", "quiet", "grade", "fresh", "colon",
]


def first_word(count):
    return 0


def type_word(session, word, enter=True):
    """Type a word into the session one key at a time."""
    for letter in word:
        session.key_press(letter)
    if enter:
        session.key_press("ENTER")


@pytest.fixture
def word_source():
    # Always picks "allow" as the secret
    return WordSource(WORDS, rand_index=first_word)


@pytest.fixture
def session(word_source):
    return GameSession(word_source)


@pytest.fixture
def game_service(word_source):
    service = game_service_module.initialize_game_service(word_source)
    yield service
    game_service_module._game_service = None


@pytest.fixture
def app_and_socketio(game_service):
    return create_app(TestingConfig)


@pytest.fixture
def client(app_and_socketio):
    app, _ = app_and_socketio
    return app.test_client()
