"""
WordMania Game Server - Main Entry Point

Loads the word list, initializes the game service and starts the
Flask-SocketIO application.
"""

from wordmania import create_app
from wordmania.config import Config
from wordmania.services.game_service import initialize_game_service
from wordmania.services.word_source import WordListError, load_word_source
from wordmania.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Loading word list...")

        # Without a word list no game can ever start
        try:
            word_source = load_word_source(Config.WORD_LIST_PATH)
        except WordListError as e:
            print(f"✗ Failed to load word list: {e}")
            game_logger.logger.critical(f"Word list unavailable: {e}")
            raise

        print(f"✓ Loaded {len(word_source)} words from {Config.WORD_LIST_PATH}")

        initialize_game_service(word_source)
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("WordMania Server Starting")

        print(f"\nStarting WordMania Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("WordMania Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
