# app.py
import logging

from flask import Flask
from flask_cors import CORS
from config import Config
from dictionary_store import DictionaryStore
from translation import TranslationService
from api.translation import translation_bp


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    logging.basicConfig(level=app.config["LOG_LEVEL"])

    # Enable CORS for all routes
    CORS(app)

    # Load the dictionary once; later requests reuse the snapshot
    app.dictionary_store = DictionaryStore(
        app.config["DICTIONARY_PATH"],
        auto_reload=app.config["DICTIONARY_AUTO_RELOAD"],
    )
    app.dictionary_store.get()

    app.translation_service = TranslationService(
        app.dictionary_store,
        wrap_translations=app.config["WRAP_TRANSLATIONS"],
        max_workers=app.config["BATCH_WORKERS"],
        batch_timeout=app.config["BATCH_TIMEOUT"],
    )

    # Register Blueprints
    app.register_blueprint(translation_bp, url_prefix="/api/translate")

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host=Config.SERVER_HOST, port=Config.SERVER_PORT, threaded=True)
