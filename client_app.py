# client_app.py
import logging

from flask import Flask
from flask_cors import CORS
from config import Config
from translation_client import TranslationClientService
from api.client import client_bp


def create_client_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    logging.basicConfig(level=app.config["LOG_LEVEL"])

    CORS(app)

    app.translation_client = TranslationClientService(
        app.config["TRANSLATION_SERVER_URL"],
        connect_timeout=app.config["CLIENT_CONNECT_TIMEOUT"],
        read_timeout=app.config["CLIENT_READ_TIMEOUT"],
        max_retries=app.config["CLIENT_MAX_RETRIES"],
        backoff_factor=app.config["CLIENT_BACKOFF_FACTOR"],
        request_deadline=app.config["CLIENT_REQUEST_DEADLINE"],
        health_timeout=app.config["HEALTH_TIMEOUT"],
        max_workers=app.config["CLIENT_WORKERS"],
    )

    app.register_blueprint(client_bp, url_prefix="/api/client")

    return app


if __name__ == "__main__":
    app = create_client_app()
    app.run(host=Config.SERVER_HOST, port=Config.CLIENT_PORT, threaded=True)
