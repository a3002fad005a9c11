# api/client.py
import logging

from flask import Blueprint, Response, request, jsonify, current_app
from http import HTTPStatus

from api.params import get_words

logger = logging.getLogger(__name__)

client_bp = Blueprint("client_bp", __name__)


def _lines(results):
    return Response("\n".join(results), mimetype="text/plain")


@client_bp.route("/translate/batch", methods=["GET"])
def translate_batch():
    """
    GET /api/client/translate/batch?words=кот,дом
    """
    words = get_words(request.args)
    if not words:
        return (
            jsonify({"error": "Missing 'words' query param"}),
            HTTPStatus.BAD_REQUEST,
        )

    logger.info("API: Batch translation request for words: %s", words)
    return _lines(current_app.translation_client.translate_words(words))


@client_bp.route("/translate/<path:word>", methods=["GET"])
def translate(word):
    logger.info("API: Received request to translate word: %s", word)
    return Response(
        current_app.translation_client.translate_word(word), mimetype="text/plain"
    )


@client_bp.route("/health", methods=["GET"])
def health():
    logger.info("API: Health check requested")
    return Response(
        current_app.translation_client.check_health(), mimetype="text/plain"
    )


@client_bp.route("/test", methods=["GET"])
def test_words():
    logger.info("API: Test endpoint called")
    words = current_app.config["CLIENT_TEST_WORDS"]
    return _lines(current_app.translation_client.translate_words(words))
