# api/translation.py
import logging

from flask import Blueprint, Response, request, jsonify, current_app
from http import HTTPStatus

from api.params import get_words
from results import ResultStatus

logger = logging.getLogger(__name__)

translation_bp = Blueprint("translation_bp", __name__)

STATUS_HEADER = "X-Translation-Status"


@translation_bp.route("/health", methods=["GET"])
def health():
    return Response("Server is running", mimetype="text/plain")


@translation_bp.route("/batch", methods=["GET"])
def translate_batch():
    """
    GET /api/translate/batch?words=кот&words=дом
    Returns text/plain, one translation per line, sorted and de-duplicated.
    """
    words = get_words(request.args)
    if not words:
        return (
            jsonify({"error": "Missing 'words' query param"}),
            HTTPStatus.BAD_REQUEST,
        )

    logger.info("Received batch translation request for %d words", len(words))
    results = current_app.translation_service.translate_batch(words)
    return Response("\n".join(results), mimetype="text/plain")


@translation_bp.route("/<path:word>", methods=["GET"])
def translate(word):
    """
    GET /api/translate/<word>
    200 with the translation (or "Translation not found") as plain text,
    400 with "Error: <reason>" if the lookup itself failed.
    """
    logger.info("Received translation request for word: %s", word)
    result = current_app.translation_service.translate(word)

    status = HTTPStatus.OK
    if result.status is ResultStatus.ERROR:
        logger.error("Error translating word: %s: %s", word, result.reason)
        status = HTTPStatus.BAD_REQUEST

    resp = Response(result.text, status=status, mimetype="text/plain")
    resp.headers[STATUS_HEADER] = result.status.value
    return resp
