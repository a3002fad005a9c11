# config.py
import os
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _env_bool(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name, default):
    value = os.environ.get(name)
    if not value:
        return list(default)
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    # Server side: where the flat source=target dictionary lives
    DICTIONARY_PATH = os.environ.get(
        "DICTIONARY_PATH", os.path.join(BASE_DIR, "resources", "dictionary.txt")
    )
    DICTIONARY_AUTO_RELOAD = _env_bool("DICTIONARY_AUTO_RELOAD", True)
    # Legacy "translated: ... :end" output format, off unless a caller needs it
    WRAP_TRANSLATIONS = _env_bool("WRAP_TRANSLATIONS", False)
    BATCH_WORKERS = int(os.environ.get("BATCH_WORKERS", 8))
    # Wall-clock limit for a whole batch, not per term
    BATCH_TIMEOUT = float(os.environ.get("BATCH_TIMEOUT", 10))

    SERVER_HOST = os.environ.get("SERVER_HOST", "127.0.0.1")
    SERVER_PORT = int(os.environ.get("SERVER_PORT", 8081))

    # Client side: outbound calls to the translation server
    TRANSLATION_SERVER_URL = os.environ.get(
        "TRANSLATION_SERVER_URL", "http://localhost:8081"
    )
    CLIENT_PORT = int(os.environ.get("CLIENT_PORT", 8080))
    CLIENT_CONNECT_TIMEOUT = float(os.environ.get("CLIENT_CONNECT_TIMEOUT", 3))
    CLIENT_READ_TIMEOUT = float(os.environ.get("CLIENT_READ_TIMEOUT", 5))
    CLIENT_MAX_RETRIES = int(os.environ.get("CLIENT_MAX_RETRIES", 3))
    CLIENT_BACKOFF_FACTOR = float(os.environ.get("CLIENT_BACKOFF_FACTOR", 1))
    # Total time allowed for one outbound exchange, retries included
    CLIENT_REQUEST_DEADLINE = float(os.environ.get("CLIENT_REQUEST_DEADLINE", 10))
    CLIENT_WORKERS = int(os.environ.get("CLIENT_WORKERS", 8))
    HEALTH_TIMEOUT = float(os.environ.get("HEALTH_TIMEOUT", 3))
    CLIENT_TEST_WORDS = _env_list(
        "CLIENT_TEST_WORDS", ["привет", "мир", "дом", "кот", "собака"]
    )

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
