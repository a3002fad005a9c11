# translation_client.py
import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor, TimeoutError, wait
from urllib.parse import quote

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from results import collapse

logger = logging.getLogger(__name__)

USER_AGENT = "TranslationClient/1.0"

_READ_CHUNK = 64


def _log_response(response, *args, **kwargs):
    request = response.request
    logger.info("Request: %s %s", request.method, request.url)
    logger.info("Response status: %s", response.status_code)


class TranslationClientService:
    """
    Talks to the translation server over HTTP.

    - Calls run on a long-lived worker pool; each worker thread keeps its
      own requests.Session (sessions are not guaranteed thread-safe),
      mounted with a retrying HTTPAdapter.
    - Every call carries a (connect, read) timeout per socket operation
      and a wall-clock deadline for the whole exchange, retries included.
    - Failures never propagate: they are mapped to descriptive strings.
    """

    def __init__(
        self,
        base_url: str,
        connect_timeout: float = 3.0,
        read_timeout: float = 5.0,
        max_retries: int = 3,
        backoff_factor: float = 1.0,
        request_deadline: float = 10.0,
        health_timeout: float = 3.0,
        max_workers: int = 8,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = (connect_timeout, read_timeout)
        self.request_deadline = request_deadline
        self.health_timeout = health_timeout
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor
        self.executor = ThreadPoolExecutor(
            max_workers=max(1, max_workers), thread_name_prefix="translation-client"
        )
        self._tls = threading.local()
        self._sessions = []
        self._sessions_lock = threading.Lock()

    def _build_session(self, retries: int) -> requests.Session:
        session = requests.Session()
        retry = Retry(
            total=retries,
            connect=retries,
            read=retries,
            status=retries,
            backoff_factor=self.backoff_factor,
            status_forcelist=(502, 503, 504),
            allowed_methods=frozenset(["GET"]),
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        session.headers.update({"Accept": "text/plain", "User-Agent": USER_AGENT})
        session.hooks["response"].append(_log_response)
        with self._sessions_lock:
            self._sessions.append(session)
        return session

    def _get_session(self, health: bool = False) -> requests.Session:
        attr = "health_session" if health else "session"
        session = getattr(self._tls, attr, None)
        if session is None:
            session = self._build_session(0 if health else self.max_retries)
            setattr(self._tls, attr, session)
        return session

    def _fetch(self, url: str, timeout, limit: float, health: bool = False) -> str:
        """
        Runs on a worker thread. Streams the body so a server trickling
        bytes is cut off once `limit` seconds have passed.
        """
        deadline = time.monotonic() + limit
        resp = self._get_session(health).get(url, timeout=timeout, stream=True)
        with resp:
            resp.raise_for_status()
            body = bytearray()
            for chunk in resp.iter_content(chunk_size=_READ_CHUNK):
                body.extend(chunk)
                if time.monotonic() > deadline:
                    raise requests.Timeout(f"no response within {limit}s")
            return body.decode(resp.encoding or "utf-8", errors="replace")

    def _word_url(self, word: str) -> str:
        return f"{self.base_url}/api/translate/{quote(word, safe='')}"

    def _translation_text(self, word: str, future) -> str:
        try:
            text = future.result(timeout=0)
        except TimeoutError:
            future.cancel()
            error = f"no response within {self.request_deadline}s"
        except Exception as e:
            error = e
        else:
            logger.info("Translation received: %s -> %s", word, text)
            return text

        logger.error("Failed to translate '%s': %s", word, error)
        return f"ERROR: Failed to translate - {error}"

    def translate_word(self, word: str) -> str:
        logger.info("Sending translation request for: %s", word)
        future = self.executor.submit(
            self._fetch, self._word_url(word), self.timeout, self.request_deadline
        )
        wait([future], timeout=self.request_deadline)
        return self._translation_text(word, future)

    def translate_words(self, words) -> list:
        """
        Translate each word concurrently under one shared deadline, then
        case-fold, de-duplicate and sort the results.
        """
        words = list(words)
        logger.info("Starting batch translation of %d words", len(words))
        if not words:
            return []

        futures = [
            self.executor.submit(
                self._fetch, self._word_url(word), self.timeout, self.request_deadline
            )
            for word in words
        ]
        wait(futures, timeout=self.request_deadline)
        translations = [
            self._translation_text(word, future) for word, future in zip(words, futures)
        ]

        logger.info(
            "Batch translation completed. Processing %d results", len(translations)
        )
        return collapse(translations)

    def check_health(self) -> str:
        logger.info("Checking server health...")
        url = f"{self.base_url}/api/translate/health"
        future = self.executor.submit(
            self._fetch,
            url,
            (self.health_timeout, self.health_timeout),
            self.health_timeout,
            True,
        )

        try:
            return future.result(timeout=self.health_timeout)
        except TimeoutError:
            future.cancel()
            error = f"no response within {self.health_timeout}s"
        except Exception as e:
            error = e

        logger.warning("Health check failed: %s", error)
        return f"Server is unavailable: {error}"

    def close(self):
        self.executor.shutdown(wait=False, cancel_futures=True)
        with self._sessions_lock:
            sessions, self._sessions = self._sessions, []
        for session in sessions:
            session.close()
