# translation.py
import logging
import time
from concurrent.futures import ThreadPoolExecutor, wait

from normalizer import normalize
from resolver import resolve
from results import TranslationResult, collapse

logger = logging.getLogger(__name__)


class TranslationService:
    def __init__(
        self,
        dictionary_store,
        wrap_translations: bool = False,
        max_workers: int = 8,
        batch_timeout: float = 10.0,
    ):
        self.dictionary_store = dictionary_store
        self.wrap_translations = wrap_translations
        self.batch_timeout = batch_timeout
        self.executor = ThreadPoolExecutor(
            max_workers=max(1, max_workers), thread_name_prefix="translate"
        )

    def translate(self, word: str) -> TranslationResult:
        """
        Translate a single word. Never raises; anything that goes wrong
        inside the lookup comes back as an ERROR result.
        """
        logger.info("START translation for: %s", word)
        start = time.perf_counter()

        try:
            term = normalize(word)
            dictionary = self.dictionary_store.get()
            result = resolve(term, dictionary)
            if self.wrap_translations and result.ok:
                result = TranslationResult.found(self._wrap(result.value))
        except Exception as e:
            logger.exception("Error translating word: %s", word)
            return TranslationResult.error(str(e) or type(e).__name__)

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "END translation for %s: %s (took %.1f ms)", word, result.text, elapsed_ms
        )
        return result

    def translate_batch(self, words) -> list:
        """
        Translate every word on the worker pool and return the sorted,
        de-duplicated, lower-cased results. The whole batch shares one
        deadline; a word whose task fails or is still pending when it
        expires contributes an "Error: ..." string instead of failing the
        batch.
        """
        words = list(words)
        logger.info("Starting batch translation of %d words", len(words))

        futures = [self.executor.submit(self.translate, word) for word in words]
        wait(futures, timeout=self.batch_timeout)

        texts = []
        for word, future in zip(words, futures):
            if not future.done():
                future.cancel()
                logger.warning("Translation of '%s' timed out", word)
                texts.append(f"Error: translation of '{word}' timed out")
                continue
            try:
                texts.append(future.result().text)
            except Exception as e:
                logger.error("Translation task for '%s' failed: %s", word, e)
                texts.append(f"Error: {e}")

        return collapse(texts)

    def shutdown(self):
        self.executor.shutdown(wait=False, cancel_futures=True)

    @staticmethod
    def _wrap(value: str) -> str:
        return f"translated: {normalize(value)} :end"
