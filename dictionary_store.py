# dictionary_store.py
import logging
import os
import threading
from types import MappingProxyType

from normalizer import normalize

logger = logging.getLogger(__name__)

_NOT_LOADED = object()


def parse_dictionary(lines):
    """
    Parse `source=target` lines into a dict of normalized terms.

    Blank lines and lines starting with '#' are skipped. Each line is split
    on the first '='. Returns (entries, duplicates) where duplicates lists
    every normalized source key that was seen more than once; the last
    occurrence wins.
    """
    entries = {}
    duplicates = []

    for line_no, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        source, sep, target = line.partition("=")
        if not sep:
            logger.warning("Skipping line %d without '=': %r", line_no, line)
            continue

        source = normalize(source)
        target = normalize(target)
        if not source:
            logger.warning("Skipping line %d with empty source term", line_no)
            continue

        if source in entries:
            logger.warning("Duplicate key found: %s (line %d)", source, line_no)
            duplicates.append(source)
        entries[source] = target

    return entries, duplicates


class DictionaryStore:
    """
    Holds the loaded dictionary as a read-only snapshot.

    The file is parsed once and re-parsed only when its modification time
    changes (if auto_reload is on) or when reload() is called.
    """

    def __init__(self, path, auto_reload: bool = True):
        self.path = path
        self.auto_reload = auto_reload
        self.duplicates = []
        self._snapshot = MappingProxyType({})
        self._mtime = _NOT_LOADED
        self._lock = threading.Lock()

    def _current_mtime(self):
        try:
            return os.stat(self.path).st_mtime_ns
        except OSError:
            return None

    def load(self):
        """
        Read and parse the dictionary file. Never raises: an unreadable or
        undecodable file is logged and yields an empty dictionary.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as handle:
                entries, duplicates = parse_dictionary(handle)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error reading dictionary file %s: %s", self.path, e)
            self.duplicates = []
            return MappingProxyType({})

        self.duplicates = duplicates
        logger.info("Dictionary loaded from %s: %d entries", self.path, len(entries))
        return MappingProxyType(entries)

    def reload(self):
        with self._lock:
            self._mtime = self._current_mtime()
            self._snapshot = self.load()
            return self._snapshot

    def get(self):
        """
        Returns the current snapshot, loading it on first use and again
        whenever the file changed on disk.
        """
        if self._mtime is _NOT_LOADED or (
            self.auto_reload and self._current_mtime() != self._mtime
        ):
            with self._lock:
                mtime = self._current_mtime()
                if mtime != self._mtime:
                    self._mtime = mtime
                    self._snapshot = self.load()
        return self._snapshot
