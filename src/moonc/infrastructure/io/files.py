"""Source and output file access."""

import os
import threading
from typing import Dict

from moonc.domain.exceptions import ReadError, WriteError


class SourceFileReader:
    """Reads source files as UTF-8 text without newline translation."""

    def read(self, path: str) -> str:
        try:
            with open(path, 'r', encoding='utf-8', newline='') as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(path, str(e))


class OutputFileWriter:
    """
    Writes generated files, truncating any previous content.

    Two inputs with the same basename compiled into one target directory
    resolve to the same output path. With serialize_writes enabled, writes to
    one path never overlap; the last writer still wins.
    """

    def __init__(self, serialize_writes: bool = True):
        self.serialize_writes = serialize_writes
        self._guard = threading.Lock()
        self._locks: Dict[str, threading.Lock] = {}

    def write(self, path: str, text: str) -> int:
        """
        Write text to path.

        Args:
            path: Output file path; parent directory must exist
            text: Generated code

        Returns:
            Number of bytes written

        Raises:
            WriteError: If the file cannot be opened or written
        """
        data = text.encode('utf-8')
        if not self.serialize_writes:
            return self._write(path, data)
        with self._lock_for(path):
            return self._write(path, data)

    def _lock_for(self, path: str) -> threading.Lock:
        key = os.path.normcase(os.path.abspath(path))
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
            return lock

    @staticmethod
    def _write(path: str, data: bytes) -> int:
        try:
            with open(path, 'wb') as f:
                f.write(data)
        except OSError as e:
            raise WriteError(path, str(e))
        return len(data)
