"""Console output shared by all compile tasks."""

import sys
import threading
from typing import Optional, TextIO


class StreamConsole:
    """Implements IConsole; each message is written whole under a lock."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self._lock = threading.Lock()

    def emit(self, text: str) -> None:
        # sys.stdout is looked up per call so redirection after construction works
        stream = self._stream or sys.stdout
        with self._lock:
            stream.write(text + "\n")
            stream.flush()
