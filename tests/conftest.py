import os
import sys
import threading
import time

import pytest

# Ensure src/ is on sys.path so the 'moonc' package is importable without installing
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from moonc.domain.exceptions import ParseError
from moonc.domain.models import BatchRequest, CompilerConfig
from moonc.application.pipeline import CompilationPipeline
from moonc.infrastructure.io import SourceFileReader, OutputFileWriter


FAIL_MARKER = "!fail"


class FakeCompiler:
    """
    Deterministic stand-in for the external compiler.

    Generated code is a header plus the source. Sources starting with
    FAIL_MARKER are rejected. Per-source delays let tests control the order
    in which concurrent tasks finish.
    """

    def __init__(self, delays=None):
        self.delays = dict(delays or {})
        self.compiled = []
        self.parsed = []
        self._lock = threading.Lock()

    def compile(self, source, config):
        with self._lock:
            self.compiled.append(source)
        time.sleep(self.delays.get(source, 0))
        if source.startswith(FAIL_MARKER):
            return "", f"syntax error: {source[len(FAIL_MARKER):].strip()}"
        header = "-- lines\n" if config.reserve_line_numbers else "-- lua\n"
        return header + source, ""

    def parse(self, source):
        with self._lock:
            self.parsed.append(source)
        if source.startswith(FAIL_MARKER):
            raise ParseError("syntax error")
        return ("file", source)

    def version(self):
        return "0.0.test"


class RecordingConsole:
    """Console collecting emitted messages."""

    def __init__(self):
        self.messages = []
        self._lock = threading.Lock()

    def emit(self, text):
        with self._lock:
            self.messages.append(text)


@pytest.fixture
def fake_compiler():
    return FakeCompiler()


@pytest.fixture
def console():
    return RecordingConsole()


@pytest.fixture
def write_source(tmp_path):
    """Write a source file under tmp_path and return its path as str."""
    def _write(name, content):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')
        return str(path)
    return _write


@pytest.fixture
def make_pipeline(fake_compiler, console):
    """Build a CompilationPipeline for a request with real file IO."""
    def _make(compiler=None, metrics=None, **request_kwargs):
        request_kwargs.setdefault('files', ())
        request_kwargs.setdefault('config', CompilerConfig())
        return CompilationPipeline(
            compiler=compiler or fake_compiler,
            request=BatchRequest(**request_kwargs),
            console=console,
            reader=SourceFileReader(),
            writer=OutputFileWriter(),
            metrics=metrics,
        )
    return _make


@pytest.fixture
def fake_compiler_cls():
    """FakeCompiler class, for tests that need custom delays."""
    return FakeCompiler
