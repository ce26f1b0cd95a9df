"""
Output sinks the emitter writes generated code to.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Protocol

# Extensions of files the generated TypeScript module may be written to
SUPPORTED_OUTPUT_SUFFIXES = (".ts", ".tsx", ".mts", ".js", ".jsx", ".mjs")


class OutputExistsError(FileExistsError):
    """Raised when the output file already has content and overwriting is off."""


class UnsupportedOutputError(ValueError):
    """Raised when the output file is not a TypeScript or JavaScript file."""


def check_output_path(path: Path | str, overwrite: bool = False) -> Path:
    """
    Check that generated code may be written to path.

    Args:
        path: Target file path
        overwrite: Whether an existing non-empty file may be replaced

    Returns:
        The path as a Path

    Raises:
        UnsupportedOutputError: If the extension is not a script extension
        OutputExistsError: If the file has content and overwrite is False
    """
    path = Path(path)
    if path.suffix.lower() not in SUPPORTED_OUTPUT_SUFFIXES:
        raise UnsupportedOutputError(
            f"Only output files of type 'text/javascript' ({'|'.join(SUPPORTED_OUTPUT_SUFFIXES)}) are supported: {path}"
        )
    if path.is_file() and path.stat().st_size > 0 and not overwrite:
        raise OutputExistsError(f"Output file already has content, use the '--overwrite' flag to overwrite it: {path}")
    return path


class OutputSink(Protocol):
    """Protocol implemented by every output destination."""

    def write(self, text: str) -> None: ...

    def flush(self) -> None: ...

    def close(self) -> None: ...


class FileSink:
    """Writes generated code to a file as it is produced."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.path, "w", encoding="utf-8")

    @property
    def closed(self) -> bool:
        return self._file.closed

    def write(self, text: str) -> None:
        self._file.write(text)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        self._file.close()


class StringSink:
    """Collects generated code in memory.

    The text stays readable through getvalue() after close().
    """

    def __init__(self):
        self._buffer = io.StringIO()
        self._value = ""
        self.closed = False

    def write(self, text: str) -> None:
        self._buffer.write(text)

    def flush(self) -> None:
        self._value = self._buffer.getvalue()

    def close(self) -> None:
        self.flush()
        self._buffer.close()
        self.closed = True

    def getvalue(self) -> str:
        if self.closed:
            return self._value
        return self._buffer.getvalue()
