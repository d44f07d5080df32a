"""Line source for lineslice: a file, a gzip file, or standard input."""

import gzip
import sys
from collections.abc import Iterator
from contextlib import nullcontext
from pathlib import Path
from typing import BinaryIO


class LineSource:
    """Stream decoded text lines from a file or a binary stream.

    Lines are split on LF only. The LF is stripped, and so is a CR right
    before it, so CRLF and LF input read the same.
    """

    def __init__(
        self,
        path: str | Path | None = None,
        stream: BinaryIO | None = None,
        encoding: str = "utf-8",
        errors: str = "strict",
    ):
        self.path = None if path in (None, "-") else Path(path)
        self.stream = stream
        self.encoding = encoding
        self.errors = errors
        self._handle: BinaryIO | None = None

    @property
    def name(self) -> str:
        return str(self.path) if self.path else "<stdin>"

    def __enter__(self) -> "LineSource":
        if self.path is not None:
            self._handle = self._open_path(self.path)
        return self

    def __exit__(self, *exc_info) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __iter__(self) -> Iterator[str]:
        if self._handle is not None:
            yield from self._decode(self._handle)
            return

        with self._open() as f:
            yield from self._decode(f)

    def _open(self):
        if self.path is not None:
            return self._open_path(self.path)
        # Standard input stays open for the caller.
        return nullcontext(self.stream or sys.stdin.buffer)

    @staticmethod
    def _open_path(path: Path) -> BinaryIO:
        opener = gzip.open if path.suffix == ".gz" else open
        return opener(path, "rb")

    def _decode(self, f: BinaryIO) -> Iterator[str]:
        for raw in f:
            yield split_line(raw).decode(self.encoding, self.errors)


def split_line(raw: bytes) -> bytes:
    """Strip one line terminator (LF or CRLF) from a raw line."""
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw
