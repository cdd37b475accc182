"""InputStream — explicit console read handle with a fault flag.

Wraps any text file object (``sys.stdin``, ``io.StringIO``) and reads it
one line at a time.  Tokens are whitespace-delimited and may span line
boundaries.  A failed extraction sets the fault flag and leaves the
rejected token unread; the caller must :meth:`~InputStream.clear` the
flag and :meth:`~InputStream.ignore` the token before extracting again.
"""

from __future__ import annotations

import io
import logging
import sys
from collections.abc import Callable
from typing import TextIO, TypeVar

from repval.domain.errors import InputExhausted, StreamFaultedError, TypeMismatch

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_DISCARD_LIMIT = 80


class InputStream:
    """Line-buffered token reader over a text source."""

    def __init__(self, source: TextIO) -> None:
        self._source = source
        self._buffer = ""
        self._fault = False
        self._eof = False

    @classmethod
    def from_text(cls, text: str) -> InputStream:
        """Build a stream over an in-memory string."""
        return cls(io.StringIO(text))

    @classmethod
    def stdin(cls) -> InputStream:
        return cls(sys.stdin)

    # --- Flags ---

    @property
    def good(self) -> bool:
        """True when the last extraction succeeded and input remains."""
        return not self._fault and not self._eof

    @property
    def faulted(self) -> bool:
        return self._fault

    @property
    def eof(self) -> bool:
        return self._eof

    @property
    def pending(self) -> str:
        """Unread remainder of the current line."""
        return self._buffer

    # --- Operations ---

    def extract(self, parse: Callable[[str], T]) -> T:
        """Parse the next token with *parse* and consume it.

        Raises:
            StreamFaultedError: If the fault flag is still set.
            TypeMismatch: If *parse* rejects the token.  The fault flag
                is set and the token stays in the buffer.
            InputExhausted: If the source ends before a token appears.
        """
        if self._fault:
            raise StreamFaultedError("stream is faulted; call clear() before extracting")
        token = self._peek_token()
        try:
            value = parse(token)
        except TypeMismatch:
            self._fault = True
            raise
        self._buffer = self._buffer[len(token) :]
        return value

    def clear(self) -> None:
        """Reset the fault flag so later extractions are allowed."""
        self._fault = False

    def ignore(self, count: int = DEFAULT_DISCARD_LIMIT, delim: str = "\n") -> str:
        """Discard up to *count* characters, stopping after *delim*.

        Only the current line buffer is touched; no new line is read.
        Returns the discarded text.
        """
        idx = self._buffer.find(delim)
        if idx == -1 or idx >= count:
            cut = min(count, len(self._buffer))
        else:
            cut = idx + len(delim)
        discarded, self._buffer = self._buffer[:cut], self._buffer[cut:]
        logger.debug("Discarded %d characters from input buffer", len(discarded))
        return discarded

    # --- Internals ---

    def _fill(self) -> bool:
        line = self._source.readline()
        if not line:
            self._eof = True
            return False
        self._buffer += line
        return True

    def _peek_token(self) -> str:
        while True:
            stripped = self._buffer.lstrip()
            if stripped:
                self._buffer = stripped
                return stripped.split(maxsplit=1)[0]
            self._buffer = ""
            if not self._fill():
                raise InputExhausted("input ended before a value was entered")
