# Copyright 2026 TinyLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line buffer that feeds the scanner one character at a time.

The buffer holds a single line of source text. When the cursor runs off the
end of the line the next line is read from the stream, optionally echoed to a
listing sink, and the line counter is advanced. Lines longer than the buffer
are read in chunks; only the first chunk of a physical line counts as a new
line.
"""

from typing import TextIO

# ###############
# Public Interface
# ###############

EOF = ""
"""Sentinel returned by :meth:`LineBuffer.next_char` once the stream is exhausted."""

DEFAULT_BUFFER_LENGTH = 256


class LineBuffer:
    """One-line window over a text stream with single-character put-back.

    Args:
        source: Readable text stream supporting ``readline(limit)``.
        listing: Sink that receives echoed source lines, or None.
        echo: Echo every line read to *listing* before it is consumed.
        buffer_length: Size of the line buffer. At most ``buffer_length - 1``
            characters are read per refill.
    """

    def __init__(
        self,
        source: TextIO,
        listing: TextIO | None = None,
        echo: bool = False,
        buffer_length: int = DEFAULT_BUFFER_LENGTH,
    ) -> None:
        if buffer_length < 2:
            raise ValueError(f"buffer_length must be at least 2, got {buffer_length}")
        self._source = source
        self._listing = listing
        self._echo = echo
        self._chunk_size = buffer_length - 1
        self._line_text = ""
        self._pos = 0
        self._eof = False
        self._at_line_start = True
        self._lineno = 0

    @property
    def line(self) -> int:
        """Number of physical lines read so far."""
        return self._lineno

    def next_char(self) -> str:
        """Return the next character, refilling from the stream when needed.

        Returns :data:`EOF` once the stream is exhausted, and keeps returning it
        on every later call.
        """
        if self._eof:
            return EOF
        if self._pos >= len(self._line_text) and not self._refill():
            return EOF
        ch = self._line_text[self._pos]
        self._pos += 1
        return ch

    def put_back(self) -> None:
        """Back up one character. A no-op once end of file has been reached."""
        if not self._eof:
            self._pos -= 1

    # ################
    # Implementation
    # ################

    def _refill(self) -> bool:
        """Read the next chunk into the buffer. Returns False at end of stream."""
        text = self._source.readline(self._chunk_size)
        if not text:
            self._eof = True
            self._line_text = ""
            self._pos = 0
            return False

        if self._at_line_start:
            self._lineno += 1
        self._at_line_start = text.endswith("\n")

        if self._echo and self._listing is not None:
            echoed = text if text.endswith("\n") else text + "\n"
            self._listing.write(f"{self._lineno:4d}: {echoed}")

        self._line_text = text
        self._pos = 0
        return True
