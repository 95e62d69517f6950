# Copyright 2026 TinyLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""DFA scanner for the TINY language.

Each call to :meth:`Scanner.get_token` runs the state machine from ``START``
until it reaches ``DONE`` and returns exactly one token. Identifiers and
numbers are scanned by maximal munch with one character of lookahead, which is
handed back to the line buffer when it belongs to the next token. Comments are
skipped inside the same call and never produce a token.

Malformed input never raises: it surfaces as an ``ERROR`` token and scanning
continues with the next call.
"""

import enum
import io
from collections.abc import Iterator
from typing import TextIO

from tinylex.scanner.buffer import DEFAULT_BUFFER_LENGTH, EOF, LineBuffer
from tinylex.scanner.tokens import Token, TokenType, format_token, reserved_lookup, single_char_lookup

# ###############
# Public Interface
# ###############

MAX_TOKEN_LENGTH = 40


class Scanner:
    """Token scanner over a single source stream.

    Every scanner owns its own line buffer and line counter, so any number of
    scanners can run side by side.

    Args:
        source: Readable text stream holding TINY source code.
        listing: Sink for echoed source lines and token traces, or None.
        echo_source: Echo every source line to *listing* as it is read.
        trace_scan: Write one trace line per token to *listing*.
        max_token_length: Maximum number of characters kept in a lexeme.
            Longer identifiers and numbers are still consumed in full.
        buffer_length: Size of the underlying line buffer.
    """

    def __init__(
        self,
        source: TextIO,
        listing: TextIO | None = None,
        *,
        echo_source: bool = False,
        trace_scan: bool = False,
        max_token_length: int = MAX_TOKEN_LENGTH,
        buffer_length: int = DEFAULT_BUFFER_LENGTH,
    ) -> None:
        if max_token_length < 1:
            raise ValueError(f"max_token_length must be at least 1, got {max_token_length}")
        self._buffer = LineBuffer(source, listing, echo=echo_source, buffer_length=buffer_length)
        self._listing = listing
        self._trace = trace_scan
        self._max_token_length = max_token_length

    @property
    def line(self) -> int:
        """Number of physical source lines consumed so far."""
        return self._buffer.line

    def get_token(self) -> Token:
        """Scan and return the next token.

        On return the line buffer is positioned at the first character that is
        not part of the returned token.
        """
        lexeme: list[str] = []
        state = _State.START
        token_type = TokenType.ERROR

        while state != _State.DONE:
            ch = self._buffer.next_char()
            save = True

            if state == _State.START:
                if ch in _DIGITS:
                    state = _State.IN_NUMBER
                elif ch in _LETTERS:
                    state = _State.IN_IDENTIFIER
                elif ch == "{":
                    save = False
                    state = _State.IN_COMMENT
                elif ch in _WHITESPACE:
                    save = False
                elif ch == ":":
                    state = _State.IN_ASSIGN
                elif ch == EOF:
                    save = False
                    state = _State.DONE
                    token_type = TokenType.ENDFILE
                else:
                    state = _State.DONE
                    token_type = single_char_lookup(ch) or TokenType.ERROR

            elif state == _State.IN_COMMENT:
                save = False
                if ch == "}":
                    state = _State.START
                elif ch == EOF:
                    # Unterminated comment: report the opening brace.
                    state = _State.DONE
                    token_type = TokenType.ERROR
                    lexeme.append("{")

            elif state == _State.IN_ASSIGN:
                state = _State.DONE
                if ch == "=":
                    token_type = TokenType.ASSIGN
                else:
                    self._buffer.put_back()
                    save = False
                    token_type = TokenType.ERROR

            elif state == _State.IN_NUMBER:
                if ch not in _DIGITS:
                    self._buffer.put_back()
                    save = False
                    state = _State.DONE
                    token_type = TokenType.NUM

            elif state == _State.IN_IDENTIFIER:
                if ch not in _LETTERS:
                    self._buffer.put_back()
                    save = False
                    state = _State.DONE
                    token_type = TokenType.ID

            if save and len(lexeme) < self._max_token_length:
                lexeme.append(ch)

        value = "".join(lexeme)
        if token_type == TokenType.ID:
            token_type = reserved_lookup(value)

        token = Token(token_type, value, self._buffer.line)
        if self._trace and self._listing is not None:
            self._listing.write(f"\t{token.line}: {format_token(token)}\n")
        return token

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the end-of-file token."""
        while True:
            token = self.get_token()
            yield token
            if token.type == TokenType.ENDFILE:
                return


def tokenize(source: str, max_token_length: int = MAX_TOKEN_LENGTH) -> list[Token]:
    """Tokenize TINY source text held in memory.

    Args:
        source: The full program text.
        max_token_length: Maximum number of characters kept in a lexeme.

    Returns:
        A list of tokens ending with a single ``ENDFILE`` token. Malformed
        input shows up as ``ERROR`` tokens inside the list.
    """
    return list(Scanner(io.StringIO(source), max_token_length=max_token_length))


# ################
# Implementation
# ################


class _State(enum.Enum):
    """States of the scanner DFA."""

    START = enum.auto()
    IN_ASSIGN = enum.auto()
    IN_COMMENT = enum.auto()
    IN_NUMBER = enum.auto()
    IN_IDENTIFIER = enum.auto()
    DONE = enum.auto()


_DIGITS = frozenset("0123456789")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_WHITESPACE = frozenset(" \t\n\r\f\v")
