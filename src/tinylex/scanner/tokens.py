# Copyright 2026 TinyLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token types, the token value object, and the reserved-word table for TINY."""

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the TINY scanner."""

    # Book-keeping
    ENDFILE = "EOF"
    ERROR = "ERROR"

    # Reserved words
    IF = "if"
    THEN = "then"
    ELSE = "else"
    END = "end"
    REPEAT = "repeat"
    UNTIL = "until"
    READ = "read"
    WRITE = "write"

    # Multi-character tokens
    ID = "ID"
    NUM = "NUM"

    # Special symbols
    ASSIGN = ":="
    EQ = "="
    LT = "<"
    PLUS = "+"
    MINUS = "-"
    TIMES = "*"
    OVER = "/"
    LPAREN = "("
    RPAREN = ")"
    SEMI = ";"


@dataclass(frozen=True)
class Token:
    """A lexical token with the line it was scanned on.

    Attributes:
        type: The kind of token.
        value: The lexeme, bounded by the scanner's maximum token length.
            Empty for the end-of-file token.
        line: 1-based source line number at the moment the token was finalized.
    """

    type: TokenType
    value: str
    line: int


RESERVED_WORDS: tuple[tuple[str, TokenType], ...] = (
    ("if", TokenType.IF),
    ("then", TokenType.THEN),
    ("else", TokenType.ELSE),
    ("end", TokenType.END),
    ("repeat", TokenType.REPEAT),
    ("until", TokenType.UNTIL),
    ("read", TokenType.READ),
    ("write", TokenType.WRITE),
)

SINGLE_CHAR_TOKENS: tuple[tuple[str, TokenType], ...] = (
    ("+", TokenType.PLUS),
    ("-", TokenType.MINUS),
    ("*", TokenType.TIMES),
    ("/", TokenType.OVER),
    (";", TokenType.SEMI),
    ("(", TokenType.LPAREN),
    (")", TokenType.RPAREN),
    ("<", TokenType.LT),
    ("=", TokenType.EQ),
)


def reserved_lookup(lexeme: str) -> TokenType:
    """Classify an identifier-shaped lexeme.

    The table is scanned in order and the first exact, case-sensitive match
    wins. Anything else is an ordinary identifier.
    """
    for word, token_type in RESERVED_WORDS:
        if lexeme == word:
            return token_type
    return TokenType.ID


def single_char_lookup(ch: str) -> TokenType | None:
    """Return the token type of a one-character operator, or None."""
    for symbol, token_type in SINGLE_CHAR_TOKENS:
        if ch == symbol:
            return token_type
    return None


def is_reserved(token_type: TokenType) -> bool:
    """Return True if *token_type* is one of the reserved-word kinds."""
    return token_type in _RESERVED_TYPES


def format_token(token: Token) -> str:
    """Render a token the way the TINY compiler listing shows it.

    Examples:
        ``reserved word: if``, ``:=``, ``NUM, val= 12``, ``ID, name= x``,
        ``ERROR: $`` and ``EOF``.
    """
    if is_reserved(token.type):
        return f"reserved word: {token.value}"
    if token.type == TokenType.ENDFILE:
        return "EOF"
    if token.type == TokenType.NUM:
        return f"NUM, val= {token.value}"
    if token.type == TokenType.ID:
        return f"ID, name= {token.value}"
    if token.type == TokenType.ERROR:
        return f"ERROR: {token.value}"
    return token.type.value


# ################
# Implementation
# ################

_RESERVED_TYPES = frozenset(token_type for _, token_type in RESERVED_WORDS)
