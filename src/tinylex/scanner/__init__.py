# Copyright 2026 TinyLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line buffer, DFA scanner and token contract for the TINY language."""

from tinylex.scanner.buffer import EOF, LineBuffer
from tinylex.scanner.lexer import MAX_TOKEN_LENGTH, Scanner, tokenize
from tinylex.scanner.tokens import RESERVED_WORDS, Token, TokenType, format_token, reserved_lookup

__all__ = [
    "EOF",
    "LineBuffer",
    "MAX_TOKEN_LENGTH",
    "RESERVED_WORDS",
    "Scanner",
    "Token",
    "TokenType",
    "format_token",
    "reserved_lookup",
    "tokenize",
]
