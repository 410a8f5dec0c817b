"""
TinyScript Lexer Package

Implements the lexical analyzer (tokenizer) for the TinyScript language,
a small C-like scripting language.

Key Features:
- Single-pass, maximal-munch scanning with one character of lookahead
- Static, read-only keyword and operator tables
- Source location tracking on every token
- Error recovery and diagnostics
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS, OPERATORS
from .lexer import Lexer, tokenize, tokenize_string
from .errors import LexerError, InvalidCharacterError, NumericOverflowError, Diagnostic

__all__ = [
    "Lexer",
    "tokenize",
    "tokenize_string",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "OPERATORS",
    "LexerError",
    "InvalidCharacterError",
    "NumericOverflowError",
    "Diagnostic",
]
