"""
TinyScript Package

The scanning stage of TinyScript, a small C-like scripting language.
Source text goes in, a flat list of tokens comes out; a parser is the
intended consumer of that list.

Architecture:
    tinyscript/
    └── lexer/           # Tokenization and lexical analysis

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, tokenize, Token, TokenType, LexerError

__all__ = [
    # Core API
    "Lexer",
    "tokenize",
    "Token",
    "TokenType",
    "LexerError",

    # Version info
    "__version__",
    "__license__",
]
