"""
Token definitions for the TinyScript lexer.

This module defines every token type the scanner can produce:
- Keywords (reserved lowercase words)
- Operators (single and two-character)
- Literals (integers) and identifiers
- Punctuation and delimiters

Only IDENTIFIER and NUMBER tokens carry a value. Everything else is a
payload-free tag.
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union


class TokenType(Enum):
    """
    Enumeration of all token types in TinyScript.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Identifiers and Literals
    # ========================================================================
    IDENTIFIER = auto()             # counter, var123, 123var
    NUMBER = auto()                 # 42

    # ========================================================================
    # Keywords
    # ========================================================================

    # Control flow keywords
    IF = auto()                     # if
    ELSE = auto()                   # else
    ELSEIF = auto()                 # elseif
    WHILE = auto()                  # while
    FOR = auto()                    # for
    BREAK = auto()                  # break
    RETURN = auto()                 # return

    # Data type keywords
    INTEGER = auto()                # int
    STRING = auto()                 # string
    BOOLEAN = auto()                # bool

    # Value keywords
    TRUE = auto()                   # true
    FALSE = auto()                  # false
    NULL = auto()                   # null

    # Declaration keywords
    FUNCTION = auto()               # function
    GLOBAL = auto()                 # global

    # Input/output keywords
    INPUT = auto()                  # input
    PRINT = auto()                  # print

    # Logical keywords
    AND = auto()                    # and
    OR = auto()                     # or
    NOT = auto()                    # not

    # ========================================================================
    # Operators
    # ========================================================================

    # Assignment operators
    ASSIGN = auto()                 # =
    INCREMENT_ASSIGN = auto()       # +=
    DECREMENT_ASSIGN = auto()       # -=

    # Arithmetic operators
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    ASTERISK = auto()               # *
    SLASH = auto()                  # /
    MODULO = auto()                 # %
    EXPONENT = auto()               # **

    # Relational operators
    EQUALITY = auto()               # ==
    LESS_THAN = auto()              # <
    GREATER_THAN = auto()           # >
    LESS_EQUAL = auto()             # <=
    GREATER_EQUAL = auto()          # >=

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    LEFT_BRACKET = auto()           # [
    RIGHT_BRACKET = auto()          # ]

    COMMA = auto()                  # ,
    SEMICOLON = auto()              # ;
    SINGLE_QUOTE = auto()           # '


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and for pointing tooling at the lexeme
    a token was scanned from.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of buffer

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the TinyScript language.

    Two tokens are equal when their type and value match. The lexeme and
    location are kept for diagnostics only and take no part in comparison,
    so `Token(TokenType.PLUS, "+", None, loc_a) == Token(TokenType.PLUS, "+", None, loc_b)`.
    """
    type: TokenType
    lexeme: str = field(compare=False)
    value: Union[str, int, None] = None    # str for IDENTIFIER, int for NUMBER
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.type.name}({self.value!r})"
        return self.type.name

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in {TokenType.NUMBER, TokenType.TRUE, TokenType.FALSE}

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORD_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator or punctuation."""
        return self.type in OPERATOR_TYPES

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENTIFIER


def identifier(name: str, location: Optional[SourceLocation] = None) -> Token:
    """Build an IDENTIFIER token carrying `name` verbatim."""
    return Token(TokenType.IDENTIFIER, name, name, location)


def number(value: int, location: Optional[SourceLocation] = None, lexeme: Optional[str] = None) -> Token:
    """Build a NUMBER token."""
    return Token(TokenType.NUMBER, str(value) if lexeme is None else lexeme, value, location)


def simple(token_type: TokenType, location: Optional[SourceLocation] = None) -> Token:
    """Build a payload-free token, using the canonical spelling as lexeme."""
    return Token(token_type, SPELLINGS.get(token_type, ""), None, location)


# Lookup tables used by the lexer for keyword/operator recognition.
# All of them are read-only views and safe to share between threads.

KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    # Control flow
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "elseif": TokenType.ELSEIF,
    "while": TokenType.WHILE,
    "for": TokenType.FOR,
    "break": TokenType.BREAK,
    "return": TokenType.RETURN,

    # Data types
    "int": TokenType.INTEGER,
    "string": TokenType.STRING,
    "bool": TokenType.BOOLEAN,

    # Values
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "null": TokenType.NULL,

    # Declarations
    "function": TokenType.FUNCTION,
    "global": TokenType.GLOBAL,

    # Input/output
    "input": TokenType.INPUT,
    "print": TokenType.PRINT,

    # Logical
    "and": TokenType.AND,
    "or": TokenType.OR,
    "not": TokenType.NOT,
})

# Punctuation emitted without lookahead
SINGLE_CHAR_TOKENS: Mapping[str, TokenType] = MappingProxyType({
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "'": TokenType.SINGLE_QUOTE,
    "/": TokenType.SLASH,
    "%": TokenType.MODULO,
})

# first char -> (suffix, two-char type, one-char type)
TWO_CHAR_OPERATORS: Mapping[str, Tuple[str, TokenType, TokenType]] = MappingProxyType({
    "-": ("=", TokenType.DECREMENT_ASSIGN, TokenType.MINUS),
    "+": ("=", TokenType.INCREMENT_ASSIGN, TokenType.PLUS),
    "*": ("*", TokenType.EXPONENT, TokenType.ASTERISK),
    "=": ("=", TokenType.EQUALITY, TokenType.ASSIGN),
    "<": ("=", TokenType.LESS_EQUAL, TokenType.LESS_THAN),
    ">": ("=", TokenType.GREATER_EQUAL, TokenType.GREATER_THAN),
})


def _build_operators() -> Mapping[str, TokenType]:
    operators = dict(SINGLE_CHAR_TOKENS)
    for first, (suffix, long_type, short_type) in TWO_CHAR_OPERATORS.items():
        operators[first] = short_type
        operators[first + suffix] = long_type
    return MappingProxyType(operators)


OPERATORS: Mapping[str, TokenType] = _build_operators()

# Canonical spelling of every payload-free token type
SPELLINGS: Mapping[TokenType, str] = MappingProxyType({
    **{token_type: spelling for spelling, token_type in KEYWORDS.items()},
    **{token_type: spelling for spelling, token_type in OPERATORS.items()},
})

KEYWORD_TYPES = frozenset(KEYWORDS.values())
OPERATOR_TYPES = frozenset(OPERATORS.values())

# Whitespace that separates tokens
WHITESPACE = frozenset(" \t\r\n")

COMMENT_START = "#"

# Largest value a NUMBER token may carry (signed 64-bit)
INT64_MAX = 2 ** 63 - 1
