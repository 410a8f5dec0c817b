"""
TinyScript Lexer - turns source text into tokens

Single forward pass, one character of lookahead. Classification is
decided by the first character of each lexeme; operators are at most
two characters long.
"""

import logging
import string
from typing import List, Optional

from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, SINGLE_CHAR_TOKENS,
    TWO_CHAR_OPERATORS, WHITESPACE, COMMENT_START, INT64_MAX
)
from .errors import (
    LexerError, create_invalid_character_error, create_numeric_overflow_error
)

logger = logging.getLogger(__name__)

LETTERS = frozenset(string.ascii_letters)
DIGITS = frozenset(string.digits)
IDENTIFIER_CHARS = LETTERS | DIGITS | {'_'}
DIGIT_RUN_CHARS = LETTERS | DIGITS


class Lexer:
    """
    TinyScript lexical analyzer.

    Converts source code text into a list of tokens. By default errors are
    collected rather than raised so that a caller can report all of them at
    once; with `recover=False` scanning stops at the first one.
    """

    def __init__(self, source: str, filename: str = "<unknown>", recover: bool = True):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name used in error locations
            recover: Keep scanning past errors instead of raising the first
        """
        self.source = source
        self.filename = filename
        self.recover = recover
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of recognized tokens, in source order. Lexemes that
            produced an error are left out and the error is kept in
            `self.errors`.

        Raises:
            LexerError: On the first error, when `recover` is False
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens = []
        self.errors = []

        while self.pos < len(self.source):
            try:
                token = self._next_token()
                if token:
                    self.tokens.append(token)

            except LexerError as e:
                if not self.recover:
                    raise
                # The offending lexeme is already consumed, keep going
                logger.warning("%s: %s", e.location, e.diagnostic.message)
                self.errors.append(e)

        logger.debug("%s: %d tokens, %d errors", self.filename, len(self.tokens), len(self.errors))
        return self.tokens

    def _next_token(self) -> Optional[Token]:
        """Scan one lexeme at the cursor. Returns None for whitespace and comments."""
        current_char = self.source[self.pos]
        location = self._location()

        if current_char in LETTERS:
            return self._tokenize_identifier_or_keyword(location)

        if current_char in DIGITS:
            return self._tokenize_number(location)

        if current_char in SINGLE_CHAR_TOKENS:
            self._advance()
            return Token(SINGLE_CHAR_TOKENS[current_char], current_char, None, location)

        if current_char in TWO_CHAR_OPERATORS:
            return self._tokenize_operator(location)

        if current_char == COMMENT_START:
            self._skip_comment()
            return None

        if current_char in WHITESPACE:
            self._advance()
            return None

        self._advance()
        raise create_invalid_character_error(current_char, location)

    def _tokenize_identifier_or_keyword(self, location: SourceLocation) -> Token:
        """Tokenize an identifier or keyword."""
        start_pos = self.pos

        while self.pos < len(self.source) and self.source[self.pos] in IDENTIFIER_CHARS:
            self._advance()

        lexeme = self.source[start_pos:self.pos]

        token_type = KEYWORDS.get(lexeme)
        if token_type is not None:
            return Token(token_type, lexeme, None, location)
        return Token(TokenType.IDENTIFIER, lexeme, lexeme, location)

    def _tokenize_number(self, location: SourceLocation) -> Token:
        """
        Tokenize a digit-led run.

        Letters may follow the digits; if any does, the whole run is an
        identifier (`123var`), otherwise it is an integer literal.
        """
        start_pos = self.pos
        has_letter = False

        while self.pos < len(self.source) and self.source[self.pos] in DIGIT_RUN_CHARS:
            if self.source[self.pos] in LETTERS:
                has_letter = True
            self._advance()

        lexeme = self.source[start_pos:self.pos]

        if has_letter:
            return Token(TokenType.IDENTIFIER, lexeme, lexeme, location)

        # Leading zeros are insignificant; past 19 digits it cannot fit
        digits = lexeme.lstrip('0') or '0'
        if len(digits) > len(str(INT64_MAX)) or int(digits) > INT64_MAX:
            raise create_numeric_overflow_error(lexeme, location)
        value = int(digits)

        return Token(TokenType.NUMBER, lexeme, value, location)

    def _tokenize_operator(self, location: SourceLocation) -> Token:
        """Tokenize an operator that may take a second character."""
        first = self.source[self.pos]
        suffix, long_type, short_type = TWO_CHAR_OPERATORS[first]
        self._advance()

        if self._current() == suffix:
            self._advance()
            return Token(long_type, first + suffix, None, location)

        return Token(short_type, first, None, location)

    def _skip_comment(self):
        """Skip a comment up to and including the next newline."""
        while self.pos < len(self.source):
            char = self.source[self.pos]
            self._advance()
            if char == '\n':
                break

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _current(self) -> str:
        """Character at the cursor, or '' at end of input."""
        if self.pos < len(self.source):
            return self.source[self.pos]
        return ''

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0

    def get_diagnostics(self) -> List[LexerError]:
        """Get all collected errors."""
        return list(self.errors)


def tokenize(source: str, filename: str = "<string>") -> List[Token]:
    """
    Tokenize a complete source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        InvalidCharacterError: On a character no token can start with
        NumericOverflowError: On an integer literal above INT64_MAX
    """
    return Lexer(source, filename, recover=False).tokenize()


tokenize_string = tokenize
