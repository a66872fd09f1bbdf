"""
Monkey Lexer - turns source text into tokens on demand

The lexer is pull based: every call to ``next_token`` skips whitespace and
returns exactly one token. It never backtracks and never raises; input it
cannot make sense of comes back as an ILLEGAL token, and an integer literal
that overflows is additionally recorded in ``Lexer.errors``.
"""

import logging
from typing import List

from .tokens import Token, TokenType, SourceLocation, KEYWORDS, OPERATORS, INTEGER_MAX
from .errors import LexerError, create_number_overflow_error

logger = logging.getLogger(__name__)

# Marks "no character here" once the cursor has run off the end of the input
END_OF_INPUT = ""

WHITESPACE = frozenset(" \t\n\r")


class Lexer:
    """
    Monkey lexical analyzer.

    Holds the source text and a cursor made of two indices: ``position``
    points at the character in ``ch`` and ``read_position`` at the one after
    it. Both only ever move forward.
    """

    def __init__(self, source: str, filename: str = "<stdin>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.position = 0
        self.read_position = 0
        self.ch = END_OF_INPUT
        self.line = 1
        self.column = 0
        self.errors: List[LexerError] = []

        self._read_char()

    def next_token(self) -> Token:
        """
        Return the next token in the input.

        Once the input is exhausted this keeps returning EOF without moving
        the cursor.
        """
        self._skip_whitespace()

        location = self._location()
        ch = self.ch

        if ch == END_OF_INPUT:
            return Token(TokenType.EOF, "", None, location)

        if ch == '=' or ch == '!':
            if self._peek_char() == '=':
                self._read_char()
                self._read_char()
                lexeme = ch + '='
                return Token(OPERATORS[lexeme], lexeme, None, location)
            self._read_char()
            return Token(OPERATORS[ch], ch, None, location)

        if ch in OPERATORS:
            self._read_char()
            return Token(OPERATORS[ch], ch, None, location)

        if _is_letter(ch):
            return self._read_identifier(location)

        if _is_digit(ch):
            try:
                return self._read_number(location)
            except LexerError as e:
                logger.debug("%s: %s", e.location, e.message)
                self.errors.append(e)
                return Token(TokenType.ILLEGAL, e.lexeme, None, location)

        # Anything else is illegal, but we still step over it
        self._read_char()
        return Token(TokenType.ILLEGAL, ch, None, location)

    def tokenize(self) -> List[Token]:
        """
        Pull every remaining token.

        Returns:
            List of tokens ending with (and including) the first EOF token
        """
        tokens = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                return tokens

    def has_errors(self) -> bool:
        """Check if lexer recorded any errors."""
        return len(self.errors) > 0

    def _read_identifier(self, location: SourceLocation) -> Token:
        """Read a maximal run of letters and look it up in the keyword table."""
        start = self.position
        while _is_letter(self.ch):
            self._read_char()

        lexeme = self.source[start:self.position]
        token_type = KEYWORDS.get(lexeme, TokenType.IDENTIFIER)
        value = lexeme if token_type == TokenType.IDENTIFIER else None
        return Token(token_type, lexeme, value, location)

    def _read_number(self, location: SourceLocation) -> Token:
        """Read a maximal run of decimal digits as an integer literal."""
        start = self.position
        while _is_digit(self.ch):
            self._read_char()

        lexeme = self.source[start:self.position]
        value = int(lexeme)
        if value > INTEGER_MAX:
            raise create_number_overflow_error(lexeme, location)

        return Token(TokenType.INTEGER, lexeme, value, location)

    def _read_char(self):
        """Advance the cursor by one character, updating line/column."""
        if self.ch == '\n':
            self.line += 1
            self.column = 0
        self.column += 1

        if self.read_position >= len(self.source):
            self.ch = END_OF_INPUT
            self.position = len(self.source)
            return

        self.ch = self.source[self.read_position]
        self.position = self.read_position
        self.read_position += 1

    def _peek_char(self) -> str:
        """Peek at the next character without consuming it."""
        if self.read_position >= len(self.source):
            return END_OF_INPUT
        return self.source[self.read_position]

    def _skip_whitespace(self):
        while self.ch in WHITESPACE:
            self._read_char()

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.position)


def _is_letter(ch: str) -> bool:
    return ch == '_' or ('a' <= ch <= 'z') or ('A' <= ch <= 'Z')


def _is_digit(ch: str) -> bool:
    return '0' <= ch <= '9'


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens including the final EOF token
    """
    return Lexer(source, filename).tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens including the final EOF token

    Raises:
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
