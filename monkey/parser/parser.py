"""
Monkey Recursive Descent Parser

Builds a Program from the token stream of a Lexer, one statement at a time,
looking at most two tokens ahead. A malformed statement is recorded as a
ParseError and skipped up to the next semicolon; parsing always runs to the
end of the input.
"""

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional

from ..lexer.errors import LexerError
from ..lexer.lexer import Lexer
from ..lexer.tokens import Token, TokenType
from .ast_nodes import Program, Statement, LetStatement, Expression, Identifier, Literal
from .errors import (
    ParseError, SyntaxErrorRecovery, create_unexpected_token_error,
    create_unsupported_statement_error, create_invalid_expression_error
)

logger = logging.getLogger(__name__)


class Precedence(IntEnum):
    """Operator precedence levels for a future Pratt expression parser."""
    LOWEST = 1
    EQUALS = 2          # ==, !=
    LESS_GREATER = 3    # <, >
    SUM = 4             # +, -
    PRODUCT = 5         # *, /
    PREFIX = 6          # -x, !x
    CALL = 7            # f(x)


PRECEDENCES = {
    TokenType.EQUAL: Precedence.EQUALS,
    TokenType.NOT_EQUAL: Precedence.EQUALS,
    TokenType.LESS_THAN: Precedence.LESS_GREATER,
    TokenType.GREATER_THAN: Precedence.LESS_GREATER,
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.MULTIPLY: Precedence.PRODUCT,
    TokenType.DIVIDE: Precedence.PRODUCT,
    TokenType.LEFT_PAREN: Precedence.CALL,
}


def precedence_of(token_type: TokenType) -> Precedence:
    """Binding power of an infix operator; LOWEST for anything else."""
    return PRECEDENCES.get(token_type, Precedence.LOWEST)


@dataclass
class ParseResult:
    """
    Program built by the parser plus every error found on the way.

    ``errors`` holds the syntax errors; ``lexer_errors`` holds what the
    lexer recorded while feeding the parser, such as integer overflow.
    """
    program: Program
    errors: List[ParseError] = field(default_factory=list)
    lexer_errors: List[LexerError] = field(default_factory=list)

    def has_errors(self) -> bool:
        """Check if lexing or parsing found any errors."""
        return len(self.errors) > 0 or len(self.lexer_errors) > 0

    def all_errors(self) -> list:
        """Every diagnostic, lexer errors first."""
        return list(self.lexer_errors) + list(self.errors)


class Parser:
    """
    Monkey recursive descent parser.

    Keeps a two token window over the lexer: ``current_token`` is the token
    being parsed and ``peek_token`` the one after it.
    """

    def __init__(self, lexer: Lexer):
        """
        Initialize the parser and prime the lookahead window.

        Args:
            lexer: Lexer positioned at the start of the input
        """
        self.lexer = lexer
        self.errors: List[ParseError] = []
        self.current_token: Optional[Token] = None
        self.peek_token: Optional[Token] = None

        self.next_token()
        self.next_token()

    def next_token(self):
        """Shift the window one token forward."""
        self.current_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def parse_program(self) -> ParseResult:
        """
        Parse the whole input.

        Returns:
            ParseResult with the statements that parsed cleanly and the
            errors for those that did not, both in source order
        """
        statements = []

        while not self._current_is(TokenType.EOF):
            try:
                statements.append(self.parse_statement())
            except ParseError as e:
                self.errors.append(e)
                logger.debug("%s: %s", e.location, e.message)
                self._synchronize()
            self.next_token()

        return ParseResult(Program(statements), list(self.errors), list(self.lexer.errors))

    def parse_statement(self) -> Statement:
        """Parse the statement starting at the current token."""
        if self._current_is(TokenType.LET):
            return self.parse_let_statement()

        raise create_unsupported_statement_error(self.current_token)

    def parse_let_statement(self) -> LetStatement:
        """
        Parse ``let <identifier> = <expression>;``.

        The trailing semicolon is optional. On return the current token is
        the last token of the statement.
        """
        self._expect_peek(TokenType.IDENTIFIER)
        name = Identifier(self.current_token.value)

        self._expect_peek(TokenType.ASSIGN)

        self.next_token()
        value = self.parse_expression()

        if self._peek_is(TokenType.SEMICOLON):
            self.next_token()

        return LetStatement(name, value)

    def parse_expression(self) -> Expression:
        """Parse the expression starting at the current token."""
        token = self.current_token

        if token.type == TokenType.IDENTIFIER:
            return Identifier(token.value)
        if token.type == TokenType.INTEGER:
            return Literal(token.value)

        raise create_invalid_expression_error(token)

    # Helper methods

    def _current_is(self, token_type: TokenType) -> bool:
        return self.current_token.type == token_type

    def _peek_is(self, token_type: TokenType) -> bool:
        return self.peek_token.type == token_type

    def _expect_peek(self, token_type: TokenType):
        """Consume the peek token if it has the given type, else raise."""
        if not self._peek_is(token_type):
            raise create_unexpected_token_error(token_type, self.peek_token)
        self.next_token()

    def _synchronize(self):
        """Skip forward to the end of the broken statement."""
        skipped = 0
        while self.current_token.type not in SyntaxErrorRecovery.STATEMENT_BOUNDARIES:
            self.next_token()
            skipped += 1

        if skipped:
            logger.debug("skipped %d token(s) to %s", skipped, self.current_token)


def parse_string(source: str, filename: str = "<string>") -> ParseResult:
    """
    Convenience function to parse a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        ParseResult; lexer and syntax errors are reported in it, not raised
    """
    parser = Parser(Lexer(source, filename))
    return parser.parse_program()


def parse_file(filepath: str) -> ParseResult:
    """
    Convenience function to parse a source file.

    Args:
        filepath: Path to source file

    Returns:
        ParseResult for the file's contents

    Raises:
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return parse_string(source, filepath)
