"""
Error handling for the Monkey parser.

Syntax errors are raised inside a single statement routine and caught by
``Parser.parse_program``, which records them and resynchronizes. They
never escape to the caller.
"""

from enum import Enum
from typing import Optional, List, Union

from ..lexer.tokens import Token, TokenType
from ..lexer.errors import Diagnostic


class ParseErrorKind(Enum):
    """Category of a parse error."""
    UNEXPECTED_TOKEN = "Unexpected Token"

    def __str__(self) -> str:
        return self.value


class ParseError(Exception):
    """
    A syntax error found while parsing one statement.

    Carries the error kind, a one-line message, the offending token and a
    full diagnostic for display.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        token: Token,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.token = token
        self.diagnostic = Diagnostic(
            message=f"{kind}: {message}",
            location=token.location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self):
        return self.token.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def title(self) -> str:
        """Short name of the error code, e.g. 'Unexpected token'."""
        return PARSER_ERROR_CODES.get(self.code, str(self.kind))

    def __str__(self) -> str:
        return str(self.diagnostic)

    def __repr__(self) -> str:
        return f"ParseError({self.kind.name}, {self.message!r})"


class SyntaxErrorRecovery:
    """
    Utilities for error recovery in the parser.
    """

    # Token types that end a statement; the parser skips forward to one of
    # these after an error
    STATEMENT_BOUNDARIES = {
        TokenType.SEMICOLON,
        TokenType.EOF,
    }

    @staticmethod
    def suggest_missing_token(expected: TokenType) -> List[str]:
        """Suggest what token might be missing."""
        token_suggestions = {
            TokenType.IDENTIFIER: ["Add a name after 'let'"],
            TokenType.ASSIGN: ["Add an assignment operator '='"],
            TokenType.SEMICOLON: ["Add a semicolon ';' to end the statement"],
        }

        return list(token_suggestions.get(expected, []))


# Parser error codes
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P005": "Invalid expression",
    "P013": "Unsupported statement",
}


# Helper functions for creating common parser errors

def create_unexpected_token_error(expected: Union[TokenType, str], found: Token) -> ParseError:
    """Create an error for a token other than the one the grammar requires next."""
    expected_str = expected.name if isinstance(expected, TokenType) else expected
    suggestions = SyntaxErrorRecovery.suggest_missing_token(expected) if isinstance(expected, TokenType) else []

    return ParseError(
        ParseErrorKind.UNEXPECTED_TOKEN,
        f"expected next token to be {expected_str}, got {found} instead",
        token=found,
        code="P001",
        help_text=f"The parser expected to see {expected_str} at this position.",
        suggestions=suggestions
    )


def create_unsupported_statement_error(found: Token) -> ParseError:
    """Create an error for a token that does not start any known statement."""
    return ParseError(
        ParseErrorKind.UNEXPECTED_TOKEN,
        f"no statement starts with {found}",
        token=found,
        code="P013",
        help_text="Only 'let' statements are supported.",
    )


def create_invalid_expression_error(found: Token) -> ParseError:
    """Create an error for a token that does not start any known expression."""
    return ParseError(
        ParseErrorKind.UNEXPECTED_TOKEN,
        f"no expression starts with {found}",
        token=found,
        code="P005",
        help_text="Expressions are identifiers or integer literals.",
    )
