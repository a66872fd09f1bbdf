"""
Error handling for the Monkey lexer.

Provides diagnostics with source location information. The lexer itself
never raises to its caller: errors are collected on the lexer and the
offending input is handed on as an ILLEGAL token.

Author: monkey-py contributors
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation, INTEGER_MAX


@dataclass
class Diagnostic:
    """Base record for lexer and parser diagnostics (errors, warnings, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Raised inside the lexer when a single token cannot be formed.

    ``Lexer.next_token`` catches it, records it in ``Lexer.errors`` and
    keeps going.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        lexeme: str = "",
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.lexeme = lexeme
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def title(self) -> str:
        """Short name of the error code, e.g. 'Number literal overflow'."""
        return ERROR_CODES.get(self.code, "Lexer error")

    def __str__(self) -> str:
        return str(self.diagnostic)


# Lexer error codes
ERROR_CODES = {
    "L007": "Number literal overflow",
}


def create_number_overflow_error(lexeme: str, location: SourceLocation) -> LexerError:
    """Create an error for an integer literal that does not fit in 64 bits."""
    return LexerError(
        message=f"Integer literal out of range: '{lexeme}'",
        location=location,
        lexeme=lexeme,
        code="L007",
        help_text=f"Integer literals must not exceed {INTEGER_MAX}.",
        suggestions=["Use a smaller integer literal"]
    )
