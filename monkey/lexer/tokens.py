"""
Token definitions for the Monkey lexer.

This module defines every token type the Monkey lexer can produce:
- Special tokens (end of input, illegal input)
- Identifiers and integer literals
- Keywords
- Operators and punctuation

Author: monkey-py contributors
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Any, Optional


class TokenType(Enum):
    """
    Enumeration of all token types in Monkey.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input
    ILLEGAL = auto()                # Unrecognized character or bad literal

    # ========================================================================
    # Identifiers and Literals
    # ========================================================================
    IDENTIFIER = auto()             # five, add, foo_bar
    INTEGER = auto()                # 5, 838383

    # ========================================================================
    # Keywords
    # ========================================================================
    FUNCTION = auto()               # fn
    LET = auto()                    # let
    IF = auto()                     # if
    ELSE = auto()                   # else
    TRUE = auto()                   # true
    FALSE = auto()                  # false
    RETURN = auto()                 # return

    # ========================================================================
    # Operators
    # ========================================================================
    ASSIGN = auto()                 # =
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    MULTIPLY = auto()               # *
    DIVIDE = auto()                 # /
    BANG = auto()                   # !

    EQUAL = auto()                  # ==
    NOT_EQUAL = auto()              # !=
    LESS_THAN = auto()              # <
    GREATER_THAN = auto()           # >

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    COMMA = auto()                  # ,
    SEMICOLON = auto()              # ;
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and for the token listing printed by the CLI.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Monkey language.

    Two tokens are equal when their type, lexeme and value match; where
    they came from in the source does not take part in the comparison.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any                      # Identifier text or int value, else None
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __str__(self) -> str:
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORDS.values()

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator or punctuation."""
        return self.type in OPERATORS.values()

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENTIFIER


# Lookup tables used by the lexer for keyword/operator recognition

KEYWORDS = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "return": TokenType.RETURN,
}

OPERATORS = {
    # Arithmetic
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "!": TokenType.BANG,

    # Assignment
    "=": TokenType.ASSIGN,

    # Comparison
    "==": TokenType.EQUAL,
    "!=": TokenType.NOT_EQUAL,
    "<": TokenType.LESS_THAN,
    ">": TokenType.GREATER_THAN,

    # Punctuation
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
}

# Integer literals must fit a signed 64-bit integer
INTEGER_MAX = 2 ** 63 - 1
