"""
Monkey Lexer Package

Implements the lexical analyzer (tokenizer) for the Monkey language.

Key Features:
- Pull-based tokenization, one token per call
- Fixed keyword table and one-character lookahead for '==' and '!='
- Illegal input represented in-band, never raised
- Source location tracking on every token
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "LexerError",
    "tokenize_string",
    "tokenize_file",
]
