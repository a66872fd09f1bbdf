"""
Monkey Front End Package

Tokenizer and recursive descent parser for the Monkey programming language.

Architecture:
    monkey/
    ├── lexer/           # Tokenization and lexical analysis
    ├── parser/          # Syntax analysis and AST generation
    ├── repl.py          # Interactive token printer
    └── cli.py           # Command-line front end

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType
from .parser import Parser, ParseResult, parse_string

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "Parser",
    "ParseResult",
    "parse_string",

    # Version info
    "__version__",
    "__license__",
]
