"""
Monkey Parser Package

Implements a recursive descent parser for the Monkey language.

Key Features:
- Two-token lookahead over a pull-based lexer
- Structural AST nodes (Program, statements, expressions)
- Per-statement error isolation and resynchronization
- Structured parse errors collected instead of raised
"""

from .ast_nodes import (
    ASTNode, Program, Statement, Expression,
    LetStatement, ReturnStatement, ExpressionStatement,
    Identifier, Literal,
)
from .parser import Parser, ParseResult, Precedence, precedence_of, parse_string, parse_file
from .errors import ParseError, ParseErrorKind

__all__ = [
    # Core parser
    "Parser", "ParseResult", "Precedence", "precedence_of",
    "parse_string", "parse_file",

    # AST nodes
    "ASTNode", "Program", "Statement", "Expression",
    "LetStatement", "ReturnStatement", "ExpressionStatement",
    "Identifier", "Literal",

    # Error handling
    "ParseError", "ParseErrorKind",
]
