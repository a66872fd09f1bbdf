"""
Abstract Syntax Tree node definitions for Monkey.

Nodes are plain data. Equality is structural, so two parses of the same
text compare equal. A Program owns its statements and each statement owns
its expressions; nodes keep no parent links.
"""

from dataclasses import dataclass, field
from typing import List


class ASTNode:
    """Base class for all AST nodes."""
    pass


# ============================================================================
# Expressions
# ============================================================================

class Expression(ASTNode):
    """Base class for expressions."""
    pass


@dataclass(frozen=True)
class Identifier(Expression):
    """A name bound by a let statement or referenced in an expression."""
    name: str


@dataclass(frozen=True)
class Literal(Expression):
    """Integer literal."""
    value: int


# ============================================================================
# Statements
# ============================================================================

class Statement(ASTNode):
    """Base class for statements."""
    pass


@dataclass(frozen=True)
class LetStatement(Statement):
    """``let <name> = <value>;``"""
    name: Identifier
    value: Expression


@dataclass(frozen=True)
class ReturnStatement(Statement):
    """``return <value>;``"""
    value: Expression


@dataclass(frozen=True)
class ExpressionStatement(Statement):
    """An expression used on its own as a statement."""
    expression: Expression


# ============================================================================
# Top-level
# ============================================================================

@dataclass
class Program(ASTNode):
    """Root AST node: the statements of a source text, in source order."""
    statements: List[Statement] = field(default_factory=list)
