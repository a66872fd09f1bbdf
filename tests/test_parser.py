"""
Test suite for the Monkey parser.

Tests cover:
- Lookahead window priming
- Let statements and their expressions
- Error collection and resynchronization
- Determinism of the produced AST
"""

import unittest
import sys
import os
import tempfile
import dataclasses

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from monkey.lexer.lexer import Lexer
from monkey.lexer.tokens import Token, TokenType
from monkey.parser.parser import Parser, ParseResult, Precedence, precedence_of, parse_string, parse_file
from monkey.parser.ast_nodes import (
    Program, LetStatement, ReturnStatement, ExpressionStatement, Identifier, Literal
)
from monkey.parser.errors import ParseError, ParseErrorKind


def let(name, value):
    if isinstance(value, int):
        return LetStatement(Identifier(name), Literal(value))
    return LetStatement(Identifier(name), Identifier(value))


class TestParser(unittest.TestCase):
    """Test cases for well-formed input."""

    def test_initialization_primes_lookahead(self):
        parser = Parser(Lexer("\nlet x = 5;\n"))

        self.assertEqual(Token(TokenType.LET, "let", None), parser.current_token)
        self.assertEqual(Token(TokenType.IDENTIFIER, "x", "x"), parser.peek_token)
        self.assertEqual([], parser.errors)

    def test_parse_let_statement(self):
        parser = Parser(Lexer("let x = 5;"))
        statement = parser.parse_let_statement()

        self.assertEqual(let("x", 5), statement)
        self.assertEqual(0, len(parser.errors))
        self.assertEqual(TokenType.SEMICOLON, parser.current_token.type)

    def test_let_statements(self):
        result = parse_string("let x = 5;\nlet y = 10;\nlet foobar = 838383;")

        self.assertFalse(result.has_errors())
        self.assertEqual(
            Program([let("x", 5), let("y", 10), let("foobar", 838383)]),
            result.program
        )

    def test_identifier_expression(self):
        result = parse_string("let a = b;")
        self.assertEqual([let("a", "b")], result.program.statements)

    def test_missing_semicolon_is_tolerated(self):
        result = parse_string("let x = 5\nlet y = x")

        self.assertEqual([], result.errors)
        self.assertEqual([let("x", 5), let("y", "x")], result.program.statements)

    def test_empty_input(self):
        result = parse_string("")
        self.assertEqual(Program([]), result.program)
        self.assertFalse(result.has_errors())

    def test_parse_is_deterministic(self):
        source = "let x = 5;\nlet 7;\nlet y = x;\nreturn 1;"
        first = parse_string(source)
        second = parse_string(source)

        self.assertEqual(first.program, second.program)
        self.assertEqual(
            [(e.kind, e.message, e.code) for e in first.errors],
            [(e.kind, e.message, e.code) for e in second.errors]
        )


class TestParserErrors(unittest.TestCase):
    """Test cases for malformed input and recovery."""

    def test_let_statement_with_errors(self):
        result = parse_string("let x 5;\nlet = 10;\nlet 838383;")

        self.assertEqual([], result.program.statements)
        self.assertEqual(3, len(result.errors))
        self.assertEqual([
            "expected next token to be ASSIGN, got INTEGER('5') instead",
            "expected next token to be IDENTIFIER, got ASSIGN('=') instead",
            "expected next token to be IDENTIFIER, got INTEGER('838383') instead",
        ], [e.message for e in result.errors])
        for error in result.errors:
            self.assertEqual(ParseErrorKind.UNEXPECTED_TOKEN, error.kind)
            self.assertEqual("P001", error.code)

    def test_recovers_at_next_statement(self):
        result = parse_string("let x 5;\nlet y = 10;\nlet = 1;\nlet z = y;")

        self.assertEqual([let("y", 10), let("z", "y")], result.program.statements)
        self.assertEqual(2, len(result.errors))

    def test_unsupported_statement(self):
        result = parse_string("return 5;\nlet a = 1;")

        self.assertEqual([let("a", 1)], result.program.statements)
        self.assertEqual(1, len(result.errors))
        self.assertEqual("P013", result.errors[0].code)
        self.assertEqual(TokenType.RETURN, result.errors[0].token.type)

    def test_unsupported_expression(self):
        result = parse_string("let x = fn;\nlet y = ;\nlet z = 3;")

        self.assertEqual([let("z", 3)], result.program.statements)
        self.assertEqual(["P005", "P005"], [e.code for e in result.errors])
        self.assertEqual(TokenType.FUNCTION, result.errors[0].token.type)
        self.assertEqual(TokenType.SEMICOLON, result.errors[1].token.type)

    def test_garbage_input_still_terminates(self):
        result = parse_string("@@@ let")

        self.assertEqual([], result.program.statements)
        self.assertEqual(1, len(result.errors))
        self.assertEqual(TokenType.ILLEGAL, result.errors[0].token.type)

    def test_overflowing_literal(self):
        lexer = Lexer("let x = 99999999999999999999;\nlet y = 2;")
        result = Parser(lexer).parse_program()

        self.assertEqual([let("y", 2)], result.program.statements)
        self.assertEqual(["P005"], [e.code for e in result.errors])
        self.assertEqual(1, len(lexer.errors))
        self.assertEqual("L007", lexer.errors[0].code)
        self.assertEqual(lexer.errors, result.lexer_errors)

    def test_overflow_reported_by_parse_string(self):
        result = parse_string("let x = 99999999999999999999;")

        self.assertTrue(result.has_errors())
        self.assertEqual(["L007"], [e.code for e in result.lexer_errors])
        self.assertEqual(["P005"], [e.code for e in result.errors])
        self.assertEqual(["L007", "P005"], [e.code for e in result.all_errors()])
        self.assertIn("out of range", str(result.lexer_errors[0]))

    def test_overflow_skipped_during_recovery_is_still_reported(self):
        result = parse_string("let 5 99999999999999999999;\nlet y = 2;")

        self.assertEqual([let("y", 2)], result.program.statements)
        self.assertEqual(["P001"], [e.code for e in result.errors])
        self.assertEqual(["L007"], [e.code for e in result.lexer_errors])

    def test_lexer_errors_alone_reject_input(self):
        lexer = Lexer("99999999999999999999")
        lexer.tokenize()
        result = ParseResult(Program([]), [], list(lexer.errors))

        self.assertTrue(result.has_errors())
        self.assertFalse(ParseResult(Program([])).has_errors())

    def test_errors_accumulate_on_parser(self):
        parser = Parser(Lexer("let 1;\nlet 2;"))
        result = parser.parse_program()

        self.assertEqual(2, len(parser.errors))
        self.assertEqual(parser.errors, result.errors)
        self.assertIsNot(parser.errors, result.errors)

    def test_statement_routines_raise(self):
        parser = Parser(Lexer("let = 5;"))
        with self.assertRaises(ParseError):
            parser.parse_let_statement()
        # Nothing consumed past the let keyword
        self.assertEqual(TokenType.LET, parser.current_token.type)

    def test_error_diagnostic_format(self):
        result = parse_string("let x 5;", "main.mky")
        error = result.errors[0]

        self.assertEqual("main.mky", error.location.filename)
        self.assertEqual((1, 7), (error.location.line, error.location.column))
        text = str(error)
        self.assertTrue(text.startswith("ERROR: Unexpected Token: expected next token to be ASSIGN"))
        self.assertIn("--> main.mky:1:7", text)
        self.assertIn("Add an assignment operator '='", text)
        self.assertIn("UNEXPECTED_TOKEN", repr(error))
        self.assertEqual("Unexpected token", error.title)


class TestPrecedence(unittest.TestCase):
    """Test cases for the precedence scale."""

    def test_ordering(self):
        self.assertLess(Precedence.LOWEST, Precedence.EQUALS)
        self.assertLess(Precedence.EQUALS, Precedence.LESS_GREATER)
        self.assertLess(Precedence.LESS_GREATER, Precedence.SUM)
        self.assertLess(Precedence.SUM, Precedence.PRODUCT)
        self.assertLess(Precedence.PRODUCT, Precedence.PREFIX)
        self.assertLess(Precedence.PREFIX, Precedence.CALL)

    def test_precedence_of(self):
        self.assertEqual(Precedence.EQUALS, precedence_of(TokenType.NOT_EQUAL))
        self.assertEqual(Precedence.SUM, precedence_of(TokenType.MINUS))
        self.assertEqual(Precedence.PRODUCT, precedence_of(TokenType.DIVIDE))
        self.assertEqual(Precedence.CALL, precedence_of(TokenType.LEFT_PAREN))
        self.assertEqual(Precedence.LOWEST, precedence_of(TokenType.SEMICOLON))


class TestASTNodes(unittest.TestCase):
    """Test cases for AST node values."""

    def test_structural_equality(self):
        self.assertEqual(ReturnStatement(Literal(1)), ReturnStatement(Literal(1)))
        self.assertNotEqual(ReturnStatement(Literal(1)), ExpressionStatement(Literal(1)))
        self.assertNotEqual(Identifier("x"), Literal(0))

    def test_nodes_are_immutable(self):
        statement = ExpressionStatement(Identifier("x"))
        with self.assertRaises(dataclasses.FrozenInstanceError):
            statement.expression = Identifier("y")


class TestParseFile(unittest.TestCase):
    """Test cases for parsing from disk."""

    def test_parse_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "program.mky")
            with open(path, 'w', encoding='utf-8') as f:
                f.write("let answer = 42;\nlet = 0;\n")

            result = parse_file(path)

        self.assertEqual([let("answer", 42)], result.program.statements)
        self.assertEqual(1, len(result.errors))
        self.assertEqual(path, result.errors[0].location.filename)


if __name__ == '__main__':
    unittest.main()
