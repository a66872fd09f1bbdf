#!/usr/bin/env python3
"""
Main test runner for the Monkey front end.

Runs a quick lexer/parser smoke check and then the unittest suite in tests/.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_check():
    """Lex and parse a small program end to end."""

    print("🐒 Monkey Front End Test Suite")
    print("=" * 60)

    try:
        from monkey.lexer.lexer import Lexer
        from monkey.parser.parser import Parser
        print("✅ Lexer and parser imported successfully")
    except ImportError as e:
        print(f"❌ Failed to import monkey modules: {e}")
        return False

    code = """
    let x = 5;
    let y = 10;
    let foobar = 838383;
    """

    print("  🔧 Lexing...")
    tokens = Lexer(code).tokenize()
    print(f"     Generated {len(tokens)} tokens")

    print("  🔧 Parsing...")
    result = Parser(Lexer(code)).parse_program()
    if result.has_errors():
        print(f"     ❌ Parse errors: {len(result.errors)}")
        for error in result.errors:
            print(f"        {error.message}")
        return False
    print(f"     Generated program with {len(result.program.statements)} statements")

    print("  ❌ Testing error recovery...")
    result = Parser(Lexer("let x 5;\nlet = 10;\nlet 838383;")).parse_program()
    if len(result.errors) != 3:
        print(f"     ❌ Expected 3 errors, got {len(result.errors)}")
        return False
    print(f"     ✅ Recovered from {len(result.errors)} malformed statements")
    print()
    return True


def run_all_tests():
    """Run the smoke check and then every test module under tests/."""
    if not run_smoke_check():
        return False

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    outcome = unittest.TextTestRunner(verbosity=2).run(suite)
    return outcome.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
