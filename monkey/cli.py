"""
Command-line front end for the Monkey lexer and parser.

Formats tokens, statements and diagnostics for a terminal. The exit
status is 1 whenever the lexer or the parser reported anything.
"""

import argparse
import logging
import sys

from . import __version__
from .lexer import Lexer
from .parser import parse_string
from . import repl


def _read_source(path: str):
    """Return (source, filename) for a path, with '-' meaning stdin."""
    if path == '-':
        return sys.stdin.read(), "<stdin>"

    with open(path, 'r', encoding='utf-8') as f:
        return f.read(), path


def _print_diagnostics(errors) -> None:
    for error in errors:
        print(f"error[{error.code}]: {error.title}", file=sys.stderr)
        print(str(error), end="", file=sys.stderr)


def run_tokenize(path: str) -> int:
    """Print every token of a file with its location."""
    source, filename = _read_source(path)
    lexer = Lexer(source, filename)

    for token in lexer.tokenize():
        print(f"{token.location}\t{token}")

    _print_diagnostics(lexer.errors)
    return 1 if lexer.has_errors() else 0


def run_parse(path: str) -> int:
    """Parse a file, printing its statements and then any diagnostics."""
    source, filename = _read_source(path)
    result = parse_string(source, filename)

    for statement in result.program.statements:
        print(repr(statement))

    errors = result.all_errors()
    _print_diagnostics(errors)

    if result.has_errors():
        print(f"{len(errors)} error(s) found", file=sys.stderr)
        return 1
    return 0


def main(argv=None):
    """Main entry point for the monkey command."""

    parser = argparse.ArgumentParser(
        prog="monkey",
        description="Monkey language lexer and parser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    monkey                          # Start the interactive prompt
    monkey tokenize program.mky     # List the tokens of a file
    monkey parse program.mky        # Parse a file and report syntax errors
    echo 'let x = 5;' | monkey parse -
        """
    )

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log lexer and parser recovery at DEBUG level')
    parser.add_argument('--version', action='version',
                        version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest='command')
    subparsers.add_parser('repl', help='Start the interactive token printer')

    tokenize_parser = subparsers.add_parser('tokenize', help='Print the tokens of a file')
    tokenize_parser.add_argument('file', nargs='?', default='-',
                                 help="Source file ('-' for stdin)")

    parse_parser = subparsers.add_parser('parse', help='Parse a file and report errors')
    parse_parser.add_argument('file', nargs='?', default='-',
                              help="Source file ('-' for stdin)")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == 'tokenize':
            return run_tokenize(args.file)
        if args.command == 'parse':
            return run_parse(args.file)
        return repl.main()
    except OSError as e:
        print(f"monkey: cannot read {e.filename}: {e.strerror}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
