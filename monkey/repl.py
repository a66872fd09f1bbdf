"""
Interactive Monkey prompt.

Reads one line at a time, runs a fresh lexer over it and prints every
token up to the end of the line. The parser is not involved.

On a terminal, lines are read with ``input()`` so that ``readline``
provides editing and history.
"""

import sys
from typing import Callable, TextIO

from .lexer import Lexer, TokenType

PROMPT = ">> "

BANNER = (
    "Hello! This is the Monkey programming language!\n"
    "Feel free to type in commands\n"
)


def run(read_line: Callable[[], str], output_stream: TextIO):
    """
    Run the read-lex-print loop until end of input or Ctrl-C.

    Args:
        read_line: Returns the next line (prompting as needed), '' at end
            of input; may raise KeyboardInterrupt
        output_stream: Where the banner and tokens are written
    """
    output_stream.write(BANNER)

    while True:
        try:
            line = read_line()
        except KeyboardInterrupt:
            output_stream.write("\nCtrl-C\n")
            return

        if not line:
            output_stream.write("\nCtrl-D\n")
            return

        lexer = Lexer(line)
        token = lexer.next_token()
        while token.type != TokenType.EOF:
            output_stream.write(f"{token}\n")
            token = lexer.next_token()


def start(input_stream: TextIO, output_stream: TextIO, prompt: str = PROMPT):
    """Run the loop over plain streams, writing the prompt before each line."""

    def read_line():
        output_stream.write(prompt)
        output_stream.flush()
        return input_stream.readline()

    run(read_line, output_stream)


def start_interactive(output_stream: TextIO, prompt: str = PROMPT):
    """Run the loop on a terminal with readline line editing."""
    import readline  # noqa: F401  (enables editing and history for input())

    def read_line():
        try:
            return input(prompt) + "\n"
        except EOFError:
            return ""

    run(read_line, output_stream)


def main():
    """Entry point for the monkey-repl console script."""
    if sys.stdin.isatty():
        start_interactive(sys.stdout)
    else:
        start(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
