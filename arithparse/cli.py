#!/usr/bin/env python3
"""
Command line front end for arithparse.

Evaluates expressions given as arguments, or read line by line from
standard input, and prints the result, the token stream or the syntax tree.

Author: xwest
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from . import __version__
from .evaluator import EvaluationError, evaluate
from .lexer.errors import TokenizerError
from .lexer.tokenizer import Tokenizer
from .lexer.tokens import TokenType
from .parser.errors import ParseError
from .parser.parser import parse_string

logger = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """Render whole numbers without a trailing '.0'."""
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def print_tokens(expression: str, out: TextIO, err: TextIO) -> bool:
    """
    Print every token of an expression, reporting lexical errors as they
    occur and carrying on until END.

    Returns:
        True if no lexical error was found
    """
    print(f"Parsing: {expression}", file=out)
    tokenizer = Tokenizer(expression, "<input>")
    success = True
    while True:
        try:
            token = tokenizer.next_token()
        except TokenizerError as e:
            print(f"- Error: {e.message}", file=err)
            success = False
            continue
        print(f"- Token: {token}", file=out)
        if token.type == TokenType.END:
            return success


def process_expression(expression: str, mode: str, out: TextIO, err: TextIO) -> bool:
    """
    Handle one expression in the selected mode.

    Returns:
        True if the expression was processed without error
    """
    if mode == "tokens":
        return print_tokens(expression, out, err)

    try:
        if mode == "ast":
            tree = parse_string(expression, "<input>")
            try:
                text = repr(tree)
            except RecursionError:
                print("ERROR: the syntax tree is nested too deeply to print", file=err)
                return False
            print(text, file=out)
        else:
            result = evaluate(expression, "<input>")
            print(f"{expression} = {format_number(result)}", file=out)
    except (ParseError, EvaluationError) as e:
        logger.debug("Failed to process %r", expression, exc_info=True)
        print(str(e), file=err, end="")
        return False
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arithparse",
        description="Parse and evaluate arithmetic expressions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    arithparse "(1 + 3) * 4"              # Evaluate an expression
    arithparse --tokens "1 + (3*2) - 2^10" # Show the token stream
    arithparse --ast "-1 + 3 * 4"          # Show the syntax tree
    echo "2^3^2" | arithparse             # Read expressions from stdin
        """
    )

    parser.add_argument('expressions', nargs='*', metavar='expression',
                        help='Expressions to process (read from stdin if omitted)')

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument('--tokens', dest='mode', action='store_const', const='tokens',
                      help='Print the tokens of each expression')
    mode.add_argument('--ast', dest='mode', action='store_const', const='ast',
                      help='Print the syntax tree of each expression')
    parser.set_defaults(mode='evaluate')

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    if args.expressions:
        expressions = args.expressions
    else:
        expressions = (line.strip() for line in sys.stdin if line.strip())

    success = True
    for expression in expressions:
        if not process_expression(expression, args.mode, sys.stdout, sys.stderr):
            success = False

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
