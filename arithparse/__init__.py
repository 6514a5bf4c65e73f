"""
arithparse Package

Turns arithmetic expressions such as "(1 + 3) * 4" into syntax trees.

Architecture:
    arithparse/
    ├── lexer/           # Tokenization (lazy token stream)
    ├── parser/          # Precedence climbing parser and AST
    ├── evaluator.py     # AST evaluation (visitor)
    └── cli.py           # Command line front end

Author: xwest
License: MIT
"""

from ._version import __version__

__author__ = "xwest"
__license__ = "MIT"

from .lexer import Tokenizer, Token, TokenType, TokenizerError
from .parser import Parser, Node, ParseError, parse_string
from .evaluator import Evaluator, EvaluationError, evaluate

__all__ = [
    # Core classes
    "Tokenizer",
    "Token",
    "TokenType",
    "Parser",
    "Node",
    "Evaluator",

    # Functions
    "parse_string",
    "evaluate",

    # Errors
    "TokenizerError",
    "ParseError",
    "EvaluationError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
