"""
arithparse Parser Package

Implements a precedence climbing recursive descent parser for arithmetic
expressions. Produces immutable Abstract Syntax Trees with source spans.

Key Features:
- Precedence climbing with a single token of lookahead
- Right associative exponentiation
- Unary negation and implicit multiplication of parenthesized groups
- Fail-fast error diagnostics

Author: xwest
"""

from .ast_nodes import (
    ASTNodeType, ASTVisitor, SourceSpan, Node, BinaryOp,
    Number, Negative, Add, Subtract, Multiply, Divide, Power
)
from .parser import Parser, OperationPrecedence, parse_string
from .errors import (
    ParseError, EmptyExpressionError, UnmatchedParenthesisError,
    InvalidExpressionError, UnexpectedTokenError, NestingTooDeepError, LexicalError
)

__all__ = [
    # Core parser
    "Parser", "OperationPrecedence", "parse_string",

    # AST nodes
    "ASTNodeType", "ASTVisitor", "SourceSpan", "Node", "BinaryOp",
    "Number", "Negative", "Add", "Subtract", "Multiply", "Divide", "Power",

    # Error handling
    "ParseError", "EmptyExpressionError", "UnmatchedParenthesisError",
    "InvalidExpressionError", "UnexpectedTokenError", "NestingTooDeepError", "LexicalError",
]
