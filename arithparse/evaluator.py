"""
Evaluation of arithparse syntax trees.

The evaluator is a plain visitor over the AST; it is not needed to parse
an expression and the parser never calls it.

Author: xwest
"""

import logging
import math
from typing import Optional, Union

from .lexer.errors import Diagnostic
from .lexer.tokens import SourceLocation
from .parser.ast_nodes import (
    ASTVisitor, Node, BinaryOp, Number, Negative, Add, Subtract, Multiply, Divide, Power
)
from .parser.parser import parse_string

logger = logging.getLogger(__name__)


class EvaluationError(ArithmeticError):
    """
    Exception raised when a well-formed tree has no numeric value.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        node: Node,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.node = node
        self.diagnostic = Diagnostic(
            message=message,
            location=_node_location(node),
            severity="error",
            code=code,
            help_text=help_text
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


def _node_location(node: Node) -> Optional[SourceLocation]:
    if node.span is None:
        return None
    return node.span.start


def _check_overflow(result: float, node: BinaryOp, left: float, right: float) -> float:
    if math.isinf(result) and math.isfinite(left) and math.isfinite(right):
        raise EvaluationError(
            f"{left!r} {node.operator} {right!r} is too large to represent",
            node,
            code="E003"
        )
    return result


class Evaluator(ASTVisitor):
    """
    Computes the float value of an expression tree.

    Every operator raises EvaluationError when finite operands give an
    infinite result; an infinite literal (a number too long to represent)
    propagates as inf.
    """

    def evaluate(self, node: Node) -> float:
        return node.accept(self)

    def visit_number(self, node: Number) -> float:
        return node.value

    def visit_negative(self, node: Negative) -> float:
        return -self.evaluate(node.operand)

    def visit_add(self, node: Add) -> float:
        left = self.evaluate(node.left)
        right = self.evaluate(node.right)
        return _check_overflow(left + right, node, left, right)

    def visit_subtract(self, node: Subtract) -> float:
        left = self.evaluate(node.left)
        right = self.evaluate(node.right)
        return _check_overflow(left - right, node, left, right)

    def visit_multiply(self, node: Multiply) -> float:
        left = self.evaluate(node.left)
        right = self.evaluate(node.right)
        return _check_overflow(left * right, node, left, right)

    def visit_divide(self, node: Divide) -> float:
        dividend = self.evaluate(node.left)
        divisor = self.evaluate(node.right)
        if divisor == 0:
            raise EvaluationError("division by zero", node, code="E001")
        return _check_overflow(dividend / divisor, node, dividend, divisor)

    def visit_power(self, node: Power) -> float:
        base = self.evaluate(node.base)
        exponent = self.evaluate(node.exponent)
        try:
            return math.pow(base, exponent)
        except ValueError:
            raise EvaluationError(
                f"{base!r} ^ {exponent!r} is undefined",
                node,
                code="E002",
                help_text="Negative numbers have no real fractional powers and 0 has no negative powers."
            ) from None
        except OverflowError:
            raise EvaluationError(
                f"{base!r} ^ {exponent!r} is too large to represent",
                node,
                code="E002"
            ) from None


def evaluate(expression: Union[str, Node], filename: str = "<string>") -> float:
    """
    Evaluate an expression string or an already parsed tree.

    Raises:
        ParseError: If the expression string cannot be parsed
        EvaluationError: If the tree has no numeric value
    """
    if isinstance(expression, str):
        node = parse_string(expression, filename)
    else:
        node = expression

    try:
        result = Evaluator().evaluate(node)
    except RecursionError:
        raise EvaluationError(
            "the expression is nested too deeply to be evaluated",
            node,
            code="E004"
        ) from None
    logger.debug("Evaluated %r to %r", node, result)
    return result


# Evaluation error codes for categorization
EVALUATION_ERROR_CODES = {
    "E001": "Division by zero",
    "E002": "Undefined or overflowing power",
    "E003": "Arithmetic overflow",
    "E004": "Nesting too deep",
}
