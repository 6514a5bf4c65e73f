"""
arithparse Precedence Climbing Parser

Implements a recursive descent parser with precedence climbing for
arithmetic expressions. Tokens are pulled from the tokenizer one at a
time, with a single token of lookahead.

Author: xwest
"""

import logging
from typing import Callable, Dict, Optional, Type
from enum import IntEnum

from ..lexer.tokens import Token, TokenType
from ..lexer.tokenizer import Tokenizer
from ..lexer.errors import TokenizerError
from .ast_nodes import (
    Node, Number, Negative, BinaryOp, Add, Subtract, Multiply, Divide, Power,
    SourceSpan
)
from .errors import (
    EmptyExpressionError, UnmatchedParenthesisError, InvalidExpressionError,
    UnexpectedTokenError, NestingTooDeepError, LexicalError
)

logger = logging.getLogger(__name__)


class OperationPrecedence(IntEnum):
    """Operator precedence levels, lowest first."""
    DEFAULT_ZERO = 0        # anything that is not a binary operator
    ADD_SUBTRACT = 2        # +, -
    MULTIPLY_DIVISION = 3   # *, /
    POWER = 4               # ^
    NEGATIVE = 5            # unary -


class Parser:
    """
    Arithmetic expression parser.

    Owns a tokenizer and the current lookahead token. The first token is
    read on construction, so empty input and a bad first character fail
    before parse() is ever called.
    """

    def __init__(self, expression: str, filename: str = "<string>"):
        """
        Initialize parser with an expression.

        Args:
            expression: Expression text
            filename: Name reported in diagnostics

        Raises:
            EmptyExpressionError: If the expression contains no tokens
            LexicalError: If the first token cannot be read
        """
        self.expression = expression
        self.tokenizer = Tokenizer(expression, filename)
        self.current_token = self._next_token()
        self.previous_token: Optional[Token] = None
        self._result: Optional[Node] = None

        if self.current_token.type == TokenType.END:
            raise EmptyExpressionError(self.current_token.location)

        self._init_parsing_tables()

    def _init_parsing_tables(self):
        """Initialize operator precedence and parsing function tables."""

        # Prefix parsing functions (tokens that can start an operand)
        self.prefix_parsers: Dict[TokenType, Callable[[], Node]] = {
            TokenType.NUMBER: self._parse_number,
            TokenType.SUBTRACT: self._parse_negative,
            TokenType.OPEN_PAREN: self._parse_grouping,
        }

        # Operator precedence table
        self.precedences: Dict[TokenType, OperationPrecedence] = {
            TokenType.ADD: OperationPrecedence.ADD_SUBTRACT,
            TokenType.SUBTRACT: OperationPrecedence.ADD_SUBTRACT,
            TokenType.MULTIPLY: OperationPrecedence.MULTIPLY_DIVISION,
            TokenType.DIVIDE: OperationPrecedence.MULTIPLY_DIVISION,
            TokenType.POWER: OperationPrecedence.POWER,
        }

        # Node built for each binary operator
        self.binary_nodes: Dict[TokenType, Type[BinaryOp]] = {
            TokenType.ADD: Add,
            TokenType.SUBTRACT: Subtract,
            TokenType.MULTIPLY: Multiply,
            TokenType.DIVIDE: Divide,
            TokenType.POWER: Power,
        }

        # Operators whose right operand may contain the same operator again
        self.right_associative = {TokenType.POWER}

    def parse(self) -> Node:
        """
        Parse the expression into an AST.

        Returns:
            Root node of the expression

        Raises:
            ParseError: If parsing fails
        """
        if self._result is not None:
            return self._result

        try:
            root = self._parse_precedence(OperationPrecedence.DEFAULT_ZERO)
        except RecursionError:
            raise NestingTooDeepError(self.current_token.location, self.current_token) from None

        if self.current_token.type == TokenType.CLOSE_PAREN:
            raise UnmatchedParenthesisError(self.current_token.location, self.current_token)
        if self.current_token.type != TokenType.END:
            raise UnexpectedTokenError(self.current_token)

        logger.debug("Parsed %r into %r", self.expression, root)
        self._result = root
        return root

    def _parse_precedence(self, precedence: OperationPrecedence) -> Node:
        """Parse an expression whose operators all bind tighter than `precedence`."""
        left = self._parse_primary()

        while precedence < self._get_precedence(self.current_token.type):
            if self.current_token.type == TokenType.END:
                break
            left = self._parse_binary(left)

        return left

    def _get_precedence(self, token_type: TokenType) -> OperationPrecedence:
        """Get precedence for a token type."""
        return self.precedences.get(token_type, OperationPrecedence.DEFAULT_ZERO)

    def _parse_primary(self) -> Node:
        """Parse a number, a negation or a parenthesized group."""
        prefix_parser = self.prefix_parsers.get(self.current_token.type)
        if prefix_parser is None:
            raise InvalidExpressionError(self.current_token)
        return prefix_parser()

    # Prefix parsers (tokens that can start an operand)

    def _parse_number(self) -> Number:
        token = self._advance()
        return Number(token.value, SourceSpan(token.location, token.location))

    def _parse_negative(self) -> Negative:
        """Parse unary minus; it binds tighter than every binary operator."""
        operator_token = self._advance()

        operand = self._parse_precedence(OperationPrecedence.NEGATIVE)

        return Negative(operand, self._span_from(operator_token))

    def _parse_grouping(self) -> Node:
        """Parse a parenthesized expression, and `(a)(b)` as a product."""
        open_token = self._advance()  # Consume (

        inner = self._parse_precedence(OperationPrecedence.DEFAULT_ZERO)

        if self.current_token.type != TokenType.CLOSE_PAREN:
            raise UnmatchedParenthesisError(self.current_token.location, self.current_token)
        self._advance()  # Consume )

        # Implicit multiplication between adjacent groups
        if self.current_token.type == TokenType.OPEN_PAREN:
            right = self._parse_precedence(OperationPrecedence.MULTIPLY_DIVISION)
            return Multiply(inner, right, self._span_from(open_token))

        return inner

    # Infix parsers

    def _parse_binary(self, left: Node) -> BinaryOp:
        """Parse binary operation."""
        operator_token = self._advance()

        precedence = self._get_precedence(operator_token.type)
        if operator_token.type in self.right_associative:
            # One level lower so the same operator is consumed on the right
            right = self._parse_precedence(OperationPrecedence(precedence - 1))
        else:
            right = self._parse_precedence(precedence)

        node_class = self.binary_nodes[operator_token.type]
        return node_class(left, right, SourceSpan(left.span.start, right.span.end))

    # Utility methods

    def _advance(self) -> Token:
        """Consume and return the current token."""
        self.previous_token = self.current_token
        self.current_token = self._next_token()
        return self.previous_token

    def _next_token(self) -> Token:
        try:
            return self.tokenizer.next_token()
        except TokenizerError as e:
            raise LexicalError(e) from e

    def _span_from(self, start_token: Token) -> SourceSpan:
        return SourceSpan(start_token.location, self.previous_token.location)


def parse_string(source: str, filename: str = "<string>") -> Node:
    """
    Convenience function to parse an expression string.

    Args:
        source: Expression text
        filename: Filename for error reporting

    Returns:
        Root node of the AST

    Raises:
        ParseError: If parsing fails
    """
    return Parser(source, filename).parse()
