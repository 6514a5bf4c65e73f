"""
Error handling for the arithparse parser.

Provides error reporting with source location information for syntax
errors. Each failure condition has its own exception class; all of them
derive from ParseError.

Author: xwest
"""

from typing import Optional, List

from ..lexer.tokens import Token, TokenType, SourceLocation
from ..lexer.errors import Diagnostic, TokenizerError


class ParseError(Exception):
    """
    Exception raised when the parser encounters a fatal syntax error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.location = location
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token

    def __str__(self) -> str:
        return str(self.diagnostic)


class EmptyExpressionError(ParseError):
    """The source did not contain a single token."""

    def __init__(self, location: SourceLocation):
        super().__init__(
            message="no tokens could be extracted from the expression",
            location=location,
            code="P010",
            help_text="The expression is empty or contains only whitespace."
        )


class UnmatchedParenthesisError(ParseError):
    """An opening parenthesis was never closed, or a closing one never opened."""

    def __init__(self, location: SourceLocation, token: Optional[Token] = None):
        if token is not None and token.type == TokenType.CLOSE_PAREN:
            suggestions = ["Remove the extra ')'", "Add the matching '('"]
        else:
            suggestions = ["Add a closing parenthesis ')'"]

        super().__init__(
            message="there are unmatched parenthesis in the expression",
            location=location,
            token=token,
            code="P012",
            suggestions=suggestions
        )


class InvalidExpressionError(ParseError):
    """A token that cannot start an operand was found where one was expected."""

    def __init__(self, token: Token):
        if token.type == TokenType.END:
            found = "the end of the expression"
        else:
            found = f"'{token.lexeme}'"

        super().__init__(
            message=f"the expression isn't valid: expected a number, '-' or '(' but found {found}",
            location=token.location,
            token=token,
            code="P005",
            suggestions=["Ensure all operators have operands"]
        )


class UnexpectedTokenError(ParseError):
    """Input remained after a complete expression was parsed."""

    def __init__(self, token: Token):
        help_text = None
        if token.type == TokenType.OPEN_PAREN:
            help_text = "Implicit multiplication is only supported between parenthesized groups, e.g. '(1+2)(3+4)'."

        super().__init__(
            message=f"unexpected '{token.lexeme}' after the end of the expression",
            location=token.location,
            token=token,
            code="P001",
            help_text=help_text,
            suggestions=["Add an operator between the operands"]
        )


class NestingTooDeepError(ParseError):
    """The expression nests deeper than the parser's recursion can follow."""

    def __init__(self, location: SourceLocation, token: Optional[Token] = None):
        super().__init__(
            message="the expression is nested too deeply to be parsed",
            location=location,
            token=token,
            code="P013",
            help_text="Reduce the number of nested parentheses or repeated operators."
        )


class LexicalError(ParseError):
    """A tokenizer error surfaced while parsing."""

    def __init__(self, tokenizer_error: TokenizerError):
        self.tokenizer_error = tokenizer_error
        super().__init__(
            message=tokenizer_error.message,
            location=tokenizer_error.location,
            code=tokenizer_error.diagnostic.code,
            help_text=tokenizer_error.diagnostic.help_text,
            suggestions=tokenizer_error.diagnostic.suggestions
        )


# Parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P005": "Invalid expression",
    "P010": "Empty expression",
    "P012": "Mismatched parentheses",
    "P013": "Nesting too deep",
}
