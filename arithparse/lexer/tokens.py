"""
Token definitions for the arithparse tokenizer.

This module defines every token type an arithmetic expression can contain:
- Operators (+, -, *, /, ^)
- Grouping (parentheses)
- Number literals
- The END sentinel returned once the source is exhausted

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Optional


class TokenType(Enum):
    """
    Enumeration of all token types in an arithmetic expression.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    END = auto()                    # End of input (returned forever)

    # ========================================================================
    # Literals
    # ========================================================================
    NUMBER = auto()                 # 42, 3.14, 10.0993

    # ========================================================================
    # Operators
    # ========================================================================
    ADD = auto()                    # +
    SUBTRACT = auto()               # - (binary minus or unary negation)
    MULTIPLY = auto()               # *
    DIVIDE = auto()                 # /
    POWER = auto()                  # ^

    # ========================================================================
    # Grouping
    # ========================================================================
    OPEN_PAREN = auto()             # (
    CLOSE_PAREN = auto()            # )


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source expression.

    Used for error reporting and for the spans attached to AST nodes.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of the source

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token of an arithmetic expression.

    Two tokens are equal when their type, lexeme and value match; the
    source location is carried along for diagnostics only.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Optional[float]          # Parsed value, only set for NUMBER
    location: SourceLocation = field(compare=False)

    def __str__(self) -> str:
        if self.type == TokenType.NUMBER:
            return f"{self.type.name}({self.value!r})"
        return self.type.name

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_operator(self) -> bool:
        """Check if this token is an arithmetic operator."""
        return self.type in OPERATOR_TYPES

    @property
    def is_end(self) -> bool:
        return self.type == TokenType.END


# Lookup table for the single-character symbols
OPERATORS = {
    "+": TokenType.ADD,
    "-": TokenType.SUBTRACT,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "^": TokenType.POWER,
    "(": TokenType.OPEN_PAREN,
    ")": TokenType.CLOSE_PAREN,
}

OPERATOR_TYPES = frozenset({
    TokenType.ADD,
    TokenType.SUBTRACT,
    TokenType.MULTIPLY,
    TokenType.DIVIDE,
    TokenType.POWER,
})

DIGITS = frozenset("0123456789")

# Characters allowed inside a number literal after its first digit
NUMBER_CHARS = DIGITS | {"."}
