"""
Error handling for the arithparse tokenizer.

Provides error reporting with source location information and suggestions
for the characters people most often type by mistake.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for diagnostics (errors, warnings, info)."""
    message: str
    location: Optional[SourceLocation]  # None for nodes built outside the parser
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class TokenizerError(Exception):
    """
    Exception raised when the tokenizer cannot produce the next token.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
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

    def __str__(self) -> str:
        return str(self.diagnostic)


class InvalidCharacterError(TokenizerError):
    """A character that is not part of the expression grammar."""

    def __init__(self, char: str, location: SourceLocation):
        self.char = char
        suggestions = suggest_ascii_alternatives(char)

        if suggestions:
            help_text = f"Did you mean {' or '.join(repr(s) for s in suggestions)}?"
        elif char.isprintable():
            help_text = "Only digits, '.', '+', '-', '*', '/', '^' and parentheses are supported."
        else:
            help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

        super().__init__(
            message=f"found an invalid (or not supported) character '{char}'",
            location=location,
            code="L001",
            help_text=help_text,
            suggestions=suggestions
        )


class InvalidNumberError(TokenizerError):
    """A number literal whose text cannot be converted to a float."""

    def __init__(self, text: str, location: SourceLocation):
        self.text = text
        help_text = None
        if text.count(".") > 1:
            help_text = "A number literal can contain at most one decimal point."

        super().__init__(
            message=f"an error occurred when trying to convert '{text}' into a number",
            location=location,
            code="L003",
            help_text=help_text
        )


# Characters that look like a supported symbol but are not ASCII
_ASCII_ALTERNATIVES = {
    '×': ['*'],
    '⋅': ['*'],
    '·': ['*'],
    '÷': ['/'],
    '−': ['-'],
    '–': ['-'],
    '[': ['('],
    ']': [')'],
    '{': ['('],
    '}': [')'],
    ',': ['.'],
}


def suggest_ascii_alternatives(char: str) -> List[str]:
    """Suggest supported ASCII symbols for a rejected character."""
    return list(_ASCII_ALTERNATIVES.get(char, []))


# Error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
    "L003": "Invalid numeric literal",
}
