"""
arithparse Lexer Package

Implements a character-level tokenizer for arithmetic expressions.

Key Features:
- Lazy, pull-based token stream with an END sentinel
- Number literals with decimal points
- Source location tracking for diagnostics

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation
from .tokenizer import Tokenizer, tokenize_string
from .errors import Diagnostic, TokenizerError, InvalidCharacterError, InvalidNumberError

__all__ = [
    "Tokenizer",
    "tokenize_string",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "TokenizerError",
    "InvalidCharacterError",
    "InvalidNumberError",
]
