"""
arithparse Tokenizer - turns an expression string into tokens, one at a time

Tokens are pulled on demand. Once the source runs out the tokenizer keeps
handing back END tokens, so callers have to look for END themselves; there
is no StopIteration. A lexical error consumes the offending text, so
tokenizing can resume with the next call.

xwest
"""

from typing import Iterator, List

from .tokens import Token, TokenType, SourceLocation, OPERATORS, DIGITS, NUMBER_CHARS
from .errors import InvalidCharacterError, InvalidNumberError


class Tokenizer:
    """
    Arithmetic expression tokenizer.

    Converts source text into a lazy stream of tokens with a single
    character of lookahead for multi-character number literals.
    """

    def __init__(self, source: str, filename: str = "<string>"):
        """
        Initialize the tokenizer with an expression.

        Args:
            source: Expression text
            filename: Name reported in diagnostics
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        return self.next_token()

    def next_token(self) -> Token:
        """
        Produce the next token.

        Returns:
            The next token, or an END token when the source is exhausted

        Raises:
            InvalidCharacterError: If the next character is not supported
            InvalidNumberError: If a number literal cannot be converted
        """
        self._skip_whitespace()

        location = self._location()

        if self.pos >= len(self.source):
            return Token(TokenType.END, "", None, location)

        current_char = self.source[self.pos]

        if current_char in OPERATORS:
            self._advance()
            return Token(OPERATORS[current_char], current_char, None, location)

        if current_char in DIGITS:
            return self._tokenize_number(location)

        # Consume the bad character so the next call resumes after it
        self._advance()
        raise InvalidCharacterError(current_char, location)

    def tokenize(self) -> List[Token]:
        """
        Tokenize the rest of the source.

        Returns:
            List of tokens ending with the first END token
        """
        tokens = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.type == TokenType.END:
                return tokens

    def _tokenize_number(self, location: SourceLocation) -> Token:
        """Tokenize a number literal starting at the current digit."""
        start_pos = self.pos
        self._advance()

        # Decimal points are not counted here, float() decides what is valid
        while self.pos < len(self.source) and self.source[self.pos] in NUMBER_CHARS:
            self._advance()

        lexeme = self.source[start_pos:self.pos]

        try:
            value = float(lexeme)
        except ValueError:
            raise InvalidNumberError(lexeme, location) from None

        return Token(TokenType.NUMBER, lexeme, value, location)

    def _skip_whitespace(self):
        while self.pos < len(self.source) and self.source[self.pos].isspace():
            self._advance()

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize an expression string.

    Args:
        source: Expression text
        filename: Filename for error reporting

    Returns:
        List of tokens ending with END

    Raises:
        TokenizerError: On the first lexical error
    """
    return Tokenizer(source, filename).tokenize()
