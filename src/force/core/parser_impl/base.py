"""
Base parser class for FORCE schema source.

Provides the token cursor used by all parser mixins.
"""

from pathlib import Path

from ..errors import make_non_expect_error, make_parse_error
from ..lexer import IDENTIFIER_PLACEHOLDER, Token, TokenType


class BaseParser:
    """
    Base parser class with token manipulation utilities.

    The cursor is a plain index into a token list the parser never mutates.
    Every grammar rule reads the current token, and only ``advance`` moves
    the cursor.
    """

    def __init__(self, tokens: list[Token], file: Path):
        """
        Initialize parser.

        Args:
            tokens: List of tokens from lexer, ending with END
            file: Source file path (for error reporting)

        Raises:
            ParseError: If the token list is empty
        """
        if not tokens:
            raise make_parse_error("Empty token stream (expected at least END)", file, 1, 1)
        self.tokens = tokens
        self.file = file
        self.pos = 0

    def current_token(self) -> Token:
        """Get current token."""
        return self.tokens[self.pos]

    def advance(self) -> None:
        """
        Move to the next token.

        Raises:
            ParseError: If the cursor is already on the last token
        """
        if self.pos + 1 >= len(self.tokens):
            token = self.current_token()
            raise make_parse_error(
                f"Unexpected end of token stream after {token.describe()}",
                self.file,
                token.line,
                token.column,
            )
        self.pos += 1

    def eat(self, expected: Token) -> None:
        """
        Consume the current token if it equals ``expected``.

        Raises:
            NonExpectError: If the current token differs; the cursor stays put
        """
        token = self.current_token()
        if token != expected:
            raise make_non_expect_error(expected, token, self.file)
        self.advance()

    def get_identifier(self) -> str:
        """
        Consume an identifier and return its text.

        Raises:
            NonExpectError: If the current token is not an identifier
        """
        token = self.current_token()
        if token.type != TokenType.IDENTIFIER:
            raise make_non_expect_error(IDENTIFIER_PLACEHOLDER, token, self.file)
        self.advance()
        return token.value

    def match(self, *token_types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self.current_token().type in token_types
