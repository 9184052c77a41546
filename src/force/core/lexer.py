"""
Lexer/Tokenizer for FORCE schema source.

Converts raw schema text into a stream of tokens with source location tracking.
The stream always ends with a single END token.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .errors import make_parse_error


class TokenType(Enum):
    """Token types in the FORCE schema language."""

    # Literals
    IDENTIFIER = "IDENTIFIER"
    REGEX = "REGEX"

    # Type keywords
    NUMBER = "Number"
    ONE_LINE = "OneLine"
    TEXT = "Text"
    BOND = "Bond"

    # Punctuation
    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"
    COMMA = ","
    STAR = "*"

    # Special
    END = "END"


KEYWORDS = {
    TokenType.NUMBER.value,
    TokenType.ONE_LINE.value,
    TokenType.TEXT.value,
    TokenType.BOND.value,
}

PUNCTUATION = {
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    ",": TokenType.COMMA,
    "*": TokenType.STAR,
}


@dataclass(frozen=True)
class Token:
    """
    A single token in the schema source.

    Equality is structural over ``type`` and ``value`` only, so an expected
    token built with :meth:`of` matches the lexer's token wherever it sits in
    the source. Two IDENTIFIER tokens are equal only when their text matches.

    Attributes:
        type: Type of token
        value: Identifier text, regex pattern, or the fixed spelling
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    type: TokenType
    value: str
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    @classmethod
    def of(cls, token_type: TokenType, line: int = 0, column: int = 0) -> "Token":
        """Build a fixed-spelling token (keyword, punctuation, END)."""
        return cls(token_type, token_type.value, line, column)

    def describe(self) -> str:
        """Short human-readable form used in error messages."""
        if self.type == TokenType.IDENTIFIER:
            return f"identifier {self.value!r}"
        if self.type == TokenType.REGEX:
            return f"regex /{self.value}/"
        if self.type == TokenType.END:
            return "end of input"
        return f"'{self.value}'"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"


# Stand-in used only as the ``expect`` side of identifier errors
IDENTIFIER_PLACEHOLDER = Token(TokenType.IDENTIFIER, "<identifier>")


class Lexer:
    """
    Lexer for FORCE schema source.

    Whitespace is insignificant; ``#`` starts a comment running to end of line.
    """

    def __init__(self, text: str, file: Path):
        """
        Initialize lexer.

        Args:
            text: Source text to tokenize
            file: Source file path (for error reporting)
        """
        self.text = text
        self.file = file
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: list[Token] = []

    def current_char(self) -> str | None:
        """Get current character or None if at end."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def peek_char(self, offset: int = 1) -> str | None:
        """Peek ahead at character."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return None
        return self.text[pos]

    def advance(self) -> None:
        """Move to next character, updating line/column."""
        if self.pos < len(self.text):
            if self.text[self.pos] == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def skip_whitespace(self) -> None:
        """Skip whitespace characters, newlines included."""
        while self.current_char() in (" ", "\t", "\r", "\n"):
            self.advance()

    def skip_comment(self) -> None:
        """Skip comment (from # to end of line)."""
        if self.current_char() == "#":
            while self.current_char() and self.current_char() != "\n":
                self.advance()

    def read_identifier(self) -> str:
        """Read an identifier or keyword."""
        chars = []
        current = self.current_char()
        while current and (current.isalnum() or current == "_"):
            chars.append(current)
            self.advance()
            current = self.current_char()
        return "".join(chars)

    def read_regex(self) -> str:
        """
        Read a /.../ regex literal and return its body.

        ``\\/`` yields a literal slash; every other escape is kept verbatim so
        the pattern reaches the regex engine unchanged.
        """
        start_line = self.line
        start_col = self.column
        self.advance()  # skip opening slash

        chars = []
        while True:
            current = self.current_char()
            if current is None or current == "\n":
                raise make_parse_error(
                    "Unterminated regex literal",
                    self.file,
                    start_line,
                    start_col,
                )
            if current == "/":
                break

            if current == "\\" and self.peek_char() == "/":
                self.advance()
                chars.append("/")
                self.advance()
            elif current == "\\" and self.peek_char() not in (None, "\n"):
                chars.append(current)
                self.advance()
                chars.append(self.current_char() or "")
                self.advance()
            else:
                chars.append(current)
                self.advance()

        self.advance()  # skip closing slash
        return "".join(chars)

    def tokenize(self) -> list[Token]:
        """
        Tokenize the entire source text.

        Returns:
            List of tokens terminated by END

        Raises:
            ParseError: If an unexpected character or unterminated regex is found
        """
        while True:
            self.skip_whitespace()

            ch = self.current_char()
            if ch is None:
                break

            token_line = self.line
            token_col = self.column

            if ch == "#":
                self.skip_comment()

            elif ch.isalpha() or ch == "_":
                value = self.read_identifier()
                if value in KEYWORDS:
                    self.tokens.append(Token.of(TokenType(value), token_line, token_col))
                else:
                    self.tokens.append(
                        Token(TokenType.IDENTIFIER, value, token_line, token_col)
                    )

            elif ch == "/":
                pattern = self.read_regex()
                self.tokens.append(Token(TokenType.REGEX, pattern, token_line, token_col))

            elif ch in PUNCTUATION:
                self.advance()
                self.tokens.append(Token.of(PUNCTUATION[ch], token_line, token_col))

            else:
                raise make_parse_error(
                    f"Unexpected character: {ch!r}",
                    self.file,
                    token_line,
                    token_col,
                )

        self.tokens.append(Token.of(TokenType.END, self.line, self.column))

        return self.tokens


def tokenize(text: str, file: Path) -> list[Token]:
    """
    Convenience function to tokenize schema text.

    Args:
        text: Source text
        file: Source file path

    Returns:
        List of tokens
    """
    lexer = Lexer(text, file)
    return lexer.tokenize()
