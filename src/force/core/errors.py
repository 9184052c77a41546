"""
Error types for FORCE schema lexing, parsing, and project configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .lexer import Token


class ForceError(Exception):
    """Base exception for all FORCE errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(ForceError):
    """
    Raised when schema source cannot be tokenized or parsed.

    Examples:
    - Unexpected characters
    - Unterminated regex literals
    - Token stream without an END marker
    """

    pass


class NonExpectError(ParseError):
    """
    Raised when the current token is not the one specific token required.

    Attributes:
        expect: The token the grammar required at this point
        fact: The token actually found
    """

    def __init__(
        self,
        expect: Token,
        fact: Token,
        context: ErrorContext | None = None,
    ):
        self.expect = expect
        self.fact = fact
        super().__init__(f"Expected {expect.describe()}, got {fact.describe()}", context)


class NoMeetError(ParseError):
    """
    Raised when the current token matches none of several acceptable tokens.

    Attributes:
        expect: Human-readable description of the acceptable alternatives
        fact: The token actually found
    """

    def __init__(
        self,
        expect: str,
        fact: Token,
        context: ErrorContext | None = None,
    ):
        self.expect = expect
        self.fact = fact
        super().__init__(f"Expected {expect}, got {fact.describe()}", context)


class ManifestError(ForceError):
    """
    Raised when a force.toml manifest is missing or malformed.

    Examples:
    - No [project] table
    - sources is not a list of strings
    """

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        file: Path to the source file where error occurred
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional source lines around the error location
    """

    file: Path
    line: int
    column: int
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "social.force:10:5"
        """
        location = f"{self.file}:{self.line}:{self.column}"
        if self.snippet:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format code snippet with line numbers and error marker."""
        if not self.snippet:
            return ""

        lines = self.snippet.split("\n")
        formatted = []

        # Snippet starts up to 2 lines before the error
        start_line = max(1, self.line - 2)

        for i, line in enumerate(lines):
            line_num = start_line + i
            prefix = f"{line_num:4d} | "
            formatted.append(prefix + line)

            if line_num == self.line:
                marker_pos = len(prefix) + self.column - 1
                formatted.append(" " * marker_pos + "^^^")

        return "\n".join(formatted)


def extract_snippet(text: str, line: int, radius: int = 2) -> str:
    """
    Cut the lines surrounding ``line`` out of ``text``.

    Args:
        text: Full source text
        line: Line number (1-indexed) of the error
        radius: Number of lines to keep on either side

    Returns:
        The selected lines joined with newlines
    """
    lines = text.split("\n")
    start = max(1, line - radius)
    end = min(len(lines), line + radius)
    return "\n".join(lines[start - 1 : end])


def make_parse_error(
    message: str,
    file: Path,
    line: int,
    column: int,
    snippet: str | None = None,
) -> ParseError:
    """
    Helper to create a ParseError with context.

    Args:
        message: Error description
        file: Source file path
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional code snippet

    Returns:
        ParseError with context attached
    """
    context = ErrorContext(file=file, line=line, column=column, snippet=snippet)
    return ParseError(message, context)


def make_non_expect_error(expect: Token, fact: Token, file: Path) -> NonExpectError:
    """Create a NonExpectError located at the offending token."""
    context = ErrorContext(file=file, line=fact.line, column=fact.column)
    return NonExpectError(expect, fact, context)


def make_no_meet_error(expect: str, fact: Token, file: Path) -> NoMeetError:
    """Create a NoMeetError located at the offending token."""
    context = ErrorContext(file=file, line=fact.line, column=fact.column)
    return NoMeetError(expect, fact, context)


def make_manifest_error(message: str, file: Path | None = None) -> ManifestError:
    """
    Helper to create a ManifestError, naming the manifest file when known.

    Args:
        message: Error description
        file: Optional manifest path

    Returns:
        ManifestError with the file name prefixed to the message
    """
    if file is not None:
        return ManifestError(f"{file}: {message}")
    return ManifestError(message)
