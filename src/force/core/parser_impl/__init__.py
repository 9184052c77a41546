"""
FORCE Schema Parser Package.

The parser is built from mixins that separate parsing logic by construct:

- Parser: The complete parser class
- parse_force: Convenience function to tokenize and parse schema text

Usage:
    from force.core.parser_impl import parse_force

    force = parse_force(text, file)
"""

from pathlib import Path

from .. import ir
from ..lexer import tokenize
from .base import BaseParser
from .category import CategoryParserMixin
from .types import TypeParserMixin


class Parser(
    BaseParser,
    TypeParserMixin,
    CategoryParserMixin,
):
    """
    Complete FORCE schema parser.

    - TypeParserMixin: Field types and bond targets
    - CategoryParserMixin: Category blocks and their fields

    A Parser is built for one token list and parsed once.
    """

    def parse(self) -> ir.Force:
        """
        Parse the whole token stream.

        Returns:
            Force with every declared category and an empty link table
        """
        categories = self.parse_categories()
        return ir.Force(categories=categories, links={})


def parse_force(text: str, file: Path) -> ir.Force:
    """
    Parse complete schema source.

    Args:
        text: Schema source text
        file: Source file path

    Returns:
        The parsed Force
    """
    tokens = tokenize(text, file)
    parser = Parser(tokens, file)
    return parser.parse()


__all__ = [
    "Parser",
    "parse_force",
    "BaseParser",
    "TypeParserMixin",
    "CategoryParserMixin",
]
