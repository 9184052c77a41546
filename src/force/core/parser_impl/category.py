"""
Category parsing for FORCE schema source.

Handles category blocks and the fields declared inside them.
"""

import logging
from typing import TYPE_CHECKING, Any

from .. import ir
from ..lexer import Token, TokenType

logger = logging.getLogger(__name__)


class CategoryParserMixin:
    """
    Mixin providing category and field parsing.

    Note: This mixin expects to be combined with BaseParser and
    TypeParserMixin via multiple inheritance.
    """

    if TYPE_CHECKING:
        eat: Any
        match: Any
        get_identifier: Any
        parse_datatype: Any
        file: Any

    def parse_categories(self) -> dict[str, ir.Category]:
        """
        Parse categories until END.

        A category whose name was already declared replaces the earlier one.
        """
        categories: dict[str, ir.Category] = {}

        while not self.match(TokenType.END):
            category = self.parse_category()
            if category.name in categories:
                logger.warning(
                    "%s: category %r redeclared; the later declaration wins",
                    self.file,
                    category.name,
                )
            categories[category.name] = category

        return categories

    def parse_category(self) -> ir.Category:
        """
        Parse a category block.

        Grammar:
            IDENTIFIER LBRACE field* RBRACE
        """
        name = self.get_identifier()
        self.eat(Token.of(TokenType.LBRACE))

        fields: list[ir.FieldSpec] = []
        # END stops the loop so an unclosed body reports the missing brace
        while not self.match(TokenType.RBRACE, TokenType.END):
            fields.append(self.parse_field())

        self.eat(Token.of(TokenType.RBRACE))

        logger.debug("Parsed category %s with %d field(s)", name, len(fields))
        return ir.Category(
            name=name,
            fields=fields,
            link_to=ir.Linkees(kind=ir.LinkeesKind.ALL),
        )

    def parse_field(self) -> ir.FieldSpec:
        """
        Parse a field declaration.

        Grammar:
            datatype IDENTIFIER
        """
        datatype = self.parse_datatype()
        name = self.get_identifier()
        return ir.FieldSpec(name=name, datatype=datatype)
