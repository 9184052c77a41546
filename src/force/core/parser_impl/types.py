"""
Type parsing for FORCE schema source.

Handles field type specifications and bond targets.
"""

from typing import TYPE_CHECKING, Any

from .. import ir
from ..errors import make_no_meet_error
from ..lexer import Token, TokenType


class TypeParserMixin:
    """
    Mixin providing data type and bondee parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        advance: Any
        eat: Any
        match: Any
        current_token: Any
        get_identifier: Any
        file: Any

    def parse_datatype(self) -> ir.DataType:
        """
        Parse field type specification.

        Examples:
            Number
            OneLine
            Text
            Text /^[a-z]+$/
            Bond[*]
            Bond[Person, Group]
        """
        token = self.current_token()

        # Number
        if token.type == TokenType.NUMBER:
            self.advance()
            return ir.DataType(kind=ir.DataTypeKind.NUMBER)

        # OneLine
        elif token.type == TokenType.ONE_LINE:
            self.advance()
            return ir.DataType(kind=ir.DataTypeKind.ONE_LINE)

        # Text [/regex/]
        elif token.type == TokenType.TEXT:
            self.advance()
            pattern = None
            if self.match(TokenType.REGEX):
                pattern = self.current_token().value
                self.advance()
            return ir.DataType(kind=ir.DataTypeKind.TEXT, pattern=pattern)

        # Bond[...]
        elif token.type == TokenType.BOND:
            self.advance()
            bondee = self.parse_bondee()
            return ir.DataType(kind=ir.DataTypeKind.BOND, bondee=bondee)

        raise make_no_meet_error("a type", token, self.file)

    def parse_bondee(self) -> ir.Bondee:
        """
        Parse the bracketed target list of a bond.

        Grammar:
            LBRACKET STAR RBRACKET
            LBRACKET IDENTIFIER (COMMA IDENTIFIER)* RBRACKET
        """
        self.eat(Token.of(TokenType.LBRACKET))
        token = self.current_token()

        if token.type == TokenType.STAR:
            self.advance()
            self.eat(Token.of(TokenType.RBRACKET))
            return ir.Bondee(kind=ir.BondeeKind.ALL)

        if token.type == TokenType.IDENTIFIER:
            choices = [token.value]
            self.advance()

            while not self.match(TokenType.RBRACKET):
                self.eat(Token.of(TokenType.COMMA))
                choices.append(self.get_identifier())

            self.eat(Token.of(TokenType.RBRACKET))
            return ir.Bondee(kind=ir.BondeeKind.CHOICES, choices=choices)

        raise make_no_meet_error("* or an identifier", token, self.file)
