"""
Property-based tests using Hypothesis.

These tests check parser invariants over generated schemas instead of a
handful of hand-written ones.
"""

from pathlib import Path

from hypothesis import given, settings
from hypothesis import strategies as st

from force.core import ir
from force.core.errors import ParseError
from force.core.lexer import KEYWORDS, Lexer, Token, TokenType
from force.core.parser_impl import Parser, parse_force

FILE = Path("test.force")

names = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]{0,11}", fullmatch=True).filter(
    lambda s: s not in KEYWORDS
)

patterns = st.text(
    alphabet=st.characters(blacklist_characters="/\\\n\r", blacklist_categories=("Cs",)),
    max_size=12,
)

bondees = st.one_of(
    st.just(ir.Bondee(kind=ir.BondeeKind.ALL)),
    st.lists(names, min_size=1, max_size=5).map(
        lambda choices: ir.Bondee(kind=ir.BondeeKind.CHOICES, choices=choices)
    ),
)

datatypes = st.one_of(
    st.just(ir.DataType(kind=ir.DataTypeKind.NUMBER)),
    st.just(ir.DataType(kind=ir.DataTypeKind.ONE_LINE)),
    st.builds(
        lambda p: ir.DataType(kind=ir.DataTypeKind.TEXT, pattern=p),
        st.none() | patterns,
    ),
    st.builds(lambda b: ir.DataType(kind=ir.DataTypeKind.BOND, bondee=b), bondees),
)

fields = st.builds(lambda n, d: ir.FieldSpec(name=n, datatype=d), names, datatypes)

categories = st.lists(
    st.builds(
        lambda n, fs: ir.Category(name=n, fields=fs),
        names,
        st.lists(fields, max_size=6),
    ),
    max_size=6,
    unique_by=lambda c: c.name,
)

any_token = st.one_of(
    st.sampled_from(
        [t for t in TokenType if t not in (TokenType.IDENTIFIER, TokenType.REGEX)]
    ).map(Token.of),
    names.map(lambda n: Token(TokenType.IDENTIFIER, n)),
    patterns.map(lambda p: Token(TokenType.REGEX, p)),
)


def datatype_tokens(datatype: ir.DataType) -> list[Token]:
    if datatype.kind == ir.DataTypeKind.NUMBER:
        return [Token.of(TokenType.NUMBER)]
    if datatype.kind == ir.DataTypeKind.ONE_LINE:
        return [Token.of(TokenType.ONE_LINE)]
    if datatype.kind == ir.DataTypeKind.TEXT:
        tokens = [Token.of(TokenType.TEXT)]
        if datatype.pattern is not None:
            tokens.append(Token(TokenType.REGEX, datatype.pattern))
        return tokens

    tokens = [Token.of(TokenType.BOND), Token.of(TokenType.LBRACKET)]
    if datatype.bondee.kind == ir.BondeeKind.ALL:
        tokens.append(Token.of(TokenType.STAR))
    else:
        for i, choice in enumerate(datatype.bondee.choices):
            if i:
                tokens.append(Token.of(TokenType.COMMA))
            tokens.append(Token(TokenType.IDENTIFIER, choice))
    tokens.append(Token.of(TokenType.RBRACKET))
    return tokens


def schema_tokens(declared: list[ir.Category]) -> list[Token]:
    tokens: list[Token] = []
    for category in declared:
        tokens.append(Token(TokenType.IDENTIFIER, category.name))
        tokens.append(Token.of(TokenType.LBRACE))
        for f in category.fields:
            tokens.extend(datatype_tokens(f.datatype))
            tokens.append(Token(TokenType.IDENTIFIER, f.name))
        tokens.append(Token.of(TokenType.RBRACE))
    tokens.append(Token.of(TokenType.END))
    return tokens


def schema_source(declared: list[ir.Category]) -> str:
    lines = []
    for category in declared:
        lines.append(f"{category.name} {{")
        for f in category.fields:
            lines.append(f"  {f.datatype.describe()} {f.name}")
        lines.append("}")
    return "\n".join(lines)


# =============================================================================
# Parser Property Tests
# =============================================================================


class TestParserProperties:
    """Property-based tests for the grammar rules."""

    @given(categories)
    @settings(max_examples=200)
    def test_well_formed_tokens_roundtrip(self, declared: list[ir.Category]) -> None:
        """Invariant: every declared category comes back with its fields in order."""
        force = Parser(schema_tokens(declared), FILE).parse()

        assert force.category_names == [c.name for c in declared]
        for category in declared:
            assert force.categories[category.name].fields == category.fields
        assert force.links == {}

    @given(categories)
    @settings(max_examples=100)
    def test_well_formed_source_roundtrip(self, declared: list[ir.Category]) -> None:
        """Invariant: rendering a schema to text and parsing it gives it back."""
        force = parse_force(schema_source(declared), FILE)

        assert list(force.categories.values()) == declared

    @given(st.lists(names, min_size=1, max_size=10))
    @settings(max_examples=100)
    def test_bondee_choices_keep_order(self, choices: list[str]) -> None:
        """Invariant: [A, B, C] parses to choices A, B, C in that order."""
        bondee = ir.Bondee(kind=ir.BondeeKind.CHOICES, choices=choices)
        tokens = datatype_tokens(ir.DataType(kind=ir.DataTypeKind.BOND, bondee=bondee))
        parser = Parser(tokens + [Token.of(TokenType.END)], FILE)

        assert parser.parse_datatype().bondee.choices == choices
        assert parser.current_token() == Token.of(TokenType.END)

    @given(names, st.lists(fields, max_size=4), st.lists(fields, max_size=4))
    @settings(max_examples=100)
    def test_redeclaration_last_wins(
        self, name: str, first: list[ir.FieldSpec], second: list[ir.FieldSpec]
    ) -> None:
        """Invariant: a repeated category name keeps only the later declaration."""
        declared = [ir.Category(name=name, fields=first), ir.Category(name=name, fields=second)]

        force = Parser(schema_tokens(declared), FILE).parse()

        assert force.category_names == [name]
        assert force.categories[name].fields == second

    @given(st.text(min_size=0, max_size=500))
    @settings(max_examples=300)
    def test_parser_never_crashes_on_arbitrary_text(self, text: str) -> None:
        """Invariant: parse_force never crashes, only raises ParseError."""
        try:
            parse_force(text, FILE)
        except ParseError:
            pass  # Expected for invalid input

    @given(st.text(alphabet=st.sampled_from("AB{}[],*/# \nNumberTextBond"), max_size=200))
    @settings(max_examples=300)
    def test_parser_never_crashes_on_schema_like_text(self, text: str) -> None:
        """Invariant: near-miss schemas fail with ParseError, nothing else."""
        try:
            parse_force(text, FILE)
        except ParseError:
            pass  # Expected for invalid input

    @given(st.lists(any_token, min_size=1, max_size=40))
    @settings(max_examples=300)
    def test_parser_never_crashes_on_arbitrary_tokens(self, tokens: list[Token]) -> None:
        """Invariant: any token list, with or without END, only raises ParseError."""
        try:
            Parser(tokens, FILE).parse()
        except ParseError:
            pass  # Expected for invalid input


# =============================================================================
# Lexer Property Tests
# =============================================================================


class TestLexerProperties:
    """Property-based tests for the lexer."""

    @given(st.text(min_size=0, max_size=1000))
    @settings(max_examples=200)
    def test_lexer_never_crashes_on_arbitrary_input(self, text: str) -> None:
        """Invariant: Lexer never crashes, only raises ParseError."""
        try:
            Lexer(text, FILE).tokenize()
        except ParseError:
            pass  # Expected for invalid input

    @given(st.text(min_size=0, max_size=500))
    @settings(max_examples=100)
    def test_lexer_ends_with_single_end(self, text: str) -> None:
        """Invariant: a successful tokenize ends with exactly one END token."""
        try:
            tokens = Lexer(text, FILE).tokenize()
        except ParseError:
            return
        assert tokens[-1].type == TokenType.END
        assert [t.type for t in tokens].count(TokenType.END) == 1

    @given(st.text(min_size=0, max_size=500))
    @settings(max_examples=100)
    def test_lexer_token_positions_valid(self, text: str) -> None:
        """Invariant: all tokens have line and column numbers of at least 1."""
        try:
            tokens = Lexer(text, FILE).tokenize()
        except ParseError:
            return
        for token in tokens:
            assert token.line >= 1, f"Token {token} has invalid line"
            assert token.column >= 1, f"Token {token} has invalid column"

    @given(patterns)
    @settings(max_examples=100)
    def test_regex_body_preserved(self, pattern: str) -> None:
        """Invariant: a /.../ literal without slashes or backslashes keeps its body."""
        tokens = Lexer(f"/{pattern}/", FILE).tokenize()

        assert tokens[0] == Token(TokenType.REGEX, pattern)
