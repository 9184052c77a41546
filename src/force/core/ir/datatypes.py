"""
Data type definitions for FORCE IR.

This module contains the field type system: scalar kinds, optional text
patterns, and bond targets.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class BondeeKind(str, Enum):
    """Which categories a bond field may target."""

    ALL = "all"
    CHOICES = "choices"


class Bondee(BaseModel):
    """
    Target restriction of a bond field.

    Examples:
        - Bond[*]: Bondee(kind=ALL)
        - Bond[Person, Group]: Bondee(kind=CHOICES, choices=["Person", "Group"])
    """

    kind: BondeeKind
    choices: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_choices(self) -> Bondee:
        """A choices bondee names at least one category; an all bondee names none."""
        if self.kind == BondeeKind.CHOICES and not self.choices:
            raise ValueError("Bondee choices must name at least one category")
        if self.kind == BondeeKind.ALL and self.choices:
            raise ValueError("Bondee 'all' cannot list choices")
        return self

    def allows(self, category: str) -> bool:
        """Check whether a bond may point at the given category."""
        return self.kind == BondeeKind.ALL or category in self.choices


class DataTypeKind(str, Enum):
    """Enumeration of supported field types in FORCE."""

    NUMBER = "number"
    ONE_LINE = "one_line"
    TEXT = "text"
    BOND = "bond"


class DataType(BaseModel):
    """
    Represents a field type specification.

    Examples:
        - Number: DataType(kind=NUMBER)
        - OneLine: DataType(kind=ONE_LINE)
        - Text /^x/: DataType(kind=TEXT, pattern="^x")
        - Bond[*]: DataType(kind=BOND, bondee=Bondee(kind=ALL))
    """

    kind: DataTypeKind
    pattern: str | None = None  # for text
    bondee: Bondee | None = None  # for bond

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_payload(self) -> DataType:
        """Only text carries a pattern and only bond carries a bondee."""
        if self.pattern is not None and self.kind != DataTypeKind.TEXT:
            raise ValueError(f"Only text fields take a pattern, not {self.kind.value}")
        if self.kind == DataTypeKind.BOND and self.bondee is None:
            raise ValueError("Bond fields require a bondee")
        if self.kind != DataTypeKind.BOND and self.bondee is not None:
            raise ValueError(f"Only bond fields take a bondee, not {self.kind.value}")
        return self

    @property
    def is_bond(self) -> bool:
        return self.kind == DataTypeKind.BOND

    def describe(self) -> str:
        """Render the type the way it is written in schema source."""
        if self.kind == DataTypeKind.NUMBER:
            return "Number"
        if self.kind == DataTypeKind.ONE_LINE:
            return "OneLine"
        if self.kind == DataTypeKind.TEXT:
            return f"Text /{self.pattern}/" if self.pattern is not None else "Text"
        if self.bondee is None or self.bondee.kind == BondeeKind.ALL:
            return "Bond[*]"
        return f"Bond[{', '.join(self.bondee.choices)}]"
