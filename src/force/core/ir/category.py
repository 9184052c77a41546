"""
Category model types for FORCE IR.

This module contains field specifications, categories, and the
category-level restriction on incoming bonds.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .datatypes import DataType


class FieldSpec(BaseModel):
    """
    Specification for a single field in a category.

    Attributes:
        name: Field identifier
        datatype: Field type specification
    """

    name: str
    datatype: DataType

    model_config = ConfigDict(frozen=True)


class LinkeesKind(str, Enum):
    """Which categories may bond into a category."""

    ALL = "all"
    NAMES = "names"


class Linkees(BaseModel):
    """
    Categories permitted to bond into a category.

    Parsing always produces ``ALL``; no schema syntax narrows it yet.
    """

    kind: LinkeesKind = LinkeesKind.ALL
    names: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class Category(BaseModel):
    """
    A named node-type declaration.

    Attributes:
        name: Category identifier (unique within a Force)
        fields: Fields in declaration order
        link_to: Categories allowed to bond into this one
    """

    name: str
    fields: list[FieldSpec] = Field(default_factory=list)
    link_to: Linkees = Field(default_factory=Linkees)

    model_config = ConfigDict(frozen=True)

    def get_field(self, name: str) -> FieldSpec | None:
        """Get field by name."""
        for f in self.fields:
            if f.name == name:
                return f
        return None

    @property
    def bond_fields(self) -> list[FieldSpec]:
        """Fields whose type is a bond, in declaration order."""
        return [f for f in self.fields if f.datatype.is_bond]
