"""
Top-level FORCE model: categories plus resolved links.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .category import Category


class LinkeeKind(str, Enum):
    """Target of a resolved link."""

    ALL = "all"
    NAME = "name"


class Linkee(BaseModel):
    """
    Target side of a link: every category, or one named category.

    Frozen so it can key the link table.
    """

    kind: LinkeeKind
    name: str | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_name(self) -> Linkee:
        if self.kind == LinkeeKind.NAME and not self.name:
            raise ValueError("A named linkee requires a category name")
        if self.kind == LinkeeKind.ALL and self.name is not None:
            raise ValueError("Linkee 'all' cannot carry a name")
        return self


class Link(BaseModel):
    """
    A resolved bond instance between two categories.

    Attributes:
        from_category: Name of the category the link starts from
        to: Target of the link
    """

    from_category: str
    to: Linkee

    model_config = ConfigDict(frozen=True)

    @property
    def key(self) -> tuple[str, Linkee]:
        return (self.from_category, self.to)


class Force(BaseModel):
    """
    Result of parsing a schema.

    Attributes:
        categories: Categories keyed by name
        links: Resolved links keyed by (from_category, to); empty after parsing
    """

    categories: dict[str, Category] = Field(default_factory=dict)
    links: dict[tuple[str, Linkee], Link] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    def get_category(self, name: str) -> Category | None:
        """Get category by name."""
        return self.categories.get(name)

    @property
    def category_names(self) -> list[str]:
        """Category names in insertion order."""
        return list(self.categories)

    def to_json_dict(self) -> dict[str, object]:
        """
        JSON-friendly view of the model.

        Link keys are tuples, so links are emitted as a list instead of a mapping.
        """
        return {
            "categories": {
                name: category.model_dump(mode="json")
                for name, category in self.categories.items()
            },
            "links": [link.model_dump(mode="json") for link in self.links.values()],
        }
