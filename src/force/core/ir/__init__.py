"""
FORCE Intermediate Representation (IR) types.

Types are organized into submodules and re-exported from this package.
"""

# Categories
from .category import (
    Category,
    FieldSpec,
    Linkees,
    LinkeesKind,
)

# Field types
from .datatypes import (
    Bondee,
    BondeeKind,
    DataType,
    DataTypeKind,
)

# Force
from .force import (
    Force,
    Link,
    Linkee,
    LinkeeKind,
)

__all__ = [
    # Field types
    "Bondee",
    "BondeeKind",
    "DataType",
    "DataTypeKind",
    # Categories
    "Category",
    "FieldSpec",
    "Linkees",
    "LinkeesKind",
    # Force
    "Force",
    "Link",
    "Linkee",
    "LinkeeKind",
]
