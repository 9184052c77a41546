"""
FORCE - a small schema language for graph-shaped data.

Categories declare typed fields; Bond fields declare which categories a
relationship may point at.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import ForceError, ManifestError, NoMeetError, NonExpectError, ParseError
from .core.parser_impl import parse_force

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "parse_force",
    "ForceError",
    "ParseError",
    "NonExpectError",
    "NoMeetError",
    "ManifestError",
]
