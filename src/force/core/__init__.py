"""Core FORCE functionality: IR, lexer, parser, manifest."""

from . import ir
from .errors import (
    ErrorContext,
    ForceError,
    ManifestError,
    NoMeetError,
    NonExpectError,
    ParseError,
)
from .lexer import Token, TokenType, tokenize
from .manifest import ForceManifest, find_manifest, load_manifest
from .parser import load_force, load_forces, merge_forces
from .parser_impl import Parser, parse_force

__all__ = [
    "ir",
    "ForceError",
    "ParseError",
    "NonExpectError",
    "NoMeetError",
    "ManifestError",
    "ErrorContext",
    "Token",
    "TokenType",
    "tokenize",
    "Parser",
    "parse_force",
    "load_force",
    "load_forces",
    "merge_forces",
    "ForceManifest",
    "load_manifest",
    "find_manifest",
]
