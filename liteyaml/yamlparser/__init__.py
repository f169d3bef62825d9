"""Indentation driven parser for a practical subset of YAML."""
from __future__ import annotations

from .errors import (
    ClassificationError,
    LiteYamlError,
    NavigationError,
    ParseError,
    StructuralError,
)
from .loader import YamlDocument, safe_load
from .navigate import PathStep, ValueKind, get, kind_of
from .parser import DEFAULT_MAX_DEPTH, IndentStack, StructuralParser, parse, tokenize
from .tokens import Token, TokenKind

__all__ = [
    "ClassificationError",
    "DEFAULT_MAX_DEPTH",
    "IndentStack",
    "LiteYamlError",
    "NavigationError",
    "ParseError",
    "PathStep",
    "StructuralError",
    "StructuralParser",
    "Token",
    "TokenKind",
    "ValueKind",
    "YamlDocument",
    "get",
    "kind_of",
    "parse",
    "safe_load",
    "tokenize",
]
