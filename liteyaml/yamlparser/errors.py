"""Exceptions raised by the YAML subset parser."""
from __future__ import annotations

from typing import Iterable, Sequence, Tuple

_SHOWN = 40


class LiteYamlError(Exception):
    """Base class for every error raised by :mod:`liteyaml.yamlparser`."""


class ParseError(LiteYamlError, ValueError):
    """The document could not be turned into a value tree."""


class ClassificationError(ParseError):
    """A span of input matched none of the token patterns."""

    def __init__(self, fragment: str) -> None:
        super().__init__(f"Unrecognised input: {fragment!r}")
        self.fragment = fragment


class StructuralError(ParseError):
    """The token stream does not reduce to exactly one document value."""

    def __init__(self, message: str, remainder: Iterable[object] = ()) -> None:
        super().__init__(message)
        self.remainder: Tuple[object, ...] = tuple(remainder)

    @classmethod
    def leftover(cls, tokens: Iterable[object]) -> "StructuralError":
        remainder = tuple(tokens)
        # only the first 40 characters reach the message
        parts = []
        length = 1
        for token in remainder:
            parts.append(str(token)[:_SHOWN])
            length += len(parts[-1]) + (2 if len(parts) > 1 else 0)
            if length > _SHOWN:
                break
        rendered = "[" + ", ".join(parts) + "]"
        return cls("Expected end of yaml, found: %.40s" % rendered, remainder)


class NavigationError(LiteYamlError, LookupError):
    """A ``get`` path step could not be applied to the value it reached."""

    def __init__(self, message: str, path: Sequence[object], step: object) -> None:
        super().__init__(message)
        self.path = tuple(path)
        self.step = step


__all__ = [
    "ClassificationError",
    "LiteYamlError",
    "NavigationError",
    "ParseError",
    "StructuralError",
]
