"""Inspect and walk parsed value trees."""
from __future__ import annotations

from enum import Enum
from typing import Any, Union

from .errors import NavigationError

PathStep = Union[str, int]


class ValueKind(str, Enum):
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    STRING = "string"
    INTEGER = "integer"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    NULL = "null"


def kind_of(value: Any) -> ValueKind:
    """Classify a node of a parsed tree."""
    if value is None:
        return ValueKind.NULL
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.DOUBLE
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.SEQUENCE
    if isinstance(value, dict):
        return ValueKind.MAPPING
    raise TypeError(f"Not a parsed YAML value: {type(value).__name__}")


def get(value: Any, *path: PathStep) -> Any:
    """Follow *path* through *value*.

    String steps key into mappings and integer steps index sequences.  A key
    that is missing yields ``None``, exactly like a key explicitly set to
    ``null`` or ``~``; callers that need to tell the two apart must check the
    mapping themselves.  Indexing out of range, or stepping into anything that
    is not the matching container, raises :class:`NavigationError`.
    """
    current = value
    for depth, step in enumerate(path):
        walked = path[: depth + 1]
        if isinstance(step, int) and not isinstance(step, bool):
            if not isinstance(current, list):
                raise NavigationError(
                    f"Cannot index {kind_of(current).value} with {step!r}", walked, step
                )
            if step < 0:
                raise NavigationError(f"Negative sequence index {step}", walked, step)
            try:
                current = current[step]
            except IndexError as exc:
                raise NavigationError(
                    f"Index {step} out of range for sequence of length {len(current)}", walked, step
                ) from exc
        elif isinstance(step, str):
            if not isinstance(current, dict):
                raise NavigationError(
                    f"Cannot look up key {step!r} in {kind_of(current).value}", walked, step
                )
            current = current.get(step)
        else:
            raise NavigationError(f"Unsupported path step {step!r}", walked, step)
    return current


__all__ = ["PathStep", "ValueKind", "get", "kind_of"]
