"""Convenience entry points layered over :func:`parse`."""
from __future__ import annotations

from typing import Any

from .navigate import PathStep, get
from .parser import DEFAULT_MAX_DEPTH, parse


class YamlDocument:
    """A document parsed once on construction and queried with :meth:`get`."""

    def __init__(self, text: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self.root: Any = parse(text, max_depth=max_depth)

    def get(self, *path: PathStep) -> Any:
        return get(self.root, *path)

    def __repr__(self) -> str:
        return f"YamlDocument({self.root!r})"


def safe_load(stream: Any) -> Any:
    """Parse *stream*: a ``str``, UTF-8 ``bytes`` or a file-like object."""
    text = stream.read() if hasattr(stream, "read") else stream
    if isinstance(text, bytes):
        text = text.decode("utf-8")
    if not isinstance(text, str):
        raise TypeError("safe_load expects a string, bytes, or file-like object")
    return parse(text)


__all__ = ["YamlDocument", "safe_load"]
