"""Leaf value reconstruction: literals, quoted strings, block and fold scalars."""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any, Callable, List, Mapping

from .errors import StructuralError

LITERALS: Mapping[str, Any] = MappingProxyType(
    {"true": True, "false": False, "null": None, "~": None}
)
EMPTY_COLLECTIONS: Mapping[str, Callable[[], Any]] = MappingProxyType({"[]": list, "{}": dict})

_SIMPLE_ESCAPES: Mapping[str, str] = MappingProxyType(
    {
        "b": "\b",
        "t": "\t",
        "n": "\n",
        "f": "\f",
        "r": "\r",
        "s": " ",
        "e": "\x1b",
        "a": "\a",
        "v": "\v",
        '"': '"',
        "'": "'",
        "\\": "\\",
        "/": "/",
        " ": " ",
        "N": "\x85",
        "_": "\xa0",
        "L": "\u2028",
        "P": "\u2029",
    }
)
_ESCAPE_RE = re.compile(
    r"\\(x[0-9A-Fa-f]{2}|u[0-9A-Fa-f]{4}|U[0-9A-Fa-f]{8}|[0-3][0-7]{0,2}|[4-7][0-7]?|.|\Z)",
    re.DOTALL,
)
_FLOAT_SHAPE_RE = re.compile(r"[-+.0-9eE]+")
_FOLD_BREAKS_RE = re.compile("\n\n| \n")


def literal(text: str) -> Any:
    """Resolve a boolean, null or empty collection literal."""
    factory = EMPTY_COLLECTIONS.get(text)
    if factory is not None:
        return factory()
    return LITERALS.get(text)


def _decode_escape(match: "re.Match[str]") -> str:
    code = match.group(1)
    if not code:
        raise StructuralError("Dangling backslash in quoted scalar")
    if code[0] in "xuU" and len(code) > 1:
        return chr(int(code[1:], 16))
    if code[0] in "01234567":
        return chr(int(code, 8))
    try:
        return _SIMPLE_ESCAPES[code]
    except KeyError:
        raise StructuralError(f"Invalid escape sequence '\\{code}' in quoted scalar") from None


def decode_escapes(text: str) -> str:
    return _ESCAPE_RE.sub(_decode_escape, text)


def unquote(token: str) -> str:
    """Strip the quotes of a quoted scalar and translate its escapes.

    ``''`` collapses to ``'`` in single quoted text; backslash escapes are
    decoded for both quote styles, so unlike standard YAML ``'C:\\temp'`` comes
    back with a tab in it.  Double the backslash to keep it literal.
    """
    quote, inner = token[0], token[1:-1]
    if quote == "'":
        inner = inner.replace("''", "'")
    return decode_escapes(inner)


def _strip_indent(body: str) -> List[str]:
    lines = body.split("\n")
    margin = min((len(line) - len(line.lstrip()) for line in lines if line.strip()), default=0)
    return [line[margin:].rstrip() for line in lines]


def block_scalar(token: str) -> str:
    """Rebuild a ``|`` (literal) or ``>`` (folded) scalar from its captured span.

    The first line of *token* holds the indicator (with optional chomp sign,
    indentation digit and comment); the rest is the indented body.  Unless the
    indicator carries ``-`` the result ends with exactly one newline.

    Blank lines never reach this function: they are dropped while the document
    is prepared, so a blank line inside a ``>`` fold does not turn into a line
    break.  Only more-indented lines break a fold.
    """
    header, _, body = token.partition("\n")
    lines = _strip_indent(body.rstrip())
    if header.startswith("|"):
        text = "\n".join(lines)
    else:
        text = "".join("\n" + line + "\n" if line.startswith(" ") else line + " " for line in lines)
        text = _FOLD_BREAKS_RE.sub("\n", text)
    chomp = "" if header[1:].startswith("-") else "\n"
    return text.rstrip() + chomp


def plain_scalar(text: str) -> Any:
    """Return *text* as a float when it is number shaped, else unchanged."""
    if _FLOAT_SHAPE_RE.fullmatch(text):
        try:
            return float(text)
        except ValueError:
            return text
    return text


def integer(text: str) -> int:
    # arbitrary precision; leading zeros and an explicit sign are accepted
    return int(text)


__all__ = [
    "EMPTY_COLLECTIONS",
    "LITERALS",
    "block_scalar",
    "decode_escapes",
    "integer",
    "literal",
    "plain_scalar",
    "unquote",
]
