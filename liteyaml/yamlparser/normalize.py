"""Make implicit nesting explicit in the raw token stream.

On a compact line such as ``- key: value`` or ``a: b: c`` the second marker
opens a new block without a line break, so no indent token separates it from
the first one.  The pass below synthesizes that indent, widens the indent in
front of a dash by the dash column, and merges indents left adjacent once
comments, tags and anchors have been dropped.

Every synthetic indent opens one more nested value, so a line carrying more of
them than ``max_depth`` is rejected here, before the parser sees it.
"""
from __future__ import annotations

from collections import deque
from typing import Deque, FrozenSet, Iterable, List, Tuple

from .errors import StructuralError
from .tokens import Token, TokenKind

DEFAULT_MAX_DEPTH = 200

_NESTING_PAIRS: FrozenSet[Tuple[TokenKind, TokenKind]] = frozenset(
    {
        (TokenKind.DASH, TokenKind.KEY),
        (TokenKind.DASH, TokenKind.DASH),
        (TokenKind.KEY, TokenKind.KEY),
    }
)


def _span(token: Token) -> int:
    return token.width if token.kind is TokenKind.INDENT else len(token.text)


def normalize(tokens: Iterable[Token], *, max_depth: int = DEFAULT_MAX_DEPTH) -> Deque[Token]:
    out: List[Token] = []
    nested = 0
    for token in tokens:
        previous = out[-1] if out else None
        if previous is None:
            out.append(token)
            continue

        pair = (previous.kind, token.kind)
        if pair in _NESTING_PAIRS:
            nested += 1
            if nested > max_depth:
                raise StructuralError(f"Maximum nesting depth of {max_depth} exceeded")
            base = _span(out[-2]) if len(out) >= 2 else 0
            # a dash right after the new indent widens it, as on a real line
            width = base + 1 + (token.kind is TokenKind.DASH)
            out.append(Token.indent(width))
        elif pair == (TokenKind.INDENT, TokenKind.DASH):
            out[-1] = Token.indent(previous.width + 1)
        elif pair == (TokenKind.INDENT, TokenKind.INDENT):
            continue

        if token.kind is TokenKind.INDENT:
            nested = 0
        out.append(token)
    return deque(out)


__all__ = ["DEFAULT_MAX_DEPTH", "normalize"]
