"""Recursive descent over the normalized token stream.

Nesting is tracked with an explicit :class:`IndentStack`.  An indent token
wider than the stack top opens a block, one of equal width separates siblings,
and a narrower one is an *undent*: exactly one level is popped and the token is
left in place, so each enclosing block gets to pop its own level as the call
stack unwinds.
"""
from __future__ import annotations

import logging
from collections import deque
from typing import Any, Deque, Dict, Iterable, List, Optional

from . import scalars
from .errors import ParseError, StructuralError
from .navigate import kind_of
from .normalize import DEFAULT_MAX_DEPTH, normalize
from .tokens import Token, TokenKind, classify

LOGGER = logging.getLogger(__name__)


class IndentStack:
    """Indentation widths of the open blocks, innermost last."""

    def __init__(self) -> None:
        self._widths: List[int] = [0]

    @property
    def top(self) -> int:
        return self._widths[-1]

    def push(self, width: int) -> None:
        self._widths.append(width)

    def pop(self) -> int:
        return self._widths.pop()

    def __len__(self) -> int:
        return len(self._widths)

    def __repr__(self) -> str:
        return f"IndentStack({self._widths!r})"


class StructuralParser:
    def __init__(self, tokens: Iterable[Token], max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self.tokens: Deque[Token] = deque(tokens)
        self.indents = IndentStack()
        self.max_depth = max_depth
        self._depth = 0

    def parse(self) -> Any:
        root = self.parse_value()
        if self.tokens:
            raise StructuralError.leftover(self.tokens)
        return root

    def _peek(self) -> Optional[Token]:
        return self.tokens[0] if self.tokens else None

    def resolve_indent(self) -> bool:
        """Consume or act on a leading indent token; return True on undent."""
        token = self._peek()
        if token is None or token.kind is not TokenKind.INDENT:
            return False
        if token.width > self.indents.top:
            self.indents.push(self.tokens.popleft().width)
            return False
        if token.width == self.indents.top:
            self.tokens.popleft()
            return False
        self.indents.pop()
        return True

    def parse_value(self) -> Any:
        if self._depth >= self.max_depth:
            raise StructuralError(f"Maximum nesting depth of {self.max_depth} exceeded")
        self._depth += 1
        try:
            return self._parse_node()
        finally:
            self._depth -= 1

    def _parse_node(self) -> Any:
        if self.resolve_indent():
            return None
        token = self._peek()
        if token is None:
            return None
        if token.kind is TokenKind.KEY:
            return self._parse_mapping()
        if token.kind is TokenKind.DASH:
            return self._parse_sequence()

        self.tokens.popleft()
        if token.kind in (TokenKind.BOOL, TokenKind.NULL, TokenKind.EMPTY):
            return scalars.literal(token.text)
        if token.kind is TokenKind.QUOTE:
            return scalars.unquote(token.text)
        if token.kind is TokenKind.BLOCK:
            return scalars.block_scalar(token.text)
        if token.kind is TokenKind.INT:
            return scalars.integer(token.text)
        if token.kind is TokenKind.FLOW:
            return token.text
        return scalars.plain_scalar(token.text)

    def _value_is_absent(self) -> bool:
        # nothing on the key's line and the next line is not nested deeper
        token = self._peek()
        if token is None:
            return True
        return token.kind is TokenKind.INDENT and token.width <= self.indents.top

    def _parse_mapping(self) -> Dict[str, Any]:
        mapping: Dict[str, Any] = {}
        while self.tokens and self.tokens[0].kind is TokenKind.KEY:
            key = self.tokens.popleft().text
            mapping[key] = None if self._value_is_absent() else self.parse_value()
            if self.resolve_indent():
                break
        return mapping

    def _at_sibling_dash(self) -> bool:
        if len(self.tokens) < 2:
            return False
        indent, following = self.tokens[0], self.tokens[1]
        return (
            indent.kind is TokenKind.INDENT
            and indent.width == self.indents.top
            and following.kind is TokenKind.DASH
        )

    def _parse_sequence(self) -> List[Any]:
        items: List[Any] = []
        while self.tokens:
            self.tokens.popleft()
            items.append(None if self._at_sibling_dash() else self.parse_value())
            if self.resolve_indent():
                break
            token = self._peek()
            if token is None or token.kind is not TokenKind.DASH:
                break
        return items


def tokenize(text: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> List[Token]:
    """Classify *text* and normalize the result into the parser's input."""
    return list(normalize(classify(text), max_depth=max_depth))


def parse(text: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Any:
    """Parse a YAML subset document into plain Python values.

    Mappings become ``dict`` (insertion ordered, last duplicate key wins),
    sequences ``list``, and leaves ``str``, ``int``, ``float``, ``bool`` or
    ``None``.  Raises :class:`ParseError` subclasses on the first problem found.
    """
    try:
        tokens = normalize(classify(text), max_depth=max_depth)
        token_count = len(tokens)
        root = StructuralParser(tokens, max_depth=max_depth).parse()
    except ParseError as exc:
        LOGGER.debug("yaml.rejected: %s: %s", type(exc).__name__, exc)
        raise
    LOGGER.debug("yaml.parsed: %d tokens, %s", token_count, kind_of(root).value)
    return root


__all__ = ["DEFAULT_MAX_DEPTH", "IndentStack", "StructuralParser", "parse", "tokenize"]
