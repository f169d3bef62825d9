"""Pattern based scanner turning YAML text into a flat list of tokens.

Every line of the document is prefixed with a single space so indentation and
document markers can be anchored uniformly at the start of a line.  The token
patterns are combined into one alternation and tried in declaration order at
each position, so earlier patterns shadow later ones: a quoted string wins over
a comment marker inside it, a sequence dash wins over a negative number, and so
on.  Document markers, tags, anchors and comments are recognised only so they
are not mistaken for values; they never leave :func:`classify`.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, List, Tuple

from .errors import ClassificationError


class TokenKind(Enum):
    QUOTE = "quote"
    BLOCK = "block"
    FLOW = "flow"
    DOCUMENT = "document"
    TAG = "tag"
    ANCHOR = "anchor"
    COMMENT = "comment"
    DASH = "dash"
    BOOL = "bool"
    NULL = "null"
    EMPTY = "empty"
    INT = "int"
    INDENT = "indent"
    KEY = "key"
    VALUE = "value"


@dataclass(frozen=True)
class Token:
    """A classified span.

    Indent tokens carry only their ``width``; their spaces are rendered on
    demand by :attr:`source`, so synthetic indents stay constant size however
    deep a compact line nests.
    """

    kind: TokenKind
    text: str = ""
    width: int = 0

    @classmethod
    def indent(cls, width: int) -> "Token":
        return cls(TokenKind.INDENT, width=width)

    @property
    def source(self) -> str:
        if self.kind is TokenKind.INDENT:
            return " " * self.width
        return self.text

    def __str__(self) -> str:
        return f"{self.kind.name}={self.source}"


# Order matters: the first alternative matching at a position wins.
TOKEN_PATTERNS: Tuple[Tuple[TokenKind, str], ...] = (
    (TokenKind.QUOTE, r"\"(?:\\\"|.)*?\"|'(?:\\'|.)*?'(?: |$)"),
    (
        TokenKind.BLOCK,
        r"[>|][+-]?\d? *(?:#.*)?\n (?P<block_indent> +).+?\n(?: (?P=block_indent).+?\n)*",
    ),
    (
        TokenKind.FLOW,
        r"[\[{].*?\n (?P<flow_indent> +).+,\n(?: (?P=flow_indent).+,?\n)*(?: +[\]}]\n)?",
    ),
    (TokenKind.DOCUMENT, r"^ (?:%.*|---|\.\.\.)(?: |$)"),
    (TokenKind.TAG, r"!\S*"),
    (TokenKind.ANCHOR, r"&\S+"),
    (TokenKind.COMMENT, r" *#.*$"),
    (TokenKind.DASH, r"-(?: |$)"),
    (TokenKind.BOOL, r"(?:true|false)(?: |$)"),
    (TokenKind.NULL, r"(?:null|~)(?: |$)"),
    (TokenKind.EMPTY, r"\[\]|\{\}"),
    (TokenKind.INT, r"[-+]?\d+(?: |$)"),
    (TokenKind.INDENT, r"^ +"),
    (TokenKind.KEY, r"[^\[{:\n]+:(?: |$)"),
    (TokenKind.VALUE, r"\S[^\n]*?(?= #|$)"),
)

DISCARDED_KINDS: FrozenSet[TokenKind] = frozenset(
    {TokenKind.DOCUMENT, TokenKind.TAG, TokenKind.ANCHOR, TokenKind.COMMENT}
)

_TOKEN_RE = re.compile(
    "|".join(f"(?P<{kind.name}>{pattern})" for kind, pattern in TOKEN_PATTERNS),
    re.MULTILINE | re.ASCII,
)
_LINE_BREAKS_RE = re.compile(r"\r\n?")
_BLANK_LINES_RE = re.compile(r"\n[ \t\n\x0b\f\r]*\n|\n")


def prepare(text: str) -> str:
    """Drop blank lines and prefix every remaining line with one space."""
    text = _LINE_BREAKS_RE.sub("\n", text)
    return " " + _BLANK_LINES_RE.sub("\n ", text).strip() + "\n"


def _matched_kind(match: "re.Match[str]") -> TokenKind:
    for kind, _ in TOKEN_PATTERNS:
        if match.group(kind.name) is not None:
            return kind
    raise AssertionError("token pattern matched without a kind")  # pragma: no cover


def classify(text: str) -> List[Token]:
    """Return the raw token sequence for *text*.

    Raises :class:`ClassificationError` if a non-blank span is left unmatched.
    """
    source = prepare(text)
    tokens: List[Token] = []
    position = 0
    for match in _TOKEN_RE.finditer(source):
        gap = source[position:match.start()]
        if gap.strip():
            raise ClassificationError(gap.strip())
        position = match.end()

        kind = _matched_kind(match)
        if kind in DISCARDED_KINDS:
            continue
        raw = match.group()
        if kind is TokenKind.INDENT:
            tokens.append(Token.indent(len(raw)))
            continue
        value = raw.strip()
        if kind is TokenKind.KEY:
            value = value.split(":", 1)[0].strip()
        tokens.append(Token(kind, value))

    tail = source[position:]
    if tail.strip():
        raise ClassificationError(tail.strip())
    return tokens


__all__ = ["DISCARDED_KINDS", "TOKEN_PATTERNS", "Token", "TokenKind", "classify", "prepare"]
