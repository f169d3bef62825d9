"""Pydantic models for the parsing API."""
from __future__ import annotations

from typing import Any, List, Literal, Union

from pydantic import BaseModel, Field

ValueKindName = Literal["mapping", "sequence", "string", "integer", "double", "boolean", "null"]
PathStepModel = Union[int, str]


class ParseRequest(BaseModel):
    """A YAML document submitted for parsing."""

    text: str = Field(..., description="YAML document text")
    path: List[PathStepModel] = Field(
        default_factory=list,
        description="Keys and 0-based indexes selecting the node to return",
    )


class TokensRequest(BaseModel):
    text: str = Field(..., description="YAML document text")


class ParseResponse(BaseModel):
    """Node selected from the parsed document."""

    value: Any = None
    kind: ValueKindName
    path: List[PathStepModel] = Field(default_factory=list)


class TokenPayload(BaseModel):
    kind: str
    text: str


class TokensResponse(BaseModel):
    """Normalized token stream, as fed to the structural parser."""

    tokens: List[TokenPayload]


class ErrorDetail(BaseModel):
    error: str
    message: str


__all__ = [
    "ErrorDetail",
    "ParseRequest",
    "ParseResponse",
    "PathStepModel",
    "TokenPayload",
    "TokensRequest",
    "TokensResponse",
    "ValueKindName",
]
