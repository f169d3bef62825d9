"""YAML parsing endpoints."""
from __future__ import annotations

import json
import math
from typing import Any, Dict, List

import structlog
from fastapi import APIRouter, File, Form, HTTPException, UploadFile
from pydantic import ValidationError

from liteyaml import settings
from liteyaml.models.api import (
    ErrorDetail,
    ParseRequest,
    ParseResponse,
    TokenPayload,
    TokensRequest,
    TokensResponse,
)
from liteyaml.yamlparser import NavigationError, ParseError, get, kind_of, parse, tokenize

router = APIRouter(tags=["parse"])
logger = structlog.get_logger("parse")


def _jsonable(value: Any) -> Any:
    """Render non-finite floats as strings so the response stays valid JSON."""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, list):
        return [_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    return value


def _check_size(size: int) -> None:
    if size > settings.MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="Document exceeds size limit")


def _error_detail(exc: Exception) -> Dict[str, str]:
    return ErrorDetail(error=type(exc).__name__, message=str(exc)).model_dump()


def _parse_and_select(request: ParseRequest, endpoint: str) -> ParseResponse:
    size = len(request.text.encode("utf-8"))
    try:
        root = parse(request.text, max_depth=settings.YAML_MAX_DEPTH)
        node = get(root, *request.path)
    except ParseError as exc:
        logger.info("parse.request", endpoint=endpoint, bytes=size, outcome="rejected")
        raise HTTPException(status_code=422, detail=_error_detail(exc)) from exc
    except NavigationError as exc:
        logger.info("parse.request", endpoint=endpoint, bytes=size, outcome="not_found")
        raise HTTPException(status_code=404, detail=_error_detail(exc)) from exc

    logger.info("parse.request", endpoint=endpoint, bytes=size, outcome="ok")
    return ParseResponse(value=_jsonable(node), kind=kind_of(node).value, path=request.path)


@router.post("/parse", response_model=ParseResponse)
def parse_document(payload: ParseRequest) -> ParseResponse:
    _check_size(len(payload.text.encode("utf-8")))
    return _parse_and_select(payload, "parse")


@router.post("/parse-file", response_model=ParseResponse)
async def parse_file(
    document: UploadFile = File(...),
    path: str = Form("[]", description="JSON list of keys and indexes"),
) -> ParseResponse:
    raw = await document.read()
    _check_size(len(raw))
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise HTTPException(status_code=400, detail=f"Document is not valid UTF-8: {exc}") from exc

    try:
        steps = json.loads(path or "[]")
        request = ParseRequest.model_validate({"text": text, "path": steps})
    except (json.JSONDecodeError, ValidationError) as exc:
        raise HTTPException(status_code=400, detail=f"Invalid path: {exc}") from exc

    return _parse_and_select(request, "parse-file")


@router.post("/tokens", response_model=TokensResponse)
def list_tokens(payload: TokensRequest) -> TokensResponse:
    """Expose the normalized token stream for diagnosing parse failures."""
    _check_size(len(payload.text.encode("utf-8")))
    try:
        tokens = tokenize(payload.text, max_depth=settings.YAML_MAX_DEPTH)
    except ParseError as exc:
        raise HTTPException(status_code=422, detail=_error_detail(exc)) from exc
    items: List[TokenPayload] = [
        TokenPayload(kind=token.kind.name, text=token.source) for token in tokens
    ]
    return TokensResponse(tokens=items)
