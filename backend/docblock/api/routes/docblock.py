"""Endpoints that expose doc block parsing."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from docblock.api.deps import get_app_settings
from docblock.core.config import Settings
from docblock.docblock_builder import build_parse_response
from docblock.docblock_parser import DocBlock
from docblock.docblock_text import UnsupportedSourceError, decode_payload, load_doc_comments
from docblock.schemas import FileParseResponse, ParseRequest, ParseResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/docblock", tags=["docblock"])


@router.post("/parse", response_model=ParseResponse)
def parse_doc_comment(
    payload: ParseRequest,
    settings: Settings = Depends(get_app_settings),
) -> ParseResponse:
    include_tokens = settings.include_tokens if payload.include_tokens is None else payload.include_tokens
    block = DocBlock.from_text(payload.text)
    return build_parse_response(block, include_tokens=include_tokens)


@router.post("/parse-file", response_model=FileParseResponse)
async def parse_source_file(
    file: UploadFile = File(...),
    include_tokens: bool | None = None,
    settings: Settings = Depends(get_app_settings),
) -> FileParseResponse:
    contents = await file.read()
    if len(contents) > settings.max_upload_bytes:
        raise HTTPException(status_code=413, detail="Uploaded file is too large")
    text = decode_payload(contents)
    if not text.strip():
        raise HTTPException(status_code=400, detail="Uploaded file is empty or unreadable")

    filename = file.filename or "source.txt"
    try:
        comments = load_doc_comments(filename, text, settings.allowed_suffixes)
    except UnsupportedSourceError as exc:
        raise HTTPException(status_code=415, detail=str(exc)) from exc
    except Exception as exc:  # pragma: no cover - defensive logging
        logger.exception("Failed to scan source file '%s'", filename)
        raise HTTPException(status_code=400, detail="Could not process the uploaded file") from exc

    if not comments:
        raise HTTPException(status_code=404, detail="No doc comment blocks found in the file")

    if include_tokens is None:
        include_tokens = settings.include_tokens
    blocks = [
        build_parse_response(DocBlock.from_text(comment), include_tokens=include_tokens)
        for comment in comments
    ]
    return FileParseResponse(filename=filename, blocks=blocks)
