from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from .docblock_models import TokenKind


class TokenSchema(BaseModel):
    kind: TokenKind = Field(..., description="Token classification")
    text: str = Field(..., description="Exact text matched for the token")


class ParseRequest(BaseModel):
    text: Optional[str] = Field(default=None, description="Raw doc comment, with or without /** */ delimiters")
    include_tokens: Optional[bool] = Field(
        default=None,
        description="Return the per-line token stream; falls back to the service setting when omitted.",
    )


class ParseResponse(BaseModel):
    tags: dict[str, str] = Field(default_factory=dict, description="Tag name to tag value, last occurrence wins")
    comments: list[str] = Field(default_factory=list, description="Free-form comment lines in source order")
    tokens: Optional[list[list[TokenSchema]]] = Field(
        default=None,
        description="Token groups, one per input line, when requested",
    )


class FileParseResponse(BaseModel):
    filename: str = Field(..., description="Original uploaded file name")
    blocks: list[ParseResponse] = Field(..., description="Parsed doc blocks in file order")


class HealthResponse(BaseModel):
    status: str = Field(..., description="Current API state")
    app: str = Field(..., description="Application name")
    environment: str = Field(..., description="Deployment environment")
