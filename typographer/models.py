from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from typographer.formatting.config import DEFAULT_THRESHOLD_QUOTE


class ErrorEnvelope(BaseModel):
    code: str
    message: str
    request_id: str | None = None


class FormatOptions(BaseModel):
    quotes: bool = True
    ellipsis: bool = True
    guillemets: bool = False
    dashes: bool = False
    threshold_quote: int = Field(default=DEFAULT_THRESHOLD_QUOTE, ge=0, le=10_000)
    french: bool = False
    threshold_currency: int = Field(default=3, ge=0, le=64)
    threshold_unit: int = Field(default=2, ge=0, le=64)
    threshold_real_word: int = Field(default=3, ge=0, le=64)


class FormatRequest(BaseModel):
    text: str
    options: FormatOptions = Field(default_factory=FormatOptions)
    output: Literal["text", "tex", "html"] = "text"


class FormatResponse(BaseModel):
    text: str
    stats: dict[str, int] = Field(default_factory=dict)


class TransformRequest(BaseModel):
    text: str
    transformations: list[str] = Field(default_factory=list)
    options: FormatOptions = Field(default_factory=FormatOptions)


class TransformResponse(BaseModel):
    text: str


class TransformationOut(BaseModel):
    name: str
    description: str


class TransformationListResponse(BaseModel):
    transformations: list[TransformationOut]
