from __future__ import annotations

import re
import uuid

from fastapi import Request
from fastapi.responses import JSONResponse

from typographer.formatting.config import TypographyConfig
from typographer.models import ErrorEnvelope, FormatOptions, TransformationOut
from typographer.transforms import DESCRIPTIONS, Transformation

_INTERNAL_ERROR_MESSAGE = "internal server error"

_REQUEST_ID_RE = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def _error_code_for_status(status_code: int) -> str:
    if status_code == 404:
        return "not_found"
    if status_code in {400, 413, 422}:
        return "bad_request"
    return "internal_error"


def _error(status_code: int, message: str, *, request_id: str | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": ErrorEnvelope(
                code=_error_code_for_status(status_code), message=message, request_id=request_id
            ).model_dump()
        },
        headers={"x-request-id": request_id} if request_id else None,
    )


def _request_id_from_request(request: Request) -> str:
    existing = getattr(getattr(request, "state", object()), "request_id", None)
    if isinstance(existing, str) and existing:
        return existing

    incoming = str(request.headers.get("x-request-id", "") or "").strip()
    request_id = incoming if incoming and _REQUEST_ID_RE.fullmatch(incoming) else uuid.uuid4().hex

    request.state.request_id = request_id
    return request_id


def _format_from_options(opts: FormatOptions) -> TypographyConfig:
    return TypographyConfig(
        quotes=bool(opts.quotes),
        ellipsis=bool(opts.ellipsis),
        guillemets=bool(opts.guillemets),
        dashes=bool(opts.dashes),
        threshold_quote=int(opts.threshold_quote),
        french=bool(opts.french),
        threshold_currency=int(opts.threshold_currency),
        threshold_unit=int(opts.threshold_unit),
        threshold_real_word=int(opts.threshold_real_word),
    )


def _transformations_out() -> list[TransformationOut]:
    return [TransformationOut(name=t.value, description=DESCRIPTIONS[t]) for t in Transformation]
