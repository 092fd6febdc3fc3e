from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError

from typographer.converters import (
    _INTERNAL_ERROR_MESSAGE,
    _error,
    _format_from_options,
    _request_id_from_request,
    _transformations_out,
)
from typographer.escape import escape_html, escape_tex, nb_spaces_html, nb_spaces_tex
from typographer.formatting.fixer import format_text
from typographer.logging_setup import default_log_dir, ensure_file_logging
from typographer.models import (
    FormatRequest,
    FormatResponse,
    TransformationListResponse,
    TransformRequest,
    TransformResponse,
)
from typographer.transforms import parse_transformations, transform_lines

logger = logging.getLogger(__name__)

MAX_TEXT_CHARS = 2 * 1024 * 1024


@asynccontextmanager
async def _lifespan(_app: FastAPI) -> AsyncIterator[None]:
    log_file = ensure_file_logging(log_dir=default_log_dir())
    logger.info("file logging enabled: %s", log_file)
    yield


app = FastAPI(title="typographer", lifespan=_lifespan)


@app.exception_handler(HTTPException)
async def _http_exception_handler(request: Request, exc: HTTPException):
    return _error(int(exc.status_code), str(exc.detail), request_id=_request_id_from_request(request))


@app.exception_handler(RequestValidationError)
async def _validation_exception_handler(request: Request, exc: RequestValidationError):
    msg = "bad request"
    errors = exc.errors()
    if errors:
        first = errors[0]
        loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        msg = first.get("msg") or msg
        if loc:
            msg = f"{loc}: {msg}"
    return _error(400, msg, request_id=_request_id_from_request(request))


@app.exception_handler(Exception)
async def _unhandled_exception_handler(request: Request, exc: Exception):
    request_id = _request_id_from_request(request)
    logger.exception("unhandled error: request_id=%s", request_id, exc_info=exc)
    return _error(500, _INTERNAL_ERROR_MESSAGE, request_id=request_id)


def _check_size(text: str) -> None:
    if len(text) > MAX_TEXT_CHARS:
        raise HTTPException(status_code=413, detail=f"text too large (> {MAX_TEXT_CHARS} characters)")


@app.get("/healthz")
async def healthz():
    return {"ok": True}


@app.get("/api/v1/transformations", response_model=TransformationListResponse)
async def list_transformations():
    return TransformationListResponse(transformations=_transformations_out())


@app.post("/api/v1/format", response_model=FormatResponse)
def format_endpoint(body: FormatRequest):
    _check_size(body.text)
    config = _format_from_options(body.options)
    result = format_text(body.text, config)

    text = result.text
    if body.output == "tex":
        text = nb_spaces_tex(escape_tex(text))
    elif body.output == "html":
        text = nb_spaces_html(escape_html(text))

    logger.info("format: chars=%d output=%s stats=%s", len(body.text), body.output, result.stats)
    return FormatResponse(text=text, stats=result.stats)


@app.post("/api/v1/transform", response_model=TransformResponse)
def transform_endpoint(body: TransformRequest):
    _check_size(body.text)
    try:
        parse_transformations(body.transformations)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    config = _format_from_options(body.options)
    text = transform_lines(body.text, body.transformations, config)
    logger.info("transform: chars=%d steps=%s", len(body.text), body.transformations)
    return TransformResponse(text=text)
