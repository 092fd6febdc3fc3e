from __future__ import annotations

import json

import pytest

from typographer.converters import _error, _error_code_for_status, _format_from_options
from typographer.formatting.config import TypographyConfig
from typographer.models import FormatOptions


@pytest.mark.parametrize(
    ("status", "code"),
    [(400, "bad_request"), (413, "bad_request"), (422, "bad_request"), (404, "not_found"), (409, "internal_error"), (500, "internal_error")],
)
def test_error_code_for_status(status: int, code: str):
    assert _error_code_for_status(status) == code


def test_error_envelope_body():
    res = _error(413, "too large", request_id="r1")
    assert res.status_code == 413
    assert json.loads(res.body) == {"error": {"code": "bad_request", "message": "too large", "request_id": "r1"}}


def test_format_from_options_defaults_match_config():
    assert _format_from_options(FormatOptions()) == TypographyConfig()
    cfg = _format_from_options(FormatOptions(french=True, threshold_quote=0))
    assert cfg.french is True
    assert cfg.threshold_quote == 0
