from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from typographer.formatting.chars import NNBSP
from typographer.formatting.config import TypographyConfig
from typographer.formatting.rules import apply_rules


def test_apply_rules_all_stages_and_stats() -> None:
    out, stats = apply_rules('He said  "hi"... -- <<ok>>', TypographyConfig(dashes=True, guillemets=True))
    assert out == "He said “hi”… – «ok»"
    assert stats == {"normalize_whitespace": 1, "ellipsis": 1, "dashes": 1, "guillemets": 2, "quotes": 2}


def test_apply_rules_only_reports_non_zero_counters() -> None:
    assert apply_rules("plain text", TypographyConfig()) == ("plain text", {})


def test_disabled_stages_pass_through() -> None:
    cfg = TypographyConfig(quotes=False, ellipsis=False)
    assert apply_rules('"a"...', cfg) == ('"a"...', {})


def test_french_stage_runs_last_when_enabled() -> None:
    out, stats = apply_rules("Quoi?", TypographyConfig(french=True))
    assert out == f"Quoi{NNBSP}?"
    assert stats == {"french_spacing": 1}

    assert apply_rules("Quoi?", TypographyConfig())[0] == "Quoi?"


def test_apply_rules_rejects_non_text() -> None:
    with pytest.raises(TypeError):
        apply_rules(b"bytes", TypographyConfig())  # type: ignore[arg-type]


def test_configs_do_not_interfere_across_threads() -> None:
    texts = [f'Say "!" now {i}... -- ok' for i in range(50)]
    configs = [
        TypographyConfig(),
        TypographyConfig(threshold_quote=0),
        TypographyConfig(dashes=True, ellipsis=False),
        TypographyConfig(quotes=False, french=True),
    ]
    jobs = [(t, c) for t in texts for c in configs]

    expected = [apply_rules(t, c) for t, c in jobs]
    with ThreadPoolExecutor(max_workers=8) as pool:
        got = list(pool.map(lambda job: apply_rules(*job), jobs))

    assert got == expected
