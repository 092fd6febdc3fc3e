from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

import typographer.cli as cli
from typographer.formatting.chars import NBSP, NNBSP


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TYPOGRAPHER_THRESHOLD_QUOTE", "TYPOGRAPHER_DASHES", "TYPOGRAPHER_GUILLEMETS", "TYPOGRAPHER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def _stdin(monkeypatch: pytest.MonkeyPatch, data: bytes) -> None:
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data), encoding="utf-8"))


def test_list_prints_transformations(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["--list"]) == 0
    out = capsys.readouterr().out
    assert "clean_quotes" in out
    assert "format_french_tex" in out


def test_unknown_transformation_is_a_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["bogus"]) == 2
    err = capsys.readouterr().err
    assert "unknown transformation" in err
    assert "escape_html" in err


def test_stdin_to_stdout(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    _stdin(monkeypatch, b'He said  "x"... <b>\n')
    assert cli.main(["clean_quotes", "clean_ellipsis", "escape_html"]) == 0
    assert capsys.readouterr().out == "He said “x”… &lt;b&gt;\n"


def test_no_transformation_only_collapses_whitespace(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _stdin(monkeypatch, b"\xef\xbb\xbfa   b\r\nc\n")
    assert cli.main([]) == 0
    assert capsys.readouterr().out == "a b\r\nc\n"


def test_threshold_quote_option(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    _stdin(monkeypatch, b'Say "!" now')
    assert cli.main(["clean_quotes", "--threshold-quote", "0"]) == 0
    assert capsys.readouterr().out == 'Say "!" now'

    _stdin(monkeypatch, b'Say "!" now')
    assert cli.main(["clean_quotes"]) == 0
    assert capsys.readouterr().out == "Say “!” now"


def test_threshold_quote_from_env(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("TYPOGRAPHER_THRESHOLD_QUOTE", "0")
    _stdin(monkeypatch, b'Say "!" now')
    assert cli.main(["clean_quotes"]) == 0
    assert capsys.readouterr().out == 'Say "!" now'


def test_dashes_flag_enables_dashes_in_format_french(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _stdin(monkeypatch, b"a -- b")
    assert cli.main(["format_french"]) == 0
    assert capsys.readouterr().out == "a -- b"

    _stdin(monkeypatch, b"a -- b")
    assert cli.main(["format_french", "--dashes"]) == 0
    assert capsys.readouterr().out == f"a –{NBSP}b"


def test_invalid_utf8_fails(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    _stdin(monkeypatch, b"caf\xe9")
    assert cli.main(["clean_quotes"]) == 1
    assert "not valid UTF-8" in capsys.readouterr().err


def test_files_in_and_out(tmp_path: Path) -> None:
    src = tmp_path / "in.txt"
    dst = tmp_path / "out" / "result.txt"
    src.write_bytes("Bonjour!\r\nÇa va?\r\n".encode("utf-8"))

    assert cli.main(["format_french", "-i", str(src), "-o", str(dst)]) == 0
    assert dst.read_bytes().decode("utf-8") == f"Bonjour{NNBSP}!\r\nÇa va{NNBSP}?\r\n"


def test_missing_input_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["clean_quotes", "-i", str(tmp_path / "missing.txt")]) == 1
    assert "cannot read input" in capsys.readouterr().err
