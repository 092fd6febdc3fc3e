from __future__ import annotations

import os

from typographer.formatting.config import TypographyConfig


_TRUE = {"1", "true", "yes", "y", "on"}
_FALSE = {"0", "false", "no", "n", "off"}


def env_truthy(name: str) -> bool:
    v = str(os.getenv(name, "")).strip().lower()
    return v in _TRUE


def env_bool(name: str, default: bool) -> bool:
    v = str(os.getenv(name, "")).strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    return default


def env_int(name: str, default: int) -> int:
    raw = str(os.getenv(name, "")).strip()
    if not raw:
        return default
    try:
        return int(raw)
    except Exception:
        return default


def config_from_env(base: TypographyConfig | None = None) -> TypographyConfig:
    """Defaults for the command line and the server; the library never reads the environment."""

    base = base or TypographyConfig()
    return base.with_overrides(
        threshold_quote=max(0, env_int("TYPOGRAPHER_THRESHOLD_QUOTE", base.threshold_quote)),
        dashes=env_bool("TYPOGRAPHER_DASHES", base.dashes),
        guillemets=env_bool("TYPOGRAPHER_GUILLEMETS", base.guillemets),
    )
