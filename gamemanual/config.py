from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


def _b(name: str, default: bool, env: Optional[Mapping[str, str]] = None) -> bool:
    v = (os.environ if env is None else env).get(name)
    if v is None:
        return default
    v2 = v.strip().lower()
    return v2 in ("1", "true", "yes", "on", "y")


def _f(name: str, default: float, env: Optional[Mapping[str, str]] = None) -> float:
    try:
        return float((os.environ if env is None else env).get(name, str(default)))
    except (TypeError, ValueError):
        return default


DEFAULT_TIMEOUT_SEC: float = 60.0

LOG_LEVEL: str = os.getenv("GAME_MANUAL_LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class GenerationSettings:
    """Per-request knobs for provider calls, read from the environment."""

    timeout_sec: float = DEFAULT_TIMEOUT_SEC
    strict: bool = True

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "GenerationSettings":
        timeout = _f("GAME_MANUAL_TIMEOUT_SEC", DEFAULT_TIMEOUT_SEC, env)
        if timeout <= 0:
            timeout = DEFAULT_TIMEOUT_SEC
        return cls(
            timeout_sec=timeout,
            strict=_b("GAME_MANUAL_STRICT", True, env),
        )
