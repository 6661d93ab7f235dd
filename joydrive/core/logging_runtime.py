from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

from joydrive.core.config import Settings


log = logging.getLogger("joydrive")
mixer_log = logging.getLogger("joydrive.mixer")

LOG_PROFILES: dict[str, dict[str, Any]] = {
    "DEFAULT": {
        "title": "Обычные логи (INFO), без трассировки микшера",
        "log_level": "INFO",
        "mixer_trace": False,
    },
    "MIXER_DEBUG": {
        "title": "Отладка микшера (DEBUG + каждый вызов x/y -> A/B)",
        "log_level": "DEBUG",
        "mixer_trace": True,
    },
    "QUIET": {
        "title": "Тихий режим (WARNING)",
        "log_level": "WARNING",
        "mixer_trace": False,
    },
}


@dataclass
class LoggingRuntime:
    log_level: str
    mixer_trace: bool


def setup_base_logging(settings: Settings) -> None:
    level = getattr(logging, (settings.log_level or "INFO").upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def _normalize_profile(v: Optional[str]) -> Optional[str]:
    if not v:
        return None
    v = v.strip().upper().replace("-", "_")
    return v or None


def _apply_logging_runtime(runtime: LoggingRuntime) -> None:
    lvl = getattr(logging, runtime.log_level.upper(), logging.INFO)

    log.setLevel(lvl)
    if runtime.mixer_trace:
        mixer_log.setLevel(logging.DEBUG)
    else:
        # без трассировки микшер не опускается ниже INFO
        mixer_log.setLevel(max(lvl, logging.INFO))

    log.info(
        "Logging profile applied: level=%s, mixer_trace=%s",
        runtime.log_level,
        runtime.mixer_trace,
    )


def ensure_logging_config(settings: Settings) -> LoggingRuntime:
    """
    - если LOG_PROFILE задан → применяем профиль
    - иначе → берём log_level / mixer_trace из settings
    """
    profile_key = _normalize_profile(settings.log_profile or os.getenv("LOG_PROFILE"))
    if profile_key:
        preset = LOG_PROFILES.get(profile_key)
        if not preset:
            raise RuntimeError(
                f"Unknown LOG_PROFILE={profile_key}. Available: {', '.join(LOG_PROFILES.keys())}"
            )
        runtime = LoggingRuntime(
            log_level=preset["log_level"],
            mixer_trace=bool(preset["mixer_trace"]),
        )
        _apply_logging_runtime(runtime)
        return runtime

    runtime = LoggingRuntime(
        log_level=(settings.log_level or "INFO").upper(),
        mixer_trace=bool(settings.mixer_trace),
    )
    _apply_logging_runtime(runtime)
    return runtime
