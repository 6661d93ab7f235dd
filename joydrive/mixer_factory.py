from __future__ import annotations

from typing import Optional

from joydrive.core.config import Settings
from joydrive.core.logging_runtime import ensure_logging_config, log, setup_base_logging
from joydrive.services.mixer import DriveMixer


def create_mixer(settings: Optional[Settings] = None) -> DriveMixer:
    settings = settings or Settings()

    # базовая конфигурация логирования (формат, logger-и)
    setup_base_logging(settings)
    ensure_logging_config(settings)

    mixer = DriveMixer.from_settings(settings)
    log.info(
        "Mixer ready: deadzone=%.3f, full_scale=%.3f, magnitude_mode=%s",
        mixer.deadzone,
        mixer.full_scale,
        mixer.magnitude_mode,
    )
    return mixer
