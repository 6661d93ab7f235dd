from __future__ import annotations

from typing import Any, Optional
from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


MAGNITUDE_MODES: tuple[str, ...] = ("squared", "euclidean", "dominant_axis")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # --- Микшер
    # ниже этой магнитуды стика моторы стоят
    mixer_deadzone: float = 0.1
    # магнитуда, которая даёт полную скорость
    mixer_full_scale: float = 1.0
    # squared | euclidean | dominant_axis
    mixer_magnitude_mode: str = "squared"

    # полная шкала для SetAEngine/SetBEngine
    pwm_limit: int = 255

    log_level: Optional[str] = None
    log_profile: Optional[str] = None

    # трассировка каждого вызова микшера в DEBUG
    mixer_trace: bool = False

    @field_validator("mixer_deadzone")
    @classmethod
    def _v_deadzone(cls: type["Settings"], v: float) -> float:
        if not 0 <= v < 1:
            raise ValueError("mixer_deadzone must be in [0, 1)")
        return float(v)

    @field_validator("mixer_full_scale")
    @classmethod
    def _v_full_scale(cls: type["Settings"], v: float) -> float:
        if not v > 0:
            raise ValueError("mixer_full_scale must be > 0")
        return float(v)

    @field_validator("mixer_magnitude_mode", mode="before")
    @classmethod
    def _v_magnitude_mode(cls: type["Settings"], v: Any) -> str:
        v = str(v or "").strip().lower().replace("-", "_")
        if v not in MAGNITUDE_MODES:
            raise ValueError(f"mixer_magnitude_mode must be {'|'.join(MAGNITUDE_MODES)}")
        return v

    @field_validator("pwm_limit")
    @classmethod
    def _v_pwm_limit(cls: type["Settings"], v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError("pwm_limit must be 1..65535")
        return v

    @model_validator(mode="after")
    def _v_mixer_range(self) -> "Settings":
        # мёртвая зона должна быть меньше полной шкалы
        if not self.mixer_deadzone < self.mixer_full_scale:
            raise ValueError(
                f"mixer_deadzone must be < mixer_full_scale "
                f"(got {self.mixer_deadzone} >= {self.mixer_full_scale})"
            )
        return self
