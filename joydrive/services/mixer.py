from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from joydrive.core.config import MAGNITUDE_MODES, Settings
from joydrive.core.logging_runtime import mixer_log
from joydrive.core.tables import MOTOR_A_TABLE, MOTOR_B_TABLE, BreakpointTable
from joydrive.schemas.joystick import JoystickIn, MotorCommand
from joydrive.utils.math_mix import lerp


def squared_magnitude(x: float, y: float) -> float:
    # 1.3 on the diagonals, 1 on the cardinals
    return x * x + y * y


def euclidean_magnitude(x: float, y: float) -> float:
    # 1.15 on the diagonals, 1 on the cardinals
    return math.hypot(x, y)


def dominant_axis_magnitude(x: float, y: float) -> float:
    # full diagonal and full cardinal both read 1
    ax = abs(x)
    ay = abs(y)
    return ax if ax > ay else ay


MAGNITUDES: Dict[str, Callable[[float, float], float]] = {
    "squared": squared_magnitude,
    "euclidean": euclidean_magnitude,
    "dominant_axis": dominant_axis_magnitude,
}


@dataclass(frozen=True)
class DriveMixer:
    """
    Joystick (x, y) -> motor speeds (A, B) for a differential drive.

    The stick angle is measured from forward (+y) with +x turning positive,
    looked up in each side's lean table and scaled by the stick magnitude
    after the dead zone.
    """

    deadzone: float = 0.1
    full_scale: float = 1.0
    magnitude_mode: str = "squared"
    motor_a: BreakpointTable = MOTOR_A_TABLE
    motor_b: BreakpointTable = MOTOR_B_TABLE
    pwm_limit: int = 255

    def __post_init__(self) -> None:
        if not 0 <= self.deadzone < self.full_scale:
            raise ValueError(
                f"deadzone must be in [0, full_scale): deadzone={self.deadzone} full_scale={self.full_scale}"
            )
        if self.magnitude_mode not in MAGNITUDE_MODES:
            raise ValueError(
                f"Unknown magnitude_mode: {self.magnitude_mode!r} (expected {'|'.join(MAGNITUDE_MODES)})"
            )
        if self.pwm_limit < 1:
            raise ValueError(f"pwm_limit must be >= 1: pwm_limit={self.pwm_limit}")

    @classmethod
    def from_settings(cls, settings: Settings) -> "DriveMixer":
        return cls(
            deadzone=settings.mixer_deadzone,
            full_scale=settings.mixer_full_scale,
            magnitude_mode=settings.mixer_magnitude_mode,
            pwm_limit=settings.pwm_limit,
        )

    def mix(self, x: float, y: float) -> tuple[float, float]:
        rad_angle = math.atan2(x, y)
        deg_angle = math.degrees(rad_angle)

        raw_magnitude = MAGNITUDES[self.magnitude_mode](x, y)
        magnitude = lerp(raw_magnitude, self.deadzone, self.full_scale, 0.0, 1.0)

        m1v = self.motor_a(deg_angle) * magnitude
        m2v = self.motor_b(deg_angle) * magnitude

        if mixer_log.isEnabledFor(logging.DEBUG):
            mixer_log.debug(
                "x=%.3f y=%.3f rad_angle=%.3f deg_angle=%.3f magnitude=%.3f motor_a=%.3f motor_b=%.3f",
                x, y, rad_angle, deg_angle, magnitude, m1v, m2v
            )

        return m1v, m2v


DEFAULT_MIXER = DriveMixer()


def calculate_motors_direction_velocity_vector(x: float, y: float) -> tuple[float, float]:
    """Direction/intensity vector for motors A and B from joystick x, y."""
    return DEFAULT_MIXER.mix(x, y)


def mix_joystick(data: JoystickIn, mixer: Optional[DriveMixer] = None) -> MotorCommand:
    a, b = (mixer or DEFAULT_MIXER).mix(data.x, data.y)
    return MotorCommand(motor_a=a, motor_b=b)


def mix_joystick_pwm(data: JoystickIn, mixer: Optional[DriveMixer] = None) -> tuple[int, int]:
    """Joystick -> (A, B) on the mixer's SetAEngine/SetBEngine scale."""
    mixer = mixer or DEFAULT_MIXER
    return mix_joystick(data, mixer).as_pwm(mixer.pwm_limit)
