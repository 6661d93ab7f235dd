import math

from pydantic import BaseModel, Field

from joydrive.utils.math_mix import clamp


def _to_pwm(v: float, limit: int) -> int:
    # NaN -> стоп
    if math.isnan(v):
        return 0
    return int(round(clamp(v * limit, -limit, limit)))


class JoystickIn(BaseModel):
    x: float = Field(description="Turn: left(-1) .. right(+1)")
    y: float = Field(description="Throttle: back(-1) .. forward(+1)")


class MotorCommand(BaseModel):
    motor_a: float = Field(description="Side A speed, -1..1")
    motor_b: float = Field(description="Side B speed, -1..1")

    def as_pwm(self, limit: int = 255) -> tuple[int, int]:
        """
        Scale to the integer range of SetAEngine/SetBEngine (-limit..limit).
        Values are clamped before rounding, so infinities saturate; NaN maps to 0.
        """
        return _to_pwm(self.motor_a, limit), _to_pwm(self.motor_b, limit)
