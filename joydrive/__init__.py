from joydrive.core.config import Settings
from joydrive.core.tables import (
    ANGLES,
    MOTOR_A_ANGLE_SPEEDS,
    MOTOR_B_ANGLE_SPEEDS,
    BreakpointTable,
    BreakpointTableError,
)
from joydrive.mixer_factory import create_mixer
from joydrive.schemas.joystick import JoystickIn, MotorCommand
from joydrive.services.mixer import (
    DriveMixer,
    calculate_motors_direction_velocity_vector,
    mix_joystick,
    mix_joystick_pwm,
)
from joydrive.utils.math_mix import lerp, lerp_array

__all__ = [
    "ANGLES",
    "MOTOR_A_ANGLE_SPEEDS",
    "MOTOR_B_ANGLE_SPEEDS",
    "BreakpointTable",
    "BreakpointTableError",
    "DriveMixer",
    "JoystickIn",
    "MotorCommand",
    "Settings",
    "calculate_motors_direction_velocity_vector",
    "create_mixer",
    "lerp",
    "lerp_array",
    "mix_joystick",
    "mix_joystick_pwm",
]
