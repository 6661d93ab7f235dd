from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from joydrive.utils.math_mix import lerp_array


class BreakpointTableError(ValueError):
    def __init__(self, reason: str, inputs: Sequence[float], outputs: Sequence[float]):
        super().__init__(f"Bad breakpoint table: {reason}. inputs={tuple(inputs)!r} outputs={tuple(outputs)!r}")
        self.reason = reason
        self.inputs = tuple(inputs)
        self.outputs = tuple(outputs)


@dataclass(frozen=True)
class BreakpointTable:
    """
    Piecewise-linear curve given as two parallel sequences.

    wrap=True marks a table over a circular domain: it must span exactly
    360 degrees and start and end on the same output (-180 and +180 are
    one physical direction).
    """

    inputs: Tuple[float, ...]
    outputs: Tuple[float, ...]
    wrap: bool = False

    def __post_init__(self) -> None:
        # tuples even if lists were passed in
        object.__setattr__(self, "inputs", tuple(float(v) for v in self.inputs))
        object.__setattr__(self, "outputs", tuple(float(v) for v in self.outputs))

        if len(self.inputs) != len(self.outputs):
            raise BreakpointTableError("inputs and outputs differ in length", self.inputs, self.outputs)
        if len(self.inputs) < 2:
            raise BreakpointTableError("at least 2 breakpoints required", self.inputs, self.outputs)
        for a, b in zip(self.inputs, self.inputs[1:]):
            if not a < b:
                raise BreakpointTableError("inputs must be strictly increasing", self.inputs, self.outputs)

        if self.wrap:
            if self.inputs[-1] - self.inputs[0] != 360.0:
                raise BreakpointTableError("wrap table must span 360 degrees", self.inputs, self.outputs)
            if self.outputs[0] != self.outputs[-1]:
                raise BreakpointTableError("wrap table must end on its first output", self.inputs, self.outputs)

    def __len__(self) -> int:
        return len(self.inputs)

    def __call__(self, value: float) -> float:
        return lerp_array(value, self.inputs, self.outputs)


# 8 compass directions, -180 and 180 are the same direction (backward)
ANGLES: Tuple[float, ...] = (-180.0, -135.0, -90.0, -45.0, 0.0, 45.0, 90.0, 135.0, 180.0)

# per-angle speed multipliers ("lean" curves) for each side
MOTOR_A_ANGLE_SPEEDS: Tuple[float, ...] = (-1.0, -1.0, -1.0, 0.0, 1.0, 1.0, 1.0, 0.0, -1.0)
MOTOR_B_ANGLE_SPEEDS: Tuple[float, ...] = (-1.0, 0.0, 1.0, 1.0, 1.0, 0.0, -1.0, -1.0, -1.0)

MOTOR_A_TABLE = BreakpointTable(ANGLES, MOTOR_A_ANGLE_SPEEDS, wrap=True)
MOTOR_B_TABLE = BreakpointTable(ANGLES, MOTOR_B_ANGLE_SPEEDS, wrap=True)
