from __future__ import annotations

from typing import Sequence


def clamp(v: float, lo: float, hi: float) -> float:
    if v < lo:
        return lo
    if v > hi:
        return hi
    return v


def lerp(value: float, min_input: float, max_input: float, min_output: float, max_output: float) -> float:
    """
    Clamp value into [min_input, max_input] and map it linearly onto
    [min_output, max_output]. min_input == max_input is not allowed.
    """
    return min_output + (clamp(value, min_input, max_input) - min_input) / (max_input - min_input) * (
        max_output - min_output
    )


def lerp_array(value: float, inputs: Sequence[float], outputs: Sequence[float]) -> float:
    """
    Piecewise-linear lookup over breakpoints (inputs strictly increasing).
    Outside the table the nearest end output is returned, no extrapolation.
    """
    for idx in range(len(inputs) - 1):
        cur = inputs[idx]
        nxt = inputs[idx + 1]
        if value < cur:
            return outputs[idx]
        if value <= nxt:
            return lerp(value, cur, nxt, outputs[idx], outputs[idx + 1])
    return outputs[-1]
