import math


def sawtooth(x: float, lower_bound: float, upper_bound: float, period: float) -> float:
    """Ramp linearly from lower_bound towards upper_bound over every period of x, then wrap."""
    amplitude = upper_bound - lower_bound
    normalized = x / period
    fraction = normalized - math.floor(normalized)
    if fraction >= 1.0:
        # -1e-20 / 10 floors to -1 and leaves a fraction that rounds up to 1.0
        fraction = 0.0
    return lower_bound + amplitude * fraction


def staircase(x: float, height: float, period: float) -> float:
    """Rise by height every period of x. Zero on [0, period)."""
    steps = math.floor(x / period)
    return steps * height


def range_mapper(x: float, a: float, b: float, c: float, d: float) -> float:
    """
    Linearly map x from the range [a, b] to the range [c, d].

    No clamping is done, values outside [a, b] extrapolate along the same line.
    """
    return ((x - a) / (b - a)) * (d - c) + c
