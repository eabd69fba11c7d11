# simulation/inputs.py
# Validation of the slider values before they reach the solver
import logging
import math
from numbers import Real

from simulation.motion_solver import MotionParams, ScenarioKind

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    pass


def _as_float(name, value):
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be finite, got {value!r}")
    return value


def build_params(speed_a, speed_b, head_start, scenario, variant=None):
    """
    Turn raw UI values into MotionParams.
    Speeds must be positive; everything is clamped into the variant's ranges.
    """
    speed_a = _as_float("speed_a", speed_a)
    speed_b = _as_float("speed_b", speed_b)
    head_start = _as_float("head_start", head_start)

    if speed_a <= 0 or speed_b <= 0:
        raise InvalidInputError(f"Speeds must be positive (got {speed_a}, {speed_b})")

    try:
        scenario = ScenarioKind.from_label(scenario)
    except ValueError as e:
        raise InvalidInputError(str(e)) from e

    if variant is not None:
        clamped = (
            variant.speed_a.clamp(speed_a),
            variant.speed_b.clamp(speed_b),
            variant.head_start.clamp(head_start),
        )
        if clamped != (speed_a, speed_b, head_start):
            logger.info("Clamped inputs to %s ranges: %s -> %s",
                        variant.name, (speed_a, speed_b, head_start), clamped)
        speed_a, speed_b, head_start = clamped

    return MotionParams(speed_a, speed_b, max(0.0, head_start), scenario)
