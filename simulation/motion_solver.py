# simulation/motion_solver.py
# Closed-form meeting time for two trains on one line.
import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class ScenarioKind(Enum):
    SAME_DIRECTION = "Same Direction"
    OPPOSITE_DIRECTION = "Opposite Direction"

    @classmethod
    def from_label(cls, label):
        if isinstance(label, cls):
            return label
        for kind in cls:
            if kind.value.lower() == str(label).strip().lower():
                return kind
        raise ValueError(f"Unknown scenario: {label!r}")


@dataclass(frozen=True)
class MotionParams:
    """Train A leaves first; Train B starts `head_start` hours later."""
    speed_a: float
    speed_b: float
    head_start: float
    scenario: ScenarioKind = ScenarioKind.SAME_DIRECTION

    @property
    def initial_gap(self):
        return self.speed_a * self.head_start


@dataclass(frozen=True)
class MeetingResult:
    time: float
    distance: float
    distance_a: float
    distance_b: float
    initial_gap: float
    closing_speed: float


def solve_meeting(params):
    """
    Meeting time (hours after B starts) and distances, or None when
    the trains never meet (same direction with B not faster than A).
    """
    a, b, h = params.speed_a, params.speed_b, params.head_start
    gap = a * h

    if params.scenario is ScenarioKind.SAME_DIRECTION:
        if b <= a:
            logger.debug("No meeting: speed_b=%s <= speed_a=%s", b, a)
            return None
        relative = b - a
        t = gap / relative
        return MeetingResult(
            time=t,
            distance=b * t,
            distance_a=a * (t + h),
            distance_b=b * t,
            initial_gap=gap,
            closing_speed=relative,
        )

    combined = a + b
    t = gap / combined
    return MeetingResult(
        time=t,
        distance=a * (h + t),
        distance_a=a * (h + t),
        distance_b=b * t,
        initial_gap=gap,
        closing_speed=combined,
    )
