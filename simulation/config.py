# simulation/config.py
# Tunables for the train motion page. Slider variants are data, not separate apps.
import os
from dataclasses import dataclass

# animation: simulated hours per frame, wall-clock seconds per frame
FRAME_STEP = 0.1
FRAME_INTERVAL = 0.1
# how long the animation keeps running after the meeting (hours)
MEETING_BUFFER = 2.0

# track scaling
TRACK_PADDING = 1.3
MIN_TRACK_MILES = 300

DEFAULT_VARIANT = os.environ.get("TRAIN_MOTION_VARIANT", "classic")
LOG_LEVEL = os.environ.get("TRAIN_MOTION_LOG_LEVEL", "INFO")


@dataclass(frozen=True)
class SliderRange:
    min: float
    max: float
    default: float
    step: float = 1

    def clamp(self, value):
        return max(self.min, min(self.max, value))


@dataclass(frozen=True)
class VariantConfig:
    name: str
    label: str
    speed_a: SliderRange
    speed_b: SliderRange
    head_start: SliderRange
    buffer: float = MEETING_BUFFER


VARIANTS = {
    "classic": VariantConfig(
        name="classic",
        label="Classic (20-300 mph)",
        speed_a=SliderRange(20, 200, 40),
        speed_b=SliderRange(30, 300, 60),
        head_start=SliderRange(0.5, 5.0, 2.0, 0.5),
        buffer=2.0,
    ),
    "calculator": VariantConfig(
        name="calculator",
        label="Calculator (10-800 mph)",
        speed_a=SliderRange(10, 800, 40),
        speed_b=SliderRange(10, 800, 60),
        head_start=SliderRange(0.0, 10.0, 2.0, 0.5),
        buffer=3.0,
    ),
    "extended": VariantConfig(
        name="extended",
        label="Extended head start (0-24 h)",
        speed_a=SliderRange(10, 800, 40),
        speed_b=SliderRange(10, 800, 60),
        head_start=SliderRange(0.0, 24.0, 2.0, 0.5),
        buffer=3.0,
    ),
}


def get_variant(name=None):
    """Look up a slider variant by name (defaults to DEFAULT_VARIANT)."""
    key = name or DEFAULT_VARIANT
    try:
        return VARIANTS[key]
    except KeyError:
        raise KeyError(f"Unknown variant {key!r}; expected one of {sorted(VARIANTS)}") from None
