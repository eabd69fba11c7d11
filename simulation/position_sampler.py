# simulation/position_sampler.py
# Train positions along the line for a given elapsed time (hours since B started)
import math
from typing import NamedTuple

import numpy as np
import pandas as pd

from simulation.config import FRAME_STEP, MEETING_BUFFER
from simulation.motion_solver import ScenarioKind

_EPS = 1e-9


class PositionSample(NamedTuple):
    elapsed: float
    pos_a: float
    pos_b: float


def positions_at(params, elapsed):
    """Both positions are miles from Train A's station."""
    a, b, h = params.speed_a, params.speed_b, params.head_start
    pos_a = a * (elapsed + h)
    travelled_b = b * elapsed if elapsed > 0 else 0.0

    if params.scenario is ScenarioKind.SAME_DIRECTION:
        pos_b = travelled_b
    else:
        # B's displacement is reversed when drawing, not here
        pos_b = a * h + travelled_b
    return PositionSample(elapsed, pos_a, pos_b)


class FrameSequence:
    """
    Finite, restartable run of samples from `start` to meeting time + buffer.
    Frame i sits at elapsed = i * step, so long runs don't drift.
    """

    def __init__(self, params, end_time, step=FRAME_STEP, start=0.0):
        if step <= 0:
            raise ValueError("step must be positive")
        self.params = params
        self.step = step
        self.end_time = end_time
        if end_time is None:
            self._first, self._last = 0, -1
        else:
            self._first = max(0, math.ceil(start / step - _EPS))
            self._last = math.floor(end_time / step + _EPS)

    def __len__(self):
        return max(0, self._last - self._first + 1)

    def __iter__(self):
        for i in range(self._first, self._last + 1):
            yield positions_at(self.params, round(i * self.step, 9))

    def __repr__(self):
        return f"FrameSequence(frames={len(self)}, step={self.step}, end_time={self.end_time})"


def sample_frames(params, meeting, step=FRAME_STEP, buffer=MEETING_BUFFER, start=0.0):
    end_time = None if meeting is None else meeting.time + buffer
    return FrameSequence(params, end_time, step=step, start=start)


def frames_dataframe(params, meeting, step=FRAME_STEP, buffer=MEETING_BUFFER, start=0.0):
    """One row per animation frame, built from the same samples the ticker draws."""
    columns = list(PositionSample._fields) + ["gap"]
    frames = sample_frames(params, meeting, step=step, buffer=buffer, start=start)
    if len(frames) == 0:
        return pd.DataFrame(columns=columns)

    table = pd.DataFrame(list(frames), columns=PositionSample._fields)
    pos_a = table["pos_a"].to_numpy()
    pos_b = table["pos_b"].to_numpy()
    if params.scenario is ScenarioKind.OPPOSITE_DIRECTION:
        # distance still between the approaching trains: the initial gap
        # minus what each has covered since B started
        initial_gap = params.initial_gap
        gap = initial_gap - (pos_a - initial_gap) - (pos_b - initial_gap)
    else:
        gap = pos_a - pos_b
    table["gap"] = np.abs(gap)
    return table
