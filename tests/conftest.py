"""
Pytest configuration and shared fixtures for the train motion tests.
"""
import pytest

from simulation.motion_solver import MotionParams, ScenarioKind


# =============================================================================
# Scenario Fixtures
# =============================================================================

@pytest.fixture
def pursuit_params():
    """Textbook pursuit: A at 40 mph, B at 60 mph two hours later."""
    return MotionParams(40, 60, 2, ScenarioKind.SAME_DIRECTION)


@pytest.fixture
def approach_params():
    """Same speeds, trains moving toward each other."""
    return MotionParams(40, 60, 2, ScenarioKind.OPPOSITE_DIRECTION)


@pytest.fixture
def slower_pursuer_params():
    """B slower than A: they never meet."""
    return MotionParams(40, 30, 1, ScenarioKind.SAME_DIRECTION)


@pytest.fixture
def speed_grid():
    """
    (speed_a, speed_b, head_start) triples spanning the slider ranges.

    Returns:
        list of tuples
    """
    return [
        (a, b, h)
        for a in (10, 20, 40, 55.5, 200, 800)
        for b in (10, 30, 60, 65, 300, 800)
        for h in (0, 0.5, 2, 3, 10, 24)
    ]
