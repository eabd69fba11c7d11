"""
Unit tests for simulation/explanations.py and simulation/logging_config.py
"""
import logging

import pytest

from simulation.explanations import (
    NO_MEETING_MESSAGE,
    calculation_steps,
    result_message,
    worked_examples,
)
from simulation.logging_config import setup_logging
from simulation.motion_solver import solve_meeting


def test_success_banner(pursuit_params):
    level, text = result_message(pursuit_params, solve_meeting(pursuit_params))
    assert level == "success"
    assert "4.00 hours" in text
    assert "240.0 miles" in text


def test_no_meeting_banner(slower_pursuer_params):
    assert result_message(slower_pursuer_params, None) == ("error", NO_MEETING_MESSAGE)


def test_pursuit_steps(pursuit_params):
    steps = calculation_steps(pursuit_params, solve_meeting(pursuit_params))
    assert steps[0].endswith("= 80 mi")
    assert "Relative speed: 60 − 40 = 20 mph" in steps
    assert "Meeting time: 80 / 20 = 4.00 h" in steps


def test_approach_steps(approach_params):
    steps = calculation_steps(approach_params, solve_meeting(approach_params))
    assert "Combined speed: 40 + 60 = 100 mph" in steps
    assert "Meeting time: 80 / 100 = 0.80 h" in steps


def test_no_meeting_steps(slower_pursuer_params):
    steps = calculation_steps(slower_pursuer_params, None)
    assert len(steps) == 3
    assert "never closes the gap" in steps[-1]


def test_worked_examples():
    answers = [example["answer"] for example in worked_examples()]
    assert answers == [pytest.approx(4.0), pytest.approx(10.0), pytest.approx(3.0)]


def test_setup_logging_does_not_duplicate_handlers(tmp_path):
    log_file = tmp_path / "sim.log"
    setup_logging("DEBUG")
    logger = setup_logging(logging.INFO, log_file=str(log_file))
    assert logger.name == "simulation"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2

    logging.getLogger("simulation.motion_solver").info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "simulation.motion_solver - INFO - hello" in log_file.read_text(encoding="utf-8")
    logger.handlers.clear()


def test_setup_logging_closes_previous_file_handler(tmp_path):
    log_file = tmp_path / "sim.log"
    first = setup_logging(logging.INFO, log_file=str(log_file))
    old_file_handler = next(h for h in first.handlers if isinstance(h, logging.FileHandler))
    first.info("before rerun")

    logger = setup_logging(logging.INFO, log_file=str(log_file))
    logger.info("after rerun")
    for handler in logger.handlers:
        handler.flush()

    assert old_file_handler not in logger.handlers
    assert old_file_handler.stream is None
    text = log_file.read_text(encoding="utf-8")
    assert "before rerun" in text
    assert "after rerun" in text
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_setup_logging_unknown_level_falls_back_to_info():
    logger = setup_logging("chatty")
    assert logger.level == logging.INFO
    logger.handlers.clear()
