# simulation/explanations.py
# Text shown next to the animation
from simulation.motion_solver import MotionParams, ScenarioKind, solve_meeting

NO_MEETING_MESSAGE = "Train B is not faster than Train A. They will never meet in the same direction."

LEARN_THE_MATH = """
### Core concept: relative speed
When two trains move on the same line:
- In the **same direction**: *subtract* speeds
- In **opposite directions**: *add* speeds

### Same Direction:
If Train A leaves earlier, and Train B is faster:
- **Formula**: `t = (r1 * h) / (r2 - r1)`
- r1 = slower speed (Train A), r2 = faster speed (Train B), h = head start time

### Opposite Direction:
If trains move toward each other:
- **Formula**: `t = d / (r1 + r2)`
- d = initial distance = `r1 * h`
"""


def result_message(params, meeting):
    if meeting is None:
        return "error", NO_MEETING_MESSAGE
    return "success", (
        f"📍 Trains will meet after {meeting.time:.2f} hours, "
        f"{meeting.distance:.1f} miles from Train A's station."
    )


def calculation_steps(params, meeting):
    a, b, h = params.speed_a, params.speed_b, params.head_start
    steps = [f"Train A's head start: {a:g} mph × {h:g} h = {params.initial_gap:g} mi"]
    if params.scenario is ScenarioKind.SAME_DIRECTION:
        steps.append(f"Relative speed: {b:g} − {a:g} = {b - a:g} mph")
        if meeting is None:
            steps.append("Relative speed is not positive, so Train B never closes the gap.")
            return steps
    else:
        steps.append(f"Combined speed: {a:g} + {b:g} = {a + b:g} mph")

    steps += [
        f"Meeting time: {meeting.initial_gap:g} / {meeting.closing_speed:g} = {meeting.time:.2f} h",
        f"Train A travels {meeting.distance_a:.1f} mi, Train B travels {meeting.distance_b:.1f} mi",
    ]
    return steps


def worked_examples():
    """Textbook problems, answered by the solver."""
    pursuit = solve_meeting(MotionParams(40, 60, 2, ScenarioKind.SAME_DIRECTION))
    practice = solve_meeting(MotionParams(50, 65, 3, ScenarioKind.SAME_DIRECTION))
    # 300 miles apart: a head start of 7.5 h at 40 mph opens the same gap
    approach = solve_meeting(MotionParams(40, 60, 7.5, ScenarioKind.OPPOSITE_DIRECTION))
    return [
        {
            "title": "Same Direction Example",
            "problem": ("Train A leaves a station traveling at 40 mph. Two hours later, Train B "
                        "leaves the same station traveling at 60 mph. How long will it take "
                        "Train B to catch up?"),
            "working": "40(t + 2) = 60t → 80 = 20t",
            "answer": pursuit.time,
        },
        {
            "title": "Practice Problem",
            "problem": "Train A leaves at 50 mph. Train B leaves 3 hours later at 65 mph.",
            "working": "t = (50 * 3) / (65 - 50) = 150 / 15",
            "answer": practice.time,
        },
        {
            "title": "Opposite Direction Example",
            "problem": ("Train A heads east at 40 mph, Train B heads west at 60 mph. The stations "
                        "are 300 miles apart. When do they meet?"),
            "working": "t = 300 / (40 + 60)",
            "answer": approach.time,
        },
    ]
