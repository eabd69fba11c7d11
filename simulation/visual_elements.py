# simulation/visual_elements.py
import plotly.graph_objects as go

from simulation.config import MEETING_BUFFER, MIN_TRACK_MILES, TRACK_PADDING
from simulation.motion_solver import ScenarioKind

TRAIN_COLORS = {"A": "red", "B": "blue"}


def track_extent(params, meeting, buffer=MEETING_BUFFER):
    """Length of the drawn track in miles."""
    if meeting is None:
        return float(MIN_TRACK_MILES)
    end_time = meeting.time + buffer
    if params.scenario is ScenarioKind.OPPOSITE_DIRECTION:
        # A keeps going past the meeting point until the last frame
        return max(params.initial_gap, params.speed_a * end_time, 1.0)
    run_out_a = params.speed_a * (end_time + params.head_start)
    run_out_b = params.speed_b * end_time
    return max(run_out_a, run_out_b, meeting.distance * TRACK_PADDING, MIN_TRACK_MILES)


def render_positions(params, sample):
    """
    Marker x positions. Approaching trains are drawn from opposite ends of
    the initial gap so they meet on screen at the meeting time.
    """
    if params.scenario is ScenarioKind.SAME_DIRECTION:
        return sample.pos_a, sample.pos_b
    gap = params.initial_gap
    x_a = sample.pos_a - gap
    x_b = max(gap - (sample.pos_b - gap), 0.0)
    return x_a, x_b


def draw_track(fig, extent):
    for y in (1, -1):
        fig.add_trace(go.Scatter(
            x=[0, extent], y=[y, y],
            mode="lines",
            line=dict(color="gray", width=4),
            hoverinfo="skip",
            showlegend=False
        ))


def draw_trains(fig, x_a, x_b):
    for name, x, y in (("A", x_a, 1), ("B", x_b, -1)):
        fig.add_trace(go.Scatter(
            x=[x], y=[y],
            mode="markers+text",
            text=[f"Train {name}"],
            name=f"Train {name}",
            marker=dict(size=20, color=TRAIN_COLORS[name], symbol="square"),
            textposition="top center",
            textfont=dict(color="black")
        ))


def draw_meeting_point(fig, x):
    fig.add_vline(x=x, line_dash="dot", line_color="green",
                  annotation_text="Meet", annotation_position="top")


def meeting_x(params, meeting):
    if params.scenario is ScenarioKind.SAME_DIRECTION:
        return meeting.distance
    # travel of A after B started
    return params.speed_a * meeting.time


def build_frame_figure(params, meeting, sample, extent):
    fig = go.Figure()
    draw_track(fig, extent)
    if meeting is not None:
        draw_meeting_point(fig, meeting_x(params, meeting))
    x_a, x_b = render_positions(params, sample)
    draw_trains(fig, x_a, x_b)

    fig.update_layout(
        title=f"Time: {sample.elapsed:.1f} hours",
        xaxis=dict(title="Distance (mi)", range=[0, extent]),
        yaxis=dict(visible=False, range=[-2, 2]),
        height=300,
        showlegend=False,
        plot_bgcolor="white"
    )
    return fig
