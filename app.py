# app.py
import streamlit as st

from simulation.config import LOG_LEVEL, VARIANTS, DEFAULT_VARIANT, get_variant
from simulation.explanations import LEARN_THE_MATH, calculation_steps, result_message, worked_examples
from simulation.inputs import InvalidInputError, build_params
from simulation.logging_config import setup_logging
from simulation.motion_solver import ScenarioKind, solve_meeting
from simulation.position_sampler import frames_dataframe
from simulation.time_controller import PlaybackController
from simulation.visual_elements import build_frame_figure, track_extent

setup_logging(LOG_LEVEL)

# -------------------------
# STREAMLIT PAGE CONFIG
# -------------------------
st.set_page_config(page_title="Train Motion App", layout="centered")
st.title("🚆 Train Motion Simulator")

# -------------------------
# Sidebar controls
# -------------------------
st.sidebar.header("Settings")
variant_names = list(VARIANTS)
variant_name = st.sidebar.selectbox(
    "Slider ranges",
    variant_names,
    index=variant_names.index(DEFAULT_VARIANT) if DEFAULT_VARIANT in VARIANTS else 0,
    format_func=lambda name: VARIANTS[name].label
)
variant = get_variant(variant_name)
loop_animation = st.sidebar.checkbox("Loop animation", value=False)

# -------------------------
# User inputs
# -------------------------
scenario = st.radio("Choose the scenario:", [kind.value for kind in ScenarioKind])


def slider(label, rng, key):
    return st.slider(label, float(rng.min), float(rng.max), float(rng.default), float(rng.step),
                     key=f"{variant.name}_{key}")


speed_a = slider("Train A Speed (mph)", variant.speed_a, "speed_a")
speed_b = slider("Train B Speed (mph)", variant.speed_b, "speed_b")
head_start = slider("Head Start (hours)", variant.head_start, "head_start")

try:
    params = build_params(speed_a, speed_b, head_start, scenario, variant)
except InvalidInputError as e:
    st.error(str(e))
    st.stop()

meeting = solve_meeting(params)

# -------------------------
# Result banner
# -------------------------
level, message = result_message(params, meeting)
getattr(st, level)(message)

if st.toggle("Show calculations"):
    for step in calculation_steps(params, meeting):
        st.markdown(f"- {step}")

# -------------------------
# Animation state
# -------------------------
if "playback" not in st.session_state:
    st.session_state.playback = PlaybackController()
playback = st.session_state.playback
playback.sync(params, meeting, variant.buffer)

col1, col2, col3 = st.columns(3)
if col1.button("▶ Start", disabled=meeting is None):
    playback.play()
if col2.button("⏸ Pause"):
    playback.pause()
if col3.button("↺ Reset"):
    playback.reset()

extent = track_extent(params, meeting, variant.buffer)
frame = st.empty()


def draw(sample):
    frame.plotly_chart(build_frame_figure(params, meeting, sample, extent), use_container_width=True)


# -------------------------
# Animation loop
# -------------------------
if playback.playing:
    if playback.run(draw, loop=loop_animation):
        st.rerun()
else:
    draw(playback.still_sample())

# -------------------------
# Position table
# -------------------------
with st.expander("📊 Position table"):
    table = frames_dataframe(params, meeting, buffer=variant.buffer)
    if table.empty:
        st.info("No meeting, nothing to tabulate.")
    else:
        st.dataframe(table.round(2), hide_index=True)

# -------------------------
# Explanation Panel
# -------------------------
with st.expander("📘 Learn the Math"):
    st.markdown(LEARN_THE_MATH)
    for example in worked_examples():
        st.markdown(f"#### {example['title']}")
        st.markdown(example["problem"])
        st.markdown(f"`{example['working']}` → **t = {example['answer']:g} hours**")
