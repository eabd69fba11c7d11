# simulation/time_controller.py
# Time utilities for playback/animation
import logging
import time

from simulation.config import FRAME_INTERVAL, FRAME_STEP, MEETING_BUFFER
from simulation.position_sampler import positions_at, sample_frames

logger = logging.getLogger(__name__)


def clamp_time(t, min_t, max_t):
    return max(min_t, min(max_t, t))


class AnimationTicker:
    """
    Owned handle for one animation run.

    run() calls on_tick(sample) for each frame and hands control back to the
    host with sleep(interval) in between. After stop() no further on_tick
    call happens, whichever side stop() is called from. run() always ends
    stopped, also when on_tick raises (Streamlit aborts a script run by
    raising inside it).
    """

    def __init__(self, frames, on_tick, interval=FRAME_INTERVAL, sleep=time.sleep):
        self._frames = frames
        self._on_tick = on_tick
        self._sleep = sleep
        self.interval = interval
        self.ticks = 0
        self.last_sample = None
        self._running = False
        self._stopped = False

    @property
    def running(self):
        return self._running

    @property
    def stopped(self):
        return self._stopped

    def run(self):
        if self._running:
            raise RuntimeError("AnimationTicker is already running")
        if self._stopped:
            return self.ticks

        self._running = True
        logger.debug("Animation started: %r", self._frames)
        try:
            for sample in self._frames:
                if self._stopped:
                    break
                self._on_tick(sample)
                self.ticks += 1
                self.last_sample = sample
                if self._stopped:
                    break
                self._sleep(self.interval)
        finally:
            self.stop()
        return self.ticks

    def stop(self):
        if self._running:
            logger.debug("Animation stopped after %d ticks", self.ticks)
        self._running = False
        self._stopped = True

    cancel = stop

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False


class PlaybackController:
    """
    Play/pause/reset state of the animation for one page session.

    Lives in st.session_state across Streamlit reruns. It holds no timer:
    every run() gets its own AnimationTicker, released when the run ends or
    is interrupted.
    """

    def __init__(self, step=FRAME_STEP):
        self.step = step
        self.params = None
        self.meeting = None
        self.buffer = MEETING_BUFFER
        self.elapsed = 0.0
        self.playing = False

    @property
    def end_time(self):
        if self.meeting is None:
            return None
        return self.meeting.time + self.buffer

    def sync(self, params, meeting, buffer=MEETING_BUFFER):
        """Take the current inputs; any change rewinds to the start."""
        changed = (params, buffer) != (self.params, self.buffer)
        self.params, self.meeting, self.buffer = params, meeting, buffer
        if changed:
            self.reset()
        return changed

    def play(self):
        self.playing = self.meeting is not None
        return self.playing

    def pause(self):
        self.playing = False

    def reset(self):
        self.playing = False
        self.elapsed = 0.0

    def record(self, sample):
        self.elapsed = sample.elapsed

    def start_offset(self):
        # a finished run starts over
        end = self.end_time
        if end is None or self.elapsed >= end - self.step / 2:
            return 0.0
        return clamp_time(self.elapsed, 0.0, end)

    def frames(self):
        return sample_frames(self.params, self.meeting, step=self.step,
                             buffer=self.buffer, start=self.start_offset())

    def still_sample(self):
        end = self.end_time
        elapsed = self.elapsed if end is None else clamp_time(self.elapsed, 0.0, end)
        return positions_at(self.params, elapsed)

    def finish(self, loop=False):
        """End of a run. Returns True when the page should rerun to play again."""
        if loop and self.meeting is not None:
            self.elapsed = 0.0
            self.playing = True
            return True
        self.playing = False
        return False

    def run(self, on_tick, loop=False, interval=FRAME_INTERVAL, sleep=time.sleep):
        def tick(sample):
            on_tick(sample)
            self.record(sample)

        with AnimationTicker(self.frames(), tick, interval=interval, sleep=sleep) as ticker:
            ticker.run()
        logger.info("Animation finished at %.1f h", self.elapsed)
        return self.finish(loop)
