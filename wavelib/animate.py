from pathlib import Path

import imageio
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from .waveconfig import DT, ParameterSet
from .sampler import sample
from .render import init_figure, draw_frame, frame_to_image


class FrameClock:
    """Monotonic simulation clock, advanced by dt once per frame."""

    def __init__(self, dt=DT, t0=0.0):
        if dt <= 0:
            raise ValueError(f"dt must be > 0, got {dt}")
        self.dt = dt
        self.start = t0
        self.t0 = t0
        self.frame = 0

    @property
    def time(self):
        return self.t0 + self.frame * self.dt

    def tick(self):
        """Returns the time of the current frame, then moves on to the next one."""
        t = self.time
        self.frame += 1
        return t

    def set_dt(self, dt):
        """
        Changes the step from the current time on, time already elapsed is kept
        """
        if dt <= 0:
            raise ValueError(f"dt must be > 0, got {dt}")
        self.t0 = self.time
        self.frame = 0
        self.dt = dt

    def reset(self):
        self.t0 = self.start
        self.frame = 0


def _resolve(params_source):
    if isinstance(params_source, ParameterSet):
        return params_source
    return params_source()


def run_frames(params_source, n_frames, dt=DT, t0=0.0, clock=None):
    """
    Frame pump. Yields (t, SampleFrame) for n_frames ticks.

    Args:
        params_source: a ParameterSet, or a zero-arg callable returning the
                       current snapshot; it is read once per tick so edits land
                       on the next frame
        n_frames (int): number of ticks, None runs until the caller stops iterating
        dt, t0 (float): clock step and start time, ignored if `clock` is given
    """
    if clock is None:
        clock = FrameClock(dt, t0)
    count = 0
    while n_frames is None or count < n_frames:
        params = _resolve(params_source)
        t = clock.tick()
        yield t, sample(t, params)
        count += 1


def make_animation(params_source, n_frames=None, dt=DT, interval=16, figsize=(12, 5)):
    """
    Wraps the frame pump in a matplotlib FuncAnimation for interactive display

    Returns:
        (Figure, FuncAnimation): keep a reference to the animation or it gets collected
    """
    fig, axes = init_figure(figsize)
    frames = run_frames(params_source, n_frames, dt)

    def update(item):
        t, frame = item
        draw_frame(axes, frame, t)
        return axes

    anim = FuncAnimation(fig, update, frames=frames, interval=interval,
                         blit=False, cache_frame_data=False, save_count=n_frames)
    return fig, anim


def render_frames(params_source, n_frames, dt=DT, t0=0.0, figsize=(8, 4), dpi=80):
    """
    Renders n_frames to RGB arrays through one reused figure
    """
    fig, axes = init_figure(figsize)
    fig.set_dpi(dpi)
    images = []
    try:
        for t, frame in run_frames(params_source, n_frames, dt, t0):
            draw_frame(axes, frame, t)
            images.append(frame_to_image(fig))
    finally:
        plt.close(fig)
    return images


def save_gif(path, params_source, n_frames=200, dt=DT, fps=30, **render_kw):
    """
    Renders the animation and writes it as a GIF with imageio
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    images = render_frames(params_source, n_frames, dt, **render_kw)
    imageio.mimsave(path, images, duration=1000.0 / fps, loop=0)
    return path


def save_snapshot(path, params, t=0.0, figsize=(12, 5), dpi=150):
    """
    Saves one frame at time t as a still image
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig, axes = init_figure(figsize)
    try:
        draw_frame(axes, sample(t, params), t)
        fig.savefig(path, dpi=dpi)
    finally:
        plt.close(fig)
    return path
