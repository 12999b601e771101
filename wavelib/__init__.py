from .waveconfig import (
    HBAR, MASS, N, HALF_WIDTH, VIEW_HALF_WIDTH, DT,
    DEFAULT_PARAMS, PARAM_RANGES,
    InvalidParameter, ParameterSet, validate_params, get_params,
)
from .gatelib import gaussian_envelope, plane_wave, rotate, phase_gate, apply_phase_gate
from .sampler import SampleFrame, init_window, sample, sample_many, probability_density
from .render import trace_view_range, density_range, init_figure, draw_frame, frame_to_image
from .animate import FrameClock, run_frames, make_animation, render_frames, save_gif, save_snapshot
