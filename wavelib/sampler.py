import numpy as np
from typing import NamedTuple

from .waveconfig import HBAR, MASS, N, HALF_WIDTH, validate_params
from .gatelib import gaussian_envelope, plane_wave, apply_phase_gate


class SampleFrame(NamedTuple):
    """One frame of sampled amplitudes, unpacks as (x, re, im, x_center)."""
    positions: np.ndarray
    real_part: np.ndarray
    imag_part: np.ndarray
    window_center: float

    @property
    def probability(self):
        return probability_density(self.real_part, self.imag_part)


def group_velocity(k0):
    return HBAR * k0 / MASS


def init_window(t, k0, n=N):
    """
    Builds the co-moving sample grid for time t.
    The window follows the primary packet, centre v*t with v = hbar k0 / m

    Returns:
        (np.ndarray, float): n evenly spaced positions covering
                             [x_center - HALF_WIDTH, x_center + HALF_WIDTH], and x_center
    """
    if n < 2:
        raise ValueError(f"Need at least 2 samples per window, got {n}")
    x_center = group_velocity(k0) * t
    x = np.linspace(x_center - HALF_WIDTH, x_center + HALF_WIDTH, n)
    #linspace endpoint can drift by an ulp, pin both ends
    x[0] = x_center - HALF_WIDTH
    x[-1] = x_center + HALF_WIDTH
    return x, x_center


def sample(t, params, n=N):
    """
    Synthesizes the wavefunction over the moving window at time t.

    Args:
        t (float): Simulation time.
        params (ParameterSet): Snapshot of the controls for this frame.
        n (int): Number of sample points.

    Returns:
        SampleFrame: positions, real part, imaginary part, window centre.
    """
    validate_params(params)
    x, x_center = init_window(t, params.k0, n)

    # both terms share the primary envelope, centred at x0 = v t
    x0 = x_center
    env = gaussian_envelope(x, x0, params.sigma, params.amplitude)

    re, im = plane_wave(x, t, params.k0, env)

    if params.second_wave:
        re2, im2 = plane_wave(x, t, params.k1, env)
        re = re + re2
        im = im + im2

    re, im = apply_phase_gate(x, re, im, params)

    return SampleFrame(x, re, im, x_center)


def sample_many(times, params, n=N):
    return [sample(t, params, n) for t in times]


def probability_density(frame_or_re, im=None):
    """
    |psi|^2 = re^2 + im^2, takes either a SampleFrame or the two component arrays
    """
    if im is None:
        re, im = frame_or_re.real_part, frame_or_re.imag_part
    else:
        re = frame_or_re
    re = np.asarray(re)
    im = np.asarray(im)
    return re ** 2 + im ** 2
