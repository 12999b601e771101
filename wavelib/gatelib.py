import numpy as np

from .waveconfig import MASS


def gaussian_envelope(x, center, width, height=1.0):
    """
    Gaussian bump of given height centred on `center`
    """
    return height * np.exp(-(x - center) ** 2 / (2 * width ** 2))


def plane_wave(x, t, k, envelope):
    """
    Returns (re, im) of one envelope-modulated plane wave with the free particle
    dispersion phase k*x - k^2 t / 2m
    """
    phase = k * x - (k ** 2) * t / (2 * MASS)
    return envelope * np.cos(phase), envelope * np.sin(phase)


def rotate(re, im, g_re, g_im):
    """
    Complex product (re + i im)(g_re + i g_im), kept as a pair
    """
    return re * g_re - im * g_im, re * g_im + im * g_re


def phase_gate(x, params):
    """
    Returns (cos phi, sin phi) for the localized phase shift
    phi(x) = bump_phase * exp(-(x - bump_center)^2 / (2 bump_width^2)).
    Identity when the bump is switched off.
    """
    x = np.asarray(x, dtype=float)
    if not params.phase_bump:
        return np.ones_like(x), np.zeros_like(x)
    phi = gaussian_envelope(x, params.bump_center, params.bump_width, params.bump_phase)
    return np.cos(phi), np.sin(phi)


def apply_phase_gate(x, re, im, params):
    """
    psi(x) -> psi(x) e^{i phi(x)}, magnitude is preserved pointwise
    """
    if not params.phase_bump:
        return re, im
    g_re, g_im = phase_gate(x, params)
    return rotate(re, im, g_re, g_im)
