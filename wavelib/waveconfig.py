import math
import dataclasses
from dataclasses import dataclass, asdict

#unit constants, hbar = m = 1
HBAR = 1.0
MASS = 1.0

N = 500             #samples per frame
HALF_WIDTH = 10.0   #sampled window is center +/- HALF_WIDTH
VIEW_HALF_WIDTH = 5.0
DT = 0.01           #frame clock step

DEFAULT_PARAMS = {
    'amplitude':   0.5,
    'sigma':       1.0,
    'k0':          5.0,
    'k1':          7.0,
    'second_wave': True,
    'phase_bump':  True,
    'bump_center': 2.0,
    'bump_width':  1.0,
    'bump_phase':  math.pi / 2,
}

# (min, max, step) for the interactive controls, not enforced by the sampler
PARAM_RANGES = {
    'amplitude':   (0.1, 2.0, 0.1),
    'sigma':       (0.1, 3.0, 0.1),
    'k0':          (0.0, 20.0, 0.5),
    'k1':          (0.0, 20.0, 0.5),
    'bump_center': (-10.0, 10.0, 0.1),
    'bump_width':  (0.1, 5.0, 0.1),
    'bump_phase':  (-math.pi, math.pi, 0.1),
}

_WIDTH_FIELDS = ('sigma', 'bump_width')


class InvalidParameter(ValueError):
    """Raised when a parameter set would make the sampler degenerate."""

    def __init__(self, name, value, reason="must be > 0"):
        self.name = name
        self.value = value
        super().__init__(f"Invalid parameter '{name}' = {value!r}: {reason}")


def _filtered_kwargs(cls, kw):
    """Return a copy of dict `kw` that only keeps keys that are fields of `cls`."""
    allowed = {f.name for f in dataclasses.fields(cls)}
    return {k: v for k, v in kw.items() if k in allowed}


def validate_params(params):
    """
    Checks a ParameterSet (or a plain dict of the same keys).
    Width fields have to be strictly positive, every number has to be finite.
    """
    values = params if isinstance(params, dict) else asdict(params)
    for name, value in values.items():
        if isinstance(value, bool):
            continue
        try:
            finite = math.isfinite(value)
        except TypeError:
            raise InvalidParameter(name, value, "must be a number") from None
        if not finite:
            raise InvalidParameter(name, value, "must be finite")
    for name in _WIDTH_FIELDS:
        if name in values and values[name] <= 0:
            raise InvalidParameter(name, values[name])
    return params


@dataclass(frozen=True)
class ParameterSet:
    """Immutable snapshot of the wave packet controls, read once per frame."""
    amplitude: float = DEFAULT_PARAMS['amplitude']
    sigma: float = DEFAULT_PARAMS['sigma']
    k0: float = DEFAULT_PARAMS['k0']
    k1: float = DEFAULT_PARAMS['k1']
    second_wave: bool = DEFAULT_PARAMS['second_wave']
    phase_bump: bool = DEFAULT_PARAMS['phase_bump']
    bump_center: float = DEFAULT_PARAMS['bump_center']
    bump_width: float = DEFAULT_PARAMS['bump_width']
    bump_phase: float = DEFAULT_PARAMS['bump_phase']

    def __post_init__(self):
        validate_params(self)

    @classmethod
    def from_dict(cls, params: dict | None = None):
        """
        Builds a snapshot on top of DEFAULT_PARAMS, keys the dataclass does not know are dropped
        """
        cfg = dict(DEFAULT_PARAMS)
        if params is not None:
            cfg.update(params)
        return cls(**_filtered_kwargs(cls, cfg))

    def replace(self, **changes):
        return dataclasses.replace(self, **changes)

    def as_dict(self):
        return asdict(self)


def get_params(params=None, **overrides):
    """
    Returns a ParameterSet from either an existing snapshot, a dict, or nothing (defaults),
    with keyword overrides applied on top
    """
    if params is None:
        params = {}
    if isinstance(params, ParameterSet):
        return params.replace(**overrides) if overrides else params
    cfg = dict(params)
    cfg.update(overrides)
    return ParameterSet.from_dict(cfg)
