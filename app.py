import time

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import streamlit as st

import wavelib

st.set_page_config(page_title="Wave Packet Explorer", layout="wide")

# ---------------- Header ----------------
st.title("1D Wave Packet Explorer")
st.caption("Gaussian packet with an optional second carrier and a localized phase gate. "
           "Tweak the controls while it plays, changes land on the next frame.")

if "clock" not in st.session_state:
    st.session_state["clock"] = wavelib.FrameClock(wavelib.DT)
clock = st.session_state["clock"]

# ---------------- Controls ----------------
R = wavelib.PARAM_RANGES
D = wavelib.DEFAULT_PARAMS


def _slider(label, key, help=None):
    lo, hi, step = R[key]
    return st.slider(label, float(lo), float(hi), float(D[key]), float(step), key=key, help=help)


with st.sidebar:
    st.markdown("### Packet")
    amplitude = _slider("A (amplitude)", "amplitude")
    sigma = _slider("σ (envelope width)", "sigma")
    k0 = _slider("k₀ (primary wavenumber)", "k0", help="Also sets the drift velocity v = ħk₀/m.")
    second_wave = st.checkbox("Second wave", value=D["second_wave"])
    k1 = _slider("k₁ (second wavenumber)", "k1")

    st.markdown("### Phase gate")
    phase_bump = st.checkbox("Phase bump", value=D["phase_bump"])
    bump_center = _slider("Bump centre", "bump_center")
    bump_width = _slider("Bump width", "bump_width")
    bump_phase = _slider("Bump phase (rad)", "bump_phase")

    st.markdown("### Playback")
    dt = st.number_input("Time step (dt)", min_value=0.001, max_value=0.1,
                         value=wavelib.DT, format="%.3f")
    playing = st.toggle("▶ Play", value=True)
    if st.button("⏮ Reset time"):
        clock.reset()

try:
    params = wavelib.ParameterSet(
        amplitude=amplitude, sigma=sigma, k0=k0, k1=k1,
        second_wave=second_wave, phase_bump=phase_bump,
        bump_center=bump_center, bump_width=bump_width, bump_phase=bump_phase,
    )
except wavelib.InvalidParameter as e:
    st.error(str(e))
    st.stop()

# ---------------- Charts ----------------
placeholder = st.empty()
status = st.empty()
fig, axes = wavelib.init_figure(figsize=(12, 5))

# a new dt only applies from the current time on
if dt != clock.dt:
    clock.set_dt(dt)


def show(t, frame):
    wavelib.draw_frame(axes, frame, t)
    placeholder.pyplot(fig, clear_figure=False)
    status.caption(f"t = {t:.2f}   window centre = {frame.window_center:.2f}")


if playing:
    # runs until a widget change reruns the script
    for t, frame in wavelib.run_frames(params, None, clock=clock):
        show(t, frame)
        time.sleep(0.01)
else:
    t = clock.time
    show(t, wavelib.sample(t, params))

plt.close(fig)
