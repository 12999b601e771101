import time
import math
from pathlib import Path

import matplotlib
matplotlib.use("Agg")

# Import our installed wave packet library
import wavelib


def run_cli_job(
    out_dir: str | Path = "outputinfo",
    n_frames: int = 200,
    dt: float = wavelib.DT,
    fps: int = 30,
    snapshot: bool = True,
    **param_overrides,
):
    """
    Renders the wave packet animation to a GIF (plus an optional t=0 still)
    for one set of parameters.
    """
    start_time = time.time()
    unknown = set(param_overrides) - set(wavelib.DEFAULT_PARAMS)
    if unknown:
        raise ValueError(f"Unknown parameter(s): {', '.join(sorted(unknown))}")

    # 1. Build and validate the parameter snapshot
    params = wavelib.get_params(param_overrides)
    print(f"--- Received Job: {n_frames} frames, dt={dt}, fps={fps} ---")
    print(f"    Parameters: A={params.amplitude}, sigma={params.sigma}, k0={params.k0}, "
          f"k1={params.k1 if params.second_wave else 'off'}, "
          f"bump={'on' if params.phase_bump else 'off'}")

    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    # 2. Optional still frame
    snapshot_path = None
    if snapshot:
        snapshot_path = wavelib.save_snapshot(out_dir / "wavepacket_t0.png", params, t=0.0)
        print(f"    Saved snapshot to {snapshot_path}")

    # 3. Animation
    print(f"⏱ Generating GIF with {n_frames} frames...")
    gif_path = wavelib.save_gif(out_dir / "wavepacket.gif", params, n_frames=n_frames, dt=dt, fps=fps)

    duration = time.time() - start_time
    print("\n--- Render Finished ---")
    print(f"    Total duration: {duration:.2f} s")
    print(f"✅ Saved {gif_path} ({n_frames} frames, {fps} FPS)")

    return {
        "gif": str(gif_path),
        "snapshot": str(snapshot_path) if snapshot_path else None,
        "frames": n_frames,
        "duration": duration,
        "params": params.as_dict(),
    }


if __name__ == "__main__":
    import argparse

    defaults = wavelib.DEFAULT_PARAMS
    parser = argparse.ArgumentParser(
        description="Render the 1D wave packet animation to a GIF.")
    parser.add_argument("--amplitude", type=float, default=defaults['amplitude'],
                        help="Envelope peak height.")
    parser.add_argument("--sigma", type=float, default=defaults['sigma'],
                        help="Gaussian envelope width.")
    parser.add_argument("--k0", type=float, default=defaults['k0'],
                        help="Primary wavenumber, also sets the drift velocity.")
    parser.add_argument("--k1", type=float, default=defaults['k1'],
                        help="Secondary wavenumber.")
    parser.add_argument("--no-second-wave", action="store_true",
                        help="Drop the k1 component.")
    parser.add_argument("--no-phase-bump", action="store_true",
                        help="Disable the localized phase shift.")
    parser.add_argument("--bump-center", type=float, default=defaults['bump_center'])
    parser.add_argument("--bump-width", type=float, default=defaults['bump_width'])
    parser.add_argument("--bump-phase", type=float, default=defaults['bump_phase'],
                        help=f"Peak phase shift in radians (default pi/2 = {math.pi / 2:.4f}).")
    parser.add_argument("--frames", type=int, default=200)
    parser.add_argument("--dt", type=float, default=wavelib.DT)
    parser.add_argument("--fps", type=int, default=30)
    parser.add_argument("--out", default="outputinfo",
                        help="Output directory for the GIF and snapshot.")
    parser.add_argument("--no-snapshot", action="store_true")
    args = parser.parse_args()

    try:
        run_cli_job(
            out_dir=args.out,
            n_frames=args.frames,
            dt=args.dt,
            fps=args.fps,
            snapshot=not args.no_snapshot,
            amplitude=args.amplitude,
            sigma=args.sigma,
            k0=args.k0,
            k1=args.k1,
            second_wave=not args.no_second_wave,
            phase_bump=not args.no_phase_bump,
            bump_center=args.bump_center,
            bump_width=args.bump_width,
            bump_phase=args.bump_phase,
        )
    except wavelib.InvalidParameter as e:
        parser.error(str(e))
