import numpy as np
import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401  registers the 3d projection
from mpl_toolkits.mplot3d.art3d import Line3DCollection

from .waveconfig import VIEW_HALF_WIDTH
from .sampler import probability_density

RE_IM_LIMIT = 1.0
DENSITY_HEADROOM = 1.1


def trace_view_range(window_center, half_width=VIEW_HALF_WIDTH):
    return (window_center - half_width, window_center + half_width)


def density_range(prob):
    """
    y-range for the density plot, [0, 1.1 * max]. Falls back to [0, 1] for an empty/flat frame
    """
    prob = np.asarray(prob)
    top = float(np.max(prob)) if prob.size else 0.0
    if not np.isfinite(top) or top <= 0:
        return (0.0, 1.0)
    return (0.0, DENSITY_HEADROOM * top)


def init_figure(figsize=(12, 5)):
    """
    Creates the figure: 3d trace of (x, Re psi, Im psi) on the left, |psi|^2 on the right

    Returns:
        (Figure, (Axes3D, Axes))
    """
    fig = plt.figure(figsize=figsize)
    ax3d = fig.add_subplot(1, 2, 1, projection='3d')
    ax2d = fig.add_subplot(1, 2, 2)
    fig.subplots_adjust(left=0.02, right=0.97, bottom=0.12, top=0.95, wspace=0.15)
    return fig, (ax3d, ax2d)


def draw_trace(ax, frame):
    x, re, im, x_center = frame
    ax.cla()
    lo, hi = trace_view_range(x_center)
    #only draw what is inside the view, mplot3d does not clip to the axes box
    mask = (x >= lo) & (x <= hi)
    pts = np.column_stack([x[mask], re[mask], im[mask]])
    #a line needs two points, coarse frames may leave fewer inside the view
    if len(pts) >= 2:
        segments = np.stack([pts[:-1], pts[1:]], axis=1)
        line = Line3DCollection(segments, cmap='viridis', linewidths=2.5)
        line.set_array(pts[:-1, 0])
        ax.add_collection3d(line)
    ax.set_xlim(lo, hi)
    ax.set_ylim(-RE_IM_LIMIT, RE_IM_LIMIT)
    ax.set_zlim(-RE_IM_LIMIT, RE_IM_LIMIT)
    ax.set_xlabel('x')
    ax.set_ylabel('Re(ψ)')
    ax.set_zlabel('Im(ψ)')


def draw_density(ax, frame):
    prob = probability_density(frame)
    ax.cla()
    ax.plot(frame.positions, prob, color='blue')
    ax.set_xlim(*trace_view_range(frame.window_center))
    ax.set_ylim(*density_range(prob))
    ax.set_xlabel('x')
    ax.set_ylabel('|ψ(x)|²')
    return prob


def draw_frame(axes, frame, t=None):
    """
    Redraws both panels for one SampleFrame
    """
    ax3d, ax2d = axes
    draw_trace(ax3d, frame)
    draw_density(ax2d, frame)
    if t is not None:
        ax2d.set_title(f"t = {t:.2f}")


def frame_to_image(fig):
    """
    Renders the canvas and returns it as an (H, W, 3) uint8 array
    """
    fig.canvas.draw()
    rgba = np.asarray(fig.canvas.buffer_rgba())
    return rgba[:, :, :3].copy()
