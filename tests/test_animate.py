import tempfile
import unittest
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from wavelib import ParameterSet
from wavelib.animate import FrameClock, make_animation, render_frames, run_frames, save_gif, save_snapshot


class TestFrameClock(unittest.TestCase):
    def test_tick_returns_current_time_then_advances(self):
        clock = FrameClock(dt=0.5, t0=1.0)
        self.assertEqual([clock.tick() for _ in range(3)], [1.0, 1.5, 2.0])
        self.assertEqual(clock.time, 2.5)
        clock.reset()
        self.assertEqual(clock.time, 1.0)

    def test_rejects_non_positive_step(self):
        with self.assertRaises(ValueError):
            FrameClock(dt=0.0)
        with self.assertRaises(ValueError):
            FrameClock().set_dt(-0.01)

    def test_changing_step_keeps_time_monotonic(self):
        clock = FrameClock(dt=0.01)
        times = [clock.tick() for _ in range(1000)]
        clock.set_dt(0.001)
        times += [clock.tick() for _ in range(5)]
        clock.set_dt(0.05)
        times += [clock.tick() for _ in range(5)]
        for earlier, later in zip(times, times[1:]):
            self.assertGreaterEqual(later, earlier)
        self.assertAlmostEqual(times[1000], 10.0)
        self.assertAlmostEqual(times[1001], 10.001)
        self.assertAlmostEqual(times[1006], 10.005 + 0.05)

    def test_reset_after_step_change_returns_to_start(self):
        clock = FrameClock(dt=0.1, t0=2.0)
        clock.tick()
        clock.set_dt(0.2)
        clock.tick()
        clock.reset()
        self.assertEqual(clock.time, 2.0)
        self.assertEqual(clock.dt, 0.2)


class TestRunFrames(unittest.TestCase):
    def test_fixed_snapshot(self):
        frames = list(run_frames(ParameterSet(k0=2.0), 4, dt=0.25))
        self.assertEqual([t for t, _ in frames], [0.0, 0.25, 0.5, 0.75])
        self.assertEqual([f.window_center for _, f in frames], [0.0, 0.5, 1.0, 1.5])

    def test_live_source_is_read_every_tick(self):
        state = {"params": ParameterSet(k0=1.0)}
        seen = []
        for t, frame in run_frames(lambda: state["params"], 4, dt=1.0):
            seen.append(frame.window_center)
            if t == 1.0:
                state["params"] = state["params"].replace(k0=10.0)
        # the new k0 shows up from the next frame on, no smoothing
        self.assertEqual(seen, [0.0, 1.0, 20.0, 30.0])

    def test_open_ended_run(self):
        frames = run_frames(ParameterSet(k0=1.0), None, dt=1.0)
        centres = [next(frames)[1].window_center for _ in range(50)]
        self.assertEqual(centres[-1], 49.0)
        frames.close()

    def test_shared_clock_continues(self):
        clock = FrameClock(dt=0.1)
        list(run_frames(ParameterSet(), 3, clock=clock))
        (t, _), = list(run_frames(ParameterSet(), 1, clock=clock))
        self.assertAlmostEqual(t, 0.3)


class TestOutput(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_render_frames(self):
        images = render_frames(ParameterSet(), 3, figsize=(4, 2), dpi=40)
        self.assertEqual(len(images), 3)
        self.assertEqual(images[0].shape, images[2].shape)

    def test_save_gif(self):
        path = save_gif(self.tmp / "out" / "packet.gif", ParameterSet(), n_frames=3, fps=10,
                        figsize=(4, 2), dpi=40)
        self.assertTrue(path.exists())
        self.assertEqual(path.read_bytes()[:3], b"GIF")

    def test_save_snapshot(self):
        path = save_snapshot(self.tmp / "still.png", ParameterSet(), t=0.5, figsize=(4, 2), dpi=40)
        self.assertEqual(path.read_bytes()[:4], b"\x89PNG")

    def test_make_animation(self):
        fig, anim = make_animation(ParameterSet(), n_frames=2)
        try:
            self.assertIsInstance(anim, FuncAnimation)
        finally:
            anim.event_source.stop()
            plt.close(fig)


if __name__ == "__main__":
    unittest.main()
