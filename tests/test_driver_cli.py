import tempfile
import unittest
from pathlib import Path

import driver_cli
from wavelib import InvalidParameter


class TestRunCliJob(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_writes_gif_and_snapshot(self):
        result = driver_cli.run_cli_job(out_dir=self.tmp, n_frames=2, fps=5, k0=2.0, second_wave=False)
        self.assertTrue(Path(result["gif"]).exists())
        self.assertTrue(Path(result["snapshot"]).exists())
        self.assertEqual(result["frames"], 2)
        self.assertEqual(result["params"]["k0"], 2.0)
        self.assertFalse(result["params"]["second_wave"])

    def test_snapshot_can_be_skipped(self):
        result = driver_cli.run_cli_job(out_dir=self.tmp, n_frames=1, snapshot=False)
        self.assertIsNone(result["snapshot"])
        self.assertFalse((self.tmp / "wavepacket_t0.png").exists())

    def test_unknown_parameter(self):
        with self.assertRaises(ValueError) as ctx:
            driver_cli.run_cli_job(out_dir=self.tmp, n_frames=1, wobble=3)
        self.assertIn("wobble", str(ctx.exception))

    def test_invalid_width_fails_before_rendering(self):
        with self.assertRaises(InvalidParameter):
            driver_cli.run_cli_job(out_dir=self.tmp / "never", n_frames=1, sigma=0.0)
        self.assertFalse((self.tmp / "never").exists())


if __name__ == "__main__":
    unittest.main()
