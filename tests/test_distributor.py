"""Tests for configuration validation, the fluent ViewDistributor and the CLI."""

from __future__ import annotations

import contextlib
import io
import json
import tempfile
import unittest
from dataclasses import replace
from pathlib import Path
from types import SimpleNamespace
from unittest import mock

from viewdistributor import (
    ConfigurationError, DistributorConfig, Rect, RotationMode, ViewDistributor,
)
from viewdistributor.__main__ import main
from tests.layout_fixture import RING_AVOID, RING_DRAW


class TestConfigValidation(unittest.TestCase):

    def test_defaults(self):
        config = DistributorConfig(draw_region=RING_DRAW)
        self.assertEqual(config.max_retries, 200)
        self.assertEqual(config.rotation_mode, RotationMode.POSITION)
        self.assertEqual(config.avoid, ())
        self.assertIsNone(config.seed)

    def test_non_positive_region_rejected(self):
        for region in (Rect(0, 0, 0, 10), Rect(0, 0, 10, 0), Rect(5, 5, 5, 5)):
            with self.subTest(region=region):
                with self.assertRaises(ConfigurationError):
                    DistributorConfig(draw_region=region)

    def test_bad_values_rejected(self):
        bad = [
            {"bound_padding": 0},
            {"avoid_padding": -1.0},
            {"max_retries": 0},
            {"rejection_tries": -1},
            {"min_angle": 10, "max_angle": 5},
            {"rotation_mode": "sideways"},
            {"time_budget_s": 0},
        ]
        for options in bad:
            with self.subTest(**options):
                with self.assertRaises(ConfigurationError):
                    DistributorConfig(draw_region=RING_DRAW, **options)

    def test_negative_extent_region_rejected(self):
        for region in ((0, 0, -10, 10), (0, 0, 10, -10), {"x": 0, "y": 0, "width": -5, "height": 5}):
            with self.subTest(region=region):
                with self.assertRaises(ConfigurationError):
                    DistributorConfig(draw_region=region)

    def test_negative_extent_avoid_rejected(self):
        with self.assertRaises(ConfigurationError):
            DistributorConfig(draw_region=RING_DRAW, avoid=[(60, 60, 40, 40)])

    def test_configuration_error_is_value_error(self):
        self.assertTrue(issubclass(ConfigurationError, ValueError))

    def test_loose_inputs_normalised(self):
        config = DistributorConfig(
            draw_region=(0, 0, 100, 100),
            avoid=[[40, 40, 60, 60]],
            rotation_mode="random",
        )
        self.assertEqual(config.draw_region, RING_DRAW)
        self.assertEqual(config.avoid, (RING_AVOID,))
        self.assertIs(config.rotation_mode, RotationMode.RANDOM)

    def test_replace_revalidates(self):
        config = DistributorConfig(draw_region=RING_DRAW)
        with self.assertRaises(ConfigurationError):
            replace(config, max_retries=0)

    def test_padded_avoid_is_fresh_copy(self):
        config = DistributorConfig(draw_region=RING_DRAW, avoid=(RING_AVOID,))
        padded = config.padded_avoid
        padded.clear()
        self.assertEqual(len(config.padded_avoid), 1)


class TestViewDistributor(unittest.TestCase):

    def test_fluent_chain(self):
        distributor = (
            ViewDistributor((0, 0, 1080, 1920))
            .min_angle(-15)
            .max_angle(15)
            .avoid(Rect(400, 800, 680, 1000))
            .bound_padding(0.9)
            .avoid_padding(1.2)
            .max_retries(50)
            .seed(3)
        )
        config = distributor.config
        self.assertEqual((config.min_angle, config.max_angle), (-15, 15))
        self.assertEqual(config.avoid, (Rect(400, 800, 680, 1000),))
        self.assertEqual(config.bound_padding, 0.9)
        self.assertEqual(config.avoid_padding, 1.2)
        self.assertEqual(config.max_retries, 50)
        self.assertEqual(config.seed, 3)

    def _angles(self, distributor):
        return distributor.config.min_angle, distributor.config.max_angle

    def test_angle_setters_in_either_order(self):
        """Positive-only and negative-only ranges set in both call orders."""
        for low, high in ((10, 20), (-30, -10), (-15, 15)):
            with self.subTest(low=low, high=high):
                forward = ViewDistributor(RING_DRAW).min_angle(low).max_angle(high)
                backward = ViewDistributor(RING_DRAW).max_angle(high).min_angle(low)
                self.assertEqual(self._angles(forward), (low, high))
                self.assertEqual(self._angles(backward), (low, high))

    def test_single_setter_widens_other_angle(self):
        distributor = ViewDistributor(RING_DRAW).min_angle(5)
        self.assertEqual(self._angles(distributor), (5, 5))
        distributor.max_angle(-5)
        self.assertEqual(self._angles(distributor), (-5, -5))

    def test_angle_range_validates(self):
        distributor = ViewDistributor(RING_DRAW)
        with self.assertRaises(ConfigurationError):
            distributor.angle_range(25, 5)
        distributor.angle_range(5, 25)
        self.assertEqual(self._angles(distributor), (5, 25))

    def test_negative_bounds_raise_configuration_error(self):
        with self.assertRaises(ConfigurationError):
            ViewDistributor((0, 0, -10, 10))
        distributor = ViewDistributor(RING_DRAW)
        with self.assertRaises(ConfigurationError):
            distributor.resize(-5, 10)
        with self.assertRaises(ConfigurationError):
            distributor.avoid((10, 10, 0, 20))
        self.assertEqual(distributor.config.draw_region, RING_DRAW)
        self.assertEqual(distributor.config.avoid, ())

    def test_avoid_views(self):
        button = SimpleNamespace(x=40, y=40, width=20, height=20)
        distributor = ViewDistributor(RING_DRAW).avoid(button, None)
        self.assertEqual(distributor.config.avoid, (RING_AVOID,))
        self.assertEqual(ViewDistributor.view_to_region(button), RING_AVOID)

    def test_set_and_clear_avoid(self):
        distributor = ViewDistributor(RING_DRAW).avoid(RING_AVOID)
        distributor.set_avoid([(0, 0, 10, 10), (90, 90, 100, 100)])
        self.assertEqual(len(distributor.config.avoid), 2)
        distributor.clear_avoid()
        self.assertEqual(distributor.config.avoid, ())

    def test_resize(self):
        distributor = ViewDistributor(RING_DRAW).resize(320, 480)
        self.assertEqual(distributor.config.draw_region, Rect(0, 0, 320, 480))
        with self.assertRaises(ConfigurationError):
            distributor.resize(0, 480)
        # A rejected change leaves the previous config in place
        self.assertEqual(distributor.config.draw_region, Rect(0, 0, 320, 480))

    def test_rotation_mode_string(self):
        distributor = ViewDistributor(RING_DRAW).rotation_mode("random")
        self.assertIs(distributor.config.rotation_mode, RotationMode.RANDOM)

    def test_candidate_regions(self):
        distributor = ViewDistributor(RING_DRAW).avoid(RING_AVOID)
        self.assertEqual(len(distributor.candidate_regions()), 8)

    def test_distribute_and_shuffle(self):
        distributor = ViewDistributor(RING_DRAW, seed=8).avoid(RING_AVOID)
        first = distributor.distribute([(10, 10), (10, 10)])
        again = distributor.distribute([(10, 10), (10, 10)])
        self.assertEqual(first.outcomes, again.outcomes)
        shuffled = distributor.shuffle([(10, 10), (10, 10)])
        self.assertEqual(len(shuffled.outcomes), 2)
        for item in shuffled.placed:
            self.assertFalse(item.rect.intersects(RING_AVOID))
        self.assertEqual(distributor.config.seed, 8)


class TestCommandLine(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.layout = Path(self._tmp.name) / "layout.json"
        self.layout.write_text(json.dumps({
            "draw_region": [0, 0, 100, 100],
            "avoid": [[40, 40, 60, 60]],
            "items": [[10, 10], [10, 10]],
            "seed": 4,
        }))

    def tearDown(self):
        self._tmp.cleanup()

    def _run(self, *args: str) -> tuple[int, str]:
        out = io.StringIO()
        with mock.patch("sys.argv", ["viewdistributor", *args]), \
                contextlib.redirect_stdout(out):
            try:
                main()
                code = 0
            except SystemExit as e:
                code = e.code
        return code, out.getvalue()

    def test_distribute(self):
        code, out = self._run("distribute", str(self.layout))
        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertTrue(data["ok"])
        self.assertEqual(len(data["outcomes"]), 2)

    def test_seed_override_is_deterministic(self):
        _, first = self._run("distribute", str(self.layout), "--seed", "17")
        _, second = self._run("distribute", str(self.layout), "--seed", "17")
        self.assertEqual(first, second)

    def test_regions(self):
        code, out = self._run("regions", str(self.layout))
        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual(len(data["regions"]), 8)
        self.assertAlmostEqual(data["free_area"], 100 * 100 - 20 * 20)

    def test_usage(self):
        code, out = self._run("bogus")
        self.assertEqual(code, 1)
        self.assertIn("Usage", out)

    def test_invalid_seed(self):
        with contextlib.redirect_stderr(io.StringIO()) as err:
            code, out = self._run("distribute", str(self.layout), "--seed", "abc")
        self.assertEqual(code, 2)
        self.assertIn("Usage", out)
        self.assertIn("abc", err.getvalue())

    def test_negative_region_in_layout(self):
        self.layout.write_text(json.dumps({
            "draw_region": {"x": 0, "y": 0, "width": -10, "height": 10},
        }))
        with contextlib.redirect_stderr(io.StringIO()):
            code, _ = self._run("regions", str(self.layout))
        self.assertEqual(code, 2)

    def test_invalid_layout(self):
        self.layout.write_text(json.dumps({"draw_region": [0, 0, 0, 0]}))
        with contextlib.redirect_stderr(io.StringIO()):
            code, _ = self._run("distribute", str(self.layout))
        self.assertEqual(code, 2)


if __name__ == "__main__":
    unittest.main()
