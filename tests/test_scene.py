"""Tests for the built-in scenes and the command-line entry point."""

import logging
import random

import pytest

import main
from camera.camera import PositionableCamera, StaticCamera
from core.vector import Vector3
from logging_config import HANDLER_NAME, setup_logging
from materials.dielectric import Dielectric
from scene.builder import build_scene, default_scene, random_scene, simple_scene
from scene.scene import Scene


class TestScenes:
    """Scene construction."""

    def test_simple_scene(self):
        scene = simple_scene(20, 10)
        assert isinstance(scene.camera, StaticCamera)
        assert len(scene.world) == 1
        assert scene.aspect_ratio == 2.0

    def test_simple_scene_requires_two_to_one(self):
        with pytest.raises(ValueError):
            simple_scene(20, 20)

    def test_default_scene_has_hollow_glass_sphere(self):
        scene = default_scene(200, 100)
        assert isinstance(scene.camera, PositionableCamera)
        hollow = [s for s in scene.world if s.radius < 0]
        assert len(hollow) == 1
        assert isinstance(hollow[0].material, Dielectric)

    def test_random_scene_is_reproducible(self):
        first = random_scene(40, 20, rng=random.Random(9))
        second = random_scene(40, 20, rng=random.Random(9))
        assert len(first.world) == len(second.world)
        for a, b in zip(first.world, second.world):
            assert a.center == b.center
            assert a.radius == b.radius

    def test_random_scene_keeps_a_clearing(self):
        scene = random_scene(40, 20, rng=random.Random(2))
        small = [s for s in scene.world if s.radius == 0.2]
        assert 0 < len(small) <= 22 * 22
        for sphere in small:
            assert (sphere.center - Vector3(4, 0.2, 0)).length() > 0.9

    def test_build_scene_by_name(self):
        assert isinstance(build_scene("simple", 20, 10), Scene)
        assert isinstance(build_scene("random", 20, 10, seed=1), Scene)
        with pytest.raises(ValueError):
            build_scene("nope", 20, 10)

    def test_scene_size_must_be_positive(self):
        with pytest.raises(ValueError):
            Scene(StaticCamera(), simple_scene(2, 1).world, 0, 1)


class TestMain:
    """Command-line rendering."""

    def test_renders_a_ppm(self, tmp_path):
        output = tmp_path / "image.ppm"
        code = main.main([str(output), "--scene", "simple", "--width", "20", "--height", "10",
                          "--samples", "2", "--max-depth", "5", "--seed", "1"])
        assert code == 0
        lines = output.read_text().splitlines()
        assert lines[:3] == ["P3", "20 10", "255"]
        assert len(lines) == 203

    def test_same_seed_same_bytes(self, tmp_path):
        outputs = [tmp_path / "a.ppm", tmp_path / "b.ppm"]
        for output in outputs:
            assert main.main([str(output), "--scene", "default", "--width", "16", "--height", "8",
                              "--samples", "1", "--max-depth", "4", "--seed", "3"]) == 0
        assert outputs[0].read_bytes() == outputs[1].read_bytes()

    def test_bad_aspect_ratio_fails(self, tmp_path, caplog):
        output = tmp_path / "image.ppm"
        with caplog.at_level(logging.ERROR):
            code = main.main([str(output), "--scene", "simple", "--width", "30", "--height", "10"])
        assert code == 1
        assert not output.exists()
        assert "Aspect ratio" in caplog.text

    def test_unwritable_output_fails(self, tmp_path):
        output = tmp_path / "missing" / "image.ppm"
        code = main.main([str(output), "--scene", "simple", "--width", "4", "--height", "2",
                          "--samples", "1"])
        assert code == 1

    def test_make_settings_uses_quality_presets(self):
        args = main.parse_args(["--quality", "balanced", "--samples", "7"])
        settings = main.make_settings(args)
        assert settings.samples_per_pixel == 7
        assert settings.max_depth == 25


class TestLogging:
    """Logging setup."""

    def test_setup_is_idempotent(self):
        logger = setup_logging("DEBUG")
        setup_logging("WARNING")
        ours = [h for h in logger.handlers if h.get_name() == HANDLER_NAME]
        assert len(ours) == 1
        assert logger.level == logging.WARNING
