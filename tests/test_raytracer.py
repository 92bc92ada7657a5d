"""Tests for the radiance integrator and the pixel sampling loop."""

import numpy as np
import pytest

from camera.camera import StaticCamera
from core.ray import Ray
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import World
from materials.material import Material
from renderer.image_io import ppm_lines
from renderer.raytracer import Renderer, background, ray_color
from renderer.settings import MAX_DEPTH, RenderSettings
from scene.builder import simple_scene
from scene.scene import Scene

BLACK = Vector3(0, 0, 0)


class Absorber(Material):
    """Absorbs every ray."""

    def scatter(self, ray_in, rec, rng=None):
        return None


class StraightUp(Material):
    """Sends every ray straight up with a fixed tint."""

    def __init__(self, tint):
        self.tint = tint

    def scatter(self, ray_in, rec, rng=None):
        return Ray(rec.p, Vector3(0, 1, 0)), self.tint


def forward_ray():
    return Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))


class TestBackground:
    """Sky gradient."""

    def test_gradient_endpoints(self):
        assert background(Ray(Vector3(0, 0, 0), Vector3(0, 3, 0))).isclose(Vector3(0.5, 0.7, 1.0))
        assert background(Ray(Vector3(0, 0, 0), Vector3(0, -2, 0))).isclose(Vector3(1, 1, 1))

    def test_horizon_is_the_midpoint(self):
        color = background(Ray(Vector3(0, 0, 0), Vector3(1, 0, 0)))
        assert color.isclose(Vector3(0.75, 0.85, 1.0))


class TestRayColor:
    """Recursive radiance resolution."""

    def test_escaping_ray_returns_background(self, rng):
        ray = forward_ray()
        assert ray_color(World(), ray, 0, rng) == background(ray)

    def test_depth_limit_returns_black(self, rng, single_sphere_world):
        for world in (single_sphere_world, World()):
            assert ray_color(world, forward_ray(), MAX_DEPTH, rng) == BLACK
            assert ray_color(world, forward_ray(), MAX_DEPTH + 7, rng) == BLACK

    def test_custom_depth_limit(self, rng, single_sphere_world):
        assert ray_color(single_sphere_world, forward_ray(), 0, rng, max_depth=0) == BLACK

    def test_absorbed_ray_is_black(self, rng):
        world = World([Sphere(Vector3(0, 0, -1), 0.5, Absorber())])
        assert ray_color(world, forward_ray(), 0, rng) == BLACK

    def test_attenuation_multiplies_incoming_radiance(self, rng):
        world = World([Sphere(Vector3(0, 0, -1), 0.5, StraightUp(Vector3(0.5, 0.25, 1.0)))])
        color = ray_color(world, forward_ray(), 0, rng)
        assert color.isclose(Vector3(0.25, 0.175, 1.0))

    def test_grey_sphere_halves_incoming_light(self, rng, single_sphere_world):
        # Albedo 0.5 and a sky no brighter than 1 per channel
        for _ in range(50):
            color = ray_color(single_sphere_world, forward_ray(), 0, rng)
            assert max(color) <= 0.5


class TestRenderer:
    """Pixel sampling, raster order and determinism."""

    def test_end_to_end_simple_scene(self):
        scene = simple_scene(20, 10)
        image = Renderer(RenderSettings(samples_per_pixel=10, seed=7)).render(scene)
        assert image.shape == (10, 20, 3)
        assert image.dtype == np.uint8

        sphere_pixel = image[5, 10].astype(int).sum()
        for row, col in ((0, 0), (0, 19), (9, 0), (9, 19)):
            assert sphere_pixel < image[row, col].astype(int).sum()

        lines = list(ppm_lines(image))
        assert len(lines) == 3 + 20 * 10
        assert lines[:3] == ["P3", "20 10", "255"]

    def test_rows_run_from_top_to_bottom(self):
        scene = Scene(StaticCamera(), World(), 20, 10)
        image = Renderer(RenderSettings(samples_per_pixel=4, seed=1)).render(scene)
        # The sky is bluest straight up, so red falls towards the top row
        assert image[0, 10, 0] < image[9, 10, 0]
        assert (image[:, :, 2] == 255).all()

    def test_seeded_renders_are_identical(self):
        scene = simple_scene(20, 10, with_ground=True)
        renderer = Renderer(RenderSettings(samples_per_pixel=3, seed=42))
        first = renderer.render(scene)
        second = renderer.render(scene)
        assert np.array_equal(first, second)
        assert list(ppm_lines(first)) == list(ppm_lines(second))

    def test_iter_pixels_follows_raster_order(self):
        scene = simple_scene(8, 4)
        renderer = Renderer(RenderSettings(samples_per_pixel=2, seed=5))
        image = renderer.render(scene)
        pixels = list(renderer.iter_pixels(scene))
        assert len(pixels) == 8 * 4
        assert pixels[0] == tuple(int(c) for c in image[0, 0])
        assert pixels[9] == tuple(int(c) for c in image[1, 1])

    def test_render_pixel_averages_samples(self, rng):
        scene = Scene(StaticCamera(), World(), 2, 1)
        renderer = Renderer(RenderSettings(samples_per_pixel=16))
        color = renderer.render_pixel(scene, 0, 0, rng)
        # Every sample is a sky color, so the average stays within the gradient
        assert 0.5 <= color.r <= 1.0
        assert color.b == pytest.approx(1.0)

    def test_linear_image_is_float32(self):
        scene = simple_scene(4, 2)
        linear = Renderer(RenderSettings(samples_per_pixel=1, seed=0)).render_linear(scene)
        assert linear.dtype == np.float32
        assert linear.shape == (2, 4, 3)


class TestRenderSettings:
    """Validation and quality presets."""

    def test_defaults(self):
        settings = RenderSettings()
        assert settings.samples_per_pixel == 100
        assert settings.max_depth == 50
        assert settings.t_min == 0.001

    def test_from_quality(self):
        settings = RenderSettings.from_quality("interactive", seed=3)
        assert settings.samples_per_pixel == 4
        assert settings.seed == 3

    @pytest.mark.parametrize("kwargs", [
        {"samples_per_pixel": 0},
        {"max_depth": -1},
        {"t_min": -0.1},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            RenderSettings(**kwargs)

    def test_unknown_quality(self):
        with pytest.raises(ValueError):
            RenderSettings.from_quality("ultra")
