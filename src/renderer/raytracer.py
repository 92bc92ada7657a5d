# renderer/raytracer.py
import logging
import math
import random
import time
from typing import Iterator, Optional, Tuple

import numpy as np

from core.ray import Ray
from core.vector import Vector3
from renderer.settings import MAX_DEPTH, T_MIN, RenderSettings
from renderer.tone_mapping import gamma_correct

logger = logging.getLogger(__name__)

SKY_HORIZON = Vector3.one()
SKY_ZENITH = Vector3(0.5, 0.7, 1.0)

def background(ray: Ray) -> Vector3:
    """
    Vertical sky gradient: white at the horizon, light blue straight up.
    """
    unit_direction = ray.direction.unit()
    t = 0.5 * (unit_direction.y + 1.0)
    return SKY_HORIZON * (1.0 - t) + SKY_ZENITH * t

def ray_color(world, ray: Ray, depth: int, rng=random,
              max_depth: int = MAX_DEPTH, t_min: float = T_MIN) -> Vector3:
    """
    Radiance carried back along `ray`.

    Follows intersection -> scatter -> recursion until the ray escapes to
    the sky, gets absorbed, or `depth` reaches `max_depth`. The last two
    contribute black; an exhausted path is black even if it would escape.
    """
    if depth >= max_depth:
        return Vector3.zero()
    rec = world.hit(ray, t_min, math.inf)
    if rec is None:
        return background(ray)

    scattered = rec.material.scatter(ray, rec, rng)
    if scattered is None:
        return Vector3.zero()
    scattered_ray, attenuation = scattered
    return attenuation * ray_color(world, scattered_ray, depth + 1, rng, max_depth, t_min)

class Renderer:
    """
    CPU path tracer. Averages `samples_per_pixel` jittered samples per pixel
    and returns 8-bit images with rows ordered top to bottom.
    """
    def __init__(self, settings: Optional[RenderSettings] = None):
        self.settings = settings if settings is not None else RenderSettings()

    def make_rng(self) -> random.Random:
        # A fresh stream per render keeps seeded renders byte-identical.
        return random.Random(self.settings.seed)

    def render_pixel(self, scene, x: int, y: int, rng=random) -> Vector3:
        """
        Average color of pixel (x, y), with y counted from the bottom row.
        """
        settings = self.settings
        width, height = scene.width, scene.height
        col = Vector3.zero()
        for _ in range(settings.samples_per_pixel):
            u = (x + rng.random()) / width
            v = (y + rng.random()) / height
            ray = scene.camera.get_ray(u, v, rng)
            col += ray_color(scene.world, ray, 0, rng, settings.max_depth, settings.t_min)
        col /= settings.samples_per_pixel
        return col

    def render_linear(self, scene, rng=None) -> np.ndarray:
        """
        Returns the averaged, not yet gamma-corrected image as a
        (height x width x 3) float32 array, top row first.
        """
        if rng is None:
            rng = self.make_rng()
        width, height = scene.width, scene.height
        accumulated = np.zeros((height, width, 3), dtype=np.float32)

        logger.info("Rendering %dx%d image, %d samples per pixel, max depth %d",
                    width, height, self.settings.samples_per_pixel, self.settings.max_depth)
        start = time.perf_counter()
        for y in range(height - 1, -1, -1):
            row = height - 1 - y
            logger.debug("Scanlines remaining: %d", y + 1)
            for x in range(width):
                col = self.render_pixel(scene, x, y, rng)
                accumulated[row, x] = (col.r, col.g, col.b)
        logger.info("Rendering finished in %.2fs", time.perf_counter() - start)
        return accumulated

    def render(self, scene, rng=None) -> np.ndarray:
        """
        Renders the scene into a (height x width x 3) uint8 array.
        """
        return gamma_correct(self.render_linear(scene, rng))

    def iter_pixels(self, scene, rng=None) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (r, g, b) byte triples in raster order: top row first,
        left to right within a row.
        """
        image = self.render(scene, rng)
        for row in image:
            for pixel in row:
                yield int(pixel[0]), int(pixel[1]), int(pixel[2])
