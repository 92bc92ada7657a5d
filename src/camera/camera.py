# camera/camera.py
import math
import random
from core.vector import Vector3
from core.ray import Ray
from core.utils import random_in_unit_disk

class Camera:
    """
    Maps image-plane coordinates (s, t) in [0, 1], origin at the lower-left
    corner, to primary rays.
    """
    def get_ray(self, s: float, t: float, rng=random) -> Ray:
        raise NotImplementedError("get_ray() must be implemented by subclasses.")

class StaticCamera(Camera):
    """
    Pinhole camera at the world origin looking down -z through a fixed
    4x2 viewport one unit away. Only suits 2:1 images.
    """
    def __init__(self):
        self.origin = Vector3(0.0, 0.0, 0.0)
        self.lower_left_corner = Vector3(-2.0, -1.0, -1.0)
        self.horizontal = Vector3(4.0, 0.0, 0.0)
        self.vertical = Vector3(0.0, 2.0, 0.0)

    def get_ray(self, s: float, t: float, rng=random) -> Ray:
        direction = (self.lower_left_corner +
                     self.horizontal * s +
                     self.vertical * t -
                     self.origin)
        return Ray(self.origin, direction)

class PositionableCamera(Camera):
    """
    Thin-lens camera placed at `look_from` and aimed at `look_at`.

    vfov is the vertical field of view in degrees. A non-zero aperture
    samples ray origins over the lens disk, blurring everything off the
    plane at `focus_dist`.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, up: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 1.0):
        view = look_from - look_at
        if view.squared_length() == 0:
            raise ValueError("look_from and look_at must differ.")
        if up.cross(view).squared_length() == 0:
            raise ValueError("up must not be parallel to the view direction.")
        if focus_dist <= 0:
            raise ValueError("focus_dist must be positive.")

        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture
        self.focus_dist = focus_dist
        self.lens_radius = aperture / 2.0

        half_height = math.tan(math.radians(vfov) / 2)
        half_width = aspect_ratio * half_height

        # Orthonormal basis: w points backwards, u right, v up
        self.w = view.unit()
        self.u = up.cross(self.w).unit()
        self.v = self.w.cross(self.u)

        self.origin = look_from
        # The w term is scaled too so the viewport sits on the focal plane.
        self.lower_left_corner = (look_from -
                                  self.u * (half_width * focus_dist) -
                                  self.v * (half_height * focus_dist) -
                                  self.w * focus_dist)
        self.horizontal = self.u * (2 * half_width * focus_dist)
        self.vertical = self.v * (2 * half_height * focus_dist)

    def get_ray(self, s: float, t: float, rng=random) -> Ray:
        """Generates a ray with depth of field effect."""
        rd = self.lens_radius * random_in_unit_disk(rng)
        offset = self.u * rd.x + self.v * rd.y

        direction = (self.lower_left_corner +
                     self.horizontal * s +
                     self.vertical * t -
                     self.origin -
                     offset)
        return Ray(self.origin + offset, direction)
