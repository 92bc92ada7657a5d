# scene/builder.py
import logging
import random
from typing import Callable, Dict, Optional

from core.vector import Vector3
from camera.camera import PositionableCamera, StaticCamera
from geometry.sphere import Sphere
from geometry.world import World
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.presets import ColorPresets, DielectricPresets, MetalPresets
from scene.scene import Scene

logger = logging.getLogger(__name__)

def simple_scene(width: int, height: int, with_ground: bool = False, **_) -> Scene:
    """
    A single grey diffuse sphere in front of the static camera.
    The static camera only supports a 2:1 aspect ratio.
    """
    if width != 2 * height:
        raise ValueError(f"Aspect ratio must be 2:1, got {width}x{height}")
    world = World()
    world.add(Sphere(Vector3(0, 0, -1), 0.5, ColorPresets.matte(ColorPresets.GRAY)))
    if with_ground:
        world.add(Sphere(Vector3(0, -100.5, -1), 100, ColorPresets.matte(ColorPresets.YELLOW)))
    return Scene(StaticCamera(), world, width, height)

def create_camera(width: int, height: int) -> PositionableCamera:
    look_from = Vector3(2, 2, 0)
    look_at = Vector3(0, 0, -1)
    return PositionableCamera(
        look_from=look_from,
        look_at=look_at,
        up=Vector3(0, 1, 0),
        vfov=20,
        aspect_ratio=width / height,
        aperture=0.1,
        focus_dist=(look_from - look_at).length()
    )

def default_scene(width: int, height: int, **_) -> Scene:
    """
    Diffuse, metal and glass spheres on a large ground sphere, seen through
    a slightly defocused positionable camera.
    """
    glass = DielectricPresets.glass()
    world = World()
    world.add(Sphere(Vector3(0, 0, -1), 0.5, ColorPresets.matte(ColorPresets.BLUE)))
    world.add(Sphere(Vector3(0, -100.5, -1), 100, ColorPresets.matte(ColorPresets.YELLOW)))
    world.add(Sphere(Vector3(1, 0, -1), 0.5, MetalPresets.gold()))
    world.add(Sphere(Vector3(-1, 0, -1), 0.5, glass))
    # Negative radius flips the normals: together the two spheres form a hollow glass bubble
    world.add(Sphere(Vector3(-1, 0, -1), -0.45, glass))
    logger.debug("Built default scene with %d spheres", len(world))
    return Scene(create_camera(width, height), world, width, height)

def random_scene(width: int, height: int, rng=None, **_) -> Scene:
    """
    The "final scene": a grid of small random spheres around three large
    ones. Roughly 80% diffuse, 15% metal and 5% glass.
    """
    if rng is None:
        rng = random.Random()
    world = World()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, ColorPresets.matte(ColorPresets.GRAY)))

    glass = DielectricPresets.glass()
    clearing = Vector3(4, 0.2, 0)
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - clearing).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                albedo = Vector3(rng.random() * rng.random(),
                                 rng.random() * rng.random(),
                                 rng.random() * rng.random())
                world.add(Sphere(center, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                albedo = Vector3(0.5 * (1 + rng.random() * rng.random()),
                                 0.5 * (1 + rng.random() * rng.random()),
                                 0.5 * (1 + rng.random() * rng.random()))
                world.add(Sphere(center, 0.2, Metal(albedo, 0.5 * rng.random())))
            else:
                world.add(Sphere(center, 0.2, glass))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, glass))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, ColorPresets.matte(ColorPresets.BROWN)))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, MetalPresets.mirror()))
    logger.debug("Built random scene with %d spheres", len(world))
    return Scene(create_camera(width, height), world, width, height)

SCENES: Dict[str, Callable[..., Scene]] = {
    "simple": simple_scene,
    "default": default_scene,
    "random": random_scene,
}

def build_scene(name: str, width: int, height: int, seed: Optional[int] = None) -> Scene:
    """
    Builds one of the named scenes. `seed` only affects the random scene.
    """
    if name not in SCENES:
        raise ValueError(f"Unknown scene '{name}'. Choose one of: {', '.join(SCENES)}")
    logger.info("Building '%s' scene (%dx%d)", name, width, height)
    return SCENES[name](width, height, rng=random.Random(seed))
