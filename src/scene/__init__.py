from scene.scene import Scene
from scene.builder import SCENES, build_scene, default_scene, random_scene, simple_scene

__all__ = ["Scene", "SCENES", "build_scene", "default_scene", "random_scene", "simple_scene"]
