# scene/scene.py
from dataclasses import dataclass

from camera.camera import Camera
from geometry.world import World

@dataclass(frozen=True)
class Scene:
    """
    Everything the renderer reads: camera, world and image size.
    Fully built before rendering and never modified by it.
    """
    camera: Camera
    world: World
    width: int
    height: int

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height
