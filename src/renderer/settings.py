# renderer/settings.py
from dataclasses import dataclass
from typing import Optional

from config import QUALITY_LEVELS

MAX_DEPTH = 50
# Lower bound on hit distance; keeps recursive rays from re-hitting
# their own origin (shadow acne).
T_MIN = 0.001

@dataclass(frozen=True)
class RenderSettings:
    samples_per_pixel: int = 100
    max_depth: int = MAX_DEPTH
    t_min: float = T_MIN
    seed: Optional[int] = None

    def __post_init__(self):
        if self.samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be >= 1, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        if self.t_min < 0:
            raise ValueError(f"t_min must be >= 0, got {self.t_min}")

    @classmethod
    def from_quality(cls, name: str, seed: Optional[int] = None) -> "RenderSettings":
        if name not in QUALITY_LEVELS:
            raise ValueError(f"Unknown quality level '{name}'. "
                             f"Choose one of: {', '.join(QUALITY_LEVELS)}")
        quality = QUALITY_LEVELS[name]
        return cls(samples_per_pixel=quality["samples"],
                   max_depth=quality["bounces"],
                   seed=seed)
