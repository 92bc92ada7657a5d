"""Configuration constants for the path tracer."""

import os

# Logging
LOG_LEVEL = os.getenv("PATHTRACER_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Image defaults
DEFAULT_WIDTH = 200
DEFAULT_HEIGHT = 100
DEFAULT_OUTPUT = "image.ppm"
DEFAULT_SCENE = "default"

# Quality levels: samples per pixel and maximum scatter depth
QUALITY_LEVELS = {
    "interactive": {"samples": 4, "bounces": 8},
    "balanced": {"samples": 32, "bounces": 25},
    "high_quality": {"samples": 100, "bounces": 50},
}
DEFAULT_QUALITY = "high_quality"
