# main.py
import argparse
import logging
import sys
from typing import List, Optional

from config import (DEFAULT_HEIGHT, DEFAULT_OUTPUT, DEFAULT_QUALITY, DEFAULT_SCENE,
                    DEFAULT_WIDTH, LOG_LEVEL, QUALITY_LEVELS)
from logging_config import setup_logging
from renderer.image_io import write_image
from renderer.raytracer import Renderer
from renderer.settings import RenderSettings
from scene.builder import SCENES, build_scene

logger = logging.getLogger(__name__)

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a scene of spheres with a path tracer.")
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT,
                        help="Output image path (.ppm, or any format Pillow knows, e.g. .png)")
    parser.add_argument("--scene", choices=sorted(SCENES), default=DEFAULT_SCENE,
                        help="Built-in scene to render")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Image width in pixels")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Image height in pixels")
    parser.add_argument("--quality", choices=list(QUALITY_LEVELS), default=DEFAULT_QUALITY,
                        help="Preset for samples per pixel and maximum depth")
    parser.add_argument("--samples", type=int, help="Samples per pixel (overrides --quality)")
    parser.add_argument("--max-depth", type=int, help="Maximum scatter depth (overrides --quality)")
    parser.add_argument("--seed", type=int, help="Seed for scene generation and sampling")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level")
    return parser.parse_args(argv)

def make_settings(args: argparse.Namespace) -> RenderSettings:
    quality = QUALITY_LEVELS[args.quality]
    return RenderSettings(
        samples_per_pixel=args.samples if args.samples is not None else quality["samples"],
        max_depth=args.max_depth if args.max_depth is not None else quality["bounces"],
        seed=args.seed
    )

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        settings = make_settings(args)
        scene = build_scene(args.scene, args.width, args.height, seed=args.seed)
        image = Renderer(settings).render(scene)
        write_image(args.output, image)
    except (OSError, ValueError) as e:
        logger.error("Couldn't render the image. [Path %s, Reason: %s]", args.output, e)
        return 1

    logger.info("Image successfully created: %s", args.output)
    return 0

if __name__ == "__main__":
    sys.exit(main())
