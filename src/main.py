# main.py
import argparse
import logging
import os
import random
import sys
from typing import List, Optional
from renderer.image_io import write_image
from renderer.raytracer import Renderer
from renderer.tone_mapping import to_rgb8
from scenes.library import SCENES, get_scene

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False):
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.INFO)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Render one of the built-in scenes with a Monte Carlo path tracer.")
    parser.add_argument("--scene", default="base", help="scene to render (see --list-scenes)")
    parser.add_argument("--width", type=int, help="image width in pixels; height follows the scene's aspect ratio")
    parser.add_argument("--samples", type=int, help="samples per pixel")
    parser.add_argument("--max-depth", type=int, help="maximum number of bounces per path")
    parser.add_argument("--workers", type=int, default=os.cpu_count() or 1,
                        help="number of render processes (1 renders in this process)")
    parser.add_argument("--seed", type=int, help="seed for scene generation and sampling")
    parser.add_argument("--output", default="image.ppm",
                        help="output file; .ppm is written as plain text, other suffixes via Pillow")
    parser.add_argument("--preview", action="store_true", help="show the result in a window when done")
    parser.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    parser.add_argument("--list-scenes", action="store_true", help="list scene names and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.list_scenes:
        for name in SCENES:
            print(name)
        return 0

    configure_logging(args.verbose)

    try:
        config, world, camera = get_scene(args.scene, rng=random.Random(args.seed))
        config = config.with_overrides(image_width=args.width,
                                       samples_per_pixel=args.samples,
                                       max_depth=args.max_depth)
    except ValueError as e:
        logger.error("%s", e)
        return 2

    logger.info("Scene %s: %r", args.scene, config)
    accumulated = Renderer(config, world, camera).render(workers=args.workers, seed=args.seed,
                                                         progress=not args.no_progress)
    rgb8 = to_rgb8(accumulated, config.samples_per_pixel)
    write_image(args.output, rgb8)

    if args.preview:
        from renderer.preview import show_image
        show_image(rgb8, title=f"Path Tracer - {args.scene}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
