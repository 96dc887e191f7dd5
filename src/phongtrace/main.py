# main.py
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from phongtrace import config
from phongtrace.config import RenderSettings
from phongtrace.errors import InvalidSceneError, OutputError
from phongtrace.logging_config import setup_logging
from phongtrace.renderer.output import save_image, to_display_array
from phongtrace.renderer.raytracer import LIGHT_MODES, Renderer
from phongtrace.scene.loader import load_scene
from phongtrace.scene.presets import demo_scene

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phongtrace",
        description="Render a scene of spheres, planes and boxes with a recursive ray tracer.",
    )
    parser.add_argument("--width", type=int, default=config.WIDTH,
                        help=f"image width in pixels (default: {config.WIDTH})")
    parser.add_argument("--height", type=int, default=config.HEIGHT,
                        help=f"image height in pixels (default: {config.HEIGHT})")
    parser.add_argument("--depth", type=int, default=config.MAX_DEPTH,
                        help=f"maximum number of mirror bounces (default: {config.MAX_DEPTH})")
    parser.add_argument("--scene", type=Path, default=None,
                        help="JSON scene description (default: built-in demo scene)")
    parser.add_argument("-o", "--output", type=Path, default=config.OUTPUT,
                        help=f"output image; .ppm is written as ASCII, other extensions "
                             f"through Pillow (default: {config.OUTPUT})")
    parser.add_argument("--light-mode", choices=LIGHT_MODES, default=config.LIGHT_MODE,
                        help="how reflections combine with several lights")
    parser.add_argument("--preview", action="store_true",
                        help="show the finished render in a window")
    parser.add_argument("--log-level", default=config.LOG_LEVEL,
                        help=f"logging level (default: {config.LOG_LEVEL})")
    parser.add_argument("--log-file", type=Path, default=config.LOG_FILE,
                        help="also write logs to this file")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        settings = RenderSettings(width=args.width, height=args.height,
                                  max_depth=args.depth, light_mode=args.light_mode,
                                  output=args.output)
    except ValueError as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 2

    try:
        scene = load_scene(args.scene) if args.scene is not None else demo_scene()
    except (OSError, InvalidSceneError) as e:
        print(f"Could not load scene: {e}", file=sys.stderr)
        return 2

    logger.debug("Using %r", settings)
    renderer = Renderer(settings.width, settings.height,
                        max_depth=settings.max_depth, light_mode=settings.light_mode)
    pixels = renderer.render(scene)

    try:
        save_image(settings.output, pixels, settings.width, settings.height)
    except OutputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"Rendered {settings.width}x{settings.height} image to {settings.output}")

    if args.preview:
        from phongtrace.renderer.preview import show
        show(to_display_array(pixels, settings.width, settings.height))
    return 0


if __name__ == "__main__":
    sys.exit(main())
