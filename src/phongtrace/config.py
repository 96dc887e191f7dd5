"""Render configuration from environment variables."""

import os
from pathlib import Path
from typing import Optional

from phongtrace.renderer.raytracer import LIGHT_MODES, MAX_BOUNCES

# Image settings
WIDTH = int(os.getenv("PHONGTRACE_WIDTH", "800"))
HEIGHT = int(os.getenv("PHONGTRACE_HEIGHT", "600"))
MAX_DEPTH = int(os.getenv("PHONGTRACE_MAX_DEPTH", str(MAX_BOUNCES)))
LIGHT_MODE = os.getenv("PHONGTRACE_LIGHT_MODE", "accumulate")
OUTPUT = Path(os.getenv("PHONGTRACE_OUTPUT", "raytracing.ppm"))

# Logging settings
LOG_LEVEL = os.getenv("PHONGTRACE_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("PHONGTRACE_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
LOG_FILE: Optional[str] = os.getenv("PHONGTRACE_LOG_FILE", None)


class RenderSettings:
    """Validated parameters for one render."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT,
                 max_depth: int = MAX_DEPTH, light_mode: str = LIGHT_MODE,
                 output: Path = OUTPUT):
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if max_depth < 0:
            raise ValueError(f"max depth must be non-negative, got {max_depth}")
        if light_mode not in LIGHT_MODES:
            raise ValueError(f"light mode must be one of {', '.join(LIGHT_MODES)}, got {light_mode!r}")
        self.width = width
        self.height = height
        self.max_depth = max_depth
        self.light_mode = light_mode
        self.output = Path(output)

    def __repr__(self) -> str:
        return (f"RenderSettings(width={self.width}, height={self.height}, "
                f"max_depth={self.max_depth}, light_mode={self.light_mode!r}, "
                f"output={str(self.output)!r})")


__all__ = [
    "WIDTH",
    "HEIGHT",
    "MAX_DEPTH",
    "LIGHT_MODE",
    "OUTPUT",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FILE",
    "RenderSettings",
]
