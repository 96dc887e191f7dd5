# renderer/output.py
import logging
from pathlib import Path
from typing import Sequence, Union

import numpy as np
from PIL import Image

from phongtrace.core.vector import Vector3
from phongtrace.errors import OutputError

logger = logging.getLogger(__name__)

PPM_MAX_VALUE = 255


def to_display_array(pixels: Sequence[Vector3], width: int, height: int) -> np.ndarray:
    """
    Quantizes a row-major pixel buffer into an (height, width, 3) uint8 image.

    This is the vectorized form of Vector3.to_display_color: each channel
    becomes round(min(c, 1.0) * 255) saturated into [0, 255], with np.rint
    in place of round. Both rounding rules send halves to the even neighbour,
    so the two paths give identical bytes. Change them together.
    """
    if len(pixels) != width * height:
        raise ValueError(f"expected {width * height} pixels, got {len(pixels)}")
    linear = np.array([tuple(p) for p in pixels], dtype=np.float64).reshape(height, width, 3)
    output = np.rint(np.minimum(linear, 1.0) * 255).clip(0, 255).astype("uint8")
    return output


def ppm_text(pixels: Sequence[Vector3], width: int, height: int) -> str:
    """
    ASCII PPM (P3) for the buffer: the header followed by one r g b triplet
    per pixel, all on a single space separated line.
    """
    image = to_display_array(pixels, width, height)
    parts = [f"P3 {width} {height} {PPM_MAX_VALUE}"]
    parts.extend(f"{r} {g} {b}" for r, g, b in image.reshape(-1, 3).tolist())
    return " ".join(parts) + "\n"


def write_ppm(path: Union[str, Path], pixels: Sequence[Vector3], width: int, height: int) -> Path:
    path = Path(path)
    text = ppm_text(pixels, width, height)
    try:
        with path.open("w", encoding="ascii") as f:
            f.write(text)
    except OSError as e:
        raise OutputError(f"Could not create file {path}: {e.strerror or e}") from e
    logger.info("Wrote %dx%d PPM to %s", width, height, path)
    return path


def save_image(path: Union[str, Path], pixels: Sequence[Vector3], width: int, height: int) -> Path:
    """
    Writes the buffer to path, choosing the format from the extension.

    .ppm files are written as ASCII P3; every other extension goes through
    Pillow.
    """
    path = Path(path)
    if path.suffix.lower() == ".ppm":
        return write_ppm(path, pixels, width, height)

    image = Image.fromarray(to_display_array(pixels, width, height))
    try:
        image.save(path)
    except (OSError, ValueError) as e:
        raise OutputError(f"Could not create file {path}: {e}") from e
    logger.info("Wrote %dx%d image to %s", width, height, path)
    return path
