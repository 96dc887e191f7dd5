# renderer/raytracer.py
import logging
import time
from typing import List, Optional

from phongtrace.core.ray import Ray
from phongtrace.core.utils import offset_ray, reflect
from phongtrace.core.vector import Vector3
from phongtrace.errors import DegenerateVectorError
from phongtrace.geometry.hittable import Intersection
from phongtrace.scene.scene import Scene

logger = logging.getLogger(__name__)

MAX_BOUNCES = 3
AMBIENT = 0.1

ACCUMULATE = "accumulate"
OVERWRITE = "overwrite"
LIGHT_MODES = (ACCUMULATE, OVERWRITE)

_BLACK = Vector3(0.0, 0.0, 0.0)


def cast_ray(scene: Scene, ray: Ray) -> Optional[Intersection]:
    """
    Nearest intersection of ray with any object in the scene.

    Ties go to the object added first.
    """
    closest = None
    for obj in scene.objects:
        isect = obj.intersect(ray)
        if isect is not None and (closest is None or isect.dist < closest.dist):
            closest = isect
    return closest


def blinn_phong(light_dir: Vector3, isect: Intersection) -> Vector3:
    """
    Diffuse plus specular response to a light in direction light_dir.

    The viewer is assumed to sit at the world origin.
    """
    material = isect.material
    diffuse = max(light_dir.dot(isect.normal), 0.0)
    specular = 0.0
    if diffuse > 0.0:
        view_dir = (-isect.pos).normalize()
        half_dir = (light_dir + view_dir).normalize()
        spec_angle = max(half_dir.dot(isect.normal), 0.0)
        specular = spec_angle ** material.shininess
    return material.color * diffuse + material.spec_color * specular


def shade(scene: Scene, ray: Ray, depth: int = MAX_BOUNCES,
          light_mode: str = ACCUMULATE) -> Vector3:
    """
    Color seen along ray, following at most depth mirror bounces.

    Every light adds its unshadowed Blinn-Phong term plus an ambient term.
    On a reflective surface with bounces left, the mirrored color scaled by
    the reflection coefficient replaces the light's contribution.

    light_mode "accumulate" sums the per-light contributions. "overwrite"
    keeps a single running accumulator that a reflection overwrites, which
    reproduces the classic single-light output exactly.
    """
    isect = cast_ray(scene, ray)
    if isect is None:
        return scene.background

    material = isect.material
    reflected = None
    if material.reflection > 0 and depth > 0:
        reflection_dir = reflect(ray.direction, isect.normal)
        reflected = shade(scene, offset_ray(isect.pos, reflection_dir),
                          depth - 1, light_mode) * material.reflection

    ambient = material.color * AMBIENT
    pixel = _BLACK
    for light in scene.lights:
        if light_mode == OVERWRITE:
            direct = _direct_light(scene, light.pos, isect)
            if direct is not None:
                pixel = pixel + direct
            pixel = pixel + ambient
            if reflected is not None:
                pixel = reflected
        elif reflected is not None:
            pixel = pixel + reflected
        else:
            direct = _direct_light(scene, light.pos, isect)
            pixel = pixel + (ambient if direct is None else direct + ambient)
    return pixel


def _direct_light(scene: Scene, light_pos: Vector3, isect: Intersection) -> Optional[Vector3]:
    """
    Blinn-Phong term for a light, or None when the light is occluded.

    A light sitting on the hit point, or a hit at the world origin where the
    view direction is undefined, contributes no direct term either.
    """
    try:
        light_dir = (light_pos - isect.pos).normalize()
        if cast_ray(scene, offset_ray(isect.pos, light_dir)) is not None:
            return None
        return blinn_phong(light_dir, isect)
    except DegenerateVectorError as e:
        logger.debug("Dropped direct light at %r: %s", isect.pos, e)
        return None


class Renderer:
    """
    Traces one primary ray per pixel and collects the colors in a
    row-major buffer whose first row is the top of the image.
    """
    def __init__(self, width: int, height: int, max_depth: int = MAX_BOUNCES,
                 light_mode: str = ACCUMULATE):
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        if light_mode not in LIGHT_MODES:
            raise ValueError(f"light_mode must be one of {LIGHT_MODES}, got {light_mode!r}")
        self.width = width
        self.height = height
        self.max_depth = max_depth
        self.light_mode = light_mode

    def trace_pixel(self, scene: Scene, x: int, y: int) -> Vector3:
        """
        Color of pixel (x, y), with y counted upwards from the bottom row.

        A degenerate primary ray yields the background color.
        """
        u = x * 2.0 / self.width - 1.0
        v = y * 2.0 / self.height - 1.0
        try:
            ray = scene.camera.ray_for(u, v)
            return shade(scene, ray, self.max_depth, self.light_mode)
        except DegenerateVectorError as e:
            logger.debug("Pixel (%d, %d) fell back to background: %s", x, y, e)
            return scene.background

    def render(self, scene: Scene) -> List[Vector3]:
        """Row-major colors, top row first. The scene is traced as a snapshot."""
        scene = scene.snapshot()
        logger.info("Rendering %dx%d, max depth %d, %d objects, %d lights",
                    self.width, self.height, self.max_depth,
                    len(scene.objects), len(scene.lights))
        start = time.perf_counter()

        pixels = [_BLACK] * (self.width * self.height)
        for y in range(self.height):
            row = (self.height - 1 - y) * self.width
            for x in range(self.width):
                pixels[row + x] = self.trace_pixel(scene, x, y)
            if logger.isEnabledFor(logging.DEBUG) and (y + 1) % 50 == 0:
                logger.debug("Traced %d/%d rows", y + 1, self.height)

        logger.info("Rendered %d pixels in %.2fs", len(pixels), time.perf_counter() - start)
        return pixels
