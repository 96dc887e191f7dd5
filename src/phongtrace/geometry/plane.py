# geometry/plane.py
import math
from typing import Optional

from phongtrace.core.ray import Ray
from phongtrace.core.vector import Vector3
from phongtrace.geometry.hittable import Geometry, Intersection
from phongtrace.materials.material import Material


def checker_parity(point: Vector3) -> int:
    """
    Returns 0 or 1 for the half-unit checkerboard tile containing point.

    Tiles are laid out in the X-Z plane.
    """
    return int(math.floor(2.0 * point.z) + math.floor(2.0 * point.x)) % 2


class Plane(Geometry):
    """
    An infinite plane through point with the given normal, patterned with a
    black and base-color checkerboard.

    The normal is expected to be unit length.
    """
    def __init__(self, point: Vector3, normal: Vector3, material: Material):
        super().__init__(material)
        self.point = point
        self.normal = normal

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        denom = ray.direction.dot(self.normal)
        if denom == 0:
            return None
        t = (self.point - ray.origin).dot(self.normal) / denom
        if not (t > 0 and math.isfinite(t)):
            return None

        p = ray.at(t)
        material = self.material()
        if checker_parity(p):
            material = material.with_color(material.color * 0.0)
        return Intersection(p, self.normal, t, material)

    def __repr__(self) -> str:
        return f"Plane({self.point!r}, {self.normal!r})"
