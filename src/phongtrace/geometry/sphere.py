# geometry/sphere.py
import math
from typing import Optional

from phongtrace.core.ray import Ray
from phongtrace.core.vector import Vector3
from phongtrace.errors import InvalidSceneError
from phongtrace.geometry.hittable import Geometry, Intersection
from phongtrace.materials.material import Material


class Sphere(Geometry):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material: Material):
        if radius <= 0:
            raise InvalidSceneError(f"sphere radius must be positive, got {radius}")
        super().__init__(material)
        self.center = center
        self.radius = float(radius)

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        l = self.center - ray.origin
        tca = l.dot(ray.direction)
        # Center behind the origin.
        if tca < 0:
            return None
        d2 = l.dot(l) - tca * tca
        radius2 = self.radius * self.radius
        if d2 > radius2:
            return None
        thc = math.sqrt(radius2 - d2)
        t0 = tca - thc
        t1 = tca + thc
        if t0 < 0 and t1 < 0:
            return None
        # Entry point, or the exit point when the origin is inside.
        t = t0 if t0 >= 0 else t1

        p = ray.at(t)
        n = (p - self.center).normalize()
        return Intersection(p, n, t, self.material())

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
