# geometry/hittable.py
from typing import Optional

from phongtrace.core.ray import Ray
from phongtrace.core.vector import Vector3
from phongtrace.materials.material import Material


class Intersection:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("pos", "normal", "dist", "material")

    def __init__(self, pos: Vector3, normal: Vector3, dist: float, material: Material):
        self.pos = pos              # Hit point
        self.normal = normal        # Unit surface normal, not necessarily facing the ray
        self.dist = dist            # Distance along the ray direction
        self.material = material    # Material resolved at the hit point

    def __repr__(self) -> str:
        return f"Intersection(pos={self.pos!r}, normal={self.normal!r}, dist={self.dist})"


class Geometry:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def __init__(self, material: Material):
        self._material = material.copy()

    def material(self) -> Material:
        return self._material

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        raise NotImplementedError("intersect() must be implemented by subclasses.")
