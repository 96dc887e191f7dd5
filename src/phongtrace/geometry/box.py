# geometry/box.py
import math
from typing import Optional

from phongtrace.core.ray import Ray
from phongtrace.core.vector import Vector3
from phongtrace.errors import InvalidSceneError
from phongtrace.geometry.hittable import Geometry, Intersection
from phongtrace.materials.material import Material

# Face normal reported for the axis that bounds the entry point. The Z face
# always reports -Z regardless of which side was hit.
_AXIS_NORMALS = {
    "x": Vector3(1.0, 0.0, 0.0),
    "y": Vector3(0.0, 1.0, 0.0),
    "z": Vector3(0.0, 0.0, -1.0),
}


class AxisAlignedBox(Geometry):
    """
    A solid box between corner_min and corner_max, intersected with the
    slab method.
    """
    def __init__(self, corner_min: Vector3, corner_max: Vector3, material: Material):
        for a in ("x", "y", "z"):
            if getattr(corner_min, a) > getattr(corner_max, a):
                raise InvalidSceneError(
                    f"box corner_min.{a} exceeds corner_max.{a}: "
                    f"{corner_min!r} / {corner_max!r}")
        super().__init__(material)
        self.corner_min = corner_min
        self.corner_max = corner_max

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        tnear = -math.inf
        tfar = math.inf
        n = _AXIS_NORMALS["x"]
        far_n = n

        for a in ("x", "y", "z"):
            o = getattr(ray.origin, a)
            d = getattr(ray.direction, a)
            lo = getattr(self.corner_min, a)
            hi = getattr(self.corner_max, a)

            if d == 0:
                # Parallel to this slab: either always inside it or never.
                if o < lo or o > hi:
                    return None
                continue

            t1 = (lo - o) / d
            t2 = (hi - o) / d
            if t1 > t2:
                t1, t2 = t2, t1
            if t1 > tnear:
                tnear = t1
                n = _AXIS_NORMALS[a]
            if t2 < tfar:
                tfar = t2
                far_n = _AXIS_NORMALS[a]
            if tnear > tfar or tfar < 0:
                return None

        if tnear > 0:
            return Intersection(ray.at(tnear), n, tnear, self.material())
        if tfar > 0:
            # Origin inside the box or on its surface: report the exit face.
            return Intersection(ray.at(tfar), far_n, tfar, self.material())
        return None

    def __repr__(self) -> str:
        return f"AxisAlignedBox({self.corner_min!r}, {self.corner_max!r})"
