from phongtrace.geometry.hittable import Geometry, Intersection
from phongtrace.geometry.sphere import Sphere
from phongtrace.geometry.plane import Plane
from phongtrace.geometry.box import AxisAlignedBox

__all__ = ["Geometry", "Intersection", "Sphere", "Plane", "AxisAlignedBox"]
