# core/vector.py
import math
from typing import Iterator, Tuple

from phongtrace.errors import DegenerateVectorError


class Vector3:
    """
    A 3D vector used for points, directions, normals and colors.

    Vectors are immutable values: every operation returns a new Vector3 and
    assigning to x, y or z raises AttributeError, so instances can be shared
    and hashed freely.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))

    def __setattr__(self, name, value):
        raise AttributeError(f"Vector3 is immutable, cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Vector3 is immutable, cannot delete {name!r}")

    def __reduce__(self):
        return (Vector3, (self.x, self.y, self.z))

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        # Component-wise, for modulating colors.
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def add(self, other: "Vector3") -> "Vector3":
        return self + other

    def sub(self, other: "Vector3") -> "Vector3":
        return self - other

    def scale(self, scalar: float) -> "Vector3":
        return self * scalar

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector3":
        """
        Returns the unit vector pointing the same way.

        Raises DegenerateVectorError for the zero vector.
        """
        l = self.length()
        if l == 0:
            raise DegenerateVectorError(f"cannot normalize zero-length vector {self!r}")
        return self / l

    def to_display_color(self) -> Tuple[int, int, int]:
        """
        Quantizes a linear color to 8-bit channels.

        Each channel is round(min(c, 1.0) * 255), saturated into [0, 255].
        Values above 1.0 map to 255, negative values saturate to 0.
        renderer.output.to_display_array applies the same mapping to a
        whole pixel buffer.
        """
        return (
            _quantize(self.x),
            _quantize(self.y),
            _quantize(self.z),
        )

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


def _quantize(c: float) -> int:
    value = round(min(c, 1.0) * 255)
    return max(0, min(255, value))
