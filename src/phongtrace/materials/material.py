# materials/material.py
from phongtrace.core.vector import Vector3
from phongtrace.errors import InvalidSceneError


class Material:
    """
    Surface description for Blinn-Phong shading.

    shininess is the specular exponent, spec_color tints highlights, color is
    the diffuse/base color and reflection blends in a mirror bounce
    (0 = fully diffuse, 1 = perfect mirror).
    """
    __slots__ = ("shininess", "spec_color", "color", "reflection")

    def __init__(self, shininess: float, spec_color: Vector3, color: Vector3,
                 reflection: float = 0.0):
        if shininess <= 0:
            raise InvalidSceneError(f"shininess must be positive, got {shininess}")
        if not 0.0 <= reflection <= 1.0:
            raise InvalidSceneError(f"reflection must be within [0, 1], got {reflection}")
        self.shininess = float(shininess)
        self.spec_color = spec_color
        self.color = color
        self.reflection = float(reflection)

    def copy(self) -> "Material":
        return Material(self.shininess, self.spec_color, self.color, self.reflection)

    def with_color(self, color: Vector3) -> "Material":
        """Returns a copy with a different base color."""
        return Material(self.shininess, self.spec_color, color, self.reflection)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return (self.shininess == other.shininess
                and self.spec_color == other.spec_color
                and self.color == other.color
                and self.reflection == other.reflection)

    def __repr__(self) -> str:
        return (f"Material(shininess={self.shininess}, spec_color={self.spec_color!r}, "
                f"color={self.color!r}, reflection={self.reflection})")
