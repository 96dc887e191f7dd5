# materials/presets.py
from phongtrace.core.vector import Vector3
from phongtrace.materials.material import Material


def basic_material(color: Vector3) -> Material:
    """A plastic-looking material: white highlights, no reflection."""
    return Material(shininess=16.0,
                    spec_color=Vector3(1.0, 1.0, 1.0),
                    color=color,
                    reflection=0.0)


class ColorPresets:
    """Common colors."""
    WHITE = Vector3(1.0, 1.0, 1.0)
    BLACK = Vector3(0.0, 0.0, 0.0)
    RED = Vector3(1.0, 0.0, 0.0)
    GREEN = Vector3(0.0, 1.0, 0.0)
    BLUE = Vector3(0.0, 0.0, 1.0)


class MaterialPresets:
    """Predefined materials used by the demo scene."""

    @staticmethod
    def matte(color: Vector3) -> Material:
        return basic_material(color)

    @staticmethod
    def glossy(color: Vector3, shininess: float = 64.0) -> Material:
        return Material(shininess=shininess,
                        spec_color=ColorPresets.WHITE,
                        color=color,
                        reflection=0.0)

    @staticmethod
    def mirror(reflection: float = 0.7) -> Material:
        return Material(shininess=32.0,
                        spec_color=ColorPresets.WHITE,
                        color=ColorPresets.WHITE,
                        reflection=reflection)
