"""A small recursive Blinn-Phong ray tracer."""
from phongtrace.core.vector import Vector3
from phongtrace.core.ray import Ray
from phongtrace.materials.material import Material
from phongtrace.geometry import Sphere, Plane, AxisAlignedBox, Intersection
from phongtrace.camera.camera import Camera
from phongtrace.scene.scene import Scene, Light
from phongtrace.renderer.raytracer import Renderer, cast_ray, shade

__version__ = "0.1.0"

__all__ = [
    "Vector3",
    "Ray",
    "Material",
    "Sphere",
    "Plane",
    "AxisAlignedBox",
    "Intersection",
    "Camera",
    "Scene",
    "Light",
    "Renderer",
    "cast_ray",
    "shade",
]
