# core/utils.py
from phongtrace.core.ray import Ray
from phongtrace.core.vector import Vector3

# Offset for secondary ray origins so they do not re-hit their own surface.
EPSILON = 0.001


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * v.dot(n) * 2.0


def offset_ray(origin: Vector3, direction: Vector3) -> Ray:
    """
    Builds a secondary ray nudged EPSILON along its own direction.
    """
    return Ray(origin + direction * EPSILON, direction)
