"""Pytest configuration and shared fixtures."""

import pytest

from phongtrace.camera.camera import Camera
from phongtrace.core.vector import Vector3
from phongtrace.geometry import Plane, Sphere
from phongtrace.materials.material import Material
from phongtrace.materials.presets import basic_material
from phongtrace.scene.scene import Light, Scene


@pytest.fixture
def red():
    """Plain red plastic."""
    return basic_material(Vector3(1.0, 0.0, 0.0))


@pytest.fixture
def white():
    return basic_material(Vector3(1.0, 1.0, 1.0))


@pytest.fixture
def mirror():
    """A perfect white mirror."""
    return Material(shininess=32.0, spec_color=Vector3(1.0, 1.0, 1.0),
                    color=Vector3(1.0, 1.0, 1.0), reflection=1.0)


@pytest.fixture
def origin_camera():
    """Camera at the origin looking down +Z with a square image plane."""
    return Camera(position=Vector3(0.0, 0.0, 0.0),
                  up=Vector3(0.0, 1.0, 0.0),
                  right=Vector3(1.0, 0.0, 0.0),
                  dist=1.0)


@pytest.fixture
def sphere_on_floor(origin_camera, red, white):
    """Unit sphere at z=5 above a floor at y=-1, lit from straight above."""
    scene = Scene(origin_camera)
    scene.add(Sphere(Vector3(0.0, 0.0, 5.0), 1.0, red))
    scene.add(Plane(Vector3(0.0, -1.0, 0.0), Vector3(0.0, 1.0, 0.0), white))
    scene.add_light(Light(Vector3(0.0, 10.0, 0.0), Vector3(1.0, 1.0, 1.0)))
    return scene
