# scene/presets.py
import logging

from phongtrace.camera.camera import Camera
from phongtrace.core.vector import Vector3
from phongtrace.geometry import AxisAlignedBox, Plane, Sphere
from phongtrace.materials.presets import ColorPresets, MaterialPresets
from phongtrace.scene.scene import Light, Scene

logger = logging.getLogger(__name__)


def empty_scene() -> Scene:
    """A scene with the default camera one unit behind the origin."""
    camera = Camera(
        position=Vector3(0.0, 0.0, -1.0),
        up=Vector3(0.0, 1.0, 0.0),
        right=Vector3(1.33, 0.0, 0.0),
        dist=2.0,
    )
    return Scene(camera)


def demo_scene() -> Scene:
    """
    Three spheres, two boxes and a mirror ball over a red checkered floor,
    lit by a single light up and to the right.
    """
    scene = empty_scene()
    scene.camera = Camera(
        position=Vector3(0.5, 2.5, -1.0),
        up=Vector3(0.0, 1.0, 0.2).normalize(),
        right=Vector3(1.33, 0.0, 0.0),
        dist=2.0,
    )

    red = MaterialPresets.glossy(ColorPresets.RED, shininess=64.0)
    blue = MaterialPresets.matte(ColorPresets.BLUE)
    green = MaterialPresets.matte(ColorPresets.GREEN)
    mirror = MaterialPresets.mirror(0.7)

    scene.add(Sphere(Vector3(-2.0, 1.5, 7.0), 0.5, red))
    scene.add(Sphere(Vector3(-1.0, -0.5, 8.0), 0.5, blue))
    scene.add(Sphere(Vector3(-3.0, -0.5, 5.0), 0.5, green))
    scene.add(Plane(Vector3(0.0, -1.0, 0.0), Vector3(0.0, 1.0, 0.0), red))
    scene.add(AxisAlignedBox(Vector3(-2.5, -1.0, 6.0), Vector3(-1.5, 1.0, 10.0), mirror))
    scene.add(AxisAlignedBox(Vector3(2.0, -1.0, 5.0), Vector3(3.0, 1.0, 6.0), green))
    scene.add(Sphere(Vector3(1.0, 0.0, 8.0), 1.0, mirror))
    scene.add_light(Light(Vector3(20.0, 20.0, -20.0), ColorPresets.WHITE))

    logger.debug("Built demo scene with %d objects", len(scene.objects))
    return scene
