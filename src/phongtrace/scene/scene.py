# scene/scene.py
import logging
from typing import List, Optional, Sequence

from phongtrace.camera.camera import Camera
from phongtrace.core.vector import Vector3
from phongtrace.errors import SceneFrozenError
from phongtrace.geometry.hittable import Geometry

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = Vector3(0.5, 0.4, 1.0)


class Light:
    """A point light. The color is carried for scene descriptions only."""
    def __init__(self, pos: Vector3, color: Vector3 = Vector3(1.0, 1.0, 1.0)):
        self.pos = pos
        self.color = color

    def __repr__(self) -> str:
        return f"Light({self.pos!r}, {self.color!r})"


class Scene:
    """
    Camera, lights and geometry to be rendered.

    Build it up with add() and add_light(), then freeze() it. The renderer
    traces a frozen snapshot(), so the scene itself stays editable between
    renders.
    """
    def __init__(self, camera: Camera, lights: Optional[Sequence[Light]] = None,
                 objects: Optional[Sequence[Geometry]] = None,
                 background: Vector3 = BACKGROUND_COLOR):
        self._frozen = False
        self.camera = camera
        self.lights: List[Light] = list(lights or [])
        self.objects: List[Geometry] = list(objects or [])
        self.background = background

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __setattr__(self, name, value):
        if getattr(self, "_frozen", False):
            raise SceneFrozenError(f"cannot set {name!r} on a frozen scene")
        super().__setattr__(name, value)

    def add(self, geometry: Geometry) -> None:
        if self._frozen:
            raise SceneFrozenError("cannot add geometry to a frozen scene")
        self.objects.append(geometry)

    def add_light(self, light: Light) -> None:
        if self._frozen:
            raise SceneFrozenError("cannot add a light to a frozen scene")
        self.lights.append(light)

    def freeze(self) -> "Scene":
        if not self._frozen:
            self.lights = tuple(self.lights)
            self.objects = tuple(self.objects)
            self._frozen = True
            logger.debug("Froze scene with %d objects and %d lights",
                         len(self.objects), len(self.lights))
        return self

    def snapshot(self) -> "Scene":
        """A frozen copy sharing the camera, lights and objects."""
        if self._frozen:
            return self
        return Scene(self.camera, self.lights, self.objects, self.background).freeze()
