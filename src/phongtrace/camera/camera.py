# camera/camera.py
from phongtrace.core.ray import Ray
from phongtrace.core.vector import Vector3


class Camera:
    """
    A pinhole camera described by an image plane.

    The plane sits dist units in front of position along
    forward = normalize(right x up) and spans right and up, so a right vector
    longer than up widens the field of view horizontally.
    """
    def __init__(self, position: Vector3, up: Vector3, right: Vector3, dist: float):
        self.position = position
        self.up = up
        self.right = right
        self.dist = float(dist)

    @property
    def forward(self) -> Vector3:
        return self.right.cross(self.up).normalize()

    def ray_for(self, u: float, v: float) -> Ray:
        """Primary ray through image plane coordinates u, v in [-1, 1]."""
        target = (self.position
                  + self.forward * self.dist
                  + self.right * u
                  + self.up * v)
        return Ray(self.position, (target - self.position).normalize())

    def __repr__(self) -> str:
        return (f"Camera(position={self.position!r}, up={self.up!r}, "
                f"right={self.right!r}, dist={self.dist})")
