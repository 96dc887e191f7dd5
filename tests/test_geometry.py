"""Tests for the sphere, plane and box intersection contracts."""

import pytest

from phongtrace.core.ray import Ray
from phongtrace.core.vector import Vector3
from phongtrace.errors import InvalidSceneError
from phongtrace.geometry import AxisAlignedBox, Plane, Sphere
from phongtrace.geometry.plane import checker_parity
from phongtrace.materials.material import Material

FORWARD = Vector3(0.0, 0.0, 1.0)
ORIGIN = Vector3(0.0, 0.0, 0.0)


class TestSphere:
    """Analytic ray-sphere test."""

    def test_hit_through_center_is_distance_minus_radius(self, red):
        sphere = Sphere(Vector3(0, 0, 5), 1.0, red)
        hit = sphere.intersect(Ray(ORIGIN, FORWARD))
        assert hit is not None
        assert hit.dist == pytest.approx(4.0)
        assert hit.pos == Vector3(0, 0, 4)
        assert hit.normal == Vector3(0, 0, -1)

    def test_hit_from_off_axis_origin(self, red):
        sphere = Sphere(Vector3(3, 4, 10), 2.0, red)
        origin = Vector3(3, 4, -2)
        hit = sphere.intersect(Ray(origin, FORWARD))
        assert hit.dist == pytest.approx(10.0)

    def test_miss_beside(self, red):
        sphere = Sphere(Vector3(0, 3, 5), 1.0, red)
        assert sphere.intersect(Ray(ORIGIN, FORWARD)) is None

    def test_miss_behind(self, red):
        sphere = Sphere(Vector3(0, 0, -5), 1.0, red)
        assert sphere.intersect(Ray(ORIGIN, FORWARD)) is None

    def test_origin_inside_uses_exit_point(self, red):
        sphere = Sphere(Vector3(0, 0, 0.5), 1.0, red)
        hit = sphere.intersect(Ray(ORIGIN, FORWARD))
        assert hit.dist == pytest.approx(1.5)
        # Normal still points away from the center.
        assert hit.normal == Vector3(0, 0, 1)

    def test_origin_inside_with_center_behind_misses(self, red):
        sphere = Sphere(Vector3(0, 0, -0.5), 1.0, red)
        assert sphere.intersect(Ray(ORIGIN, FORWARD)) is None

    def test_tangent_ray_hits(self, red):
        sphere = Sphere(Vector3(1, 0, 5), 1.0, red)
        hit = sphere.intersect(Ray(ORIGIN, FORWARD))
        assert hit is not None
        assert hit.dist == pytest.approx(5.0)

    @pytest.mark.parametrize("radius", [0.0, -1.0])
    def test_radius_must_be_positive(self, red, radius):
        with pytest.raises(InvalidSceneError):
            Sphere(ORIGIN, radius, red)

    def test_owns_a_copy_of_its_material(self, red):
        sphere = Sphere(Vector3(0, 0, 5), 1.0, red)
        assert sphere.material() == red
        assert sphere.material() is not red
        assert sphere.intersect(Ray(ORIGIN, FORWARD)).material == red


class TestPlane:
    """Infinite checkered plane."""

    def floor(self, material):
        return Plane(Vector3(0, -1, 0), Vector3(0, 1, 0), material)

    def test_hit_straight_down(self, red):
        hit = self.floor(red).intersect(Ray(Vector3(0.25, 1, 0.25), Vector3(0, -1, 0)))
        assert hit.dist == pytest.approx(2.0)
        assert hit.pos == Vector3(0.25, -1, 0.25)
        assert hit.normal == Vector3(0, 1, 0)

    def test_parallel_ray_misses(self, red):
        assert self.floor(red).intersect(Ray(ORIGIN, Vector3(1, 0, 0))) is None

    def test_ray_pointing_away_misses(self, red):
        assert self.floor(red).intersect(Ray(ORIGIN, Vector3(0, 1, 0))) is None

    def test_origin_on_plane_misses(self, red):
        ray = Ray(Vector3(0, -1, 0), Vector3(0, -1, 0))
        assert self.floor(red).intersect(ray) is None

    @pytest.mark.parametrize("x, z, parity", [
        (0.25, 0.25, 0),
        (0.75, 0.25, 1),
        (0.25, 0.75, 1),
        (0.75, 0.75, 0),
        (-0.25, 0.25, 1),
        (-0.25, -0.25, 0),
        (3.1, -7.9, 0),
    ])
    def test_checker_parity(self, x, z, parity):
        assert checker_parity(Vector3(x, 0, z)) == parity

    def test_even_tile_keeps_color(self, red):
        hit = self.floor(red).intersect(Ray(Vector3(0.25, 1, 0.25), Vector3(0, -1, 0)))
        assert hit.material.color == red.color

    def test_odd_tile_is_black(self, red):
        hit = self.floor(red).intersect(Ray(Vector3(0.75, 1, 0.25), Vector3(0, -1, 0)))
        assert hit.material.color == Vector3(0, 0, 0)
        assert hit.material.spec_color == red.spec_color
        assert hit.material.shininess == red.shininess

    def test_pattern_does_not_change_plane_material(self, red):
        plane = self.floor(red)
        plane.intersect(Ray(Vector3(0.75, 1, 0.25), Vector3(0, -1, 0)))
        assert plane.material().color == red.color


class TestAxisAlignedBox:
    """Slab method with fixed per-axis normals."""

    def box(self, material):
        return AxisAlignedBox(Vector3(-1, -1, 4), Vector3(1, 1, 6), material)

    def test_hit_front_face(self, red):
        hit = self.box(red).intersect(Ray(ORIGIN, FORWARD))
        assert hit.dist == pytest.approx(4.0)
        assert hit.pos == Vector3(0, 0, 4)
        assert hit.normal == Vector3(0, 0, -1)

    def test_pointing_away_misses(self, red):
        assert self.box(red).intersect(Ray(ORIGIN, Vector3(0, 0, -1))) is None

    def test_parallel_outside_slab_misses(self, red):
        assert self.box(red).intersect(Ray(Vector3(5, 0, 0), FORWARD)) is None
        assert self.box(red).intersect(Ray(Vector3(0, -5, 0), FORWARD)) is None

    def test_parallel_to_z_slab_outside_misses(self, red):
        ray = Ray(Vector3(-5, 0, 0), Vector3(1, 0, 0))
        assert self.box(red).intersect(ray) is None

    def test_x_face_normal_is_not_sign_corrected(self, red):
        hit = self.box(red).intersect(Ray(Vector3(-5, 0, 5), Vector3(1, 0, 0)))
        assert hit.dist == pytest.approx(4.0)
        assert hit.normal == Vector3(1, 0, 0)

    def test_y_face_normal(self, red):
        hit = self.box(red).intersect(Ray(Vector3(0, 5, 5), Vector3(0, -1, 0)))
        assert hit.dist == pytest.approx(4.0)
        assert hit.normal == Vector3(0, 1, 0)

    def test_z_face_normal_from_behind(self, red):
        hit = self.box(red).intersect(Ray(Vector3(0, 0, 10), Vector3(0, 0, -1)))
        assert hit.dist == pytest.approx(4.0)
        assert hit.normal == Vector3(0, 0, -1)

    def test_diagonal_miss(self, red):
        ray = Ray(ORIGIN, Vector3(1, 0, 1).normalize())
        assert self.box(red).intersect(ray) is None

    def test_origin_inside_reports_exit(self, red):
        hit = self.box(red).intersect(Ray(Vector3(0, 0, 5), FORWARD))
        assert hit.dist == pytest.approx(1.0)
        assert hit.pos == Vector3(0, 0, 6)

    def test_origin_on_exit_face_leaving_misses(self, red):
        # Exit distance is exactly zero, which is not a hit.
        assert self.box(red).intersect(Ray(Vector3(0, 0, 6), FORWARD)) is None
        assert self.box(red).intersect(Ray(Vector3(1, 0, 5), Vector3(1, 0, 0))) is None

    def test_origin_on_entry_face_reports_exit(self, red):
        hit = self.box(red).intersect(Ray(Vector3(0, 0, 4), FORWARD))
        assert hit.dist == pytest.approx(2.0)
        assert hit.pos == Vector3(0, 0, 6)

    def test_corners_must_be_ordered(self, red):
        with pytest.raises(InvalidSceneError):
            AxisAlignedBox(Vector3(1, 0, 0), Vector3(0, 1, 1), red)

    def test_flat_box_is_allowed(self, red):
        box = AxisAlignedBox(Vector3(-1, -1, 5), Vector3(1, 1, 5), red)
        assert box.intersect(Ray(ORIGIN, FORWARD)).dist == pytest.approx(5.0)


def test_material_validation():
    with pytest.raises(InvalidSceneError):
        Material(0.0, Vector3(1, 1, 1), Vector3(1, 0, 0))
    with pytest.raises(InvalidSceneError):
        Material(16.0, Vector3(1, 1, 1), Vector3(1, 0, 0), reflection=1.5)
