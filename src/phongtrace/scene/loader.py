"""Scene loading and validation from JSON scene descriptions.

A description looks like::

    {
        "camera": {"position": [0, 0, -1], "up": [0, 1, 0],
                   "right": [1.33, 0, 0], "dist": 2.0},
        "background": [0.5, 0.4, 1.0],
        "materials": {"red": {"color": [1, 0, 0], "shininess": 64}},
        "lights": [{"position": [20, 20, -20], "color": [1, 1, 1]}],
        "objects": [
            {"type": "sphere", "center": [0, 0, 5], "radius": 1, "material": "red"},
            {"type": "plane", "point": [0, -1, 0], "normal": [0, 1, 0], "material": "red"},
            {"type": "box", "min": [2, -1, 5], "max": [3, 1, 6],
             "material": {"color": [0, 1, 0]}}
        ]
    }

Materials may be referenced by name or given inline. Omitted material fields
take the values of basic_material().
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from phongtrace.camera.camera import Camera
from phongtrace.core.vector import Vector3
from phongtrace.errors import InvalidSceneError
from phongtrace.geometry import AxisAlignedBox, Geometry, Plane, Sphere
from phongtrace.materials.material import Material
from phongtrace.materials.presets import basic_material
from phongtrace.scene.scene import BACKGROUND_COLOR, Light, Scene

logger = logging.getLogger(__name__)


def load_scene(json_path: Union[str, Path]) -> Scene:
    """Load a scene from a JSON file."""
    path = Path(json_path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidSceneError(f"{path}: not valid JSON ({e})") from e
    scene = scene_from_dict(data)
    logger.info("Loaded scene %s: %d objects, %d lights",
                path, len(scene.objects), len(scene.lights))
    return scene


def scene_from_dict(data: Mapping[str, Any]) -> Scene:
    """Build a Scene from an already parsed description."""
    if not isinstance(data, Mapping):
        raise InvalidSceneError("scene description must be a JSON object")
    if "camera" not in data:
        raise InvalidSceneError("scene must have a camera")

    camera = _parse_camera(data["camera"])
    background = _vector(data.get("background", list(BACKGROUND_COLOR)), "background")
    materials = {
        name: _parse_material(spec, f"materials.{name}")
        for name, spec in _mapping(data.get("materials", {}), "materials").items()
    }

    scene = Scene(camera, background=background)
    for i, spec in enumerate(_list(data.get("lights", []), "lights")):
        scene.add_light(_parse_light(spec, f"lights[{i}]"))
    for i, spec in enumerate(_list(data.get("objects", []), "objects")):
        scene.add(_parse_object(spec, materials, f"objects[{i}]"))
    return scene


def _parse_camera(spec: Any) -> Camera:
    spec = _mapping(spec, "camera")
    for key in ("position", "up", "right", "dist"):
        if key not in spec:
            raise InvalidSceneError(f"camera must have {key!r}")
    return Camera(
        position=_vector(spec["position"], "camera.position"),
        up=_vector(spec["up"], "camera.up"),
        right=_vector(spec["right"], "camera.right"),
        dist=_number(spec["dist"], "camera.dist"),
    )


def _parse_light(spec: Any, where: str) -> Light:
    spec = _mapping(spec, where)
    if "position" not in spec:
        raise InvalidSceneError(f"{where} must have 'position'")
    color = _vector(spec.get("color", [1.0, 1.0, 1.0]), f"{where}.color")
    return Light(_vector(spec["position"], f"{where}.position"), color)


def _parse_material(spec: Any, where: str) -> Material:
    spec = _mapping(spec, where)
    if "color" not in spec:
        raise InvalidSceneError(f"{where} must have 'color'")
    base = basic_material(_vector(spec["color"], f"{where}.color"))
    return Material(
        shininess=_number(spec.get("shininess", base.shininess), f"{where}.shininess"),
        spec_color=_vector(spec.get("spec_color", list(base.spec_color)), f"{where}.spec_color"),
        color=base.color,
        reflection=_number(spec.get("reflection", base.reflection), f"{where}.reflection"),
    )


def _resolve_material(spec: Mapping[str, Any], materials: Dict[str, Material],
                      where: str) -> Material:
    if "material" not in spec:
        raise InvalidSceneError(f"{where} must have 'material'")
    ref = spec["material"]
    if isinstance(ref, str):
        try:
            return materials[ref]
        except KeyError:
            raise InvalidSceneError(f"{where}: unknown material {ref!r}") from None
    return _parse_material(ref, f"{where}.material")


def _parse_object(spec: Any, materials: Dict[str, Material], where: str) -> Geometry:
    spec = _mapping(spec, where)
    kind = spec.get("type")
    material = _resolve_material(spec, materials, where)

    if kind == "sphere":
        _require(spec, ("center", "radius"), where)
        return Sphere(_vector(spec["center"], f"{where}.center"),
                      _number(spec["radius"], f"{where}.radius"),
                      material)
    if kind == "plane":
        _require(spec, ("point", "normal"), where)
        return Plane(_vector(spec["point"], f"{where}.point"),
                     _vector(spec["normal"], f"{where}.normal"),
                     material)
    if kind == "box":
        _require(spec, ("min", "max"), where)
        return AxisAlignedBox(_vector(spec["min"], f"{where}.min"),
                              _vector(spec["max"], f"{where}.max"),
                              material)
    raise InvalidSceneError(f"{where}: unknown object type {kind!r}")


def _require(spec: Mapping[str, Any], keys, where: str) -> None:
    for key in keys:
        if key not in spec:
            raise InvalidSceneError(f"{where} must have {key!r}")


def _mapping(value: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise InvalidSceneError(f"{where} must be an object")
    return value


def _list(value: Any, where: str) -> list:
    if not isinstance(value, list):
        raise InvalidSceneError(f"{where} must be a list")
    return value


def _number(value: Any, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidSceneError(f"{where} must be a number, got {value!r}")
    return float(value)


def _vector(value: Any, where: str) -> Vector3:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise InvalidSceneError(f"{where} must be a list of three numbers, got {value!r}")
    return Vector3(*(_number(c, where) for c in value))
