"""Scene assembler: turns a :class:`Scene` into a COLLADA 1.4.1 document.

The document is built by plain string formatting. Identifiers come from
material and tag point names, which the model loader delivers already
safe for use in XML attributes.
"""

from __future__ import annotations

import logging

from cemconv.collada.controller import build_morph_controller
from cemconv.collada.geometry import build_geometries, format_float
from cemconv.collada.lights import Light, resolve_light
from cemconv.collada.transform import UP_AXIS_TRANSFORM, Matrix3, transform_point
from cemconv.config import (
    AUTHOR,
    AUTHORING_TOOL,
    DEFAULT_BASE_NAME,
    DOCUMENT_TIMESTAMP,
    UNIT_NAME,
    UP_AXIS,
    VISUAL_SCENE_ID,
)
from cemconv.models.scene import Model, Scene

logger = logging.getLogger(__name__)

HEADER = f"""\
<?xml version="1.0" encoding="utf-8"?>
<COLLADA xmlns="http://www.collada.org/2005/11/COLLADASchema" version="1.4.1">
  <asset>
    <contributor>
      <author>{AUTHOR}</author>
      <authoring_tool>{AUTHORING_TOOL}</authoring_tool>
    </contributor>
    <created>{DOCUMENT_TIMESTAMP}</created>
    <modified>{DOCUMENT_TIMESTAMP}</modified>
    <unit name="{UNIT_NAME}" meter="1"/>
    <up_axis>{UP_AXIS}</up_axis>
  </asset>
  <library_cameras/>
  <library_images/>"""

_IDENTITY_MATRIX = "1 0 0 0 0 1 0 0 0 0 1 0 0 0 0 1"


def convert(
    scene: Scene,
    name: str = DEFAULT_BASE_NAME,
    transform: Matrix3 = UP_AXIS_TRANSFORM,
) -> str:
    """Convert *scene* into a complete COLLADA document string.

    Parameters
    ----------
    scene:
        The loaded model scene. It is only read.
    name:
        Identifier of the rest-pose geometry and of the root node.
    transform:
        Model-to-document rotation applied to vertices and tag points.
    """
    model = scene.model

    parts = [
        HEADER,
        _library_geometries(model, name, transform),
        _library_lights(model),
        _library_controllers(model, name),
        _library_visual_scenes(model, name, transform),
        f'  <scene><instance_visual_scene url="#{VISUAL_SCENE_ID}"/></scene>',
        "</COLLADA>",
    ]
    return "\n".join(parts) + "\n"


def _library_geometries(model: Model, name: str, transform: Matrix3) -> str:
    lines = ["  <library_geometries>"]
    lines.extend(geometry.to_collada() for geometry in build_geometries(model, name, transform))
    lines.append("  </library_geometries>")
    return "\n".join(lines)


def _library_lights(model: Model) -> str:
    lines = ["  <library_lights>"]
    for tag_name in model.tag_points:
        lines.append(_light_element(tag_name, resolve_light(tag_name)))
    lines.append("  </library_lights>")
    return "\n".join(lines)


def _light_element(tag_name: str, light: Light) -> str:
    r, g, b = (format_float(channel) for channel in light.color)
    return (
        f'    <light id="{tag_name}-light" name="{tag_name}"><technique_common>'
        f"<point><color>{r} {g} {b}</color>"
        f"<linear_attenuation>{light.linear_attenuation}</linear_attenuation></point>"
        "</technique_common></light>"
    )


def _library_controllers(model: Model, name: str) -> str:
    controller = build_morph_controller(name, len(model.frames))
    if controller is None:
        return "  <library_controllers>\n  </library_controllers>"

    logger.debug("Morph controller '%s' with %d targets", controller.controller_id, len(controller.targets))
    return "\n".join([
        "  <library_controllers>",
        controller.to_collada(),
        "  </library_controllers>",
    ])


def _library_visual_scenes(model: Model, name: str, transform: Matrix3) -> str:
    lines = [
        f'  <library_visual_scenes><visual_scene id="{VISUAL_SCENE_ID}" name="{VISUAL_SCENE_ID}">',
        f'    <node id="{name}" name="{name}" type="NODE">'
        f'<matrix sid="transform">{_IDENTITY_MATRIX}</matrix>'
        f'<instance_geometry url="#{name}-mesh"/>',
    ]

    rest_pose = model.frames[0]
    for tag_name, position in zip(model.tag_points, rest_pose.tag_points):
        x, y, z = (format_float(c) for c in transform_point(position, transform))
        lines.append(
            f'      <node name="{tag_name}"><translate>{x} {y} {z}</translate>'
            f'<instance_light url="#{tag_name}-light"/></node>'
        )

    lines.append("    </node>")
    lines.append("  </visual_scene></library_visual_scenes>")
    return "\n".join(lines)
