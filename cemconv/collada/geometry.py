"""Geometry builder: one mesh per animation frame.

All frames share a single flattened index buffer built from the materials'
highest-detail triangle ranges. Only the vertex attributes differ between
frames.

Each flattened index is written three times in ``<p>``, once per input
(VERTEX, NORMAL, TEXCOORD). This assumes position, normal and texture data
are never welded differently; a format with per-channel indices would need
separate index streams here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from cemconv.collada.transform import UP_AXIS_TRANSFORM, Matrix3, transform_direction, transform_point
from cemconv.config import FLOAT_PRECISION
from cemconv.models.scene import Frame, Model

logger = logging.getLogger(__name__)

_POSITION_PARAMS = '<param name="X" type="float"/><param name="Y" type="float"/><param name="Z" type="float"/>'
_TEXTURE_PARAMS = '<param name="S" type="float"/><param name="T" type="float"/>'


def format_float(value: float) -> str:
    return f"{value:.{FLOAT_PRECISION}f}"


@dataclass
class Geometry:
    """Mesh data for one frame, already in document space."""

    name: str
    positions: list[float] = field(default_factory=list)
    normals: list[float] = field(default_factory=list)
    uvs: list[float] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    @property
    def mesh_id(self) -> str:
        return f"{self.name}-mesh"

    @property
    def vertex_count(self) -> int:
        return len(self.positions) // 3

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    def to_collada(self) -> str:
        """Render the ``<geometry>`` element."""
        name = self.name
        lines = [
            f'    <geometry id="{name}-mesh" name="{name}">',
            "      <mesh>",
            *self._source("mesh-positions", self.positions, 3, _POSITION_PARAMS),
            *self._source("mesh-normals", self.normals, 3, _POSITION_PARAMS),
            *self._source("mesh-map", self.uvs, 2, _TEXTURE_PARAMS),
            f'        <vertices id="{name}-mesh-vertices">'
            f'<input semantic="POSITION" source="#{name}-mesh-positions"/></vertices>',
            f'        <triangles count="{self.triangle_count}">',
            f'          <input semantic="VERTEX" source="#{name}-mesh-vertices" offset="0"/>',
            f'          <input semantic="NORMAL" source="#{name}-mesh-normals" offset="1"/>',
            f'          <input semantic="TEXCOORD" source="#{name}-mesh-map" offset="2" set="0"/>',
            "          <p>" + " ".join(f"{i} {i} {i}" for i in self.indices) + "</p>",
            "        </triangles>",
            "      </mesh>",
            "    </geometry>",
        ]
        return "\n".join(lines)

    def _source(self, source: str, values: list[float], stride: int, params: str) -> list[str]:
        source_id = f"{self.name}-{source}"
        return [
            f'        <source id="{source_id}">',
            f'          <float_array id="{source_id}-array" count="{len(values)}">'
            + " ".join(format_float(v) for v in values)
            + "</float_array>",
            "          <technique_common>"
            f'<accessor source="#{source_id}-array" count="{self.vertex_count}" stride="{stride}">'
            f"{params}</accessor></technique_common>",
            "        </source>",
        ]


def geometry_name(base_name: str, frame_index: int) -> str:
    """Frame 0 keeps *base_name*; later frames get a ``_frame<N>`` suffix."""
    if frame_index == 0:
        return base_name
    return f"{base_name}_frame{frame_index}"


def build_index_buffer(model: Model) -> list[int]:
    """Merge every material's LOD 0 triangles into one flat index list.

    Triangles keep their absolute position in the LOD 0 list; slots no
    material covers stay zero.
    """
    indices = [0] * (model.triangle_count * 3)

    for material in model.materials:
        if not material.triangles:
            continue
        triangle_slice = material.triangles[0]
        for index in range(triangle_slice.offset, triangle_slice.offset + triangle_slice.len):
            a, b, c = model.lod_levels[0][index]
            base = index * 3
            indices[base] = material.vertex_offset + a
            indices[base + 1] = material.vertex_offset + b
            indices[base + 2] = material.vertex_offset + c

    return indices


def build_frame_geometry(
    name: str,
    frame: Frame,
    indices: list[int],
    transform: Matrix3 = UP_AXIS_TRANSFORM,
) -> Geometry:
    """Convert one frame's vertices into document space."""
    geometry = Geometry(name=name, indices=indices)

    for vertex in frame.vertices:
        geometry.positions.extend(transform_point(vertex.position, transform))
        geometry.normals.extend(transform_direction(vertex.normal, transform))
        u, v = vertex.texture
        geometry.uvs.extend((u, 1.0 - v))

    return geometry


def build_geometries(
    model: Model,
    base_name: str,
    transform: Matrix3 = UP_AXIS_TRANSFORM,
) -> list[Geometry]:
    """Build one :class:`Geometry` per frame, in frame order."""
    indices = build_index_buffer(model)

    geometries = [
        build_frame_geometry(geometry_name(base_name, frame_index), frame, list(indices), transform)
        for frame_index, frame in enumerate(model.frames)
    ]

    logger.debug(
        "Built %d geometries for '%s' (%d indices, %d vertices)",
        len(geometries), base_name, len(indices), model.vertex_count,
    )
    return geometries
