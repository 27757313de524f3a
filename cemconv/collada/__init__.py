"""COLLADA export: geometry, lights, morph controller and document assembly."""

from cemconv.collada.controller import MorphController, build_morph_controller
from cemconv.collada.document import convert
from cemconv.collada.exporter import ColladaExporter, ExportResult, Exporter
from cemconv.collada.geometry import Geometry, build_geometries, build_index_buffer
from cemconv.collada.lights import (
    FallbackLight,
    Light,
    LightDecodeError,
    PointLight,
    decode_light,
    resolve_light,
)
from cemconv.collada.transform import UP_AXIS_TRANSFORM

__all__ = [
    "ColladaExporter",
    "ExportResult",
    "Exporter",
    "FallbackLight",
    "Geometry",
    "Light",
    "LightDecodeError",
    "MorphController",
    "PointLight",
    "UP_AXIS_TRANSFORM",
    "build_geometries",
    "build_index_buffer",
    "build_morph_controller",
    "convert",
    "decode_light",
    "resolve_light",
]
