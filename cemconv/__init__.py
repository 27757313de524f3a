"""cemconv: convert CEM model scenes into COLLADA documents."""

from cemconv.config import __version__

from cemconv.collada.document import convert
from cemconv.collada.exporter import ColladaExporter, ExportResult
from cemconv.collada.lights import LightDecodeError, decode_light, resolve_light
from cemconv.models.scene import Frame, Material, Model, Scene, TriangleSlice, Vertex

__all__ = [
    "__version__",
    "ColladaExporter",
    "ExportResult",
    "Frame",
    "LightDecodeError",
    "Material",
    "Model",
    "Scene",
    "TriangleSlice",
    "Vertex",
    "convert",
    "decode_light",
    "resolve_light",
]
