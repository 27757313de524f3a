"""Input data model for the converter."""

from cemconv.models.scene import (
    Frame,
    Material,
    Model,
    Scene,
    Triangle,
    TriangleSlice,
    Vertex,
)

__all__ = [
    "Frame",
    "Material",
    "Model",
    "Scene",
    "Triangle",
    "TriangleSlice",
    "Vertex",
]
