"""Scene: the in-memory model handed over by the model loader.

A ``Scene`` wraps exactly one ``Model``. Frame 0 is the rest pose; every
frame carries the same number of vertices and one position per tag point.
These invariants are the loader's responsibility and are not re-checked here.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

Vector2 = tuple[float, float]
Vector3 = tuple[float, float, float]

Triangle = tuple[NonNegativeInt, NonNegativeInt, NonNegativeInt]
"""Three vertex indices, relative to the owning material's ``vertex_offset``."""


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Vertex(_Frozen):
    """One vertex snapshot in model space."""

    position: Vector3
    normal: Vector3
    texture: Vector2
    """Texture coordinate with V growing downward."""


class TriangleSlice(_Frozen):
    """A run of triangles inside one level of detail."""

    offset: NonNegativeInt = 0
    len: NonNegativeInt = 0


class Material(_Frozen):
    """A material and the triangles it draws at each level of detail."""

    name: str
    texture: int = 0
    triangles: list[TriangleSlice] = Field(default_factory=list)
    """One slice per level of detail; index 0 is the highest detail."""

    vertex_offset: NonNegativeInt = 0
    vertex_count: NonNegativeInt = 0
    texture_name: str = ""


class Frame(_Frozen):
    """One animation pose."""

    vertices: list[Vertex] = Field(default_factory=list)
    tag_points: list[Vector3] = Field(default_factory=list)


class Model(_Frozen):
    lod_levels: list[list[Triangle]] = Field(default_factory=lambda: [[]])
    materials: list[Material] = Field(default_factory=list)
    frames: list[Frame] = Field(min_length=1)
    tag_points: list[str] = Field(default_factory=list)

    @property
    def triangle_count(self) -> int:
        """Number of triangles at the highest level of detail."""
        return len(self.lod_levels[0]) if self.lod_levels else 0

    @property
    def vertex_count(self) -> int:
        return len(self.frames[0].vertices)


class Scene(_Frozen):
    model: Model
