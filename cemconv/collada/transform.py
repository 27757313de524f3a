"""Up-axis conversion between model space and document space."""

from __future__ import annotations

import math

from cemconv.models.scene import Vector3

Matrix3 = tuple[Vector3, Vector3, Vector3]


def rotation_x(degrees: float) -> Matrix3:
    """Return the rotation matrix for *degrees* about the X axis.

    Quarter turns are snapped to exact 0/±1 entries.
    """
    radians = math.radians(degrees)
    c = _snap(math.cos(radians))
    s = _snap(math.sin(radians))
    return (
        (1.0, 0.0, 0.0),
        (0.0, c, -s),
        (0.0, s, c),
    )


def _snap(value: float) -> float:
    nearest = float(round(value))
    return nearest if math.isclose(value, nearest, abs_tol=1e-12) else value


# Source models are Z-up; the document is Y-up.
UP_AXIS_TRANSFORM: Matrix3 = rotation_x(-90.0)


def transform_point(point: Vector3, matrix: Matrix3 = UP_AXIS_TRANSFORM) -> Vector3:
    x, y, z = point
    return (
        matrix[0][0] * x + matrix[0][1] * y + matrix[0][2] * z,
        matrix[1][0] * x + matrix[1][1] * y + matrix[1][2] * z,
        matrix[2][0] * x + matrix[2][1] * y + matrix[2][2] * z,
    )


def transform_direction(vector: Vector3, matrix: Matrix3 = UP_AXIS_TRANSFORM) -> Vector3:
    """Normalize *vector*, then rotate it.

    The matrix carries no translation, so a direction rotates exactly
    like a point.
    """
    return transform_point(normalize(vector), matrix)


def normalize(vector: Vector3) -> Vector3:
    """Scale *vector* to unit length. A zero vector is returned unchanged."""
    length = math.sqrt(vector[0] ** 2 + vector[1] ** 2 + vector[2] ** 2)
    if length == 0.0:
        return vector
    return (vector[0] / length, vector[1] / length, vector[2] / length)
