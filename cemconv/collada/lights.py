"""Point lights derived from tag point names.

A tag point named ``light_<R>_<G>_<B>_<I>_<J>_<K>`` describes a point light:
``R, G, B`` are 0-255 color channels and ``I, J, K`` are integer parameters
carried through untouched. Every other tag point, and every ``light_`` name
that fails to decode, gets a plain white light instead.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from cemconv.config import DEFAULT_LIGHT_COLOR, LIGHT_PREFIX, LINEAR_ATTENUATION

logger = logging.getLogger(__name__)

_LIGHT_TAG = "light"
_FIELD_COUNT = 6
_DIGITS = re.compile(r"\+?[0-9]+")
_U32_MAX = 0xFFFFFFFF

Color = tuple[float, float, float]


class LightDecodeError(ValueError):
    """Raised when a ``light_`` tag point name cannot be decoded."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"{name!r}: {reason}")
        self.name = name
        self.reason = reason


@dataclass(frozen=True)
class PointLight:
    """A light whose color was decoded from its tag point name."""

    color: Color
    params: tuple[int, int, int]
    linear_attenuation: float = LINEAR_ATTENUATION


@dataclass(frozen=True)
class FallbackLight:
    """The default white light used when no color could be decoded."""

    reason: str
    color: Color = DEFAULT_LIGHT_COLOR
    linear_attenuation: float = LINEAR_ATTENUATION


Light = PointLight | FallbackLight


def decode_light(name: str) -> PointLight:
    """Decode a ``light_R_G_B_I_J_K`` name.

    Tokens after the sixth field are ignored.

    Raises
    ------
    LightDecodeError
        If the tag is not ``light``, a field is missing, or a field is not
        an unsigned 32-bit integer.
    """
    tokens = name.split("_")
    if tokens[0] != _LIGHT_TAG:
        raise LightDecodeError(name, f"expected leading '{_LIGHT_TAG}' tag")

    fields = tokens[1:1 + _FIELD_COUNT]
    if len(fields) < _FIELD_COUNT:
        raise LightDecodeError(
            name,
            f"invalid light definition, expected {_FIELD_COUNT} fields, got {len(fields)}",
        )

    values = [_parse_u32(name, token) for token in fields]
    r, g, b, i, j, k = values

    return PointLight(
        color=(r / 255.0, g / 255.0, b / 255.0),
        params=(i, j, k),
    )


def resolve_light(name: str) -> Light:
    """Return the light to emit for the tag point *name*.

    Never raises; decode failures are logged and replaced by a
    :class:`FallbackLight`.
    """
    if not name.startswith(LIGHT_PREFIX):
        return FallbackLight(reason="not a light encoding")

    try:
        return decode_light(name)
    except LightDecodeError as exc:
        logger.warning('Failed to parse light "%s": %s', name, exc.reason)
        return FallbackLight(reason=exc.reason)


def _parse_u32(name: str, token: str) -> int:
    if not _DIGITS.fullmatch(token):
        raise LightDecodeError(name, f"failed to parse number {token!r}")
    value = int(token)
    if value > _U32_MAX:
        raise LightDecodeError(name, f"number out of range {token!r}")
    return value
