"""Morph controller for multi-frame models."""

from __future__ import annotations

from dataclasses import dataclass

from cemconv.collada.geometry import geometry_name


@dataclass
class MorphController:
    """Blends the base mesh towards every later frame.

    Weights start at zero; the consuming engine animates them.
    """

    base_name: str
    targets: list[str]

    @property
    def controller_id(self) -> str:
        return f"{self.base_name}-morph"

    @property
    def weights(self) -> list[float]:
        return [0.0] * len(self.targets)

    def to_collada(self) -> str:
        name = self.base_name
        count = len(self.targets)
        lines = [
            f'    <controller id="{name}-morph" name="{name}-morph">',
            f'      <morph source="#{name}-mesh" method="NORMALIZED">',
            f'        <source id="{name}-targets">',
            f'          <IDREF_array id="{name}-targets-array" count="{count}">'
            + " ".join(self.targets)
            + "</IDREF_array>",
            "          <technique_common>"
            f'<accessor source="#{name}-targets-array" count="{count}" stride="1">'
            '<param name="IDREF" type="IDREF"/></accessor></technique_common>',
            "        </source>",
            f'        <source id="{name}-weights">',
            f'          <float_array id="{name}-weights-array" count="{count}">'
            + " ".join(f"{w:g}" for w in self.weights)
            + "</float_array>",
            "          <technique_common>"
            f'<accessor source="#{name}-weights-array" count="{count}" stride="1">'
            '<param name="MORPH_WEIGHT" type="float"/></accessor></technique_common>',
            "        </source>",
            "        <targets>",
            f'          <input semantic="MORPH_TARGET" source="#{name}-targets"/>',
            f'          <input semantic="MORPH_WEIGHT" source="#{name}-weights"/>',
            "        </targets>",
            "      </morph>",
            "    </controller>",
        ]
        return "\n".join(lines)


def build_morph_controller(base_name: str, frame_count: int) -> MorphController | None:
    """Return a controller targeting frames ``1..frame_count``, or ``None``
    when there is nothing to morph towards."""
    if frame_count <= 1:
        return None

    targets = [
        f"{geometry_name(base_name, frame_index)}-mesh"
        for frame_index in range(1, frame_count)
    ]
    return MorphController(base_name=base_name, targets=targets)
