"""Exporter interface and the COLLADA (.dae) file exporter."""

from __future__ import annotations

import abc
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from cemconv.collada.document import convert
from cemconv.config import DEFAULT_BASE_NAME, DEFAULT_OUTPUT_FILENAME
from cemconv.models.scene import Scene

logger = logging.getLogger(__name__)


@dataclass
class ExportResult:
    """Outcome of writing one COLLADA document to disk."""

    file_path: Path | None
    format: str
    success: bool = True
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "file_path": str(self.file_path) if self.file_path else None,
            "format": self.format,
            "success": self.success,
            "message": self.message,
        }


class Exporter(abc.ABC):
    """Writes a converted :class:`Scene` somewhere.

    :class:`ColladaExporter` is the only implementation.
    """

    @property
    @abc.abstractmethod
    def format_name(self) -> str:
        """Format tag recorded in :class:`ExportResult`."""

    @abc.abstractmethod
    def export(self, scene: Scene, output_dir: Path) -> ExportResult:
        """Convert *scene* and write it under *output_dir*.

        Write failures are returned as an unsuccessful result, not raised.
        """


class ColladaExporter(Exporter):
    """Export a scene as a single COLLADA 1.4.1 document."""

    def __init__(
        self,
        name: str = DEFAULT_BASE_NAME,
        filename: str = DEFAULT_OUTPUT_FILENAME,
    ) -> None:
        self.name = name
        self.filename = filename

    @classmethod
    def from_config(cls, config: dict[str, str]) -> ColladaExporter:
        """Build an exporter from :func:`cemconv.config.load_config` output."""
        return cls(
            name=config.get("CEMCONV_BASE_NAME", DEFAULT_BASE_NAME),
            filename=config.get("CEMCONV_OUTPUT_FILENAME", DEFAULT_OUTPUT_FILENAME),
        )

    @property
    def format_name(self) -> str:
        return "collada"

    def export(self, scene: Scene, output_dir: Path) -> ExportResult:
        document = convert(scene, name=self.name)
        output_path = Path(output_dir) / self.filename

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(document, encoding="utf-8")
        except OSError as exc:
            logger.warning("COLLADA export to %s failed: %s", output_path, exc)
            return ExportResult(
                file_path=None,
                format=self.format_name,
                success=False,
                message=f"COLLADA export failed: {exc}",
            )

        logger.info("Wrote %s (%d frames)", output_path, len(scene.model.frames))
        return ExportResult(
            file_path=output_path,
            format=self.format_name,
            message="COLLADA document exported successfully.",
        )
