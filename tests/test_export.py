"""Tests for the exporter surface, configuration and input models."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from cemconv.collada.exporter import ColladaExporter, ExportResult, Exporter
from cemconv.config import configure_logging, load_config
from cemconv.models.scene import Frame, Material, Model, Scene, TriangleSlice, Vertex


def _make_scene(frame_count: int = 1) -> Scene:
    vertices = [
        Vertex(position=(0, 0, 0), normal=(0, 0, 1), texture=(0, 0)),
        Vertex(position=(1, 0, 0), normal=(0, 0, 1), texture=(1, 0)),
        Vertex(position=(0, 1, 0), normal=(0, 0, 1), texture=(0, 1)),
    ]
    return Scene(model=Model(
        lod_levels=[[(0, 1, 2)]],
        materials=[Material(name="m", triangles=[TriangleSlice(offset=0, len=1)], vertex_count=3)],
        frames=[Frame(vertices=vertices, tag_points=[(0, 0, 1)]) for _ in range(frame_count)],
        tag_points=["light_255_255_0_0_0_0"],
    ))


# ---------------------------------------------------------------------------
# Exporter
# ---------------------------------------------------------------------------


class TestColladaExporter:
    def test_is_exporter(self):
        exporter = ColladaExporter()
        assert isinstance(exporter, Exporter)
        assert exporter.format_name == "collada"

    def test_export_creates_file(self, tmp_path: Path):
        exporter = ColladaExporter()
        result = exporter.export(_make_scene(), tmp_path / "export")

        assert result.success
        assert result.file_path == tmp_path / "export" / "model.dae"
        assert result.file_path.is_file()
        assert result.format == "collada"

    def test_export_content(self, tmp_path: Path):
        exporter = ColladaExporter(name="Flag", filename="flag.dae")
        result = exporter.export(_make_scene(frame_count=2), tmp_path)

        content = result.file_path.read_text(encoding="utf-8")
        assert content.startswith('<?xml version="1.0" encoding="utf-8"?>')
        assert 'id="Flag-mesh"' in content
        assert 'id="Flag_frame1-mesh"' in content
        assert 'id="Flag-morph"' in content

    def test_export_failure_reported(self, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")

        result = ColladaExporter().export(_make_scene(), blocker)

        assert not result.success
        assert result.file_path is None
        assert "failed" in result.message

    def test_result_to_dict(self, tmp_path: Path):
        result = ExportResult(file_path=tmp_path / "a.dae", format="collada")
        d = result.to_dict()
        assert d["file_path"] == str(tmp_path / "a.dae")
        assert d["success"] is True

    def test_from_config(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("CEMCONV_BASE_NAME", "Tree")
        monkeypatch.setenv("CEMCONV_OUTPUT_FILENAME", "tree.dae")
        exporter = ColladaExporter.from_config(load_config())
        assert exporter.name == "Tree"
        assert exporter.filename == "tree.dae"


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class TestConfig:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch):
        for key in ("CEMCONV_LOG_LEVEL", "CEMCONV_BASE_NAME", "CEMCONV_OUTPUT_FILENAME"):
            monkeypatch.delenv(key, raising=False)
        config = load_config()
        assert config == {
            "CEMCONV_LOG_LEVEL": "INFO",
            "CEMCONV_BASE_NAME": "Scene_Root",
            "CEMCONV_OUTPUT_FILENAME": "model.dae",
        }

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("CEMCONV_LOG_LEVEL", "DEBUG")
        assert load_config()["CEMCONV_LOG_LEVEL"] == "DEBUG"

    def test_configure_logging_single_handler(self):
        logger = logging.getLogger("cemconv")
        saved_level = logger.level
        try:
            configure_logging("debug")
            configure_logging(logging.DEBUG)
            assert len(logger.handlers) == 1
            assert logger.level == logging.DEBUG
        finally:
            logger.handlers.clear()
            logger.setLevel(saved_level)

    def test_configure_logging_follows_env(self, monkeypatch: pytest.MonkeyPatch):
        logger = logging.getLogger("cemconv")
        saved_level = logger.level
        monkeypatch.setenv("CEMCONV_LOG_LEVEL", "WARNING")
        try:
            configure_logging()
            assert logger.level == logging.WARNING
            assert logger.handlers[0].level == logging.WARNING
        finally:
            logger.handlers.clear()
            logger.setLevel(saved_level)

    def test_explicit_level_beats_env(self, monkeypatch: pytest.MonkeyPatch):
        logger = logging.getLogger("cemconv")
        saved_level = logger.level
        monkeypatch.setenv("CEMCONV_LOG_LEVEL", "ERROR")
        try:
            configure_logging(logging.DEBUG)
            assert logger.level == logging.DEBUG
        finally:
            logger.handlers.clear()
            logger.setLevel(saved_level)

    def test_configure_logging_unknown_level(self):
        logger = logging.getLogger("cemconv")
        saved_level = logger.level
        try:
            configure_logging("chatty")
            assert logger.level == logging.INFO
        finally:
            logger.handlers.clear()
            logger.setLevel(saved_level)


# ---------------------------------------------------------------------------
# Input models
# ---------------------------------------------------------------------------


class TestModels:
    def test_model_requires_a_frame(self):
        with pytest.raises(ValidationError):
            Model(frames=[])

    def test_negative_triangle_index_rejected(self):
        with pytest.raises(ValidationError):
            Model(lod_levels=[[(0, -1, 2)]], frames=[Frame()])

    def test_counts(self):
        model = _make_scene().model
        assert model.triangle_count == 1
        assert model.vertex_count == 3

    def test_scene_is_frozen(self):
        scene = _make_scene()
        with pytest.raises(ValidationError):
            scene.model = scene.model
