"""Unit tests for the export module."""

import json
import os
import tempfile

import pytest
from PIL import Image

from diagramflow.export import DiagramExporter, ExportError, diagram_to_dict
from diagramflow.flowchart import parse_flowchart
from diagramflow.sequence import parse_sequence


@pytest.fixture
def diagram():
    return parse_flowchart("flowchart\nA[Start] --> B{Check}\nB -.-> C(Data)")


class TestDiagramToDict:
    """Tests for diagram_to_dict function."""

    def test_top_level_keys(self, diagram):
        """Test the record has the renderer's keys."""
        record = diagram_to_dict(diagram)
        assert set(record) == {"type", "title", "nodes", "connections", "layout"}
        assert record["type"] == "flowchart"
        assert record["layout"] == {
            "direction": "horizontal",
            "spacing": {"x": 150, "y": 100},
            "alignment": "center",
        }

    def test_node_record(self, diagram):
        """Test nodes use camelCase styling keys."""
        node = diagram_to_dict(diagram)["nodes"][1]
        assert node["id"] == "B"
        assert node["type"] == "decision"
        assert node["position"] == {"x": 200, "y": 50}
        assert node["size"] == {"width": 120, "height": 60}
        assert set(node["styling"]) == {
            "backgroundColor",
            "borderColor",
            "textColor",
            "fontSize",
            "fontWeight",
        }

    def test_connection_record(self, diagram):
        """Test connections use from/to and omit missing labels."""
        connection = diagram_to_dict(diagram)["connections"][1]
        assert connection["from"] == "B"
        assert connection["to"] == "C"
        assert connection["type"] == "dotted"
        assert "label" not in connection

    def test_connection_label(self):
        """Test message labels are included."""
        record = diagram_to_dict(parse_sequence("sequenceDiagram\nA->>B: hi"))
        assert record["connections"][0]["label"] == "hi"

    def test_json_serializable(self, diagram):
        """Test the record survives json.dumps."""
        assert json.loads(json.dumps(diagram_to_dict(diagram)))["title"] == "Process Flow"


class TestDiagramExporter:
    """Tests for DiagramExporter class."""

    def test_save_json(self, diagram):
        """Test saving diagrams as JSON."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "diagrams.json")
            DiagramExporter().save_json([diagram, diagram], path)
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            assert len(data) == 2
            assert data[0]["nodes"][0]["id"] == "A"

    def test_save_png(self, diagram):
        """Test saving a PNG preview."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "preview.png")
            DiagramExporter().save_png(diagram, path, scale=1)
            with Image.open(path) as img:
                assert img.format == "PNG"
                assert img.width >= 50 + 2 * 150 + 120

    def test_save_png_empty_diagram(self):
        """Test a diagram without nodes still renders."""
        empty = parse_flowchart("flowchart")
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "empty.png")
            DiagramExporter().save_png(empty, path)
            assert os.path.exists(path)

    def test_save_by_suffix(self, diagram):
        """Test save picks the format from the suffix."""
        with tempfile.TemporaryDirectory() as tmpdir:
            exporter = DiagramExporter()
            json_path = os.path.join(tmpdir, "out.json")
            png_path = os.path.join(tmpdir, "out.png")
            exporter.save([diagram], json_path)
            exporter.save([diagram], png_path)
            assert os.path.exists(json_path)
            assert os.path.exists(png_path)

    def test_save_unsupported_suffix(self, diagram):
        """Test unsupported formats raise ExportError."""
        with pytest.raises(ExportError) as exc_info:
            DiagramExporter().save([diagram], "out.svg")
        assert "Unsupported export format" in str(exc_info.value)

    def test_save_png_requires_diagram(self):
        """Test PNG export of an empty list raises ExportError."""
        with pytest.raises(ExportError):
            DiagramExporter().save([], "out.png")
