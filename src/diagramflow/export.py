"""
File export functionality for parsed diagrams.

This module handles exporting DiagramData records:
- JSON (.json) - The camelCase record consumed by the vector renderer
- PNG images - A raster preview of node boxes and connectors, drawn from the
  layout positions, for checking extraction results by eye

The DiagramExporter class provides methods for saving diagrams and handles
font loading, image rendering, and file I/O.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from loguru import logger
from PIL import Image, ImageDraw, ImageFont

from .models import ConnectionType, DiagramData
from .palette import DEFAULT_PALETTE, BrandPalette


class ExportError(Exception):
    """Raised when a diagram cannot be exported."""

    pass


def diagram_to_dict(diagram: DiagramData) -> Dict[str, Any]:
    """
    Convert a diagram to the renderer's record format.

    Keys are camelCase and connection endpoints are ``from`` / ``to``.

    Args:
        diagram: Parsed diagram.

    Returns:
        JSON-serializable dict.
    """
    return {
        "type": diagram.type.value,
        "title": diagram.title,
        "nodes": [
            {
                "id": node.id,
                "label": node.label,
                "type": node.type.value,
                "position": {"x": node.position.x, "y": node.position.y},
                "size": {"width": node.size.width, "height": node.size.height},
                "styling": {
                    "backgroundColor": node.styling.background_color,
                    "borderColor": node.styling.border_color,
                    "textColor": node.styling.text_color,
                    "fontSize": node.styling.font_size,
                    "fontWeight": node.styling.font_weight,
                },
            }
            for node in diagram.nodes
        ],
        "connections": [_connection_to_dict(c) for c in diagram.connections],
        "layout": {
            "direction": diagram.layout.direction.value,
            "spacing": {"x": diagram.layout.spacing.x, "y": diagram.layout.spacing.y},
            "alignment": diagram.layout.alignment.value,
        },
    }


def _connection_to_dict(connection) -> Dict[str, Any]:
    record = {
        "from": connection.source,
        "to": connection.target,
        "type": connection.type.value,
        "color": connection.color,
    }
    if connection.label is not None:
        record["label"] = connection.label
    return record


class DiagramExporter:
    """
    Exports diagrams to various file formats.

    Attributes:
        default_font: Default font name for PNG export.
        palette: Palette used for the preview background and title.
    """

    def __init__(
        self,
        default_font: Optional[str] = None,
        palette: Optional[BrandPalette] = None,
    ):
        """
        Initialize the diagram exporter.

        Args:
            default_font: Default font name for PNG export (e.g. "DejaVu Sans").
            palette: Palette for preview chrome; node colors come from the
                diagram's own styling.
        """
        self.default_font = default_font
        self.palette = palette or DEFAULT_PALETTE

    def save(self, diagrams: List[DiagramData], filename: str) -> None:
        """
        Save diagrams, choosing the format from the file suffix.

        A ``.json`` file receives all diagrams as a list. A ``.png`` file
        receives a preview of the first diagram.

        Raises:
            ExportError: If the suffix is not supported or, for PNG, the
                list is empty.
        """
        suffix = Path(filename).suffix.lower()
        if suffix == ".json":
            self.save_json(diagrams, filename)
        elif suffix == ".png":
            if not diagrams:
                raise ExportError("No diagram to render")
            self.save_png(diagrams[0], filename)
        else:
            raise ExportError(f"Unsupported export format: {suffix or filename}")

    def save_json(self, diagrams: List[DiagramData], filename: str) -> None:
        """
        Save diagrams as a JSON list of renderer records.

        Args:
            diagrams: Diagrams to save.
            filename: Output filename (should end in .json).
        """
        payload = [diagram_to_dict(diagram) for diagram in diagrams]
        output_path = Path(filename)
        output_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        logger.debug(f"Wrote {len(diagrams)} diagrams to {output_path}")

    def save_png(
        self,
        diagram: DiagramData,
        filename: str,
        font_size: int = 12,
        padding: int = 40,
        font: Optional[str] = None,
        scale: int = 2,
    ) -> None:
        """
        Save a raster preview of a diagram.

        Nodes are drawn as filled boxes at their layout positions using
        their resolved styling. Connections are straight lines between box
        centers; dotted and dashed connections are drawn as broken lines.

        Args:
            diagram: Diagram to render.
            filename: Output filename (should end in .png).
            font_size: Label font size in points before scaling.
            padding: Margin around the diagram in pixels before scaling.
            font: Font name to use (overrides default_font if provided).
            scale: Resolution multiplier for crisp output.
        """
        loaded_font = self._load_font(font_size * scale, font or self.default_font)
        title_height = (font_size + 16) * scale

        width, height = self._extent(diagram)
        img_width = max((width + padding * 2) * scale, 100 * scale)
        img_height = max((height + padding * 2) * scale + title_height, 100 * scale)

        img = Image.new("RGB", (img_width, img_height), self.palette.neutral_light)
        draw = ImageDraw.Draw(img)
        draw.text(
            (padding * scale, 8 * scale),
            diagram.title,
            font=loaded_font,
            fill=self.palette.neutral_dark,
        )

        def to_canvas(x: int, y: int) -> Tuple[int, int]:
            return (x + padding) * scale, (y + padding) * scale + title_height

        centers = {
            node.id: to_canvas(
                node.position.x + node.size.width // 2,
                node.position.y + node.size.height // 2,
            )
            for node in diagram.nodes
        }

        for connection in diagram.connections:
            start = centers.get(connection.source)
            end = centers.get(connection.target)
            if start is None or end is None:
                continue
            if connection.type == ConnectionType.SOLID:
                draw.line([start, end], fill=connection.color, width=2 * scale)
            else:
                dash = 4 if connection.type == ConnectionType.DOTTED else 10
                self._draw_broken_line(
                    draw, start, end, connection.color, dash * scale, 2 * scale
                )

        for node in diagram.nodes:
            left, top = to_canvas(node.position.x, node.position.y)
            right = left + node.size.width * scale
            bottom = top + node.size.height * scale
            draw.rectangle(
                [left, top, right, bottom],
                fill=node.styling.background_color,
                outline=node.styling.border_color,
                width=2 * scale,
            )
            bbox = draw.textbbox((0, 0), node.label, font=loaded_font)
            text_width = bbox[2] - bbox[0]
            text_height = bbox[3] - bbox[1]
            draw.text(
                (
                    left + (right - left - text_width) // 2,
                    top + (bottom - top - text_height) // 2,
                ),
                node.label,
                font=loaded_font,
                fill=node.styling.text_color,
            )

        output_path = Path(filename)
        img.save(output_path, "PNG")
        logger.debug(f"Wrote preview of '{diagram.title}' to {output_path}")

    @staticmethod
    def _extent(diagram: DiagramData) -> Tuple[int, int]:
        """Right-most and bottom-most node edges."""
        width = max(
            (node.position.x + node.size.width for node in diagram.nodes), default=0
        )
        height = max(
            (node.position.y + node.size.height for node in diagram.nodes), default=0
        )
        return width, height

    @staticmethod
    def _draw_broken_line(
        draw: ImageDraw.ImageDraw,
        start: Tuple[int, int],
        end: Tuple[int, int],
        color: str,
        dash: int,
        width: int,
    ) -> None:
        dx = end[0] - start[0]
        dy = end[1] - start[1]
        length = (dx * dx + dy * dy) ** 0.5
        if length == 0:
            return

        steps = int(length // dash)
        for i in range(0, steps, 2):
            a = i * dash / length
            b = min((i + 1) * dash / length, 1.0)
            draw.line(
                [
                    (start[0] + dx * a, start[1] + dy * a),
                    (start[0] + dx * b, start[1] + dy * b),
                ],
                fill=color,
                width=width,
            )

    def _load_font(
        self, font_size: int, font_name: Optional[str] = None
    ) -> ImageFont.FreeTypeFont:
        """
        Load a font for PNG rendering.

        Tries the following in order:
        1. User-specified font name if provided
        2. Common system sans-serif fonts
        3. Pillow's default font
        """
        fonts_to_try = []

        if font_name:
            fonts_to_try.append(font_name)

        fonts_to_try.extend(
            [
                # Linux
                "DejaVuSans",
                "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
                # macOS
                "Helvetica",
                "/System/Library/Fonts/Helvetica.ttc",
                # Windows
                "Arial",
                "C:/Windows/Fonts/arial.ttf",
            ]
        )

        for font in fonts_to_try:
            try:
                return ImageFont.truetype(font, font_size)
            except OSError:
                continue

        try:
            return ImageFont.load_default(size=font_size)
        except TypeError:
            # Older Pillow versions don't support size parameter
            return ImageFont.load_default()
