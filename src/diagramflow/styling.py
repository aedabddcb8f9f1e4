"""
Node styling resolution.

Maps a node category to a complete NodeStyling using the brand palette.
"""

from typing import Optional

from .models import NodeStyling, NodeType
from .palette import DEFAULT_PALETTE, BrandPalette

FONT_SIZE = "12px"
FONT_WEIGHT = "500"
LIGHT_TEXT = "#FFFFFF"
DARK_TEXT = "#000000"


class StyleResolver:
    """Resolves node categories to styles from a single palette."""

    def __init__(self, palette: Optional[BrandPalette] = None):
        self.palette = palette or DEFAULT_PALETTE

    def resolve(self, node_type: NodeType) -> NodeStyling:
        """
        Return the styling for a node category.

        A new NodeStyling is built on every call, so callers may keep or
        modify the result without affecting other nodes.

        Args:
            node_type: Node category. Unknown values get the neutral style.

        Returns:
            Fully populated NodeStyling.
        """
        palette = self.palette

        if node_type in (NodeType.START, NodeType.END):
            return self._style(palette.success, palette.success)
        if node_type == NodeType.DECISION:
            return self._style(palette.warning, palette.warning, DARK_TEXT)
        if node_type == NodeType.PROCESS:
            return self._style(palette.primary, palette.primary)
        if node_type == NodeType.DATA:
            return self._style(palette.secondary, palette.secondary)
        return self._style(palette.neutral_medium, palette.neutral_dark)

    @staticmethod
    def _style(
        background: str, border: str, text: str = LIGHT_TEXT
    ) -> NodeStyling:
        return NodeStyling(
            background_color=background,
            border_color=border,
            text_color=text,
            font_size=FONT_SIZE,
            font_weight=FONT_WEIGHT,
        )


def resolve_styling(
    node_type: NodeType, palette: Optional[BrandPalette] = None
) -> NodeStyling:
    """
    Convenience function to resolve a single node style.

    Args:
        node_type: Node category.
        palette: Palette to use; the default palette when omitted.

    Returns:
        Fully populated NodeStyling.
    """
    return StyleResolver(palette).resolve(node_type)
