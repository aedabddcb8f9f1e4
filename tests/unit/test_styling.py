"""Unit tests for the styling module."""

from diagramflow.models import NodeStyling, NodeType
from diagramflow.palette import DEFAULT_PALETTE, BrandPalette
from diagramflow.styling import StyleResolver, resolve_styling


class TestStyleResolver:
    """Tests for StyleResolver class."""

    def test_start_and_end_use_success_color(self, styles):
        """Test start and end nodes share the success color."""
        for node_type in (NodeType.START, NodeType.END):
            styling = styles.resolve(node_type)
            assert styling.background_color == DEFAULT_PALETTE.success
            assert styling.border_color == DEFAULT_PALETTE.success
            assert styling.text_color == "#FFFFFF"

    def test_decision_uses_warning_color_and_dark_text(self, styles):
        """Test decision nodes use the warning color with dark text."""
        styling = styles.resolve(NodeType.DECISION)
        assert styling.background_color == DEFAULT_PALETTE.warning
        assert styling.border_color == DEFAULT_PALETTE.warning
        assert styling.text_color == "#000000"

    def test_process_uses_primary_color(self, styles):
        """Test process nodes use the primary color."""
        styling = styles.resolve(NodeType.PROCESS)
        assert styling.background_color == DEFAULT_PALETTE.primary
        assert styling.border_color == DEFAULT_PALETTE.primary

    def test_data_uses_secondary_color(self, styles):
        """Test data nodes use the secondary color."""
        styling = styles.resolve(NodeType.DATA)
        assert styling.background_color == DEFAULT_PALETTE.secondary

    def test_other_categories_use_neutral_colors(self, styles):
        """Test person and system nodes fall back to the neutral style."""
        for node_type in (NodeType.PERSON, NodeType.SYSTEM):
            styling = styles.resolve(node_type)
            assert styling.background_color == DEFAULT_PALETTE.neutral_medium
            assert styling.border_color == DEFAULT_PALETTE.neutral_dark

    def test_font_settings_always_populated(self, styles):
        """Test every category gets the base font settings."""
        for node_type in NodeType:
            styling = styles.resolve(node_type)
            assert styling.font_size == "12px"
            assert styling.font_weight == "500"

    def test_resolve_is_idempotent(self, styles):
        """Test resolving the same category twice gives equal styles."""
        for node_type in NodeType:
            assert styles.resolve(node_type) == styles.resolve(node_type)

    def test_resolve_returns_independent_objects(self, styles):
        """Test results are not shared between calls."""
        first = styles.resolve(NodeType.PROCESS)
        second = styles.resolve(NodeType.PROCESS)
        first.background_color = "#123456"
        assert second.background_color == DEFAULT_PALETTE.primary

    def test_custom_palette(self):
        """Test a custom palette is used for lookups."""
        palette = BrandPalette(primary="#111111")
        styling = StyleResolver(palette).resolve(NodeType.PROCESS)
        assert styling.background_color == "#111111"


class TestResolveStyling:
    """Tests for resolve_styling convenience function."""

    def test_returns_node_styling(self):
        """Test the convenience function returns a NodeStyling."""
        styling = resolve_styling(NodeType.DECISION)
        assert isinstance(styling, NodeStyling)
        assert styling.background_color == DEFAULT_PALETTE.warning

    def test_accepts_palette(self):
        """Test the convenience function honors a palette."""
        styling = resolve_styling(NodeType.DATA, BrandPalette(secondary="#ABCDEF"))
        assert styling.background_color == "#ABCDEF"
