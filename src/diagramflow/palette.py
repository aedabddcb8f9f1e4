"""
Brand palette used for node and connection colors.

The palette is read-only configuration. Parsers look colors up by semantic
name and never modify it, so one instance can be shared by any number of
concurrent extractions.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BrandPalette:
    """
    Semantic color names mapped to hex color values.

    Attributes:
        primary: Main brand color (process nodes, most connections).
        secondary: Secondary brand color (data nodes, timeline links).
        success: Start and end nodes.
        warning: Decision nodes.
        neutral_light: Light neutral, used for preview backgrounds.
        neutral_medium: Fill for nodes of unknown category.
        neutral_dark: Border for nodes of unknown category.
    """

    primary: str = "#2E86AB"
    secondary: str = "#A23B72"
    success: str = "#2A9D8F"
    warning: str = "#F18F01"
    neutral_light: str = "#F5F5F5"
    neutral_medium: str = "#9E9E9E"
    neutral_dark: str = "#333333"


DEFAULT_PALETTE = BrandPalette()
