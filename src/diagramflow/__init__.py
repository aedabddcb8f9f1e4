"""
diagramflow - Diagram extraction from documents

A Python library that finds embedded diagrams in markdown-like text (Mermaid
and PlantUML fences, keyword-triggered step lists) and turns them into
normalized, laid-out, styled graph records for a vector renderer.

Example:
    >>> from diagramflow import extract_diagrams
    >>> diagrams = extract_diagrams('''
    ... ```mermaid
    ... flowchart LR
    ...     A[Start] --> B{Check}
    ... ```
    ... ''')
    >>> [(n.id, n.type.value) for n in diagrams[0].nodes]
    [('A', 'process'), ('B', 'decision')]
"""

from .builder import DiagramBuilder
from .export import DiagramExporter, ExportError, diagram_to_dict
from .extractor import DEFAULT_KEYWORDS, DiagramExtractor, extract_diagrams, find_sections
from .flowchart import FlowchartParser, parse_flowchart
from .graph import check_integrity, entry_nodes, exit_nodes, has_cycle, to_networkx
from .layout import FAMILY_LAYOUTS, LinearLayout, apply_layout
from .models import (
    Alignment,
    ConnectionType,
    DiagramConnection,
    DiagramData,
    DiagramLayout,
    DiagramNode,
    DiagramType,
    LayoutDirection,
    NodeStyling,
    NodeType,
    Point,
    Size,
)
from .palette import DEFAULT_PALETTE, BrandPalette
from .parser import BlockParser, ParseError, parse_block
from .plantuml import PlantUMLParser, parse_plantuml
from .prose import ProseParser, parse_prose_section
from .sequence import SequenceParser, parse_sequence
from .styling import StyleResolver, resolve_styling
from .timeline import TimelineParser, parse_timeline

__version__ = "0.1.0"

__all__ = [
    # Main API
    "DiagramExtractor",
    "extract_diagrams",
    "find_sections",
    "DEFAULT_KEYWORDS",
    # Models
    "DiagramData",
    "DiagramNode",
    "DiagramConnection",
    "DiagramLayout",
    "NodeStyling",
    "Point",
    "Size",
    "DiagramType",
    "NodeType",
    "ConnectionType",
    "LayoutDirection",
    "Alignment",
    # Parsers
    "BlockParser",
    "ParseError",
    "parse_block",
    "FlowchartParser",
    "parse_flowchart",
    "SequenceParser",
    "parse_sequence",
    "TimelineParser",
    "parse_timeline",
    "ProseParser",
    "parse_prose_section",
    "PlantUMLParser",
    "parse_plantuml",
    "DiagramBuilder",
    # Styling and layout
    "BrandPalette",
    "DEFAULT_PALETTE",
    "StyleResolver",
    "resolve_styling",
    "LinearLayout",
    "apply_layout",
    "FAMILY_LAYOUTS",
    # Graph
    "to_networkx",
    "check_integrity",
    "entry_nodes",
    "exit_nodes",
    "has_cycle",
    # Export
    "DiagramExporter",
    "ExportError",
    "diagram_to_dict",
]
