"""
Data models for diagram extraction.

This module contains the dataclasses that make up a parsed diagram. Every
sub-language parser produces the same records so that a single renderer can
consume any of them.

Classes:
    Point: An x/y pair, used for node positions and layout spacing.
    Size: A width/height pair for node boxes.
    NodeStyling: Fully resolved visual style of one node.
    DiagramNode: One node of a diagram.
    DiagramConnection: One directed edge between two nodes.
    DiagramLayout: Placement policy for a diagram.
    DiagramData: A complete parsed diagram.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class DiagramType(str, Enum):
    """Rendering category of a diagram."""

    FLOWCHART = "flowchart"
    ORGCHART = "orgchart"
    TIMELINE = "timeline"
    PROCESS = "process"
    ARCHITECTURE = "architecture"


class NodeType(str, Enum):
    """Semantic category of a node."""

    START = "start"
    PROCESS = "process"
    DECISION = "decision"
    END = "end"
    DATA = "data"
    PERSON = "person"
    SYSTEM = "system"


class ConnectionType(str, Enum):
    """Line style of a connection."""

    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"


class LayoutDirection(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    RADIAL = "radial"


class Alignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass
class Point:
    x: int = 0
    y: int = 0


@dataclass
class Size:
    width: int = 0
    height: int = 0


@dataclass
class NodeStyling:
    """
    Visual style of a node, resolved from the brand palette.

    Attributes:
        background_color: Fill color as a hex string.
        border_color: Outline color as a hex string.
        text_color: Label color as a hex string.
        font_size: CSS-style font size (e.g. "12px").
        font_weight: CSS-style font weight (e.g. "500").
    """

    background_color: str
    border_color: str
    text_color: str
    font_size: str
    font_weight: str


@dataclass
class DiagramNode:
    """
    One node of a diagram.

    Attributes:
        id: Identifier, unique within its diagram.
        label: Display text. Defaults to the id.
        type: Semantic category driving styling.
        position: Top-left corner, assigned by the layout engine only.
        size: Box size, fixed per diagram family.
        styling: Resolved visual style.
    """

    id: str
    label: str
    type: NodeType
    size: Size
    styling: NodeStyling
    position: Point = field(default_factory=Point)


@dataclass
class DiagramConnection:
    """
    A directed connection between two nodes.

    ``source`` and ``target`` are serialized as ``from`` and ``to``.

    Attributes:
        source: Id of the node the connection leaves.
        target: Id of the node the connection enters.
        type: Line style derived from the edge notation.
        color: Line color from the palette.
        label: Optional text, e.g. a sequence message.
    """

    source: str
    target: str
    type: ConnectionType
    color: str
    label: Optional[str] = None


@dataclass
class DiagramLayout:
    """
    Placement policy for a diagram.

    ``alignment`` is metadata for the renderer; node spacing does not vary
    with it.
    """

    direction: LayoutDirection
    spacing: Point
    alignment: Alignment = Alignment.CENTER


@dataclass
class DiagramData:
    """
    A fully parsed diagram.

    Attributes:
        type: Rendering category.
        title: Human-readable title.
        nodes: Nodes in first-seen order.
        connections: Connections in declaration order.
        layout: Placement policy used for the nodes.
        source_offset: Character offset of the source region in the
            (newline-normalized) input text.
        source_kind: "fenced" or "heuristic", set by the extractor.
    """

    type: DiagramType
    title: str
    layout: DiagramLayout
    nodes: List[DiagramNode] = field(default_factory=list)
    connections: List[DiagramConnection] = field(default_factory=list)
    source_offset: int = 0
    source_kind: str = ""

    def get_node(self, node_id: str) -> Optional[DiagramNode]:
        """Return the node with the given id, or None."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def node_ids(self) -> List[str]:
        return [node.id for node in self.nodes]
