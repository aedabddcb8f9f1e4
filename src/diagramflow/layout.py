"""
Layout module for diagram nodes.

Placement is linear and deterministic: nodes are laid out one after another
in list order along the axis selected by the layout direction.

- Horizontal: x grows by spacing.x per node, y is constant.
- Vertical: y grows by spacing.y per node, x is constant.
- Radial: placed like horizontal.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from loguru import logger

from .models import Alignment, DiagramLayout, DiagramNode, LayoutDirection, Point, Size

ORIGIN_X = 50
ORIGIN_Y = 50


@dataclass
class FamilyLayout:
    """Fixed node size and placement policy for one diagram family."""

    node_size: Size
    direction: LayoutDirection
    spacing: Point
    alignment: Alignment = Alignment.CENTER

    def to_layout(self) -> DiagramLayout:
        return DiagramLayout(
            direction=self.direction,
            spacing=Point(self.spacing.x, self.spacing.y),
            alignment=self.alignment,
        )

    def make_size(self) -> Size:
        return Size(self.node_size.width, self.node_size.height)


FAMILY_LAYOUTS: Dict[str, FamilyLayout] = {
    "flowchart": FamilyLayout(
        node_size=Size(120, 60),
        direction=LayoutDirection.HORIZONTAL,
        spacing=Point(150, 100),
    ),
    "sequence": FamilyLayout(
        node_size=Size(100, 50),
        direction=LayoutDirection.HORIZONTAL,
        spacing=Point(200, 150),
    ),
    "timeline": FamilyLayout(
        node_size=Size(200, 60),
        direction=LayoutDirection.VERTICAL,
        spacing=Point(250, 80),
        alignment=Alignment.LEFT,
    ),
    "prose": FamilyLayout(
        node_size=Size(140, 60),
        direction=LayoutDirection.HORIZONTAL,
        spacing=Point(150, 100),
    ),
    "plantuml": FamilyLayout(
        node_size=Size(120, 60),
        direction=LayoutDirection.VERTICAL,
        spacing=Point(120, 80),
    ),
}


@dataclass
class LinearLayout:
    """
    Assigns positions to an ordered node list.

    Attributes:
        origin: Position of the first node.
    """

    origin: Point = field(default_factory=lambda: Point(ORIGIN_X, ORIGIN_Y))

    def apply(self, nodes: List[DiagramNode], layout: DiagramLayout) -> None:
        """
        Position every node in place according to the layout direction.

        Args:
            nodes: Nodes in placement order.
            layout: Direction and spacing to use.
        """
        direction = layout.direction
        if direction == LayoutDirection.RADIAL:
            # No radial geometry yet; radial diagrams are placed in a row.
            logger.debug("Radial layout requested, placing nodes horizontally")
            direction = LayoutDirection.HORIZONTAL

        for index, node in enumerate(nodes):
            if direction == LayoutDirection.VERTICAL:
                node.position = Point(
                    self.origin.x, self.origin.y + index * layout.spacing.y
                )
            else:
                node.position = Point(
                    self.origin.x + index * layout.spacing.x, self.origin.y
                )


def apply_layout(nodes: List[DiagramNode], layout: DiagramLayout) -> None:
    """
    Convenience function to lay out nodes from the default origin.

    Args:
        nodes: Nodes in placement order.
        layout: Direction and spacing to use.
    """
    LinearLayout().apply(nodes, layout)
