"""
PlantUML parser.

Reads the component/sequence subset of PlantUML found in ``plantuml`` fences:

    @startuml
    title Checkout
    actor Customer
    component "Payment Service" as pay
    Customer -> pay : submit
    pay --> Customer : receipt
    @enduml

Declared elements become nodes; arrows become connections. Elements used
only in arrows are created as ``system`` nodes.
"""

import re
from typing import Dict, List, Optional, Pattern, Tuple

from .builder import DiagramBuilder
from .models import ConnectionType, DiagramData, DiagramType, NodeType
from .styling import StyleResolver

DEFAULT_TITLE = "System Architecture"

START_MARKER = "@startuml"

ELEMENT_TYPES: Dict[str, NodeType] = {
    "actor": NodeType.PERSON,
    "database": NodeType.DATA,
    "participant": NodeType.SYSTEM,
    "component": NodeType.SYSTEM,
    "node": NodeType.SYSTEM,
    "queue": NodeType.SYSTEM,
    "rectangle": NodeType.SYSTEM,
    "cloud": NodeType.SYSTEM,
    "boundary": NodeType.SYSTEM,
    "control": NodeType.SYSTEM,
    "entity": NodeType.SYSTEM,
    "collections": NodeType.SYSTEM,
}

ELEMENT_PATTERN = re.compile(
    r"^(" + "|".join(ELEMENT_TYPES) + r')\s+(?:"([^"]+)"|(\w+))(?:\s+as\s+(\w+))?'
)

# Dashed and dotted before the plain arrow so "-->" is not read as "->".
ARROWS: List[Tuple[Pattern, ConnectionType]] = [
    (re.compile(r"^(\w+)\s*-->\s*(\w+)\s*(?::\s*(.+))?$"), ConnectionType.DASHED),
    (re.compile(r"^(\w+)\s*\.+>\s*(\w+)\s*(?::\s*(.+))?$"), ConnectionType.DOTTED),
    (re.compile(r"^(\w+)\s*->\s*(\w+)\s*(?::\s*(.+))?$"), ConnectionType.SOLID),
]

TITLE_PATTERN = re.compile(r"^title\s+(.+)$")


class PlantUMLParser:
    """Parses PlantUML component/sequence syntax into architecture diagrams."""

    def __init__(self, styles: Optional[StyleResolver] = None):
        self.styles = styles or StyleResolver()

    def parse(self, source: str) -> Optional[DiagramData]:
        """
        Parse a PlantUML body.

        Args:
            source: Fence body.

        Returns:
            DiagramData of type architecture, or None when the body has no
            ``@startuml`` marker.
        """
        lines = [line.strip() for line in source.strip().split("\n")]
        if not any(START_MARKER in line for line in lines):
            return None

        builder = DiagramBuilder(
            "plantuml", DiagramType.ARCHITECTURE, DEFAULT_TITLE, self.styles
        )
        color = self.styles.palette.primary

        for line in lines:
            if not line or line.startswith("'") or line.startswith("@"):
                continue

            title_match = TITLE_PATTERN.match(line)
            if title_match:
                builder.title = title_match.group(1).strip()
                continue

            element = ELEMENT_PATTERN.match(line)
            if element:
                keyword, quoted, name, alias = element.groups()
                label = quoted or name
                builder.add_node(alias or name or quoted, label, ELEMENT_TYPES[keyword])
                continue

            for pattern, connection_type in ARROWS:
                arrow = pattern.match(line)
                if arrow:
                    source_id, target_id, message = arrow.groups()
                    builder.connect(
                        source_id,
                        target_id,
                        connection_type,
                        color,
                        message.strip() if message else None,
                        default_type=NodeType.SYSTEM,
                    )
                    break

        return builder.build()


def parse_plantuml(
    source: str, styles: Optional[StyleResolver] = None
) -> Optional[DiagramData]:
    """Convenience function to parse a PlantUML body."""
    return PlantUMLParser(styles).parse(source)
