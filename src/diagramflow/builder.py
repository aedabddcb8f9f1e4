"""
Incremental diagram construction shared by the sub-language parsers.

Nodes are kept in a dict keyed by id (insertion ordered), so an edge may
reference a node before it is declared: the missing node is created on the
spot and a later declaration of the same id is ignored.
"""

from typing import Dict, List, Optional

from .layout import FAMILY_LAYOUTS, LinearLayout
from .models import (
    ConnectionType,
    DiagramConnection,
    DiagramData,
    DiagramNode,
    DiagramType,
    NodeType,
)
from .styling import StyleResolver


class DiagramBuilder:
    """
    Collects nodes and connections for one diagram.

    Example:
        >>> builder = DiagramBuilder("flowchart", DiagramType.FLOWCHART, "Flow")
        >>> builder.add_node("A", "Start", NodeType.START)
        True
        >>> builder.connect("A", "B", ConnectionType.SOLID, "#2E86AB")
        >>> [n.id for n in builder.build().nodes]
        ['A', 'B']
    """

    def __init__(
        self,
        family: str,
        diagram_type: DiagramType,
        title: str,
        styles: Optional[StyleResolver] = None,
    ):
        self.family = FAMILY_LAYOUTS[family]
        self.diagram_type = diagram_type
        self.title = title
        self.styles = styles or StyleResolver()
        self.nodes: Dict[str, DiagramNode] = {}
        self.connections: List[DiagramConnection] = []

    def add_node(
        self, node_id: str, label: Optional[str], node_type: NodeType
    ) -> bool:
        """
        Declare a node. The first declaration of an id wins.

        Args:
            node_id: Node identifier.
            label: Display text; the id is used when empty.
            node_type: Node category.

        Returns:
            True if the node was added, False if the id already existed.
        """
        if node_id in self.nodes:
            return False
        self.nodes[node_id] = DiagramNode(
            id=node_id,
            label=label or node_id,
            type=node_type,
            size=self.family.make_size(),
            styling=self.styles.resolve(node_type),
        )
        return True

    def ensure_node(
        self, node_id: str, node_type: NodeType = NodeType.PROCESS
    ) -> None:
        """Create a node labelled with its id unless it already exists."""
        self.add_node(node_id, node_id, node_type)

    def add_connection(
        self,
        source: str,
        target: str,
        connection_type: ConnectionType,
        color: str,
        label: Optional[str] = None,
    ) -> None:
        """Append a connection without touching the node set."""
        self.connections.append(
            DiagramConnection(
                source=source,
                target=target,
                type=connection_type,
                color=color,
                label=label,
            )
        )

    def connect(
        self,
        source: str,
        target: str,
        connection_type: ConnectionType,
        color: str,
        label: Optional[str] = None,
        default_type: NodeType = NodeType.PROCESS,
    ) -> None:
        """
        Append a connection, then make sure both endpoints exist.

        Endpoints that were never declared are synthesized with
        ``default_type``.
        """
        self.add_connection(source, target, connection_type, color, label)
        self.ensure_node(source, default_type)
        self.ensure_node(target, default_type)

    def build(self) -> DiagramData:
        """Lay out the collected nodes and return the finished diagram."""
        nodes = list(self.nodes.values())
        layout = self.family.to_layout()
        LinearLayout().apply(nodes, layout)
        return DiagramData(
            type=self.diagram_type,
            title=self.title,
            layout=layout,
            nodes=nodes,
            connections=list(self.connections),
        )
