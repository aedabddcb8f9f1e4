"""
Graph module for parsed diagrams.

Uses networkx for:
- A graph view of a DiagramData for downstream analysis
- Entry/exit node lookup
- Structural integrity checks (unique ids, no dangling connections)
"""

from collections import Counter
from typing import List

import networkx as nx

from .models import DiagramData


def to_networkx(diagram: DiagramData) -> nx.MultiDiGraph:
    """
    Build a networkx view of a diagram.

    Nodes carry ``label`` and ``type`` attributes; edges carry ``label`` and
    ``type``. A multigraph is used because sequence diagrams routinely send
    several messages between the same pair of participants.

    Args:
        diagram: Parsed diagram.

    Returns:
        MultiDiGraph with one node per diagram node, in diagram order.
    """
    graph = nx.MultiDiGraph(title=diagram.title, type=diagram.type.value)
    for node in diagram.nodes:
        graph.add_node(node.id, label=node.label, type=node.type.value)
    for connection in diagram.connections:
        graph.add_edge(
            connection.source,
            connection.target,
            label=connection.label,
            type=connection.type.value,
        )
    return graph


def entry_nodes(diagram: DiagramData) -> List[str]:
    """Ids of nodes with no incoming connections, in diagram order."""
    graph = to_networkx(diagram)
    return [node_id for node_id in graph.nodes if graph.in_degree(node_id) == 0]


def exit_nodes(diagram: DiagramData) -> List[str]:
    """Ids of nodes with no outgoing connections, in diagram order."""
    graph = to_networkx(diagram)
    return [node_id for node_id in graph.nodes if graph.out_degree(node_id) == 0]


def has_cycle(diagram: DiagramData) -> bool:
    return not nx.is_directed_acyclic_graph(to_networkx(diagram))


def check_integrity(diagram: DiagramData) -> List[str]:
    """
    List structural problems in a diagram.

    Checks that node ids are unique and that every connection endpoint is
    the id of a node. networkx would silently create missing endpoints, so
    the endpoints are checked against the declared ids directly.

    Args:
        diagram: Parsed diagram.

    Returns:
        Human-readable problem descriptions; empty when the diagram is sound.
    """
    problems: List[str] = []

    counts = Counter(node.id for node in diagram.nodes)
    for node_id, count in counts.items():
        if count > 1:
            problems.append(f"Duplicate node id '{node_id}' ({count} nodes)")

    for index, connection in enumerate(diagram.connections):
        for end in (connection.source, connection.target):
            if end not in counts:
                problems.append(
                    f"Connection {index} references unknown node '{end}'"
                )

    return problems
