"""
Flow/graph parser.

Handles Mermaid ``flowchart`` / ``graph`` bodies:

    flowchart LR
        A((Begin))
        A --> B{Valid?}
        B -->|yes| C[Store]
        B -.-> D(Log)

Edge lines are tried before node-definition lines; a line with an edge
token but no readable hop (e.g. ``A[Start --> end]``) is read as a node
definition. Both use ordered (pattern, outcome) tables where the first
match wins.
"""

import re
from typing import List, Match, Optional, Pattern, Tuple

from .builder import DiagramBuilder
from .models import ConnectionType, DiagramData, DiagramType, NodeType
from .styling import StyleResolver

DEFAULT_TITLE = "Process Flow"

# Checked in order: doubled parens before single parens.
NODE_SHAPES: List[Tuple[Pattern, NodeType]] = [
    (re.compile(r"(\w+)\(\(([^)]*)\)\)"), NodeType.START),
    (re.compile(r"(\w+)\{([^}]*)\}"), NodeType.DECISION),
    (re.compile(r"(\w+)\[([^\]]*)\]"), NodeType.PROCESS),
    (re.compile(r"(\w+)\(([^)]*)\)"), NodeType.DATA),
]

# Solid arrow, then plain line, then dotted.
EDGE_TOKENS: List[Tuple[Pattern, ConnectionType]] = [
    (re.compile(r"(?:-{2,}>|={2,}>)"), ConnectionType.SOLID),
    (re.compile(r"-{3,}"), ConnectionType.SOLID),
    (re.compile(r"-\.+-+>?"), ConnectionType.DOTTED),
]

ENDPOINT_PATTERN = re.compile(
    r"\s*(\w+)(\(\([^)]*\)\)|\{[^}]*\}|\[[^\]]*\]|\([^)]*\))?\s*"
)
EDGE_LABEL_PATTERN = re.compile(r"\s*\|([^|]*)\|\s*")
TITLE_PATTERN = re.compile(r"^title\s+(.+)$")

DIRECTIVES = {
    "classDef",
    "class",
    "style",
    "linkStyle",
    "click",
    "subgraph",
    "end",
    "direction",
    "accTitle",
    "accDescr",
}


class FlowchartParser:
    """Parses flow/graph syntax into a flowchart DiagramData."""

    def __init__(self, styles: Optional[StyleResolver] = None):
        self.styles = styles or StyleResolver()

    def parse(self, source: str, title: Optional[str] = None) -> DiagramData:
        """
        Parse a flowchart body.

        The first non-blank line is the declaration and is skipped. Lines
        that are neither edges nor node definitions are ignored.

        Args:
            source: Block body, declaration line included.
            title: Title declared outside the body (e.g. front matter).

        Returns:
            DiagramData of type flowchart.
        """
        lines = [line.strip() for line in source.strip().split("\n")]
        builder = DiagramBuilder(
            "flowchart", DiagramType.FLOWCHART, title or DEFAULT_TITLE, self.styles
        )

        for line in lines[1:]:
            if not line or line.startswith("%%"):
                continue

            title_match = TITLE_PATTERN.match(line)
            if title_match:
                builder.title = title_match.group(1).strip()
                continue

            if line.split()[0] in DIRECTIVES:
                continue

            if self._has_edge_token(line) and self._parse_edge_line(line, builder):
                continue

            shape = self._parse_shape(line)
            if shape:
                builder.add_node(*shape)

        return builder.build()

    def _has_edge_token(self, line: str) -> bool:
        return any(pattern.search(line) for pattern, _ in EDGE_TOKENS)

    def _match_edge_token(
        self, line: str, pos: int
    ) -> Optional[Tuple[int, ConnectionType]]:
        """Return (end offset, connection type) of the edge token at pos."""
        for pattern, connection_type in EDGE_TOKENS:
            match = pattern.match(line, pos)
            if match:
                return match.end(), connection_type
        return None

    def _parse_edge_line(self, line: str, builder: DiagramBuilder) -> bool:
        """
        Parse ``A --> B``, ``A -->|label| B{Shape}`` and chains of them.

        Endpoints are registered in the order they appear on the line.

        Returns:
            True if at least one connection was read. A line whose
            endpoints cannot be read contributes nothing.
        """
        first = ENDPOINT_PATTERN.match(line)
        if not first:
            return False

        endpoints = [first]
        hops: List[Tuple[ConnectionType, Optional[str]]] = []
        pos = first.end()

        while pos < len(line):
            token = self._match_edge_token(line, pos)
            if token is None:
                break
            pos, connection_type = token

            label = None
            label_match = EDGE_LABEL_PATTERN.match(line, pos)
            if label_match:
                label = label_match.group(1).strip() or None
                pos = label_match.end()

            endpoint = ENDPOINT_PATTERN.match(line, pos)
            if not endpoint:
                break
            hops.append((connection_type, label))
            endpoints.append(endpoint)
            pos = endpoint.end()

        color = self.styles.palette.primary
        for index, (connection_type, label) in enumerate(hops):
            source, target = endpoints[index], endpoints[index + 1]
            for endpoint in (source, target):
                self._register_endpoint(endpoint, builder)
            builder.add_connection(
                source.group(1), target.group(1), connection_type, color, label
            )

        return bool(hops)

    def _register_endpoint(self, endpoint: Match, builder: DiagramBuilder) -> None:
        shape = None
        if endpoint.group(2):
            shape = self._parse_shape(endpoint.group(1) + endpoint.group(2))
        if shape:
            builder.add_node(*shape)
        else:
            builder.ensure_node(endpoint.group(1))

    def _parse_shape(self, text: str) -> Optional[Tuple[str, str, NodeType]]:
        """Return (id, label, type) for the first matching node shape."""
        for pattern, node_type in NODE_SHAPES:
            match = pattern.search(text)
            if match:
                node_id = match.group(1)
                label = match.group(2).strip().strip('"').strip()
                return node_id, label or node_id, node_type
        return None


def parse_flowchart(
    source: str,
    styles: Optional[StyleResolver] = None,
    title: Optional[str] = None,
) -> DiagramData:
    """
    Convenience function to parse a flowchart body.

    Args:
        source: Block body, declaration line included.
        styles: Style resolver to use.
        title: Optional externally declared title.

    Returns:
        DiagramData of type flowchart.
    """
    return FlowchartParser(styles).parse(source, title)
