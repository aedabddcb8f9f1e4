"""
Timeline/task parser.

Handles Mermaid ``gantt`` bodies. Each task line (``label : rest``) becomes a
process node and every task is linked to the one before it.
"""

import re
from typing import Optional

from .builder import DiagramBuilder
from .models import ConnectionType, DiagramData, DiagramType, NodeType
from .styling import StyleResolver

DEFAULT_TITLE = "Project Timeline"

TASK_PATTERN = re.compile(r"(.+?)\s*:\s*(.+)")
DIRECTIVE_PATTERN = re.compile(
    r"^(title|dateFormat|axisFormat|tickInterval|excludes|includes|"
    r"todayMarker|weekday|section)\b"
)


class TimelineParser:
    """Parses gantt task syntax into a timeline DiagramData."""

    def __init__(self, styles: Optional[StyleResolver] = None):
        self.styles = styles or StyleResolver()

    def parse(self, source: str, title: Optional[str] = None) -> DiagramData:
        """
        Parse a gantt body into a chain of tasks.

        Args:
            source: Block body, declaration line included.
            title: Title declared outside the body; a ``title`` directive
                in the body takes precedence.

        Returns:
            DiagramData of type timeline with N tasks and N-1 connections.
        """
        lines = [line.strip() for line in source.strip().split("\n")]
        builder = DiagramBuilder(
            "timeline", DiagramType.TIMELINE, title or DEFAULT_TITLE, self.styles
        )
        color = self.styles.palette.secondary
        previous_id = None

        for line in lines[1:]:
            if not line or line.startswith("%%"):
                continue

            directive = DIRECTIVE_PATTERN.match(line)
            if directive:
                if directive.group(1) == "title":
                    declared = line[len("title"):].strip()
                    if declared:
                        builder.title = declared
                continue

            task_match = TASK_PATTERN.match(line)
            if not task_match:
                continue

            task_id = f"task{len(builder.nodes) + 1}"
            builder.add_node(task_id, task_match.group(1).strip(), NodeType.PROCESS)
            if previous_id is not None:
                builder.add_connection(
                    previous_id, task_id, ConnectionType.SOLID, color
                )
            previous_id = task_id

        return builder.build()


def parse_timeline(
    source: str,
    styles: Optional[StyleResolver] = None,
    title: Optional[str] = None,
) -> DiagramData:
    """Convenience function to parse a gantt body."""
    return TimelineParser(styles).parse(source, title)
