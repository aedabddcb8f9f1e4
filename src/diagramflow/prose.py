"""
Heuristic prose-step parser.

Turns a prose section such as

    ## Onboarding Workflow
    1. Create account
    2. Verify email
    3. Complete profile

into a process diagram with one node per numbered or bulleted step.
"""

import re
from typing import Optional

from .builder import DiagramBuilder
from .models import ConnectionType, DiagramData, DiagramType, NodeType
from .styling import StyleResolver

HEADING_MARKER = re.compile(r"^#+\s*")
NUMBERED_STEP = re.compile(r"^\d+\.\s*(.+)$")
BULLETED_STEP = re.compile(r"^[-*]\s*(.+)$")


class ProseParser:
    """Parses keyword-triggered prose sections into process diagrams."""

    def __init__(self, styles: Optional[StyleResolver] = None):
        self.styles = styles or StyleResolver()

    def parse(self, section: str) -> Optional[DiagramData]:
        """
        Parse a prose section.

        The first non-blank line (heading markers removed) is the title.
        The first step is a ``start`` node. A step whose index equals the
        number of non-blank section lines minus two is an ``end`` node; the
        count includes the title line and any closing heading, so the rule
        does not always land on the last step.

        Args:
            section: Section text, opening line first.

        Returns:
            DiagramData of type process, or None when the section has no
            steps.
        """
        lines = [line for line in section.split("\n") if line.strip()]
        if len(lines) < 2:
            return None

        title = HEADING_MARKER.sub("", lines[0].strip()).strip()
        builder = DiagramBuilder("prose", DiagramType.PROCESS, title, self.styles)
        color = self.styles.palette.primary
        end_index = len(lines) - 2

        for line in lines[1:]:
            stripped = line.strip()
            match = NUMBERED_STEP.match(stripped) or BULLETED_STEP.match(stripped)
            if not match:
                continue

            index = len(builder.nodes)
            if index == 0:
                node_type = NodeType.START
            elif index == end_index:
                node_type = NodeType.END
            else:
                node_type = NodeType.PROCESS

            step_id = f"step{index + 1}"
            builder.add_node(step_id, match.group(1).strip(), node_type)
            if index > 0:
                builder.add_connection(
                    f"step{index}", step_id, ConnectionType.SOLID, color
                )

        if not builder.nodes:
            return None
        return builder.build()


def parse_prose_section(
    section: str, styles: Optional[StyleResolver] = None
) -> Optional[DiagramData]:
    """Convenience function to parse one prose section."""
    return ProseParser(styles).parse(section)
