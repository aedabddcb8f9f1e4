"""
Sequence-interaction parser.

Handles Mermaid ``sequenceDiagram`` bodies. Every participant becomes a
``system`` node and every message becomes a labelled connection.
"""

import re
from typing import Dict, Optional

from .builder import DiagramBuilder
from .models import ConnectionType, DiagramData, DiagramType, NodeType
from .styling import StyleResolver

DEFAULT_TITLE = "Sequence Diagram"

PARTICIPANT_PATTERN = re.compile(r"^(?:participant|actor)\s+(\w+)(?:\s+as\s+(.+))?")
MESSAGE_PATTERN = re.compile(r"(\w+)\s*(-->>|-->|->>|->)[+-]?\s*(\w+)\s*:\s*(.+)")
TITLE_PATTERN = re.compile(r"^title\s*:?\s+(.+)$")


class SequenceParser:
    """Parses sequence syntax into an architecture DiagramData."""

    def __init__(self, styles: Optional[StyleResolver] = None):
        self.styles = styles or StyleResolver()

    def parse(self, source: str, title: Optional[str] = None) -> DiagramData:
        """
        Parse a sequence diagram body.

        Participants are collected in discovery order, whether declared
        explicitly or first seen in a message. Aliases are accepted but the
        node label stays the participant id.

        Args:
            source: Block body, declaration line included.
            title: Title declared outside the body.

        Returns:
            DiagramData of type architecture.
        """
        lines = [line.strip() for line in source.strip().split("\n")]
        builder = DiagramBuilder(
            "sequence", DiagramType.ARCHITECTURE, title or DEFAULT_TITLE, self.styles
        )
        # dict keeps insertion order; values unused
        participants: Dict[str, None] = {}
        color = self.styles.palette.primary

        for line in lines[1:]:
            if not line or line.startswith("%%"):
                continue

            title_match = TITLE_PATTERN.match(line)
            if title_match:
                builder.title = title_match.group(1).strip()
                continue

            participant_match = PARTICIPANT_PATTERN.match(line)
            if participant_match:
                participants.setdefault(participant_match.group(1))
                continue

            message_match = MESSAGE_PATTERN.search(line)
            if message_match:
                source_id, _, target_id, message = message_match.groups()
                participants.setdefault(source_id)
                participants.setdefault(target_id)
                # Reply arrows are read as ordinary interactions.
                builder.add_connection(
                    source_id, target_id, ConnectionType.SOLID, color, message.strip()
                )

        for participant in participants:
            builder.add_node(participant, participant, NodeType.SYSTEM)

        return builder.build()


def parse_sequence(
    source: str,
    styles: Optional[StyleResolver] = None,
    title: Optional[str] = None,
) -> DiagramData:
    """Convenience function to parse a sequence diagram body."""
    return SequenceParser(styles).parse(source, title)
