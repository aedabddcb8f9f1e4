"""Unit tests for the sequence module."""

from diagramflow.models import ConnectionType, DiagramType, LayoutDirection, NodeType
from diagramflow.sequence import parse_sequence


class TestSequenceParser:
    """Tests for SequenceParser class."""

    def test_participants_and_message(self, sequence_parser):
        """Test explicit participants and one labelled message."""
        diagram = sequence_parser.parse(
            "sequenceDiagram\nparticipant Alice\nparticipant Bob\nAlice->>Bob: Hello"
        )
        assert diagram.type == DiagramType.ARCHITECTURE
        assert diagram.title == "Sequence Diagram"
        assert [(n.id, n.type) for n in diagram.nodes] == [
            ("Alice", NodeType.SYSTEM),
            ("Bob", NodeType.SYSTEM),
        ]
        assert len(diagram.connections) == 1
        connection = diagram.connections[0]
        assert (connection.source, connection.target) == ("Alice", "Bob")
        assert connection.label == "Hello"
        assert connection.type == ConnectionType.SOLID

    def test_participants_discovered_from_messages(self, sequence_parser):
        """Test ids used only in messages become participants in order."""
        diagram = sequence_parser.parse(
            "sequenceDiagram\nClient->>API: call\nAPI->DB: query"
        )
        assert diagram.node_ids() == ["Client", "API", "DB"]

    def test_declaration_order_beats_message_order(self, sequence_parser):
        """Test explicitly declared participants keep their position."""
        diagram = sequence_parser.parse(
            "sequenceDiagram\nparticipant B\nA->>B: hi\nparticipant A"
        )
        assert diagram.node_ids() == ["B", "A"]

    def test_alias_not_surfaced(self, sequence_parser):
        """Test participant aliases are accepted but labels stay the id."""
        diagram = sequence_parser.parse(
            "sequenceDiagram\nparticipant A as Alice Smith"
        )
        assert diagram.nodes[0].label == "A"

    def test_actor_declaration(self, sequence_parser):
        """Test actor lines declare participants."""
        diagram = sequence_parser.parse("sequenceDiagram\nactor User")
        assert diagram.node_ids() == ["User"]
        assert diagram.nodes[0].type == NodeType.SYSTEM

    def test_reply_arrows_are_solid(self, sequence_parser):
        """Test reply arrows are read as solid interactions."""
        diagram = sequence_parser.parse(
            "sequenceDiagram\nA->>B: hi\nB-->>A: ok\nB-->A: done\nA->B: bye"
        )
        assert [c.label for c in diagram.connections] == ["hi", "ok", "done", "bye"]
        assert {c.type for c in diagram.connections} == {ConnectionType.SOLID}

    def test_activation_marker(self, sequence_parser):
        """Test activation markers after the arrow are tolerated."""
        diagram = sequence_parser.parse("sequenceDiagram\nA->>+B: start")
        assert (diagram.connections[0].source, diagram.connections[0].target) == (
            "A",
            "B",
        )

    def test_message_without_text_ignored(self, sequence_parser):
        """Test arrows without a message are not interactions."""
        diagram = sequence_parser.parse("sequenceDiagram\nA->>B")
        assert diagram.nodes == []
        assert diagram.connections == []

    def test_title_directive(self, sequence_parser):
        """Test a title line sets the diagram title."""
        diagram = sequence_parser.parse("sequenceDiagram\ntitle Login flow\nA->>B: hi")
        assert diagram.title == "Login flow"

    def test_layout_spacing(self, sequence_parser):
        """Test participants are spread wider than flowchart nodes."""
        diagram = sequence_parser.parse("sequenceDiagram\nA->>B: hi")
        assert diagram.layout.direction == LayoutDirection.HORIZONTAL
        assert [n.position.x for n in diagram.nodes] == [50, 250]
        assert (diagram.nodes[0].size.width, diagram.nodes[0].size.height) == (100, 50)


class TestParseSequence:
    """Tests for parse_sequence convenience function."""

    def test_parse_sequence(self):
        """Test the convenience function."""
        diagram = parse_sequence("sequenceDiagram\nA->>B: hi")
        assert len(diagram.connections) == 1
