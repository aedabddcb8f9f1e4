"""
Block parser module.

Routes the body of a fenced block to the sub-language parser for its
language tag and, for Mermaid, its declaration line.
"""

import re
from typing import Callable, List, Optional, Tuple

from .flowchart import FlowchartParser
from .models import DiagramData
from .plantuml import PlantUMLParser
from .sequence import SequenceParser
from .styling import StyleResolver
from .timeline import TimelineParser


class ParseError(Exception):
    """Raised when a block's language has no sub-language parser."""

    pass


MERMAID_LANGUAGES = ("mermaid",)
PLANTUML_LANGUAGES = ("plantuml", "puml")

FRONT_MATTER_PATTERN = re.compile(r"\A\s*---[ \t]*\n(.*?)\n[ \t]*---[ \t]*(?:\n|\Z)", re.S)
FRONT_MATTER_TITLE = re.compile(r"^\s*title\s*:\s*(.+?)\s*$", re.M)


class BlockParser:
    """
    Parses fenced diagram blocks.

    Mermaid bodies are dispatched on their first non-blank, non-comment
    line:

    - ``flowchart`` / ``graph`` -> flow/graph parser
    - ``sequenceDiagram`` -> sequence parser
    - ``gantt`` -> timeline parser

    Any other declaration yields no diagram.
    """

    def __init__(self, styles: Optional[StyleResolver] = None):
        self.styles = styles or StyleResolver()
        self.flowchart_parser = FlowchartParser(self.styles)
        self.sequence_parser = SequenceParser(self.styles)
        self.timeline_parser = TimelineParser(self.styles)
        self.plantuml_parser = PlantUMLParser(self.styles)

        self.declarations: List[
            Tuple[Tuple[str, ...], Callable[[str, Optional[str]], DiagramData]]
        ] = [
            (("flowchart", "graph"), self.flowchart_parser.parse),
            (("sequenceDiagram",), self.sequence_parser.parse),
            (("gantt",), self.timeline_parser.parse),
        ]

    @staticmethod
    def supports(language: str) -> bool:
        """Return True if blocks tagged with this language can be parsed."""
        language = language.lower()
        return language in MERMAID_LANGUAGES or language in PLANTUML_LANGUAGES

    def parse(self, language: str, body: str) -> Optional[DiagramData]:
        """
        Parse a fenced block body.

        Args:
            language: Fence language tag (e.g. "mermaid").
            body: Text between the fence lines.

        Returns:
            DiagramData, or None when the body declares no known diagram.

        Raises:
            ParseError: If the language tag is not supported.
        """
        tag = language.lower()
        if tag in MERMAID_LANGUAGES:
            return self.parse_mermaid(body)
        if tag in PLANTUML_LANGUAGES:
            return self.plantuml_parser.parse(body)
        raise ParseError(f"Unsupported diagram language: {language!r}")

    def parse_mermaid(self, body: str) -> Optional[DiagramData]:
        """
        Parse a Mermaid body, selecting the parser from its declaration.

        A YAML-style front matter block may precede the declaration; its
        ``title`` becomes the diagram title.
        """
        body, title = self._split_front_matter(body)
        lines = [
            line.strip()
            for line in body.split("\n")
            if line.strip() and not line.strip().startswith("%%")
        ]
        if not lines:
            return None

        declaration = lines[0]
        for prefixes, parse in self.declarations:
            if declaration.startswith(prefixes):
                return parse("\n".join(lines), title)
        return None

    @staticmethod
    def _split_front_matter(body: str) -> Tuple[str, Optional[str]]:
        match = FRONT_MATTER_PATTERN.match(body)
        if not match:
            return body, None

        title = None
        title_match = FRONT_MATTER_TITLE.search(match.group(1))
        if title_match:
            title = title_match.group(1).strip("\"'") or None
        return body[match.end():], title


def parse_block(
    language: str, body: str, styles: Optional[StyleResolver] = None
) -> Optional[DiagramData]:
    """
    Convenience function to parse one fenced block.

    Args:
        language: Fence language tag.
        body: Text between the fence lines.
        styles: Style resolver to use.

    Returns:
        DiagramData, or None when the body declares no known diagram.

    Raises:
        ParseError: If the language tag is not supported.
    """
    return BlockParser(styles).parse(language, body)
