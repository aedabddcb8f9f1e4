"""
Diagram extraction from document text.

Two independent passes over the text:

1. Fenced blocks (```` ```mermaid ````, ```` ```plantuml ````) are handed to
   the block parser.
2. Heuristic sections, opened by a line containing a process keyword, are
   handed to the prose-step parser.

Fenced diagrams come first, then heuristic ones, each in source order.
Extraction never raises: anything that cannot be parsed contributes no
diagram.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from loguru import logger

from .graph import check_integrity
from .models import DiagramData
from .palette import DEFAULT_PALETTE, BrandPalette
from .parser import BlockParser, ParseError
from .prose import ProseParser
from .styling import StyleResolver

DEFAULT_KEYWORDS = (
    "workflow",
    "process flow",
    "architecture",
    "diagram",
    "flowchart",
    "organization chart",
    "timeline",
    "steps",
)

FENCED_BLOCK_PATTERN = re.compile(
    r"^[ \t]*```[ \t]*([\w+-]+)[^\n]*\n(.*?)^[ \t]*```[ \t]*$", re.M | re.S
)
FENCE_LINE_PATTERN = re.compile(r"^[ \t]*```")

FENCED = "fenced"
HEURISTIC = "heuristic"


class ScanState(Enum):
    SCANNING = "scanning"
    IN_SECTION = "in_section"


@dataclass
class Section:
    """A heuristic section and where it starts in the text."""

    text: str
    offset: int


def find_sections(text: str, keywords: Sequence[str] = DEFAULT_KEYWORDS) -> List[Section]:
    """
    Split text into heuristic sections.

    A line containing any keyword (case-insensitive) opens a new section
    and flushes the open one. Inside a section every line is collected and
    a line starting with ``#`` closes it; that heading stays part of the
    closed section. Lines inside fenced blocks are skipped entirely.

    Args:
        text: Newline-normalized document text.
        keywords: Lower-case trigger keywords.

    Returns:
        Sections in source order.
    """
    sections: List[Section] = []
    state = ScanState.SCANNING
    buffer: List[str] = []
    start = 0
    offset = 0
    in_fence = False

    for line in text.split("\n"):
        line_offset = offset
        offset += len(line) + 1

        if FENCE_LINE_PATTERN.match(line):
            in_fence = not in_fence
            continue
        if in_fence:
            continue

        lowered = line.lower()
        if any(keyword in lowered for keyword in keywords):
            if buffer:
                sections.append(Section("\n".join(buffer) + "\n", start))
            buffer = [line]
            start = line_offset
            state = ScanState.IN_SECTION
        elif state == ScanState.IN_SECTION:
            buffer.append(line)
            if line.startswith("#"):
                sections.append(Section("\n".join(buffer) + "\n", start))
                buffer = []
                state = ScanState.SCANNING

    if buffer:
        sections.append(Section("\n".join(buffer) + "\n", start))

    return sections


class DiagramExtractor:
    """
    Extract diagrams from document text.

    Example:
        >>> extractor = DiagramExtractor()
        >>> diagrams = extractor.extract('''
        ... ## Release Workflow
        ... 1. Build
        ... 2. Test
        ... 3. Ship
        ... ''')
        >>> [node.label for node in diagrams[0].nodes]
        ['Build', 'Test', 'Ship']
    """

    def __init__(
        self,
        palette: Optional[BrandPalette] = None,
        keywords: Optional[Sequence[str]] = None,
    ):
        """
        Initialize the extractor.

        Args:
            palette: Brand palette for node and connection colors.
            keywords: Heuristic section trigger keywords. Matching is
                case-insensitive.
        """
        self.palette = palette or DEFAULT_PALETTE
        self.keywords = tuple(
            keyword.lower() for keyword in (keywords or DEFAULT_KEYWORDS)
        )
        self.styles = StyleResolver(self.palette)
        self.block_parser = BlockParser(self.styles)
        self.prose_parser = ProseParser(self.styles)

    def extract(self, text: str) -> List[DiagramData]:
        """
        Extract every recognizable diagram from a document.

        Args:
            text: Full document text.

        Returns:
            Fenced-block diagrams followed by heuristic-section diagrams.
            ``source_offset`` on each result allows re-sorting into strict
            source order.
        """
        if not text:
            return []

        text = text.replace("\r\n", "\n").replace("\r", "\n")
        diagrams = self.extract_fenced(text) + self.extract_heuristic(text)
        logger.debug(f"Extracted {len(diagrams)} diagrams")
        return diagrams

    def extract_fenced(self, text: str) -> List[DiagramData]:
        """Parse every fenced diagram block, in source order."""
        diagrams: List[DiagramData] = []
        for match in FENCED_BLOCK_PATTERN.finditer(text):
            language, body = match.group(1), match.group(2)
            try:
                diagram = self.block_parser.parse(language, body)
            except ParseError as e:
                logger.debug(f"Skipping fenced block at {match.start()}: {e}")
                continue
            if diagram is None:
                logger.debug(
                    f"No diagram declared in {language} block at {match.start()}"
                )
                continue
            diagrams.append(self._finish(diagram, match.start(), FENCED))
        return diagrams

    def extract_heuristic(self, text: str) -> List[DiagramData]:
        """Parse every keyword-triggered prose section, in source order."""
        diagrams: List[DiagramData] = []
        for section in find_sections(text, self.keywords):
            diagram = self.prose_parser.parse(section.text)
            if diagram is not None:
                diagrams.append(self._finish(diagram, section.offset, HEURISTIC))
        return diagrams

    def _finish(self, diagram: DiagramData, offset: int, kind: str) -> DiagramData:
        diagram.source_offset = offset
        diagram.source_kind = kind

        for problem in check_integrity(diagram):
            logger.warning(f"Diagram '{diagram.title}' at {offset}: {problem}")

        logger.debug(
            f"Parsed {diagram.type.value} diagram '{diagram.title}' at {offset}: "
            f"{len(diagram.nodes)} nodes, {len(diagram.connections)} connections"
        )
        return diagram


def extract_diagrams(text: str) -> List[DiagramData]:
    """
    Convenience function to extract diagrams with the default palette.

    Args:
        text: Full document text.

    Returns:
        List of DiagramData; empty when nothing was recognized.
    """
    return DiagramExtractor().extract(text)
