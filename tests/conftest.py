"""Pytest configuration and shared fixtures for diagramflow tests."""

import pytest

from diagramflow import (
    DiagramExtractor,
    FlowchartParser,
    ProseParser,
    SequenceParser,
    StyleResolver,
    TimelineParser,
)


@pytest.fixture
def styles():
    """Style resolver with the default palette."""
    return StyleResolver()


@pytest.fixture
def extractor():
    """Default DiagramExtractor instance."""
    return DiagramExtractor()


@pytest.fixture
def flowchart_parser(styles):
    return FlowchartParser(styles)


@pytest.fixture
def sequence_parser(styles):
    return SequenceParser(styles)


@pytest.fixture
def timeline_parser(styles):
    return TimelineParser(styles)


@pytest.fixture
def prose_parser(styles):
    return ProseParser(styles)


@pytest.fixture
def flowchart_document():
    """Document with a single Mermaid flowchart block."""
    return """# Design

```mermaid
flowchart LR
    A[Start]
    A --> B{Check}
```
"""


@pytest.fixture
def sequence_document():
    """Document with a single Mermaid sequence block."""
    return """```mermaid
sequenceDiagram
    participant Alice
    participant Bob
    Alice->>Bob: Hello
```
"""


@pytest.fixture
def gantt_document():
    """Document with a single Mermaid gantt block."""
    return """```mermaid
gantt
    title Release Plan
    dateFormat YYYY-MM-DD
    Design : a1, 2024-01-01, 5d
    Build : a2, after a1, 10d
```
"""


@pytest.fixture
def onboarding_document():
    """Prose document with a keyword-triggered numbered list."""
    return """## Onboarding Workflow
1. Create account
2. Verify email
3. Complete profile
"""


@pytest.fixture
def mixed_document():
    """Document mixing prose sections and fenced blocks."""
    return """# Platform Overview

Some introductory text without triggers.

## Deployment Steps
1. Build image
2. Push image
3. Roll out

## Request Handling

```mermaid
sequenceDiagram
    Client->>API: GET /items
    API->>DB: query
    DB-->>API: rows
    API-->>Client: 200 OK
```

```python
print("not a diagram")
```

```mermaid
flowchart TD
    start((Begin)) --> validate{Valid?}
    validate -->|yes| store[Store]
    validate -.-> log(Audit log)
```
"""
