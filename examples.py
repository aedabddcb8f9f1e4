#!/usr/bin/env python3
"""
Examples of using the diagram extractor.

Run this file to extract diagrams from sample documents and save them as
JSON records and PNG previews.
"""

from diagramflow import DiagramExporter, extract_diagrams


def example_flowchart():
    """Mermaid flowchart with shapes, labels and a dotted edge"""
    print("Example 1: Flowchart Block")

    document = """
# Checkout

```mermaid
flowchart LR
    cart((Cart)) --> pay{Paid?}
    pay -->|yes| ship[Ship order]
    pay -->|no| cart
    ship -.-> audit(Audit log)
```
"""

    diagrams = extract_diagrams(document)
    exporter = DiagramExporter()
    exporter.save(diagrams, "example_flowchart.json")
    exporter.save(diagrams, "example_flowchart.png")
    print("  Saved: example_flowchart.json, example_flowchart.png\n")


def example_sequence():
    """Mermaid sequence diagram"""
    print("Example 2: Sequence Block")

    document = """
```mermaid
sequenceDiagram
    actor User
    participant Web as Web App
    participant API
    User->>Web: Open page
    Web->>API: GET /profile
    API-->>Web: 200 OK
    Web-->>User: Render
```
"""

    diagrams = extract_diagrams(document)
    DiagramExporter().save(diagrams, "example_sequence.png")
    print("  Saved: example_sequence.png\n")


def example_timeline():
    """Mermaid gantt chart"""
    print("Example 3: Timeline Block")

    document = """
```mermaid
gantt
    title Q3 Release
    dateFormat YYYY-MM-DD
    section Build
    Design : d1, 2024-07-01, 5d
    Implement : d2, after d1, 15d
    section Ship
    Test : d3, after d2, 5d
    Release : d4, after d3, 1d
```
"""

    diagrams = extract_diagrams(document)
    DiagramExporter().save(diagrams, "example_timeline.png")
    print("  Saved: example_timeline.png\n")


def example_plantuml():
    """PlantUML component diagram"""
    print("Example 4: PlantUML Block")

    document = """
```plantuml
@startuml
actor Customer
component "Order Service" as orders
database Inventory
Customer -> orders : place order
orders ..> Inventory : reserve
@enduml
```
"""

    diagrams = extract_diagrams(document)
    DiagramExporter().save(diagrams, "example_plantuml.png")
    print("  Saved: example_plantuml.png\n")


def example_prose():
    """Keyword-triggered step list"""
    print("Example 5: Prose Workflow")

    document = """
## Incident Response Workflow
1. Page the on-call engineer
2. Open an incident channel
3. Mitigate impact
4. Write the postmortem
"""

    diagrams = extract_diagrams(document)
    DiagramExporter().save(diagrams, "example_prose.png")
    print("  Saved: example_prose.png\n")


def example_mixed_document():
    """Several diagram sources in one document"""
    print("Example 6: Mixed Document")

    document = """
# Platform Overview

## Deployment Steps
- Build image
- Push image
- Roll out

## Request Handling

```mermaid
sequenceDiagram
    Client->>API: GET /items
    API-->>Client: 200 OK
```

```mermaid
graph TD
    A[Receive] --> B{Cached?}
    B --> C[Serve]
```
"""

    diagrams = extract_diagrams(document)
    for diagram in sorted(diagrams, key=lambda d: d.source_offset):
        print(
            f"  {diagram.source_kind:9} {diagram.type.value:12} "
            f"{diagram.title} ({len(diagram.nodes)} nodes)"
        )
    DiagramExporter().save(diagrams, "example_mixed.json")
    print("  Saved: example_mixed.json\n")


def main():
    """Run all examples."""
    print("=" * 50)
    print("Diagram Extraction Examples")
    print("=" * 50)
    print()

    example_flowchart()
    example_sequence()
    example_timeline()
    example_plantuml()
    example_prose()
    example_mixed_document()

    print("=" * 50)
    print("All examples generated!")
    print("=" * 50)


if __name__ == "__main__":
    main()
