"""Component diagram assembly.

Assembles the components and edges parsed from a textual component diagram into
an immutable :class:`~componentdiagram.diagram.Diagram` that architecture rules
can be evaluated against. Edges are resolved once against a read-only catalog of
components, and diagram-wide invariants are checked before a diagram is handed out.

Key Features:
    - Edge resolution by identifier with explicit failures for unknown targets
    - Lookup of components by name or alias
    - Diagram-wide stereotype uniqueness checks
    - Components finished into new immutable values rather than mutated in place

Basic Usage:
    >>> from componentdiagram.builders import make_diagram
    >>> from componentdiagram.domain import Component, ComponentIdentifier, DependencyEdge
    >>>
    >>> a = Component(ComponentIdentifier("A"))
    >>> b = Component(ComponentIdentifier("B"))
    >>> diagram = make_diagram([a, b], [DependencyEdge(a.identifier, b.identifier)])
    >>> diagram.find_component_with(a.identifier).dependencies

The package consists of several core modules:
    - domain: Identifiers, stereotypes, components and dependencies
    - catalog: Read-only lookup over declared components
    - dependency_index: Grouping of unresolved edges by origin
    - component_finisher: Resolution of a component's edges
    - stereotypes: Diagram-wide stereotype checks
    - diagram: The diagram and its builder
    - builders: High-level entry points
    - errors: Package-specific exceptions
"""
