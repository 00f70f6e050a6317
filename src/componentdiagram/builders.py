"""High level entry points for assembling diagrams."""

from typing import Iterable, Optional, Union

from componentdiagram.catalog import ComponentCatalog
from componentdiagram.diagram import Diagram, DiagramBuilder
from componentdiagram.domain import Component, DependencyEdge

__all__ = ["make_catalog", "make_diagram"]


def make_catalog(
    components: Union[ComponentCatalog, Iterable[Component]],
) -> ComponentCatalog:
    if isinstance(components, ComponentCatalog):
        return components
    return ComponentCatalog(components)


def make_diagram(
    components: Union[ComponentCatalog, Iterable[Component]],
    edges: Optional[Iterable[DependencyEdge]] = None,
) -> Diagram:
    """Construct and return a fully resolved :class:`Diagram`.

    Each component's outgoing edges are resolved against the catalog in catalog
    order, then the stereotypes of the whole diagram are checked for uniqueness.

    Args:
        components: The declared components, or a catalog already built from them.
        edges: The unresolved edges between components, in declaration order.
            If None, every component is finished without dependencies.

    Returns:
        The assembled :class:`Diagram`.

    Raises:
        DuplicateComponentError: If two components share an identifier or alias.
        UnresolvedTargetError: If an edge targets an undeclared component.
        DuplicateStereotypeError: If a stereotype is declared more than once.

    Example:
        >>> a = Component(ComponentIdentifier("A"), alias=Alias("A1"))
        >>> b = Component(ComponentIdentifier("B"), (Stereotype("svc"),))
        >>> diagram = make_diagram([a, b], [DependencyEdge(a.identifier, b.identifier)])
        >>> diagram.components_with_alias()
    """
    builder = DiagramBuilder(make_catalog(components))
    if edges is not None:
        builder.with_dependencies(edges)
    return builder.build()
