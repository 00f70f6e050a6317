"""
Module for assembling declared components and edges into an immutable diagram.

A :class:`DiagramBuilder` groups the unresolved edges by origin, resolves each
component's edges against the catalog, and wraps every component into a
:class:`FinishedComponent`. Only once all components are finished are the
diagram-wide stereotype checks run and a :class:`Diagram` constructed.

Assembly either succeeds with a complete diagram or fails with an
:class:`IllegalDiagramError`; partially built state is never returned.
"""

import logging
from typing import Iterable

from componentdiagram.catalog import ComponentCatalog
from componentdiagram.component_finisher import ComponentFinisher
from componentdiagram.dependency_index import DependencyIndex, index_by_origin
from componentdiagram.domain import (
    ComponentIdentifier,
    DependencyEdge,
    FinishedComponent,
)
from componentdiagram.errors import (
    ComponentNotFoundError,
    DuplicateComponentError,
    IllegalDiagramError,
)
from componentdiagram.stereotypes import validate_stereotypes

__all__ = ["Diagram", "DiagramBuilder"]

logger = logging.getLogger(__name__)


class Diagram:
    """
    The finished components of a diagram together with their resolved dependencies.

    A diagram is read-only. The accessors return fresh sets, so callers cannot
    change the diagram through them.
    """

    def __init__(self, components: Iterable[FinishedComponent]):
        self._components: dict[ComponentIdentifier, FinishedComponent] = {}
        for component in components:
            if not isinstance(component, FinishedComponent):
                raise TypeError(
                    f"Diagram requires finished components, got {component!r}"
                )
            if component.identifier in self._components:
                raise DuplicateComponentError(
                    f"Component '{component.identifier}' is declared more than once"
                )
            self._components[component.identifier] = component
        validate_stereotypes(self._components.values())

    def all_components(self) -> set[FinishedComponent]:
        return set(self._components.values())

    def components_with_alias(self) -> set[FinishedComponent]:
        return {c for c in self._components.values() if c.has_alias}

    def find_component_with(self, identifier: ComponentIdentifier) -> FinishedComponent:
        if identifier not in self._components:
            raise ComponentNotFoundError(identifier)
        return self._components[identifier]

    def __len__(self) -> int:
        return len(self._components)


class DiagramBuilder:
    """Resolve the edges of a :class:`ComponentCatalog` into a :class:`Diagram`."""

    def __init__(self, catalog: ComponentCatalog):
        self._catalog = catalog
        self._edges_by_origin: DependencyIndex = index_by_origin([])

    def with_dependencies(self, edges: Iterable[DependencyEdge]) -> "DiagramBuilder":
        """Set the unresolved edges to resolve.

        Args:
            edges: The edges of the diagram, in declaration order.

        Returns:
            This builder.
        """
        self._edges_by_origin = index_by_origin(edges)
        return self

    def build(self) -> Diagram:
        """Finish every component in catalog order and assemble the diagram.

        Returns:
            A :class:`Diagram` holding one finished component per catalogued one.

        Raises:
            UnresolvedTargetError: If an edge targets a component not in the catalog.
            DuplicateStereotypeError: If two components declare the same stereotype.
        """
        self._warn_about_unknown_origins()
        finisher = ComponentFinisher(self._catalog)
        try:
            finished = [
                finisher.finish(
                    component, self._edges_by_origin.get(component.identifier, ())
                )
                for component in self._catalog
            ]
            diagram = Diagram(finished)
        except IllegalDiagramError as e:
            logger.error(f"Failed to build diagram: {e}")
            raise

        logger.debug(f"Built diagram with {len(diagram)} components")
        return diagram

    def _warn_about_unknown_origins(self):
        unknown = [o for o in self._edges_by_origin if o not in self._catalog]
        if unknown:
            logger.warning(
                f"Ignoring dependencies from undeclared components: {sorted(map(str, unknown))}"
            )
