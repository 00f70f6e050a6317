"""Utilities for turning declared components into :class:`FinishedComponent` values."""

import logging
from typing import Iterable

from componentdiagram.catalog import ComponentCatalog
from componentdiagram.domain import (
    Component,
    DependencyEdge,
    FinalizedDependency,
    FinishedComponent,
)
from componentdiagram.errors import ComponentNotFoundError, UnresolvedTargetError

logger = logging.getLogger(__name__)


class ComponentFinisher:
    """Resolve a component's outgoing edges against a catalog."""

    def __init__(self, catalog: ComponentCatalog):
        self._catalog = catalog

    def finish(
        self, component: Component, edges: Iterable[DependencyEdge]
    ) -> FinishedComponent:
        """Resolve the targets of a component's edges and attach them.

        Args:
            component: The declared component the edges originate from.
            edges: The edges leaving the component, in declaration order.

        Returns:
            The :class:`FinishedComponent` carrying one dependency per edge.

        Raises:
            UnresolvedTargetError: If an edge's target is not in the catalog.
        """
        dependencies = tuple(
            FinalizedDependency(component, self._resolve_target(edge))
            for edge in edges
        )
        logger.debug(f"Finished {component} with {len(dependencies)} dependencies")
        return FinishedComponent(component, dependencies)

    def _resolve_target(self, edge: DependencyEdge) -> Component:
        try:
            return self._catalog.find_component_with(edge.target)
        except ComponentNotFoundError as e:
            raise UnresolvedTargetError(edge.origin, edge.target) from e
