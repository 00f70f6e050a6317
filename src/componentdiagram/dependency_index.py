"""Grouping of unresolved edges by the component they originate from."""

import logging
from collections import defaultdict
from types import MappingProxyType
from typing import Iterable, Mapping

from componentdiagram.domain import ComponentIdentifier, DependencyEdge

__all__ = ["DependencyIndex", "index_by_origin"]

logger = logging.getLogger(__name__)

DependencyIndex = Mapping[ComponentIdentifier, tuple[DependencyEdge, ...]]


def index_by_origin(edges: Iterable[DependencyEdge]) -> DependencyIndex:
    """
    Groups edges by the identifier they originate from.

    Edges keep their original relative order within each group. The returned
    mapping is read-only.

    Args:
        edges: The unresolved edges of the diagram, in declaration order.

    Returns:
        A mapping from origin identifiers to the edges leaving them.
    """
    grouped: dict[ComponentIdentifier, list[DependencyEdge]] = defaultdict(list)
    for edge in edges:
        grouped[edge.origin].append(edge)

    edge_count = sum(len(group) for group in grouped.values())
    logger.debug(f"Indexed {edge_count} edges from {len(grouped)} origins")
    return MappingProxyType(
        {origin: tuple(group) for origin, group in grouped.items()}
    )
