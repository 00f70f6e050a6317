"""Diagram-wide checks over component stereotypes."""

from typing import Iterable, Union

from componentdiagram.domain import Component, FinishedComponent, Stereotype
from componentdiagram.errors import DuplicateStereotypeError

__all__ = ["validate_stereotypes"]


def validate_stereotypes(
    components: Iterable[Union[Component, FinishedComponent]],
) -> None:
    """
    Checks that no stereotype value is declared by more than one component.

    Components are scanned in the given order, and each component's stereotypes in
    declaration order; the first repeated value fails the check.

    Raises:
        DuplicateStereotypeError: For the first stereotype seen a second time.

    Args:
        components: The components of the diagram, in catalog order.
    """
    visited: set[Stereotype] = set()

    for component in components:
        for stereotype in component.stereotypes:
            if stereotype in visited:
                raise DuplicateStereotypeError(stereotype)
            visited.add(stereotype)
