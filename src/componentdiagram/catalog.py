"""Read-only lookup over the components declared in a diagram.

The catalog keeps components in declaration order and indexes them by identifier
and by alias. Edges written against either form can be resolved through it, and
it is never mutated once constructed: resolving dependencies produces new
finished values rather than changing the catalogued components.
"""

from typing import Iterable, Iterator, Union

from componentdiagram.domain import Alias, Component, ComponentIdentifier
from componentdiagram.errors import ComponentNotFoundError, DuplicateComponentError

__all__ = ["ComponentCatalog"]


class ComponentCatalog:
    """Collection of declared components with lookup by identifier or alias.

    Attributes:
        _components: Mapping from identifiers to components, in declaration order.
        _components_by_alias: Mapping from alias values to the components declaring them.

    Example:
        >>> catalog = ComponentCatalog([Component(ComponentIdentifier("A"), alias=Alias("a"))])
        >>> catalog.find_component_with(ComponentIdentifier("A"))
        >>> catalog.find_component_with_name_or_alias("a")
    """

    def __init__(self, components: Iterable[Component]):
        self._components: dict[ComponentIdentifier, Component] = {}
        self._components_by_alias: dict[str, Component] = {}
        for component in components:
            self._add(component)

    def _add(self, component: Component):
        if component.identifier in self._components:
            raise DuplicateComponentError(
                f"Component '{component.identifier}' is declared more than once"
            )
        self._components[component.identifier] = component

        if component.has_alias:
            alias = component.alias.value
            if alias in self._components_by_alias:
                raise DuplicateComponentError(
                    f"Alias '{alias}' is declared by both "
                    f"'{self._components_by_alias[alias].identifier}' "
                    f"and '{component.identifier}'"
                )
            self._components_by_alias[alias] = component

    def all_components(self) -> list[Component]:
        return list(self._components.values())

    def components_with_alias(self) -> list[Component]:
        return [c for c in self._components.values() if c.has_alias]

    def find_component_with(self, identifier: ComponentIdentifier) -> Component:
        """Look up a component by its identifier.

        Raises:
            ComponentNotFoundError: If no component has the given identifier.
        """
        try:
            return self._components[identifier]
        except KeyError:
            raise ComponentNotFoundError(identifier) from None

    def find_component_with_name_or_alias(self, key: Union[str, Alias]) -> Component:
        """Look up a component by name, falling back to its alias.

        Raises:
            ComponentNotFoundError: If neither a name nor an alias matches.
        """
        text = key.value if isinstance(key, Alias) else key
        identifier = ComponentIdentifier(text)
        if identifier in self._components:
            return self._components[identifier]
        if text in self._components_by_alias:
            return self._components_by_alias[text]
        raise ComponentNotFoundError(text)

    def __contains__(self, identifier: ComponentIdentifier) -> bool:
        return identifier in self._components

    def __iter__(self) -> Iterator[Component]:
        return iter(self._components.values())

    def __len__(self) -> int:
        return len(self._components)
