"""Domain models used throughout the diagram assembly."""

from dataclasses import dataclass, field
from typing import Optional

__all__ = [
    "ComponentIdentifier",
    "Stereotype",
    "Alias",
    "Component",
    "DependencyEdge",
    "FinalizedDependency",
    "FinishedComponent",
]


@dataclass(frozen=True)
class ComponentIdentifier:
    """Key naming a component within one diagram's namespace.

    Attributes:
        name: The component name as declared in the diagram text.
    """

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Stereotype:
    """A tag on a component. Stereotype values are unique across a diagram."""

    value: str

    def __str__(self) -> str:
        return f"<<{self.value}>>"


@dataclass(frozen=True)
class Alias:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Component:
    """
    A component as declared in the diagram, before its dependencies are resolved.

    Components are immutable. Resolving a component's outgoing edges never changes
    it; instead it is wrapped into a :class:`FinishedComponent`.

    Attributes:
        identifier: The unique identifier of the component.
        stereotypes: The stereotypes of the component, in declaration order, each
            value kept once.
        alias: The alias of the component, if one was declared.
    """

    identifier: ComponentIdentifier
    stereotypes: tuple[Stereotype, ...] = ()
    alias: Optional[Alias] = None

    def __post_init__(self):
        object.__setattr__(self, "stereotypes", tuple(dict.fromkeys(self.stereotypes)))

    @property
    def name(self) -> str:
        return self.identifier.name

    @property
    def has_alias(self) -> bool:
        return self.alias is not None and bool(self.alias.value)

    def __str__(self) -> str:
        if self.has_alias:
            return f"[{self.name}] as {self.alias}"
        return f"[{self.name}]"


@dataclass(frozen=True)
class DependencyEdge:
    """
    An unresolved directed edge between two component identifiers.

    Attributes:
        origin: Identifier of the component the edge starts from.
        target: Identifier of the component the edge points to.
    """

    origin: ComponentIdentifier
    target: ComponentIdentifier

    def __str__(self) -> str:
        return f"{self.origin} -> {self.target}"


@dataclass(frozen=True)
class FinalizedDependency:
    """
    A resolved dependency between two catalogued components.

    Both ends are the component objects held by the catalog the dependency was
    resolved against, not copies of them.

    To follow a dependency to the target's own dependencies, look the target
    up with :meth:`Diagram.find_component_with`.

    Attributes:
        origin: The component the dependency starts from.
        target: The component the dependency points to.
    """

    origin: Component
    target: Component

    def __str__(self) -> str:
        return f"{self.origin.name} -> {self.target.name}"


@dataclass(frozen=True)
class FinishedComponent:
    """
    A component together with its resolved outgoing dependencies.

    Attributes:
        component: The declared component this was finished from.
        dependencies: Outgoing dependencies, in the order their edges were declared.
    """

    component: Component
    dependencies: tuple[FinalizedDependency, ...] = field(default=())

    @property
    def identifier(self) -> ComponentIdentifier:
        return self.component.identifier

    @property
    def name(self) -> str:
        return self.component.name

    @property
    def alias(self) -> Optional[Alias]:
        return self.component.alias

    @property
    def has_alias(self) -> bool:
        return self.component.has_alias

    @property
    def stereotypes(self) -> tuple[Stereotype, ...]:
        return self.component.stereotypes

    def __str__(self) -> str:
        return str(self.component)
