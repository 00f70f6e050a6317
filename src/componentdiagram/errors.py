from componentdiagram.domain import ComponentIdentifier, Stereotype

__all__ = [
    "IllegalDiagramError",
    "ComponentNotFoundError",
    "DuplicateComponentError",
    "DuplicateStereotypeError",
    "UnresolvedTargetError",
]


class IllegalDiagramError(Exception):
    """Raised when a diagram cannot be assembled from its components and edges."""

    pass


class ComponentNotFoundError(IllegalDiagramError, KeyError):
    """Raised when no component matches an identifier, name or alias."""

    def __init__(self, key):
        super().__init__(f"No component with identifier or alias '{key}'")
        self.key = key

    def __str__(self) -> str:
        return self.args[0]


class DuplicateComponentError(IllegalDiagramError):
    """Raised when two components share an identifier or an alias."""

    pass


class DuplicateStereotypeError(IllegalDiagramError):
    def __init__(self, stereotype: Stereotype):
        super().__init__(f"Stereotype '{stereotype.value}' should be unique")
        self.stereotype = stereotype


class UnresolvedTargetError(IllegalDiagramError):
    """Raised when an edge points to an identifier that is not in the catalog."""

    def __init__(self, origin: ComponentIdentifier, target: ComponentIdentifier):
        super().__init__(
            f"Dependency {origin} -> {target} targets unknown component '{target}'"
        )
        self.origin = origin
        self.target = target
