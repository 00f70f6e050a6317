import pytest

from componentdiagram.catalog import ComponentCatalog
from componentdiagram.component_finisher import ComponentFinisher
from componentdiagram.dependency_index import index_by_origin
from componentdiagram.domain import (
    Component,
    ComponentIdentifier,
    DependencyEdge,
    FinalizedDependency,
    FinishedComponent,
    Stereotype,
)
from componentdiagram.errors import DuplicateStereotypeError, UnresolvedTargetError
from componentdiagram.stereotypes import validate_stereotypes

A, B, C = (ComponentIdentifier(name) for name in "ABC")


@pytest.fixture
def catalog() -> ComponentCatalog:
    return ComponentCatalog([Component(A), Component(B), Component(C)])


def test_index_groups_edges_by_origin_in_order():
    edges = [DependencyEdge(A, B), DependencyEdge(B, C), DependencyEdge(A, C)]

    index = index_by_origin(edges)

    assert index[A] == (edges[0], edges[2])
    assert index[B] == (edges[1],)
    assert C not in index


def test_index_is_read_only():
    index = index_by_origin([DependencyEdge(A, B)])

    with pytest.raises(TypeError):
        index[B] = ()


def test_finisher_resolves_targets_from_catalog(catalog):
    a = catalog.find_component_with(A)

    finished = ComponentFinisher(catalog).finish(
        a, [DependencyEdge(A, C), DependencyEdge(A, B)]
    )

    assert finished == FinishedComponent(
        a,
        (
            FinalizedDependency(a, catalog.find_component_with(C)),
            FinalizedDependency(a, catalog.find_component_with(B)),
        ),
    )
    assert finished.identifier == A
    assert a == Component(A)


def test_finisher_raises_for_unknown_target(catalog):
    with pytest.raises(UnresolvedTargetError, match="A -> X"):
        ComponentFinisher(catalog).finish(
            catalog.find_component_with(A), [DependencyEdge(A, ComponentIdentifier("X"))]
        )


def test_validate_stereotypes_accepts_unique_values():
    validate_stereotypes(
        [
            Component(A, (Stereotype("web"), Stereotype("api"))),
            Component(B),
            Component(C, (Stereotype("db"),)),
        ]
    )


def test_validate_stereotypes_reports_first_repeat():
    components = [
        Component(A, (Stereotype("web"), Stereotype("db"))),
        Component(B, (Stereotype("api"), Stereotype("web"))),
        Component(C, (Stereotype("db"),)),
    ]

    with pytest.raises(DuplicateStereotypeError, match="'web'"):
        validate_stereotypes(components)


def test_repeated_stereotype_on_one_component_counts_once():
    component = Component(A, (Stereotype("svc"), Stereotype("db"), Stereotype("svc")))

    validate_stereotypes([component])

    assert component.stereotypes == (Stereotype("svc"), Stereotype("db"))
    assert component == Component(A, (Stereotype("svc"), Stereotype("db")))
