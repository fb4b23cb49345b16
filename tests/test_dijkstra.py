import pytest

from transport_optimizer.adapters.graph import DijkstraRouteSolver, InMemoryGraphStore
from transport_optimizer.domain.errors import UnknownCityError, UnreachableError
from transport_optimizer.domain.models import City, Route


@pytest.fixture
def solver():
    return DijkstraRouteSolver()


def _graph(cities, routes):
    graph = InMemoryGraphStore()
    for city in cities:
        graph.add_city(city)
    for route in routes:
        graph.add_route(route)
    return graph


def test_line_network_path(solver, store, x, y, z):
    result = solver.solve(store, x, z)

    assert result.path == (x, y, z)
    assert result.total_distance == 30
    assert result.total_time == 13
    assert str(result) == "X -> Y -> Z"


def test_routes_are_usable_in_both_directions(solver, store, x, y, z):
    result = solver.solve(store, z, x)
    assert result.path == (z, y, x)
    assert result.total_distance == 30


def test_single_direct_edge():
    a, b = City(1, "A"), City(2, "B")
    graph = _graph([a, b], [Route(a, b, 7, 3)])

    result = DijkstraRouteSolver().solve(graph, a, b)

    assert result.path == (a, b)
    assert result.total_distance == 7


def test_prefers_shorter_multi_hop_path(solver):
    a, b, c = City(1, "A"), City(2, "B"), City(3, "C")
    graph = _graph(
        [a, b, c],
        [Route(a, c, 10, 1), Route(a, b, 3, 10), Route(b, c, 4, 10)],
    )

    result = solver.solve(graph, a, c)

    assert result.path == (a, b, c)
    assert result.total_distance == 7
    assert result.total_time == 20


def test_cheaper_path_found_later_replaces_first_estimate(solver):
    """A later, cheaper edge must replace an earlier frontier entry."""
    a, b, c, d = City(1, "A"), City(2, "B"), City(3, "C"), City(4, "D")
    graph = _graph(
        [a, b, c, d],
        [
            Route(a, d, 100, 1),
            Route(a, b, 1, 1),
            Route(b, c, 1, 1),
            Route(c, d, 1, 1),
        ],
    )

    result = solver.solve(graph, a, d)

    assert result.path == (a, b, c, d)
    assert result.total_distance == 3


def test_equal_distance_ties_report_minimal_total(solver):
    a, b, c, d = City(1, "A"), City(2, "B"), City(3, "C"), City(4, "D")
    graph = _graph(
        [a, b, c, d],
        [Route(a, b, 5, 1), Route(b, d, 5, 1), Route(a, c, 5, 1), Route(c, d, 5, 1)],
    )

    result = solver.solve(graph, a, d)

    assert result.total_distance == 10
    assert result.path[0] == a and result.path[-1] == d
    assert result.path[1] in (b, c)


def test_parallel_edges_use_the_lighter_one(solver):
    a, b = City(1, "A"), City(2, "B")
    graph = _graph([a, b], [Route(a, b, 20, 3), Route(a, b, 10, 9)])

    result = solver.solve(graph, a, b)

    assert result.total_distance == 10
    assert result.total_time == 9


def test_same_start_and_end(solver, store, x):
    result = solver.solve(store, x, x)

    assert result.path == (x,)
    assert result.total_distance == 0


def test_unreachable_raises_instead_of_truncated_path(solver):
    a, b = City(1, "A"), City(2, "B")
    graph = _graph([a, b], [])

    with pytest.raises(UnreachableError) as exc_info:
        solver.solve(graph, a, b)

    assert exc_info.value.start_id == 1
    assert exc_info.value.end_id == 2


def test_unreachable_after_deleting_middle_city(solver, store, x, y, z):
    store.remove_city(y)

    with pytest.raises(UnreachableError):
        solver.solve(store, x, z)


def test_unknown_city_raises(solver, store, x):
    with pytest.raises(UnknownCityError):
        solver.solve(store, x, City(99, "Ghost"))
    with pytest.raises(UnknownCityError):
        solver.solve(store, City(99, "Ghost"), x)


def test_unknown_city_error_names_the_missing_city(solver, store, x):
    with pytest.raises(UnknownCityError) as exc_info:
        solver.solve(store, City(99, "Ghost"), City(98, "Other"))
    assert exc_info.value.city_id == 98
    with pytest.raises(UnknownCityError) as exc_info:
        solver.distances_from(store, City(99, "Ghost"))
    assert exc_info.value.city_id == 99


def test_distances_from_covers_reachable_cities_only(solver, store, x, y, z):
    lonely = City(4, "Lonely")
    store.add_city(lonely)

    distances = solver.distances_from(store, x)

    assert distances == {x: 0, y: 10, z: 30}


def test_distance_grows_with_edge_weight(solver):
    a, b, c = City(1, "A"), City(2, "B"), City(3, "C")
    totals = []
    for weight in (1, 5, 20):
        graph = _graph([a, b, c], [Route(a, b, weight, 1), Route(b, c, 4, 1)])
        totals.append(solver.solve(graph, a, c).total_distance)

    assert totals == sorted(totals)
