"""Graph ports - Abstractions for the network store and routing.

These protocols define the contracts for graph operations: keeping
cities and mirrored route edges, and computing shortest paths over
them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import City, Route, RouteResult


class GraphStorePort(Protocol):
    """Port for the mutable city/route graph.

    Implementation: adapters/graph/in_memory_store.py

    Every mutation is visible to the next query. Routes are stored as
    mirrored pairs of directed edge records.
    """

    def add_city(self, city: City) -> None:
        """Register a city with an empty outgoing-edge sequence.

        Raises:
            DuplicateCityError: If the identifier is already registered.
        """
        ...

    def get_city_by_id(self, city_id: int) -> Optional[City]:
        """Get a city by identifier, or None if not registered."""
        ...

    def has_city(self, city: City) -> bool:
        ...

    def next_city_id(self) -> int:
        """Return an identifier not used by any registered city."""
        ...

    def add_route(self, route: Route) -> None:
        """Store the route and its reverse.

        Raises:
            UnknownCityError: If either endpoint is not registered.
        """
        ...

    def get_routes_from_city(self, city: City) -> List[Route]:
        """List outgoing edges in insertion order.

        Raises:
            UnknownCityError: If the city is not registered.
        """
        ...

    def get_route(self, source: City, destination: City) -> Optional[Route]:
        """Return the first inserted edge from source to destination."""
        ...

    def remove_city(self, city: City) -> bool:
        """Remove a city and every edge touching it.

        Returns:
            True if the city was registered.
        """
        ...

    def remove_route(self, source: City, destination: City) -> int:
        """Remove edges in both directions between two cities.

        Returns:
            Number of edge records removed.
        """
        ...

    def get_cities(self) -> List[City]:
        """List all registered cities in a stable order."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(self, store: GraphStorePort, start: City, end: City) -> RouteResult:
        """Find the minimum-distance path between two cities.

        Raises:
            UnknownCityError: If start or end is not registered.
            UnreachableError: If no path exists.
        """
        ...

    def distances_from(self, store: GraphStorePort, start: City) -> Dict[City, int]:
        """Compute the best distance to every reachable city."""
        ...
