"""Dijkstra Route Solver adapter.

Shortest paths by total distance over a graph store, using a binary
heap with duplicate entries instead of an indexed decrease-key.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from ...domain.errors import UnknownCityError, UnreachableError
from ...domain.models import City, Route, RouteResult
from ...ports.graph import GraphStorePort


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort. Edge weights are route
    distances and are assumed non-negative. Among paths of equal total
    distance, which one is reported is left to heap order.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, store: GraphStorePort, start: City, end: City) -> RouteResult:
        """Find the shortest path between two cities.

        Args:
            store: The graph to search.
            start: Departure city.
            end: Arrival city.

        Returns:
            RouteResult with the path and its total distance and time.

        Raises:
            UnknownCityError: If start or end is not in the graph.
            UnreachableError: If no path exists.
        """
        self._logger.debug(
            "Solving route",
            extra={"start_id": start.id, "end_id": end.id},
        )
        self._require(store, end)
        distances, previous = self._dijkstra(store, start)

        if end not in distances:
            self._logger.warning(
                "No route found",
                extra={"start_id": start.id, "end_id": end.id},
            )
            raise UnreachableError(
                f"No path from {start.name} to {end.name}",
                start_id=start.id,
                end_id=end.id,
            )

        edges = self._reconstruct(previous, start, end)
        path = (start,) + tuple(route.destination for route in edges)
        result = RouteResult(
            path=path,
            total_distance=distances[end],
            total_time=sum(route.time for route in edges),
        )

        self._logger.info(
            "Route found",
            extra={
                "start_id": start.id,
                "end_id": end.id,
                "stops": result.num_stops,
                "distance_km": result.total_distance,
            },
        )
        return result

    def distances_from(self, store: GraphStorePort, start: City) -> Dict[City, int]:
        """Compute the best known distance to every reachable city.

        Unreachable cities are absent from the result.
        """
        distances, _ = self._dijkstra(store, start)
        return distances

    def _dijkstra(
        self, store: GraphStorePort, start: City
    ) -> Tuple[Dict[City, int], Dict[City, Route]]:
        """Core algorithm.

        Runs until the frontier is empty. ``previous`` maps each reached
        city to the edge that gave it its best distance; the edge source
        is the predecessor city.
        """
        self._require(store, start)

        distances: Dict[City, int] = {start: 0}
        previous: Dict[City, Route] = {}
        counter = itertools.count()

        heap: List[Tuple[int, int, City]] = [(0, next(counter), start)]

        while heap:
            current_distance, _, u = heapq.heappop(heap)

            # stale duplicate left behind by a later improvement
            if current_distance > distances[u]:
                continue

            for route in store.get_routes_from_city(u):
                v = route.destination
                new_distance = current_distance + route.distance
                if v not in distances or new_distance < distances[v]:
                    distances[v] = new_distance
                    previous[v] = route
                    heapq.heappush(heap, (new_distance, next(counter), v))

        return distances, previous

    @staticmethod
    def _reconstruct(previous: Dict[City, Route], start: City, end: City) -> List[Route]:
        """Walk predecessor edges back from end to start."""
        edges: List[Route] = []
        current = end
        while current != start:
            route = previous.get(current)
            if route is None:
                raise UnreachableError(
                    f"No path from {start.name} to {end.name}",
                    start_id=start.id,
                    end_id=end.id,
                )
            edges.append(route)
            current = route.source

        edges.reverse()
        return edges

    @staticmethod
    def _require(store: GraphStorePort, city: City) -> None:
        if not store.has_city(city):
            raise UnknownCityError(f"City not in graph: {city.id}", city_id=city.id)
