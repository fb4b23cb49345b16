"""In-memory graph store adapter.

Keeps cities in an identifier map and, per city, the ordered sequence
of outgoing route edges. Every route added is stored twice, once per
direction, as independent edge records.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ...domain.errors import DuplicateCityError, UnknownCityError
from ...domain.models import City, Route


@dataclass
class InMemoryGraphStore:
    """Graph store backed by dictionaries.

    This adapter implements GraphStorePort. Cities are kept in
    insertion order, which is also the order returned by get_cities().
    Outgoing edges are kept in insertion order and are never
    deduplicated: adding the same route twice yields parallel edges.
    """

    _cities: Dict[int, City] = field(default_factory=dict, repr=False)
    _adjacency: Dict[City, List[Route]] = field(default_factory=dict, repr=False)
    _last_id: int = field(default=0, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def add_city(self, city: City) -> None:
        """Register a city with an empty outgoing-edge sequence.

        Args:
            city: The city to register.

        Raises:
            DuplicateCityError: If the identifier is already registered.
        """
        if city.id in self._cities:
            raise DuplicateCityError(
                f"City id already registered: {city.id}",
                city_id=city.id,
            )
        self._cities[city.id] = city
        self._adjacency[city] = []
        self._last_id = max(self._last_id, city.id)
        self._logger.debug("City added", extra={"city_id": city.id})

    def get_city_by_id(self, city_id: int) -> Optional[City]:
        return self._cities.get(city_id)

    def has_city(self, city: City) -> bool:
        return city.id in self._cities

    def next_city_id(self) -> int:
        """Return an id above every id ever registered, removed ones included."""
        return self._last_id + 1

    def add_route(self, route: Route) -> None:
        """Store a route and its mirrored reverse edge.

        No duplicate check is made; parallel edges are allowed.

        Args:
            route: The route to add.

        Raises:
            UnknownCityError: If either endpoint is not registered.
        """
        for city in (route.source, route.destination):
            if not self.has_city(city):
                raise UnknownCityError(
                    f"City not found: {city.id}",
                    city_id=city.id,
                )

        self._adjacency[route.source].append(route)
        self._adjacency[route.destination].append(route.reversed())
        self._logger.debug(
            "Route added",
            extra={
                "source_id": route.source.id,
                "destination_id": route.destination.id,
                "distance_km": route.distance,
            },
        )

    def get_routes_from_city(self, city: City) -> List[Route]:
        """List the outgoing edges of a city in insertion order.

        Args:
            city: The city whose edges are requested.

        Returns:
            A copy of the city's outgoing-edge sequence.

        Raises:
            UnknownCityError: If the city is not registered.
        """
        routes = self._adjacency.get(city)
        if routes is None:
            raise UnknownCityError(f"City not found: {city.id}", city_id=city.id)
        return list(routes)

    def get_route(self, source: City, destination: City) -> Optional[Route]:
        """Return the first inserted edge from source to destination.

        Parallel edges are resolved first-match by insertion order.
        """
        for route in self._adjacency.get(source, ()):
            if route.destination == destination:
                return route
        return None

    def remove_city(self, city: City) -> bool:
        """Remove a city, its edges, and every edge pointing at it.

        Scans every remaining city's sequence, which is fine for the
        small networks this store holds.

        Returns:
            True if the city was registered, False otherwise.
        """
        if city.id not in self._cities:
            return False

        del self._cities[city.id]
        del self._adjacency[city]
        removed = 0
        for owner, routes in self._adjacency.items():
            kept = [
                route
                for route in routes
                if route.source != city and route.destination != city
            ]
            removed += len(routes) - len(kept)
            self._adjacency[owner] = kept

        self._logger.info(
            "City removed",
            extra={"city_id": city.id, "incoming_edges_removed": removed},
        )
        return True

    def remove_route(self, source: City, destination: City) -> int:
        """Remove every edge between two cities, in both directions.

        If only one direction exists (after a one-sided edit), only that
        one is removed. Missing edges are not an error.

        Returns:
            Number of edge records removed.
        """
        removed = self.remove_directed_route(source, destination)
        if source != destination:
            removed += self.remove_directed_route(destination, source)
        self._logger.info(
            "Route removed",
            extra={
                "source_id": source.id,
                "destination_id": destination.id,
                "edges_removed": removed,
            },
        )
        return removed

    def remove_directed_route(self, source: City, destination: City) -> int:
        """Remove only the source -> destination edges.

        The mirrored destination -> source edges are left in place, so
        this breaks edge symmetry on purpose.

        Returns:
            Number of edge records removed.
        """
        routes = self._adjacency.get(source)
        if routes is None:
            return 0
        kept = [route for route in routes if route.destination != destination]
        self._adjacency[source] = kept
        return len(routes) - len(kept)

    def get_cities(self) -> List[City]:
        return list(self._cities.values())

    def __len__(self) -> int:
        return len(self._cities)
