"""Transport service - Session object for one network.

A TransportService owns one graph store and one ticket ledger and is
the only place the two meet: deleting a city removes its tickets in
the same call. Build as many services as needed; nothing is shared
between them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..domain.errors import UnknownCityError
from ..domain.models import City, Route, RouteResult, SeedReport, Ticket
from ..ports.graph import GraphStorePort, RouteSolverPort
from ..ports.ledger import TicketLedgerPort
from ..ports.seed import SeedLoaderPort
from .fare_calculator import FareCalculator


@dataclass
class TransportService:
    """Main service for editing the network, routing and booking.

    Operations take city identifiers, the way the menu and seed data
    refer to cities, and raise UnknownCityError for identifiers that
    are not registered.

    Attributes:
        graph_store: Cities and mirrored route edges
        route_solver: Computes shortest paths
        fare_calculator: Prices direct trips
        ledger: Booked tickets
        seed_loader: Optional startup data source
    """

    graph_store: GraphStorePort
    route_solver: RouteSolverPort
    fare_calculator: FareCalculator
    ledger: TicketLedgerPort
    seed_loader: Optional[SeedLoaderPort] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load_seed_data(self) -> SeedReport:
        """Fill the graph from the configured seed loader.

        Returns:
            SeedReport, empty when no loader is configured.
        """
        if self.seed_loader is None:
            return SeedReport()
        return self.seed_loader.load_into(self.graph_store)

    # ---------- cities ----------

    def get_city(self, city_id: int) -> City:
        """Get a registered city.

        Raises:
            UnknownCityError: If the identifier is not registered.
        """
        city = self.graph_store.get_city_by_id(city_id)
        if city is None:
            raise UnknownCityError(f"City ID not found: {city_id}", city_id=city_id)
        return city

    def add_city(self, city: City) -> City:
        self.graph_store.add_city(city)
        return city

    def create_city(self, name: str, population: int) -> City:
        """Register a new city under the next free identifier."""
        city = City(self.graph_store.next_city_id(), name, population)
        self.graph_store.add_city(city)
        self._logger.info(
            "City created",
            extra={"city_id": city.id, "city_name": name},
        )
        return city

    def list_cities(self) -> List[City]:
        return self.graph_store.get_cities()

    def delete_city(self, city_id: int) -> int:
        """Delete a city, every route touching it, and its tickets.

        Returns:
            Number of tickets removed along with the city.

        Raises:
            UnknownCityError: If the identifier is not registered.
        """
        city = self.get_city(city_id)
        tickets_removed = self.ledger.remove_for_city(city)
        self.graph_store.remove_city(city)
        self._logger.info(
            "City deleted",
            extra={"city_id": city_id, "tickets_removed": tickets_removed},
        )
        return tickets_removed

    # ---------- routes ----------

    def add_route(
        self, source_id: int, destination_id: int, distance: int, time: int
    ) -> Route:
        """Add a bidirectional route between two registered cities."""
        route = Route(self.get_city(source_id), self.get_city(destination_id), distance, time)
        self.graph_store.add_route(route)
        return route

    def list_routes(self) -> Dict[City, List[Route]]:
        """Map every city to its outgoing edges."""
        return {
            city: self.graph_store.get_routes_from_city(city)
            for city in self.graph_store.get_cities()
        }

    def delete_route(self, source_id: int, destination_id: int) -> int:
        """Delete the route between two cities in both directions.

        Returns:
            Number of edge records removed (0 if none existed).
        """
        source = self.get_city(source_id)
        destination = self.get_city(destination_id)
        removed = self.graph_store.remove_route(source, destination)
        if not removed:
            self._logger.warning(
                "No route to delete",
                extra={"source_id": source_id, "destination_id": destination_id},
            )
        return removed

    def find_shortest_route(self, start_id: int, end_id: int) -> RouteResult:
        """Find the minimum-distance path between two cities.

        Raises:
            UnknownCityError: If either identifier is not registered.
            UnreachableError: If no path exists.
        """
        return self.route_solver.solve(
            self.graph_store, self.get_city(start_id), self.get_city(end_id)
        )

    # ---------- tickets ----------

    def book_ticket(self, source_id: int, destination_id: int) -> Ticket:
        """Price a direct trip and record a ticket for it.

        Nothing is recorded when pricing fails.

        Raises:
            UnknownCityError: If either identifier is not registered.
            NoDirectRouteError: If the two cities share no direct route.
        """
        source = self.get_city(source_id)
        destination = self.get_city(destination_id)
        fare = self.fare_calculator.calculate(source, destination)
        return self.ledger.issue(source, destination, fare)

    def list_tickets(self) -> List[Ticket]:
        """List tickets by fare descending, booking order among ties."""
        return self.ledger.list_by_fare()

    def delete_ticket(self, ticket_id: int) -> Ticket:
        """Delete a ticket.

        Raises:
            TicketNotFoundError: If the identifier is not in the ledger.
        """
        return self.ledger.delete(ticket_id)
