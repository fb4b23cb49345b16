"""Immutable domain models for the Transport Optimizer.

All models are frozen dataclasses with slots. They have no external
dependencies and represent the core concepts of the network: cities,
the routes joining them, booked tickets and computed paths.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True, slots=True)
class City:
    """A node of the transportation network.

    Equality and hashing use ``id`` only: two City values with the same
    identifier are the same node.

    Attributes:
        id: Unique, stable identifier assigned at creation
        name: Display name
        population: Number of inhabitants (non-negative)
    """

    id: int
    name: str = field(compare=False)
    population: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        """Validate population."""
        if self.population < 0:
            raise ValueError(
                f"Population must be non-negative, got {self.population}"
            )

    def __str__(self) -> str:
        return f"{self.name} (Population : {self.population})"


@dataclass(frozen=True, slots=True)
class Route:
    """A directed edge record between two cities.

    The graph store always keeps routes as mirrored pairs, so callers
    see the network as undirected.

    Attributes:
        source: Departure city
        destination: Arrival city
        distance: Length in kilometers (positive)
        time: Travel time in minutes (positive)
    """

    source: City
    destination: City
    distance: int
    time: int

    def __post_init__(self) -> None:
        """Validate edge weights."""
        if self.distance <= 0:
            raise ValueError(f"Distance must be positive, got {self.distance}")
        if self.time <= 0:
            raise ValueError(f"Time must be positive, got {self.time}")

    def reversed(self) -> Route:
        """Return the mirrored edge with identical distance and time."""
        return Route(self.destination, self.source, self.distance, self.time)

    def __str__(self) -> str:
        return (
            f"{self.source.name} to {self.destination.name} - "
            f"{self.distance}km in {self.time} mins"
        )


@dataclass(frozen=True, slots=True)
class Ticket:
    """A booked ticket between two directly connected cities.

    Attributes:
        id: Ledger-unique identifier, 1-based and never reused
        source: Departure city
        destination: Arrival city
        fare: Price in whole currency units
        created_at: Booking timestamp
    """

    id: int
    source: City
    destination: City
    fare: int
    created_at: datetime

    def __str__(self) -> str:
        return (
            f"Ticket ID: {self.id}, From: {self.source.name}, "
            f"To: {self.destination.name}, Fare: ${self.fare}, "
            f"Date: {self.created_at:%Y-%m-%d %H:%M:%S}"
        )


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a shortest-path query.

    Attributes:
        path: Cities from start to end, both inclusive
        total_distance: Sum of edge distances along the path (km)
        total_time: Sum of edge times along the path (minutes)
    """

    path: tuple[City, ...]
    total_distance: int
    total_time: int = 0

    @property
    def num_stops(self) -> int:
        """Return the number of cities on the path."""
        return len(self.path)

    def __str__(self) -> str:
        return " -> ".join(city.name for city in self.path)


@dataclass(frozen=True, slots=True)
class SeedReport:
    """Outcome of loading seed data.

    Attributes:
        cities_loaded: Number of cities registered
        routes_loaded: Number of routes registered
        rejected: Messages describing skipped records
    """

    cities_loaded: int = 0
    routes_loaded: int = 0
    rejected: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_clean(self) -> bool:
        """Check if no record was skipped."""
        return len(self.rejected) == 0
