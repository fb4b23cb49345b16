"""Shared fixtures: a three-city line network X - Y - Z."""

from datetime import datetime

import pytest

from transport_optimizer.adapters.graph import DijkstraRouteSolver, InMemoryGraphStore
from transport_optimizer.adapters.ledger import InMemoryTicketLedger
from transport_optimizer.config import FareConfig
from transport_optimizer.domain.models import City, Route
from transport_optimizer.services import FareCalculator, TransportService

FIXED_NOW = datetime(2024, 1, 1, 12, 0, 0)


@pytest.fixture
def x():
    return City(1, "X", 100)


@pytest.fixture
def y():
    return City(2, "Y", 200)


@pytest.fixture
def z():
    return City(3, "Z", 300)


@pytest.fixture
def store(x, y, z):
    """Store holding routes X-Y (10 km, 5 min) and Y-Z (20 km, 8 min)."""
    graph = InMemoryGraphStore()
    for city in (x, y, z):
        graph.add_city(city)
    graph.add_route(Route(x, y, 10, 5))
    graph.add_route(Route(y, z, 20, 8))
    return graph


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def ledger():
    return InMemoryTicketLedger(clock=lambda: FIXED_NOW)


@pytest.fixture
def service(store, ledger):
    return TransportService(
        graph_store=store,
        route_solver=DijkstraRouteSolver(),
        fare_calculator=FareCalculator(store, FareConfig()),
        ledger=ledger,
    )
