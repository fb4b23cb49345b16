"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DuplicateCityError,
    NoDirectRouteError,
    SeedDataError,
    TicketNotFoundError,
    TransportOptimizerError,
    UnknownCityError,
    UnreachableError,
)
from .models import City, Route, RouteResult, SeedReport, Ticket

__all__ = [
    # Models
    "City",
    "Route",
    "Ticket",
    "RouteResult",
    "SeedReport",
    # Errors
    "TransportOptimizerError",
    "UnknownCityError",
    "DuplicateCityError",
    "NoDirectRouteError",
    "UnreachableError",
    "TicketNotFoundError",
    "SeedDataError",
    "ConfigurationError",
]
