"""Typed domain errors for the Transport Optimizer.

Every failure the core can report is an explicit, typed error raised
to the immediate caller. None of them is fatal: the interactive menu
catches them and prints the message.

All errors inherit from TransportOptimizerError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TransportOptimizerError(Exception):
    """Base error for the transport optimizer domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class UnknownCityError(TransportOptimizerError):
    """City identifier not registered in the graph.

    Attributes:
        city_id: The identifier that was not found
    """

    city_id: Optional[int] = None


@dataclass
class DuplicateCityError(TransportOptimizerError):
    """A city with the same identifier is already registered.

    Attributes:
        city_id: The identifier that is already taken
    """

    city_id: Optional[int] = None


@dataclass
class NoDirectRouteError(TransportOptimizerError):
    """No direct edge joins the two cities.

    Raised by fare computation instead of a sentinel fare, so a
    ticket is never booked without a real route behind it.

    Attributes:
        source_id: Source city identifier
        destination_id: Destination city identifier
    """

    source_id: Optional[int] = None
    destination_id: Optional[int] = None


@dataclass
class UnreachableError(TransportOptimizerError):
    """No path of any length exists between the two cities.

    Attributes:
        start_id: Start city identifier
        end_id: End city identifier
    """

    start_id: Optional[int] = None
    end_id: Optional[int] = None


@dataclass
class TicketNotFoundError(TransportOptimizerError):
    """Ticket identifier not present in the ledger.

    Attributes:
        ticket_id: The ticket identifier that was not found
    """

    ticket_id: Optional[int] = None


@dataclass
class SeedDataError(TransportOptimizerError):
    """A seed data line could not be parsed.

    Attributes:
        file_path: Path to the seed file
        line_number: 1-based line number of the bad record
    """

    file_path: Optional[str] = None
    line_number: Optional[int] = None


@dataclass
class ConfigurationError(TransportOptimizerError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
