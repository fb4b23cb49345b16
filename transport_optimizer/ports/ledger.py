"""Ledger port - Abstraction over booked tickets."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import City, Ticket


class TicketLedgerPort(Protocol):
    """Port for the ticket ledger.

    Implementation: adapters/ledger/in_memory_ledger.py

    Ticket identifiers come from a counter owned by the ledger; they
    start at 1 and are never reused, even after deletion.
    """

    def issue(self, source: City, destination: City, fare: int) -> Ticket:
        """Create, timestamp and append a new ticket."""
        ...

    def get(self, ticket_id: int) -> Optional[Ticket]:
        ...

    def delete(self, ticket_id: int) -> Ticket:
        """Remove a ticket by identifier.

        Raises:
            TicketNotFoundError: If no ticket has this identifier.
        """
        ...

    def list_by_fare(self) -> List[Ticket]:
        """List tickets by fare descending, booking order among ties."""
        ...

    def remove_for_city(self, city: City) -> int:
        """Remove every ticket departing from or arriving at a city.

        Returns:
            Number of tickets removed.
        """
        ...

    def __len__(self) -> int:
        ...

    def __iter__(self) -> Iterator[Ticket]:
        ...
