"""In-memory ticket ledger.

Tickets are kept in booking order. Lookups scan the list; there is
no secondary index, which is fine for the number of tickets a session
books.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterator, List, Optional

from ...domain.errors import TicketNotFoundError
from ...domain.models import City, Ticket


@dataclass
class InMemoryTicketLedger:
    """Ticket ledger backed by a list.

    This adapter implements TicketLedgerPort.

    Attributes:
        clock: Returns the timestamp stamped on new tickets

    Example:
        ledger = InMemoryTicketLedger(clock=lambda: datetime(2024, 1, 1))
        ticket = ledger.issue(paris, lyon, fare=4650)
    """

    clock: Callable[[], datetime] = datetime.now

    _tickets: List[Ticket] = field(default_factory=list, repr=False)
    _last_id: int = field(default=0, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def issue(self, source: City, destination: City, fare: int) -> Ticket:
        """Create a ticket with the next identifier and append it.

        Args:
            source: Departure city.
            destination: Arrival city.
            fare: Price computed for the trip.

        Returns:
            The new ticket.
        """
        self._last_id += 1
        ticket = Ticket(
            id=self._last_id,
            source=source,
            destination=destination,
            fare=fare,
            created_at=self.clock(),
        )
        self._tickets.append(ticket)
        self._logger.info(
            "Ticket issued",
            extra={"ticket_id": ticket.id, "fare": fare},
        )
        return ticket

    def get(self, ticket_id: int) -> Optional[Ticket]:
        for ticket in self._tickets:
            if ticket.id == ticket_id:
                return ticket
        return None

    def delete(self, ticket_id: int) -> Ticket:
        """Remove a ticket by identifier.

        Args:
            ticket_id: The identifier of the ticket to remove.

        Returns:
            The removed ticket.

        Raises:
            TicketNotFoundError: If no ticket has this identifier.
        """
        for index, ticket in enumerate(self._tickets):
            if ticket.id == ticket_id:
                del self._tickets[index]
                self._logger.info("Ticket deleted", extra={"ticket_id": ticket_id})
                return ticket

        raise TicketNotFoundError(
            f"Ticket ID not found: {ticket_id}",
            ticket_id=ticket_id,
        )

    def list_by_fare(self) -> List[Ticket]:
        """List tickets by fare, highest first.

        The sort is stable, so tickets with equal fares keep their
        booking order.
        """
        return sorted(self._tickets, key=lambda ticket: ticket.fare, reverse=True)

    def remove_for_city(self, city: City) -> int:
        """Drop every ticket that departs from or arrives at a city.

        Returns:
            Number of tickets removed.
        """
        kept = [
            ticket
            for ticket in self._tickets
            if ticket.source != city and ticket.destination != city
        ]
        removed = len(self._tickets) - len(kept)
        self._tickets = kept
        if removed:
            self._logger.info(
                "Tickets removed for city",
                extra={"city_id": city.id, "tickets_removed": removed},
            )
        return removed

    def __len__(self) -> int:
        return len(self._tickets)

    def __iter__(self) -> Iterator[Ticket]:
        return iter(list(self._tickets))
