"""Ledger adapters - Implementations of the ticket ledger port."""

from .in_memory_ledger import InMemoryTicketLedger

__all__ = ["InMemoryTicketLedger"]
