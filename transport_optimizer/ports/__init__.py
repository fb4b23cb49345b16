"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and its
adapters. They enable dependency injection and make the system
testable: a service only sees the protocol, never the concrete store.
"""

from .graph import GraphStorePort, RouteSolverPort
from .ledger import TicketLedgerPort
from .seed import SeedLoaderPort

__all__ = [
    # Graph
    "GraphStorePort",
    "RouteSolverPort",
    # Ledger
    "TicketLedgerPort",
    # Seed data
    "SeedLoaderPort",
]
