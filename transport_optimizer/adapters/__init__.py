"""Adapters layer - Concrete implementations of the ports.

Available adapters:
- graph: InMemoryGraphStore, DijkstraRouteSolver
- ledger: InMemoryTicketLedger
- seed: TextSeedLoader
"""
