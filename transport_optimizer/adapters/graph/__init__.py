"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- InMemoryGraphStore: Mutable city/route graph held in dictionaries
- DijkstraRouteSolver: Finds shortest paths using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraRouteSolver
from .in_memory_store import InMemoryGraphStore

__all__ = ["InMemoryGraphStore", "DijkstraRouteSolver"]
