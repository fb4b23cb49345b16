"""Dependency injection container.

This module provides a simple DI container without external frameworks.
It allows registering and resolving dependencies for the application.

Design principles:
1. No magic - explicit registration and resolution
2. Testable - easy to swap implementations
3. Lazy loading - adapters instantiated on first use
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        service = container.resolve(TransportService)

        # Testing
        container = Container()
        container.register(TicketLedgerPort, lambda: InMemoryTicketLedger(clock=fixed))
        ledger = container.resolve(TicketLedgerPort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)
            self._singletons.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Clear all cached singletons.

        The next resolve() builds a fresh network and ledger.
        """
        with self._lock:
            self._singletons.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default bindings.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.graph import DijkstraRouteSolver, InMemoryGraphStore
        from .adapters.ledger import InMemoryTicketLedger
        from .adapters.seed import TextSeedLoader
        from .ports.graph import GraphStorePort, RouteSolverPort
        from .ports.ledger import TicketLedgerPort
        from .ports.seed import SeedLoaderPort
        from .services import FareCalculator, TransportService

        config = config or get_config()
        container = cls(config=config)

        # Graph
        container.register(GraphStorePort, lambda: InMemoryGraphStore())
        container.register(RouteSolverPort, lambda: DijkstraRouteSolver())
        container.register(SeedLoaderPort, lambda: TextSeedLoader(config.graph))

        # Tickets
        container.register(TicketLedgerPort, lambda: InMemoryTicketLedger())
        container.register(
            FareCalculator,
            lambda: FareCalculator(container.resolve(GraphStorePort), config.fare),
        )

        # Main service
        def create_transport_service() -> TransportService:
            return TransportService(
                graph_store=container.resolve(GraphStorePort),
                route_solver=container.resolve(RouteSolverPort),
                fare_calculator=container.resolve(FareCalculator),
                ledger=container.resolve(TicketLedgerPort),
                seed_loader=container.resolve(SeedLoaderPort),
            )

        container.register(TransportService, create_transport_service)

        return container
