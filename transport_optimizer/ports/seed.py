"""Seed port - Abstraction for loading the startup network."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import SeedReport
    from .graph import GraphStorePort


class SeedLoaderPort(Protocol):
    """Port for seed data ingestion.

    Implementation: adapters/seed/text_loader.py

    A loader registers cities and routes through the store's public
    API. Bad records are reported, never fatal.
    """

    def load_into(self, store: GraphStorePort) -> SeedReport:
        """Register every valid seed record into the store.

        Returns:
            A report of what was loaded and what was rejected.
        """
        ...
