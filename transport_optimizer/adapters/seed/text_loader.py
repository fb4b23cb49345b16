"""Text seed loader adapter.

Reads the two whitespace-delimited seed files read at startup:

- cities file, one ``<city_id> <name> <population>`` record per line
  (the name may contain spaces)
- routes file, one ``<source_id> <destination_id> <distance> <time>``
  record per line

A missing file, a malformed line, a duplicate city or a route naming
an unknown city is logged and reported, and loading carries on with
the next record.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Tuple

from ...config import GraphConfig, get_config
from ...domain.errors import (
    DuplicateCityError,
    SeedDataError,
    TransportOptimizerError,
)
from ...domain.models import City, Route, SeedReport
from ...ports.graph import GraphStorePort


@dataclass
class TextSeedLoader:
    """Seed loader for whitespace-delimited text files.

    This adapter implements SeedLoaderPort.

    Attributes:
        config: Graph configuration (data directory, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load_into(self, store: GraphStorePort) -> SeedReport:
        """Register cities, then routes, into the store.

        Args:
            store: The graph store to fill.

        Returns:
            SeedReport with the number of records loaded and the
            reasons records were skipped.
        """
        rejected: List[str] = []
        cities_loaded = self._load_cities(store, rejected)
        routes_loaded = self._load_routes(store, rejected)

        report = SeedReport(
            cities_loaded=cities_loaded,
            routes_loaded=routes_loaded,
            rejected=tuple(rejected),
        )
        self._logger.info(
            "Seed data loaded",
            extra={
                "cities": cities_loaded,
                "routes": routes_loaded,
                "rejected": len(rejected),
            },
        )
        return report

    def _load_cities(self, store: GraphStorePort, rejected: List[str]) -> int:
        loaded = 0
        path = self.config.cities_path
        for line_number, fields in self._records(path, rejected):
            try:
                city = self._parse_city(fields, path, line_number)
                store.add_city(city)
                loaded += 1
            except DuplicateCityError as e:
                self._reject(rejected, f"{path.name}:{line_number}: {e}")
            except SeedDataError as e:
                self._reject(rejected, str(e))
        return loaded

    def _load_routes(self, store: GraphStorePort, rejected: List[str]) -> int:
        loaded = 0
        path = self.config.routes_path
        for line_number, fields in self._records(path, rejected):
            try:
                source_id, destination_id, distance, time = self._parse_ints(
                    fields, 4, path, line_number
                )
            except SeedDataError as e:
                self._reject(rejected, str(e))
                continue

            source = store.get_city_by_id(source_id)
            destination = store.get_city_by_id(destination_id)
            if source is None or destination is None:
                self._reject(
                    rejected,
                    f"{path.name}:{line_number}: Invalid city ID in route data "
                    f"({source_id} -> {destination_id})",
                )
                continue

            try:
                store.add_route(Route(source, destination, distance, time))
                loaded += 1
            except (ValueError, TransportOptimizerError) as e:
                self._reject(rejected, f"{path.name}:{line_number}: {e}")
        return loaded

    def _records(
        self, path: Path, rejected: List[str]
    ) -> Iterator[Tuple[int, List[str]]]:
        """Yield (line number, fields) for every non-blank line."""
        try:
            with path.open(encoding="utf-8") as f:
                for line_number, line in enumerate(f, start=1):
                    fields = line.split()
                    if fields:
                        yield line_number, fields
        except FileNotFoundError as e:
            self._read_failed(path, e)
            rejected.append(f"File not found: {path}")
        except OSError as e:
            self._read_failed(path, e)
            rejected.append(f"Cannot read {path}: {e.strerror}")
        except UnicodeDecodeError as e:
            # Records yielded before the bad bytes stay registered.
            self._read_failed(path, e)
            rejected.append(f"Cannot read {path}: not valid UTF-8")

    def _read_failed(self, path: Path, error: Exception) -> None:
        self._logger.warning(
            "Failed to read seed file",
            extra={"path": str(path), "error": str(error)},
        )

    def _parse_city(self, fields: List[str], path: Path, line_number: int) -> City:
        if len(fields) < 3:
            raise SeedDataError(
                f"{path.name}:{line_number}: expected '<id> <name> <population>'",
                file_path=str(path),
                line_number=line_number,
            )
        city_id, population = self._parse_ints(
            [fields[0], fields[-1]], 2, path, line_number
        )
        try:
            return City(city_id, " ".join(fields[1:-1]), population)
        except ValueError as e:
            raise SeedDataError(
                f"{path.name}:{line_number}: invalid city",
                file_path=str(path),
                line_number=line_number,
                cause=e,
            )

    @staticmethod
    def _parse_ints(
        fields: List[str], expected: int, path: Path, line_number: int
    ) -> List[int]:
        if len(fields) != expected:
            raise SeedDataError(
                f"{path.name}:{line_number}: expected {expected} fields, "
                f"got {len(fields)}",
                file_path=str(path),
                line_number=line_number,
            )
        try:
            return [int(value) for value in fields]
        except ValueError as e:
            raise SeedDataError(
                f"{path.name}:{line_number}: not an integer",
                file_path=str(path),
                line_number=line_number,
                cause=e,
            )

    def _reject(self, rejected: List[str], reason: str) -> None:
        self._logger.warning("Seed record skipped", extra={"reason": reason})
        rejected.append(reason)
