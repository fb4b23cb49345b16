"""Fare computation for direct routes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..config import FareConfig, get_config
from ..domain.errors import ConfigurationError, NoDirectRouteError, UnknownCityError
from ..domain.models import City
from ..ports.graph import GraphStorePort


@dataclass
class FareCalculator:
    """Prices a trip along a direct edge.

    fare = distance * base_rate_per_km
           + (source population + destination population) // population_unit

    Only a direct edge is priced, never a multi-hop path. With parallel
    edges the first inserted one is used.

    Attributes:
        store: Graph store used to look up the direct edge
        config: Fare formula constants
    """

    store: GraphStorePort
    config: FareConfig = field(default_factory=lambda: get_config().fare)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.config.population_unit <= 0:
            raise ConfigurationError(
                f"population_unit must be positive, got {self.config.population_unit}",
                setting_name="population_unit",
                expected_type="positive int",
            )

    def calculate(self, source: City, destination: City) -> int:
        """Compute the fare between two directly connected cities.

        Args:
            source: Departure city.
            destination: Arrival city.

        Returns:
            The fare in whole currency units.

        Raises:
            UnknownCityError: If either city is not registered.
            NoDirectRouteError: If no edge joins source to destination.
        """
        for city in (source, destination):
            if not self.store.has_city(city):
                raise UnknownCityError(f"City not found: {city.id}", city_id=city.id)

        route = self.store.get_route(source, destination)
        if route is None:
            raise NoDirectRouteError(
                f"No route found between {source.name} and {destination.name}",
                source_id=source.id,
                destination_id=destination.id,
            )

        base_fare = route.distance * self.config.base_rate_per_km
        demand_surcharge = (
            source.population + destination.population
        ) // self.config.population_unit
        fare = base_fare + demand_surcharge

        self._logger.debug(
            "Fare computed",
            extra={
                "source_id": source.id,
                "destination_id": destination.id,
                "base_fare": base_fare,
                "demand_surcharge": demand_surcharge,
            },
        )
        return fare
