"""Services layer - Application orchestration.

Available services:
- TransportService: Session object for editing, routing and booking
- FareCalculator: Prices trips along a direct route
"""

from .fare_calculator import FareCalculator
from .transport_service import TransportService

__all__ = ["TransportService", "FareCalculator"]
