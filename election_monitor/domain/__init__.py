"""Domain layer - Core business models and errors.

This module contains the domain models and typed errors used
throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    ElectionMonitorError,
    NetworkDataError,
    NoRouteFoundError,
    StationNotFoundError,
)
from .models import (
    NearbyStation,
    NetworkStats,
    NetworkSummary,
    RouteResult,
    Station,
)

__all__ = [
    # Models
    "Station",
    "NearbyStation",
    "RouteResult",
    "NetworkStats",
    "NetworkSummary",
    # Errors
    "ElectionMonitorError",
    "StationNotFoundError",
    "NoRouteFoundError",
    "NetworkDataError",
    "ConfigurationError",
]
