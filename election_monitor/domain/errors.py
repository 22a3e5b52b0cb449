"""Typed domain errors for the election monitor.

The station network itself never raises: it declines bad input and
returns empty results. These errors are raised by the layers around it
(adapters and services) where a caller needs to tell failures apart.

All errors inherit from ElectionMonitorError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ElectionMonitorError(Exception):
    """Base error for the election monitor domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class StationNotFoundError(ElectionMonitorError):
    """Station identifier not present in the network.

    Attributes:
        station_id: The identifier that was looked up
    """

    station_id: str = ""


@dataclass
class NoRouteFoundError(ElectionMonitorError):
    """Both stations exist but no connection path links them.

    Attributes:
        source: Departure station identifier
        target: Arrival station identifier
    """

    source: str = ""
    target: str = ""


@dataclass
class NetworkDataError(ElectionMonitorError):
    """Network data could not be loaded.

    Attributes:
        file_path: Path to the offending data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(ElectionMonitorError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
