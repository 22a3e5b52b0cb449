"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the station network and the
adapters and collaborators around it. They enable dependency injection
and make the system testable.
"""

from .network import NetworkRepositoryPort, StationNetworkPort

__all__ = [
    "NetworkRepositoryPort",
    "StationNetworkPort",
]
