"""Services layer - Application orchestration.

Available services:
- CoordinationService: Incident coordination and reporting queries
"""

from .coordination import CoordinationService

__all__ = ["CoordinationService"]
