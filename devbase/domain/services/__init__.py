"""
Domain services.
"""

from .ownership_service import OwnershipService

__all__ = ["OwnershipService"]
