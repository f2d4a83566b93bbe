"""
The authenticated identity attached to a single request.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Principal:
    """Built from a verified access token; never persisted or cached."""

    id: str
