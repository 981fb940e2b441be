"""
Meta tags component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class CurrentUrlPort(Protocol):
    """Port for resolving the full URL of the request being rendered."""

    def full_url(self) -> str | None:
        """Get the current request URL including query string."""
        ...
