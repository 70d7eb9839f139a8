"""Interface for catalog sources."""

from abc import ABC, abstractmethod
from typing import Any


class ICatalogSource(ABC):
    """Interface for anything that can deliver a raw catalog document."""

    @property
    @abstractmethod
    def location(self) -> str:
        """Get human-readable location of the catalog (path or URL)."""

    @abstractmethod
    def fetch(self) -> Any:
        """
        Fetch and decode the catalog document.

        Raises:
            LoadError: If the document cannot be read or decoded
        """
