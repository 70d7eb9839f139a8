"""Catalog loading service with file and HTTP sources."""

import json
from pathlib import Path
from typing import Any, Optional

import requests

from application.interfaces import ICatalogSource, ILoggingService
from domain.errors import LoadError
from domain.models import Catalog

from .logging_service import timing_decorator


class FileCatalogSource(ICatalogSource):
    """Catalog document stored as a UTF-8 JSON file."""

    def __init__(self, path):
        """
        Initialize file source.

        Args:
            path: Path to the catalog JSON file
        """
        self.path = Path(path)

    @property
    def location(self) -> str:
        """Get file path of the catalog."""
        return str(self.path)

    def fetch(self) -> Any:
        """Read and decode the catalog file."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError as e:
            raise LoadError(f"Catalog file not found: {self.path}") from e
        except json.JSONDecodeError as e:
            raise LoadError(f"Catalog file {self.path} is not valid JSON: {e}") from e
        except UnicodeDecodeError as e:
            raise LoadError(f"Catalog file {self.path} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise LoadError(f"Cannot read catalog file {self.path}: {e}") from e


class HttpCatalogSource(ICatalogSource):
    """Catalog document served over HTTP(S)."""

    def __init__(self, url: str, timeout: float = 5.0):
        """
        Initialize HTTP source.

        Args:
            url: URL of the catalog JSON document
            timeout: Request timeout in seconds
        """
        self.url = url
        self.timeout = timeout

    @property
    def location(self) -> str:
        """Get URL of the catalog."""
        return self.url

    def fetch(self) -> Any:
        """Download and decode the catalog document."""
        try:
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise LoadError(f"Failed to fetch catalog from {self.url}: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise LoadError(f"Catalog at {self.url} is not valid JSON: {e}") from e


class InMemoryCatalogSource(ICatalogSource):
    """Catalog document that is already decoded."""

    def __init__(self, document: Any, name: str = "<memory>"):
        self.document = document
        self.name = name

    @property
    def location(self) -> str:
        return self.name

    def fetch(self) -> Any:
        return self.document


def source_for(location: str, timeout: float = 5.0) -> ICatalogSource:
    """Pick a catalog source for a path or URL."""
    if location.startswith(("http://", "https://")):
        return HttpCatalogSource(location, timeout=timeout)
    return FileCatalogSource(location)


class CatalogService:
    """
    Service for loading and validating the catalog once per session start.

    Any failure (unreadable source, malformed JSON, broken invariant) is
    raised as LoadError; a session is never started without a catalog.
    """

    def __init__(self, logging_service: ILoggingService):
        """
        Initialize catalog service.

        Args:
            logging_service: Service for logging operations
        """
        self.logger = logging_service
        self.last_loaded: Optional[Catalog] = None

    @timing_decorator("Catalog load")
    def load(self, source: ICatalogSource) -> Catalog:
        """
        Load a catalog from a source.

        Args:
            source: Where to read the catalog document from

        Returns:
            Validated, immutable Catalog

        Raises:
            LoadError: If the source cannot be read or the catalog is invalid
        """
        self.logger.info(f"📥 Loading catalog from {source.location}")

        document = source.fetch()
        catalog = Catalog.from_dict(document)

        summary = catalog.get_summary()
        self.logger.info(
            f"✅ Catalog loaded: {summary['elements']} elements "
            f"({summary['base_elements']} base, {summary['discoverable']} discoverable), "
            f"{summary['recipes']} recipes"
        )
        if catalog.topic:
            self.logger.debug(f"📚 Topic: {catalog.topic}")

        self.last_loaded = catalog
        return catalog

    def load_from(self, location: str, timeout: float = 5.0) -> Catalog:
        """Load a catalog from a file path or URL."""
        return self.load(source_for(location, timeout=timeout))

    def load_document(self, document: Any) -> Catalog:
        """Load a catalog from an already decoded document."""
        return self.load(InMemoryCatalogSource(document))
