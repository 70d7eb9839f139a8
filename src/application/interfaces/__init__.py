"""Application service interfaces for dependency injection."""

from .catalog_source_interface import ICatalogSource
from .logging_interface import ILoggingService

__all__ = [
    "ICatalogSource",
    "ILoggingService",
]
