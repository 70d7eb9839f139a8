"""Application services package."""

from .board_presenter import BoardPresenter
from .catalog_service import (
    CatalogService,
    FileCatalogSource,
    HttpCatalogSource,
    InMemoryCatalogSource,
    source_for,
)
from .logging_service import LoggingService, TimingContext, timing_decorator
from .session_controller import ActionReport, SessionController, SessionSnapshot

__all__ = [
    "ActionReport",
    "BoardPresenter",
    "CatalogService",
    "FileCatalogSource",
    "HttpCatalogSource",
    "InMemoryCatalogSource",
    "LoggingService",
    "SessionController",
    "SessionSnapshot",
    "TimingContext",
    "source_for",
    "timing_decorator",
]
