import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from application.services import LoggingService, SessionController
from domain.models import Catalog

DATA_FILE = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "data", "gamedata.json"))


def make_document(library, topic="Test Topic"):
    return {"meta": {"topic": topic}, "library": library}


@pytest.fixture
def mud_document() -> dict:
    return make_document(
        [
            {"id": "water", "name": "Water", "tier": 0},
            {"id": "earth", "name": "Earth", "tier": 0},
            {"id": "mud", "name": "Mud", "tier": 1, "recipes": [["water", "earth"]]},
        ]
    )


@pytest.fixture
def mud_catalog(mud_document) -> Catalog:
    return Catalog.from_dict(mud_document)


@pytest.fixture
def bare_document() -> dict:
    return {
        "library": [
            {"id": "water", "tier": 0},
            {"id": "earth", "tier": 0},
            {"id": "mud", "tier": 1, "recipes": [["water", "earth"]]},
        ]
    }


@pytest.fixture
def bare_catalog(bare_document) -> Catalog:
    return Catalog.from_dict(bare_document)


@pytest.fixture
def nature_document() -> dict:
    return make_document(
        [
            {"id": "water", "name": "Water", "tier": 0},
            {"id": "fire", "name": "Fire", "tier": 0},
            {"id": "earth", "name": "Earth", "tier": 0},
            {"id": "air", "name": "Air", "tier": 0},
            {"id": "mud", "name": "Mud", "tier": 1, "recipes": [["water", "earth"]]},
            {"id": "steam", "name": "Steam", "tier": 1, "recipes": [["water", "fire"]]},
            {"id": "lava", "name": "Lava", "tier": 1, "recipes": [["earth", "fire"]]},
            {"id": "stone", "name": "Stone", "tier": 2, "recipes": [["lava", "water"], ["lava", "air"]]},
            {"id": "cloud", "name": "Cloud", "tier": 2, "recipes": [["steam", "air"]]},
        ],
        topic="Nature",
    )


@pytest.fixture
def nature_catalog(nature_document) -> Catalog:
    return Catalog.from_dict(nature_document)


@pytest.fixture
def logger() -> LoggingService:
    return LoggingService(log_level="DEBUG")


@pytest.fixture
def quiet_logger() -> LoggingService:
    return LoggingService(log_level="ERROR")


@pytest.fixture
def session(mud_catalog, quiet_logger) -> SessionController:
    return SessionController(mud_catalog, quiet_logger)


@pytest.fixture
def bare_session(bare_catalog, quiet_logger) -> SessionController:
    return SessionController(bare_catalog, quiet_logger)


@pytest.fixture
def nature_session(nature_catalog, quiet_logger) -> SessionController:
    return SessionController(nature_catalog, quiet_logger)
