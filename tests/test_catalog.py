import pytest

from conftest import make_document
from domain.errors import LoadError
from domain.models import Catalog, Element, Recipe


def test_catalog_loads_elements_in_order(nature_catalog):
    assert [element.element_id for element in nature_catalog][:4] == ["water", "fire", "earth", "air"]
    assert nature_catalog.topic == "Nature"
    assert len(nature_catalog) == 9


def test_lookup_returns_element_or_none(mud_catalog):
    assert mud_catalog.lookup("mud").name == "Mud"
    assert mud_catalog.lookup("lava") is None
    assert "mud" in mud_catalog
    assert "lava" not in mud_catalog


def test_elements_by_tier(nature_catalog):
    assert [element.element_id for element in nature_catalog.elements_by_tier(0)] == ["water", "fire", "earth", "air"]
    assert [element.element_id for element in nature_catalog.elements_by_tier(2)] == ["stone", "cloud"]
    assert nature_catalog.elements_by_tier(7) == []
    assert nature_catalog.tiers() == [0, 1, 2]


def test_counts_and_summary(nature_catalog):
    summary = nature_catalog.get_summary()

    assert nature_catalog.total_count == 9
    assert nature_catalog.discoverable_count == 5
    assert summary["base_elements"] == 4
    assert summary["recipes"] == 6


def test_recipe_index_maps_both_orders(nature_catalog):
    assert nature_catalog.find_by_recipe("air", "lava").element_id == "stone"
    assert nature_catalog.find_by_recipe("lava", "air").element_id == "stone"
    assert nature_catalog.find_by_recipe("air", "air") is None


def test_recipe_index_is_read_only(mud_catalog):
    with pytest.raises(TypeError):
        mud_catalog.recipe_index[frozenset({"a", "b"})] = mud_catalog.lookup("mud")


def test_forward_references_are_allowed():
    catalog = Catalog.from_dict(
        make_document(
            [
                {"id": "plant", "name": "Plant", "tier": 2, "recipes": [["mud", "water"]]},
                {"id": "water", "name": "Water", "tier": 0},
                {"id": "earth", "name": "Earth", "tier": 0},
                {"id": "mud", "name": "Mud", "tier": 1, "recipes": [["water", "earth"]]},
            ]
        )
    )

    assert catalog.find_by_recipe("water", "mud").element_id == "plant"


def test_integer_ids_are_supported():
    catalog = Catalog.from_dict(
        make_document(
            [
                {"id": 1, "name": "Water", "tier": 0},
                {"id": 2, "name": "Earth", "tier": 0},
                {"id": 3, "name": "Mud", "tier": 1, "recipes": [[2, 1]]},
            ]
        )
    )

    assert catalog.find_by_recipe(1, 2).name == "Mud"
    assert "1" not in catalog


def test_missing_meta_gives_empty_topic():
    catalog = Catalog.from_dict({"library": [{"id": "water", "name": "Water", "tier": 0}]})

    assert catalog.topic == ""


def test_rejects_self_recipe():
    with pytest.raises(LoadError, match="itself"):
        Catalog.from_dict(
            make_document(
                [
                    {"id": "water", "name": "Water", "tier": 0},
                    {"id": "mud", "name": "Mud", "tier": 1, "recipes": [["mud", "water"]]},
                ]
            )
        )


def test_rejects_dangling_reference():
    with pytest.raises(LoadError, match="unknown element 'fire'"):
        Catalog.from_dict(
            make_document(
                [
                    {"id": "water", "name": "Water", "tier": 0},
                    {"id": "steam", "name": "Steam", "tier": 1, "recipes": [["water", "fire"]]},
                ]
            )
        )


def test_rejects_catalog_without_base_elements():
    with pytest.raises(LoadError, match="no tier 0"):
        Catalog.from_dict(make_document([{"id": "mud", "name": "Mud", "tier": 1}]))


def test_rejects_duplicate_ids():
    with pytest.raises(LoadError, match="Duplicate"):
        Catalog.from_dict(
            make_document(
                [
                    {"id": "water", "name": "Water", "tier": 0},
                    {"id": "water", "name": "Water again", "tier": 0},
                ]
            )
        )


def test_rejects_recipe_claimed_by_two_elements():
    with pytest.raises(LoadError, match="claimed by both"):
        Catalog.from_dict(
            make_document(
                [
                    {"id": "water", "name": "Water", "tier": 0},
                    {"id": "earth", "name": "Earth", "tier": 0},
                    {"id": "mud", "name": "Mud", "tier": 1, "recipes": [["water", "earth"]]},
                    {"id": "clay", "name": "Clay", "tier": 1, "recipes": [["earth", "water"]]},
                ]
            )
        )


def test_rejects_empty_library():
    with pytest.raises(LoadError, match="empty"):
        Catalog.from_dict(make_document([]))


@pytest.mark.parametrize(
    "document",
    [
        [],
        "library",
        {"meta": {"topic": "x"}},
        {"library": {"water": {}}},
        {"meta": "Nature", "library": []},
    ],
)
def test_rejects_malformed_documents(document):
    with pytest.raises(LoadError):
        Catalog.from_dict(document)


@pytest.mark.parametrize(
    "record",
    [
        "water",
        {"id": "water", "name": "Water"},
        {"id": "water", "name": "Water", "tier": -1},
        {"id": "water", "name": "Water", "tier": 0, "recipes": {}},
        {"id": "water", "name": "Water", "tier": 0, "recipes": "fire+earth"},
        {"id": "water", "name": "Water", "tier": 0, "recipes": [["fire"]]},
    ],
)
def test_rejects_malformed_element_records(record):
    with pytest.raises(LoadError, match="Invalid element record #0"):
        Catalog.from_dict(make_document([record]))


def test_loads_records_with_only_id_tier_and_recipes(bare_catalog):
    mud = bare_catalog.lookup("mud")

    assert [element.element_id for element in bare_catalog] == ["water", "earth", "mud"]
    assert mud.name == "mud"
    assert mud.image == ""
    assert bare_catalog.find_by_recipe("earth", "water") is mud
    assert bare_catalog.elements_by_tier(0) == [bare_catalog.lookup("water"), bare_catalog.lookup("earth")]


def test_catalog_built_from_elements_directly():
    catalog = Catalog(
        [
            Element("water", "Water"),
            Element("earth", "Earth"),
            Element("mud", "Mud", tier=1, recipes=(Recipe("water", "earth"),)),
        ],
        topic="Direct",
    )

    assert catalog.to_dict()["library"][2] == {
        "id": "mud",
        "name": "Mud",
        "tier": 1,
        "image": "",
        "recipes": [["water", "earth"]],
    }
