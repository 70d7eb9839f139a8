from domain.models import UnlockSet


def test_seeded_with_exactly_the_base_elements(nature_catalog):
    unlocked = UnlockSet.seeded_from(nature_catalog)

    assert unlocked.all() == {element.element_id for element in nature_catalog.elements_by_tier(0)}
    assert unlocked.in_unlock_order() == ["water", "fire", "earth", "air"]


def test_add_is_idempotent(mud_catalog):
    unlocked = UnlockSet.seeded_from(mud_catalog)

    assert unlocked.add("mud") is True
    assert unlocked.add("mud") is False
    assert unlocked.add("water") is False
    assert len(unlocked) == 3
    assert unlocked.contains("mud")
    assert "mud" in unlocked


def test_all_returns_a_snapshot(mud_catalog):
    unlocked = UnlockSet.seeded_from(mud_catalog)
    before = unlocked.all()

    unlocked.add("mud")

    assert before == frozenset({"water", "earth"})
    assert unlocked.all() == frozenset({"water", "earth", "mud"})


def test_keeps_unlock_order():
    unlocked = UnlockSet()
    for element_id in ["steam", 0, "mud"]:
        unlocked.add(element_id)

    assert list(unlocked) == ["steam", 0, "mud"]
    assert unlocked.size == 3
