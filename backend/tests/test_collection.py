"""Tests for the collection registry and rarity bands."""

import pytest

from wildtrail.core.collection import CollectionRegistry, rarity_for


def test_collect_is_idempotent():
    """collect(17) adds once: True then False, count stays 1."""
    registry = CollectionRegistry()
    changes = []
    registry.subscribe(changes.append)

    assert registry.collect(17) is True
    assert registry.count() == 1
    assert registry.collect(17) is False
    assert registry.count() == 1
    assert registry.has_collected(17)
    assert len(changes) == 1


def test_collect_rejects_non_positive_ids():
    registry = CollectionRegistry()
    assert registry.collect(0) is False
    assert registry.collect(-4) is False
    assert registry.count() == 0


def test_unlock_order_is_kept():
    registry = CollectionRegistry()
    for collectible_id in (25, 3, 17):
        registry.collect(collectible_id)
    assert registry.unlocked_ids == (25, 3, 17)


def test_loaded_ids_are_deduplicated():
    registry = CollectionRegistry([5, 5, 0, 9, 5])
    assert registry.unlocked_ids == (5, 9)


def test_erase_clears_everything():
    registry = CollectionRegistry([1, 2, 3])
    registry.erase()
    assert registry.count() == 0
    assert registry.has_collected(1) is False


@pytest.mark.parametrize(
    "collectible_id,expected",
    [
        (1, "common"),
        (14, "common"),
        (15, "rare"),
        (17, "rare"),
        (24, "rare"),
        (25, "epic"),
        (34, "epic"),
        (35, "legendary"),
        (42, "legendary"),
        (43, "common"),
    ],
)
def test_rarity_bands(collectible_id, expected):
    assert rarity_for(collectible_id) == expected
