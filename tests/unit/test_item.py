import pytest

from grid_inventory.item import Item, empty_item
from grid_inventory.types import ItemCategory


def test_default_item_is_empty() -> None:
    item = Item()
    assert item.is_empty
    assert item == empty_item()
    assert (item.name, item.weight) == ("", 0.0)


def test_none_category_is_empty_regardless_of_fields() -> None:
    assert Item("Ghost", 4.0, ItemCategory.NONE).is_empty
    assert not Item("Dagger", 0.0, ItemCategory.WEAPON).is_empty


@pytest.mark.parametrize("weight", [-1.0, float("nan"), float("inf"), float("-inf")])
def test_invalid_weight_rejected(weight: float) -> None:
    with pytest.raises(ValueError):
        Item("Anvil", weight, ItemCategory.WEAPON)


def test_copy_is_independent() -> None:
    item = Item("Sword", 5.0, ItemCategory.WEAPON)
    clone = item.copy()
    assert clone == item and clone is not item
    clone.weight = 7.0
    assert item.weight == 5.0


def test_same_name_different_category_are_distinct() -> None:
    assert Item("Bow", 2.0, ItemCategory.WEAPON) != Item(
        "Bow", 2.0, ItemCategory.ACCESSORY
    )
