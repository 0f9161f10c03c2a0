"""
Unit tests for the Item Universe (Subtask 1.1).

Tests cover:
- Universe ordering and position mapping
- Degenerate universes
- Resolving item names
"""

import pytest

from src.evorules.core.items import DEFAULT_UNIVERSE, Item, ItemUniverse
from src.evorules.core.exceptions import DegenerateUniverse, EvolutionError


class TestItemUniverse:
    """Test suite for the item universe."""

    def test_default_universe_order(self):
        """Test the default universe follows the Item enum declaration order."""
        assert DEFAULT_UNIVERSE.size == 6
        assert list(DEFAULT_UNIVERSE) == [
            Item.LEITE, Item.PAO, Item.MANTEIGA, Item.CAFE, Item.SUCO, Item.BOLO
        ]
        assert DEFAULT_UNIVERSE.names() == ["LEITE", "PAO", "MANTEIGA", "CAFE", "SUCO", "BOLO"]

    def test_position_mapping_round_trip(self, universe):
        """Test index_of and item_at agree for every position."""
        for position, item in enumerate(universe):
            assert universe.index_of(item) == position
            assert universe.item_at(position) is item

    def test_plain_string_universe(self):
        """Test universes of arbitrary hashable symbols."""
        universe = ItemUniverse(["a", "b", "c"])

        assert len(universe) == 3
        assert "b" in universe
        assert "z" not in universe
        assert universe.index_of("c") == 2

    @pytest.mark.parametrize("items", [[], ["only"]])
    def test_degenerate_universe_rejected(self, items):
        """Test universes with fewer than two items fail fast."""
        with pytest.raises(DegenerateUniverse) as exc_info:
            ItemUniverse(items)

        assert isinstance(exc_info.value, EvolutionError)
        assert exc_info.value.details["size"] == len(items)

    def test_duplicate_items_rejected(self):
        """Test a universe cannot hold the same item twice."""
        with pytest.raises(DegenerateUniverse):
            ItemUniverse(["a", "b", "a"])

    def test_resolve_names(self, universe):
        """Test resolving enum members by name or value, case-insensitively."""
        assert universe.resolve(Item.PAO) is Item.PAO
        assert universe.resolve("PAO") is Item.PAO
        assert universe.resolve("manteiga") is Item.MANTEIGA
        assert universe.resolve(" Cafe ") is Item.CAFE

        with pytest.raises(KeyError):
            universe.resolve("CHOCOLATE")

    def test_universe_equality(self):
        """Test universes compare by their ordered items."""
        assert ItemUniverse.from_enum(Item) == DEFAULT_UNIVERSE
        assert ItemUniverse(["a", "b"]) != ItemUniverse(["b", "a"])
        assert hash(ItemUniverse(["a", "b"])) == hash(ItemUniverse(["a", "b"]))
