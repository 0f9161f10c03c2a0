"""
Item universe for association rule chromosomes.

The universe is the fixed, ordered set of items a rule can mention. Its order
defines the chromosome layout: gene i always describes item i.
"""

from typing import Any, Dict, Hashable, Iterable, Iterator, List, Tuple, Type
from enum import Enum

from src.evorules.core.exceptions import DegenerateUniverse


class Item(Enum):
    """Products sold by the sample bakery."""
    LEITE = "leite"
    PAO = "pao"
    MANTEIGA = "manteiga"
    CAFE = "cafe"
    SUCO = "suco"
    BOLO = "bolo"


class ItemUniverse:
    """
    Fixed, ordered collection of distinct items.

    A universe needs at least two items, otherwise no rule can have both an
    antecedent and a consequent.
    """

    def __init__(self, items: Iterable[Hashable]):
        self.items: Tuple[Hashable, ...] = tuple(items)

        if len(self.items) < 2:
            raise DegenerateUniverse(
                f"Item universe needs at least 2 items, got {len(self.items)}",
                details={"size": len(self.items)}
            )

        self._index: Dict[Hashable, int] = {}
        for position, item in enumerate(self.items):
            if item in self._index:
                raise DegenerateUniverse(
                    f"Duplicate item in universe: {item!r}",
                    details={"item": repr(item)}
                )
            self._index[item] = position

    @classmethod
    def from_enum(cls, enum_type: Type[Enum]) -> "ItemUniverse":
        """Create a universe from an Enum, in declaration order."""
        return cls(list(enum_type))

    @property
    def size(self) -> int:
        """Number of items, which is also the chromosome length."""
        return len(self.items)

    def item_at(self, position: int) -> Hashable:
        return self.items[position]

    def index_of(self, item: Hashable) -> int:
        """Get the chromosome position of an item (KeyError if unknown)."""
        return self._index[item]

    def resolve(self, value: Any) -> Hashable:
        """
        Resolve a raw value to a universe item.

        Accepts the item itself or, for Enum universes, the member name or
        value given as a string (case-insensitive).

        Raises:
            KeyError: If the value names no item of this universe
        """
        if value in self._index:
            return value

        if isinstance(value, str):
            wanted = value.strip().lower()
            for item in self.items:
                if isinstance(item, Enum):
                    if item.name.lower() == wanted or str(item.value).lower() == wanted:
                        return item
                elif isinstance(item, str) and item.lower() == wanted:
                    return item

        raise KeyError(value)

    def names(self) -> List[str]:
        """Display names of the items, in universe order."""
        return [item.name if isinstance(item, Enum) else str(item) for item in self.items]

    def __contains__(self, item: Hashable) -> bool:
        return item in self._index

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ItemUniverse):
            return NotImplemented
        return self.items == other.items

    def __hash__(self) -> int:
        return hash(self.items)

    def __repr__(self) -> str:
        return f"ItemUniverse({self.names()})"


DEFAULT_UNIVERSE = ItemUniverse.from_enum(Item)
