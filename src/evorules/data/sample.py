"""Sample bakery transactions used by the command line demo and the tests."""

from typing import List, Set

from src.evorules.core.items import DEFAULT_UNIVERSE, Item, ItemUniverse
from src.evorules.data.transactions import TransactionDataset

# PAO appears in 7 baskets, 4 of them with MANTEIGA; SUCO and MANTEIGA
# never appear together.
SAMPLE_TRANSACTIONS: List[Set[Item]] = [
    {Item.LEITE, Item.PAO, Item.MANTEIGA},
    {Item.PAO, Item.MANTEIGA, Item.CAFE},
    {Item.PAO, Item.MANTEIGA},
    {Item.LEITE, Item.PAO, Item.MANTEIGA, Item.BOLO},
    {Item.PAO, Item.CAFE},
    {Item.PAO, Item.SUCO},
    {Item.LEITE, Item.PAO},
    {Item.LEITE, Item.CAFE},
    {Item.CAFE, Item.BOLO},
    {Item.SUCO, Item.BOLO},
    {Item.LEITE, Item.SUCO},
    {Item.CAFE},
    {Item.LEITE, Item.BOLO},
    {Item.MANTEIGA, Item.CAFE},
    {Item.SUCO, Item.CAFE, Item.BOLO},
]


def load_sample_dataset(universe: ItemUniverse = DEFAULT_UNIVERSE) -> TransactionDataset:
    """Load the 15 sample bakery transactions."""
    return TransactionDataset(SAMPLE_TRANSACTIONS, universe)
