"""
Transaction dataset for rule evaluation.

Transactions are stored as a boolean incidence matrix (one row per
transaction, one column per universe item) so that "how many transactions
contain all of these items" is a single vectorized query.
"""

from typing import Any, FrozenSet, Hashable, Iterable, Iterator, List, Sequence

import numpy as np

from src.evorules.core.exceptions import EmptyDataset, UnknownItem
from src.evorules.core.items import ItemUniverse

Transaction = FrozenSet[Hashable]


class TransactionDataset:
    """
    Fixed, ordered sequence of transactions over an item universe.

    The dataset is supplied in full before evolution starts and never changes
    afterwards.
    """

    def __init__(self, transactions: Iterable[Iterable[Hashable]], universe: ItemUniverse):
        """
        Build the dataset and its incidence matrix.

        Args:
            transactions: Baskets of universe items (duplicates collapse)
            universe: Item universe the baskets are drawn from

        Raises:
            EmptyDataset: If no transactions are supplied
            UnknownItem: If a basket holds an item outside the universe
        """
        self.universe = universe
        self.transactions: List[Transaction] = [frozenset(t) for t in transactions]

        if not self.transactions:
            raise EmptyDataset("Dataset must contain at least one transaction")

        self.matrix = np.zeros((len(self.transactions), universe.size), dtype=bool)
        for row, transaction in enumerate(self.transactions):
            for item in transaction:
                if item not in universe:
                    raise UnknownItem(
                        f"Transaction {row} holds unknown item {item!r}",
                        details={"transaction": row, "item": repr(item)}
                    )
                self.matrix[row, universe.index_of(item)] = True

    @classmethod
    def from_records(cls, records: Iterable[Iterable[Any]], universe: ItemUniverse) -> "TransactionDataset":
        """
        Build a dataset from raw records.

        Record entries may be universe items or their names (see
        ItemUniverse.resolve).
        """
        transactions = []
        for row, record in enumerate(records):
            basket = set()
            for value in record:
                try:
                    basket.add(universe.resolve(value))
                except KeyError:
                    raise UnknownItem(
                        f"Record {row} holds unknown item {value!r}",
                        details={"transaction": row, "item": repr(value)}
                    ) from None
            transactions.append(basket)
        return cls(transactions, universe)

    def count_containing(self, indices: Sequence[int]) -> int:
        """Count transactions holding every item at the given positions."""
        if len(indices) == 0:
            return len(self.transactions)
        mask = self.matrix[:, list(indices)].all(axis=1)
        return int(mask.sum())

    def count_itemset(self, items: Iterable[Hashable]) -> int:
        """Count transactions that are supersets of the given items."""
        return self.count_containing([self.universe.index_of(i) for i in items])

    def item_frequencies(self) -> np.ndarray:
        """Fraction of transactions holding each item, in universe order."""
        return self.matrix.mean(axis=0)

    def __len__(self) -> int:
        return len(self.transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.transactions)

    def __getitem__(self, index: int) -> Transaction:
        return self.transactions[index]

    def __repr__(self) -> str:
        return f"TransactionDataset(transactions={len(self)}, items={self.universe.size})"
