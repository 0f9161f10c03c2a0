"""
Chromosome Representation for the Association Rule Genetic Algorithm.

A chromosome encodes one candidate rule X -> Y as one gene per item of the
universe. Each gene says whether its item is left out, part of the
antecedent X, or part of the consequent Y, so X and Y never overlap.
"""

from typing import Any, Dict, FrozenSet, Hashable, Iterable, List, Optional, Tuple
from dataclasses import dataclass
from enum import IntEnum
import random

from src.evorules.core.exceptions import DegenerateUniverse, RetryLimitExceeded
from src.evorules.core.items import ItemUniverse


class GeneRole(IntEnum):
    """Role of an item inside a rule."""
    NONE = 0
    ANTECEDENT = 1
    CONSEQUENT = 2


def is_valid_genes(genes: Iterable[int]) -> bool:
    """Check that genes hold at least one antecedent and one consequent."""
    has_antecedent = False
    has_consequent = False
    for gene in genes:
        if gene == GeneRole.ANTECEDENT:
            has_antecedent = True
        elif gene == GeneRole.CONSEQUENT:
            has_consequent = True
    return has_antecedent and has_consequent


def random_genes(length: int, rng: random.Random) -> Tuple[GeneRole, ...]:
    """Draw each gene uniformly from the three roles."""
    return tuple(GeneRole(rng.randrange(3)) for _ in range(length))


@dataclass(frozen=True)
class RuleChromosome:
    """
    Immutable gene vector encoding the association rule X -> Y.

    Genetic operators never edit a chromosome in place; crossover and
    mutation return new chromosomes.
    """

    genes: Tuple[GeneRole, ...]
    universe: ItemUniverse

    def __post_init__(self):
        """Normalize genes to GeneRole members and check the length."""
        genes = tuple(GeneRole(g) for g in self.genes)
        if len(genes) != self.universe.size:
            raise ValueError(
                f"Chromosome length {len(genes)} does not match universe size {self.universe.size}"
            )
        object.__setattr__(self, "genes", genes)

    @classmethod
    def random_valid(
        cls,
        universe: ItemUniverse,
        rng: random.Random,
        max_attempts: int = 1000
    ) -> "RuleChromosome":
        """
        Create a random valid chromosome by rejection sampling.

        Args:
            universe: Item universe defining the chromosome layout
            rng: Random source shared by the whole run
            max_attempts: Maximum number of draws before giving up

        Returns:
            A chromosome with at least one antecedent and one consequent gene

        Raises:
            DegenerateUniverse: If the universe has fewer than two items
            RetryLimitExceeded: If no valid draw was found within max_attempts
        """
        if universe.size < 2:
            raise DegenerateUniverse(
                "No valid rule exists over fewer than 2 items",
                details={"size": universe.size}
            )

        for _ in range(max_attempts):
            genes = random_genes(universe.size, rng)
            if is_valid_genes(genes):
                return cls(genes, universe)

        raise RetryLimitExceeded(
            f"No valid chromosome after {max_attempts} attempts",
            details={"max_attempts": max_attempts, "universe_size": universe.size}
        )

    @classmethod
    def from_itemsets(
        cls,
        universe: ItemUniverse,
        antecedent: Iterable[Hashable],
        consequent: Iterable[Hashable]
    ) -> "RuleChromosome":
        """Build the chromosome of an explicit rule antecedent -> consequent."""
        try:
            x = {universe.resolve(item) for item in antecedent}
            y = {universe.resolve(item) for item in consequent}
        except KeyError as e:
            raise ValueError(f"Unknown item: {e.args[0]!r}") from e
        overlap = x & y
        if overlap:
            raise ValueError(f"Antecedent and consequent overlap: {sorted(map(str, overlap))}")

        genes = []
        for item in universe:
            if item in x:
                genes.append(GeneRole.ANTECEDENT)
            elif item in y:
                genes.append(GeneRole.CONSEQUENT)
            else:
                genes.append(GeneRole.NONE)
        return cls(tuple(genes), universe)

    def is_valid(self) -> bool:
        """Check the rule has both an antecedent and a consequent."""
        return is_valid_genes(self.genes)

    def _items_with(self, role: GeneRole) -> FrozenSet[Hashable]:
        return frozenset(
            self.universe.item_at(i) for i, gene in enumerate(self.genes) if gene == role
        )

    def _indices_with(self, role: GeneRole) -> List[int]:
        return [i for i, gene in enumerate(self.genes) if gene == role]

    @property
    def antecedent(self) -> FrozenSet[Hashable]:
        """Items of the antecedent X."""
        return self._items_with(GeneRole.ANTECEDENT)

    @property
    def consequent(self) -> FrozenSet[Hashable]:
        """Items of the consequent Y."""
        return self._items_with(GeneRole.CONSEQUENT)

    @property
    def antecedent_indices(self) -> List[int]:
        return self._indices_with(GeneRole.ANTECEDENT)

    @property
    def consequent_indices(self) -> List[int]:
        return self._indices_with(GeneRole.CONSEQUENT)

    def crossover(
        self,
        other: "RuleChromosome",
        rng: random.Random,
        cut_point: Optional[int] = None
    ) -> Tuple["RuleChromosome", "RuleChromosome"]:
        """
        Perform single-point crossover.

        The cut point lies in [1, N-1] so both children inherit genes from
        both parents. Child A takes this chromosome's prefix and the other's
        suffix; child B the reverse.

        Args:
            other: Second parent, over the same universe
            rng: Random source used when cut_point is not given
            cut_point: Fixed cut point, mostly useful for testing

        Returns:
            The two children (not validated)
        """
        if other.universe != self.universe:
            raise ValueError("Cannot cross chromosomes over different universes")

        size = len(self.genes)
        if cut_point is None:
            cut_point = rng.randint(1, size - 1)
        elif not 1 <= cut_point <= size - 1:
            raise ValueError(f"Cut point must be in [1, {size - 1}], got {cut_point}")

        child_a = self.genes[:cut_point] + other.genes[cut_point:]
        child_b = other.genes[:cut_point] + self.genes[cut_point:]

        return RuleChromosome(child_a, self.universe), RuleChromosome(child_b, self.universe)

    def mutate(self, mutation_rate: float, rng: random.Random) -> "RuleChromosome":
        """
        Return a mutated copy of this chromosome.

        Each gene is redrawn uniformly from the three roles with probability
        mutation_rate; a redraw may yield the same role. The result is not
        validated.
        """
        genes = []
        for gene in self.genes:
            if rng.random() < mutation_rate:
                gene = GeneRole(rng.randrange(3))
            genes.append(gene)
        return RuleChromosome(tuple(genes), self.universe)

    def hamming_distance(self, other: "RuleChromosome") -> int:
        """Number of positions where the two chromosomes differ."""
        return sum(1 for a, b in zip(self.genes, other.genes) if a != b)

    def to_dict(self) -> Dict[str, Any]:
        """Convert chromosome to dictionary representation."""
        return {
            "genes": [int(g) for g in self.genes],
            "items": self.universe.names(),
            "antecedent": sorted(_display(i) for i in self.antecedent),
            "consequent": sorted(_display(i) for i in self.consequent)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], universe: ItemUniverse) -> "RuleChromosome":
        """Create chromosome from dictionary representation."""
        items = data.get("items")
        if items is not None and list(items) != universe.names():
            raise ValueError(f"Chromosome items {items} do not match universe {universe.names()}")
        return cls(tuple(data["genes"]), universe)

    def __str__(self) -> str:
        antecedent = ", ".join(_display(i) for i in self.universe if i in self.antecedent)
        consequent = ", ".join(_display(i) for i in self.universe if i in self.consequent)
        return f"{{{antecedent}}} -> {{{consequent}}}"


def _display(item: Hashable) -> str:
    return getattr(item, "name", str(item))
