"""
SetKernel: Stateless Facade over the Set Algebra

The kernel bundles the pure operations of `set_algebra.operations` behind a
single object and adds folds over lists of sets.

================================================================================
PRIMITIVES PROVIDED
================================================================================

LAYER 1: Set Operations (Algebra Primitives)
- union, intersection, difference, symmetric_difference: Set × Set → Set
- cardinality: Set → int

LAYER 2: Folds (Collection Primitives)
- fold_union, fold_intersection, fold_symmetric_difference: [Set] → Set | None
- membership_counts: [Set] → {element: count}

LAYER 3: Similarity
- similarity: Set × Set → float (Jaccard)

================================================================================
DESIGN PRINCIPLES
================================================================================

- Stateless: No storage, no history - pure transformations
- Pure: Same input → same output
- Non-aliasing: Set-valued operations always return new sets
"""

from __future__ import annotations
from typing import AbstractSet, Dict, Optional, Set, Sequence, TypeVar

from .operations import (
    union,
    intersection,
    difference,
    symmetric_difference,
)

T = TypeVar("T")


# =============================================================================
# SECTION 1: Kernel - Stateless Transformation Engine
# =============================================================================

class SetKernel:
    """
    Stateless set transformation engine.

    Provides pure morphisms (Set operations):
    - union: Set × Set → Set
    - intersection: Set × Set → Set
    - difference: Set × Set → Set
    - symmetric_difference: Set × Set → Set

    No storage, no state, no history. Pure functions only.
    """

    # -------------------------------------------------------------------------
    # Core Morphisms (Pure Functions)
    # -------------------------------------------------------------------------

    def union(self, a: AbstractSet[T], b: AbstractSet[T]) -> Set[T]:
        """
        Union of two sets.

        Morphism: Set × Set → Set
        """
        return union(a, b)

    def intersection(self, a: AbstractSet[T], b: AbstractSet[T]) -> Set[T]:
        """
        Intersection of two sets.

        Morphism: Set × Set → Set
        """
        return intersection(a, b)

    def difference(self, a: AbstractSet[T], b: AbstractSet[T]) -> Set[T]:
        """
        Difference of two sets (a - b).

        Morphism: Set × Set → Set
        """
        return difference(a, b)

    def symmetric_difference(self, a: AbstractSet[T], b: AbstractSet[T]) -> Set[T]:
        """
        Symmetric difference of two sets.

        Morphism: Set × Set → Set
        """
        return symmetric_difference(a, b)

    def cardinality(self, s: AbstractSet[T]) -> int:
        """Number of elements in s."""
        return len(s)

    # -------------------------------------------------------------------------
    # Folds (Collection Layer)
    # -------------------------------------------------------------------------

    def fold_union(self, sets: Sequence[AbstractSet[T]]) -> Optional[Set[T]]:
        """
        Fold union over list of sets.

        Morphism: [Set] → Set (or None if empty)
        """
        if not sets:
            return None
        return union(*sets)

    def fold_intersection(self, sets: Sequence[AbstractSet[T]]) -> Optional[Set[T]]:
        """
        Fold intersection over list of sets.

        The smallest set is used as the candidate pool; the result does
        not depend on which set that is.

        Morphism: [Set] → Set (or None if empty)
        """
        if not sets:
            return None
        ordered = sorted(sets, key=len)
        return intersection(*ordered)

    def fold_symmetric_difference(self, sets: Sequence[AbstractSet[T]]) -> Optional[Set[T]]:
        """
        Fold symmetric difference over list of sets (parity semantics).

        Morphism: [Set] → Set (or None if empty)
        """
        if not sets:
            return None
        return symmetric_difference(*sets)

    def membership_counts(self, sets: Sequence[AbstractSet[T]]) -> Dict[T, int]:
        """
        Count, for each element of the union, how many inputs contain it.

        Elements with an odd count are exactly the symmetric difference;
        elements counted len(sets) times are the intersection.
        """
        counts: Dict[T, int] = {}
        for s in sets:
            for item in s:
                counts[item] = counts.get(item, 0) + 1
        return counts

    # -------------------------------------------------------------------------
    # Similarity
    # -------------------------------------------------------------------------

    def similarity(self, a: AbstractSet[T], b: AbstractSet[T]) -> float:
        """
        Compute Jaccard similarity between two sets.

        sim(A, B) = |A ∩ B| / |A ∪ B|

        Two empty sets are identical, so their similarity is 1.0.
        """
        card_union = len(union(a, b))
        if card_union == 0:
            return 1.0
        return len(intersection(a, b)) / card_union


# =============================================================================
# SECTION 2: Example Usage
# =============================================================================

def main():
    """Example kernel usage."""
    print("="*70)
    print("SET KERNEL: Stateless Set Algebra")
    print("="*70)

    kernel = SetKernel()

    # =========================================================================
    # Level 1: Pure Morphisms (Basic Set Operations)
    # =========================================================================
    print("\n🔹 Level 1: Pure Morphisms (Basic Set Operations)")
    print("-" * 70)

    a = {1, 2, 3}
    b = {3, 4, 5}

    print(f"A: {sorted(a)}")
    print(f"B: {sorted(b)}")
    print(f"A ∪ B: {sorted(kernel.union(a, b))}")
    print(f"A ∩ B: {sorted(kernel.intersection(a, b))}")
    print(f"A - B: {sorted(kernel.difference(a, b))}")
    print(f"A △ B: {sorted(kernel.symmetric_difference(a, b))}")

    # =========================================================================
    # Level 2: Folds (Parity Semantics)
    # =========================================================================
    print("\n🔹 Level 2: Folds")
    print("-" * 70)

    sets = [{1, 2, 3, 10}, {2, 3, 4, 11}, {3, 4, 1, 12}]
    for i, s in enumerate(sets):
        print(f"  S{i}: {sorted(s)}")

    print(f"⋂ S: {sorted(kernel.fold_intersection(sets))}")
    print(f"△ S: {sorted(kernel.fold_symmetric_difference(sets))}")
    counts = kernel.membership_counts(sets)
    print(f"Membership counts: {dict(sorted(counts.items()))}")

    # =========================================================================
    # Level 3: Similarity
    # =========================================================================
    print("\n🔹 Level 3: Similarity")
    print("-" * 70)

    print(f"Jaccard(A, B): {kernel.similarity(a, b):.2%}")

    # =========================================================================
    # Immutability Verification
    # =========================================================================
    print("\n🔹 Immutability Verification")
    print("-" * 70)

    copy = kernel.fold_union([a])
    print(f"Single-set union equal: {copy == a}")
    print(f"Single-set union is a new object: {copy is not a}")

    print("\n" + "="*70)

    return kernel


if __name__ == "__main__":
    main()
