"""
Set Algebra Operations

Pure, stateless functions for set algebra and set relations over Python's
native set abstraction.

Design principles:
- Inputs are never mutated
- Every set-valued operation returns a NEW set, even for a single input
- No caching, no global state, no references kept after returning

Argument convention for the relational predicates:
    subset(a, b)         # is b contained in a?  (b ⊆ a)
    proper_subset(a, b)  # b ⊂ a and |a| > |b|
    set_equal(a, b)      # |a| == |b| and b ⊆ a

Note that `a` is always the CONTAINING set. set_equal and proper_subset are
built on subset and rely on this order.
"""

from __future__ import annotations
from typing import AbstractSet, Set, TypeVar, Union

T = TypeVar("T")
T1 = TypeVar("T1")
T2 = TypeVar("T2")


# =============================================================================
# UNION FAMILY
# =============================================================================

def union(*sets: AbstractSet[T]) -> Set[T]:
    """
    Union of a collection of sets.

    Morphism: [Set] → Set

    Args:
        *sets: Zero or more sets to join

    Returns:
        New set with every element appearing in at least one input.
        Empty for no inputs, a shallow copy for a single input.
    """
    if not sets:
        return set()
    if len(sets) == 1:
        return set(sets[0])

    result: Set[T] = set()
    for s in sets:
        for item in s:
            result.add(item)
    return result


def union_pair(a: AbstractSet[T1], b: AbstractSet[T2]) -> Set[Union[T1, T2]]:
    """
    Union of two sets with possibly different element types.

    Same membership as union(a, b), typed over both element domains.
    """
    result: Set[Union[T1, T2]] = set()
    for item in a:
        result.add(item)
    for item in b:
        result.add(item)
    return result


# =============================================================================
# INTERSECTION FAMILY
# =============================================================================

def intersection(*sets: AbstractSet[T]) -> Set[T]:
    """
    Intersection of a collection of sets.

    The first set is the candidate pool: each of its elements is probed
    against every other set. Argument order only changes the cost
    (|first| × number of other sets), never the result.

    Args:
        *sets: Zero or more sets

    Returns:
        New set of elements present in every input.
        Empty for no inputs, a shallow copy for a single input.
    """
    if not sets:
        return set()

    first, *rest = sets
    if not rest:
        return set(first)

    result: Set[T] = set()
    for item in first:
        if all(item in other for other in rest):
            result.add(item)
    return result


def disjoint(a: AbstractSet[T], b: AbstractSet[T]) -> bool:
    """True if no element of b is in a. Stops at the first shared element."""
    for item in b:
        if item in a:
            return False
    return True


# =============================================================================
# DIFFERENCE FAMILY
# =============================================================================

def difference(a: AbstractSet[T], b: AbstractSet[T]) -> Set[T]:
    """
    Set difference a - b.

    Elements of b that are not in a are ignored.
    """
    result: Set[T] = set()
    for item in a:
        if item not in b:
            result.add(item)
    return result


def symmetric_difference(*sets: AbstractSet[T]) -> Set[T]:
    """
    Symmetric difference of a collection of sets (parity XOR).

    Every element of every input toggles its presence in the result,
    so an element survives iff it appears in an odd number of inputs.
    For three or more sets this is NOT a chain of pairwise operations
    with other semantics:

        symmetric_difference({1, 2, 3}, {2, 3, 4}, {3, 4, 1})  # {3}

    Args:
        *sets: Zero or more sets

    Returns:
        New set. Empty for no inputs, a shallow copy for a single input.
    """
    result: Set[T] = set()
    for s in sets:
        for item in s:
            if item in result:
                result.remove(item)
            else:
                result.add(item)
    return result


# =============================================================================
# RELATIONAL PREDICATES
# =============================================================================

def subset(a: AbstractSet[T], b: AbstractSet[T]) -> bool:
    """
    Is b a subset of a (b ⊆ a)?

    Args:
        a: Containing set
        b: Set tested for containment

    Returns:
        True if every element of b is in a. Two empty sets are
        subsets of each other. Stops at the first missing element.
    """
    for item in b:
        if item not in a:
            return False
    return True


def proper_subset(a: AbstractSet[T], b: AbstractSet[T]) -> bool:
    """
    Is b a proper subset of a (b ⊂ a)?

    Size is checked first: sets of equal size (two empty sets included)
    are never proper subsets of one another.
    """
    if len(a) <= len(b):
        return False
    return subset(a, b)


def set_equal(a: AbstractSet[T], b: AbstractSet[T]) -> bool:
    """
    Do a and b contain exactly the same elements?

    Equal size plus b ⊆ a implies a ⊆ b for finite sets.
    """
    if len(a) != len(b):
        return False
    return subset(a, b)
