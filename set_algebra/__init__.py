"""
Set Algebra - Pure Set Operations and Relations

Stateless functions for union, intersection, difference, symmetric
difference, disjointness and subset/equality predicates over Python sets.
Every set-valued operation returns a new set; inputs are never mutated.
"""

__version__ = "0.1.0"

from .operations import (
    union,
    union_pair,
    intersection,
    disjoint,
    subset,
    proper_subset,
    set_equal,
    difference,
    symmetric_difference,
)
from .kernel import SetKernel

# camelCase spellings
unionPair = union_pair
properSubset = proper_subset
setEqual = set_equal
symmetricDifference = symmetric_difference

__all__ = [
    "union",
    "union_pair",
    "intersection",
    "disjoint",
    "subset",
    "proper_subset",
    "set_equal",
    "difference",
    "symmetric_difference",
    "unionPair",
    "properSubset",
    "setEqual",
    "symmetricDifference",
    "SetKernel",
]
