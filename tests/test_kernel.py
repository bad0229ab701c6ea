"""
Tests for the Set Kernel
"""

import sys

import pytest

import set_algebra
from set_algebra import SetKernel, symmetric_difference
from set_algebra.kernel import main


class TestSetKernel:
    def test_binary_morphisms(self):
        kernel = SetKernel()
        a, b = {1, 2, 3}, {3, 4, 5}

        assert kernel.union(a, b) == {1, 2, 3, 4, 5}
        assert kernel.intersection(a, b) == {3}
        assert kernel.difference(a, b) == {1, 2}
        assert kernel.symmetric_difference(a, b) == {1, 2, 4, 5}
        assert kernel.cardinality(a) == 3

    def test_has_no_threshold_measures(self):
        kernel = SetKernel()
        for name in ("inclusion", "exclusion", "contained", "overlap_symmetric", "overlap_matrix"):
            assert not hasattr(kernel, name)

    def test_package_exports_no_operation_records(self):
        assert not hasattr(set_algebra, "Operation")
        assert not hasattr(set_algebra, "record_operation")

    def test_package_does_not_load_numpy(self):
        # numpy may be imported by other tests in the session
        if "numpy" in sys.modules:
            pytest.skip("numpy already imported")
        import importlib
        saved = dict(set_algebra.kernel.__dict__)
        try:
            importlib.reload(set_algebra.kernel)
            assert "numpy" not in sys.modules
        finally:
            set_algebra.kernel.__dict__.update(saved)


class TestFolds:
    def test_empty_folds(self):
        kernel = SetKernel()
        assert kernel.fold_union([]) is None
        assert kernel.fold_intersection([]) is None
        assert kernel.fold_symmetric_difference([]) is None

    def test_single_set_fold_is_copy(self):
        kernel = SetKernel()
        s = {1, 2}
        for fold in (kernel.fold_union, kernel.fold_intersection, kernel.fold_symmetric_difference):
            result = fold([s])
            assert result == s
            assert result is not s

    def test_triple_overlap(self):
        kernel = SetKernel()
        sets = [{1, 2, 3, 10}, {2, 3, 4, 11}, {3, 4, 1, 12}]

        assert kernel.fold_union(sets) == {1, 2, 3, 4, 10, 11, 12}
        assert kernel.fold_intersection(sets) == {3}
        assert kernel.fold_symmetric_difference(sets) == {3, 10, 11, 12}

    def test_membership_counts(self):
        kernel = SetKernel()
        sets = [{1, 2, 3, 10}, {2, 3, 4, 11}, {3, 4, 1, 12}]
        counts = kernel.membership_counts(sets)

        assert counts[3] == 3
        assert counts[1] == 2
        assert counts[10] == 1
        odd = {item for item, n in counts.items() if n % 2 == 1}
        assert odd == symmetric_difference(*sets)


class TestSimilarity:
    def test_similarity(self):
        kernel = SetKernel()
        assert kernel.similarity({1, 2, 3}, {3, 4, 5}) == pytest.approx(0.2)
        assert kernel.similarity({1, 2}, {1, 2}) == 1.0
        assert kernel.similarity(set(), set()) == 1.0
        assert kernel.similarity({1}, {2}) == 0.0

    def test_similarity_symmetric(self):
        kernel = SetKernel()
        a, b = {1, 2, 3, 4}, {3, 4, 5}
        assert kernel.similarity(a, b) == kernel.similarity(b, a)


def test_main_runs(capsys):
    kernel = main()
    out = capsys.readouterr().out

    assert isinstance(kernel, SetKernel)
    assert "SET KERNEL" in out
    assert "Single-set union is a new object: True" in out
