# tests/test_union_find.py
import pytest

from percolation_threshold.exceptions import InvalidArgumentError, OutOfRangeError
from percolation_threshold.union_find import WeightedQuickUnionUF


def test_new_structure_has_singleton_components():
    uf = WeightedQuickUnionUF(5)
    assert len(uf) == 5
    assert uf.count == 5
    for i in range(5):
        assert uf.find(i) == i


def test_union_merges_components_and_counts_once():
    uf = WeightedQuickUnionUF(6)
    uf.union(0, 1)
    uf.union(1, 2)
    uf.union(2, 0)  # already connected
    assert uf.count == 4
    assert uf.connected(0, 2)
    assert not uf.connected(0, 3)


def test_union_is_transitive_across_chains():
    uf = WeightedQuickUnionUF(10)
    for i in range(0, 8, 2):
        uf.union(i, i + 2)
    assert uf.connected(0, 8)
    assert not uf.connected(0, 9)
    assert uf.count == 6


def test_smaller_tree_is_attached_under_larger():
    uf = WeightedQuickUnionUF(4)
    uf.union(0, 1)
    uf.union(0, 2)
    root = uf.find(0)
    uf.union(3, 0)
    assert uf.find(3) == root
    assert uf.size[root] == 4


def test_find_compresses_path():
    uf = WeightedQuickUnionUF(8)
    uf.union(0, 1)
    uf.union(2, 3)
    uf.union(0, 2)
    uf.union(4, 5)
    uf.union(6, 7)
    uf.union(4, 6)
    uf.union(0, 4)
    root = uf.find(7)
    assert uf.parent[7] == root


@pytest.mark.parametrize("n", [0, -3, 2.5, True])
def test_rejects_invalid_size(n):
    with pytest.raises(InvalidArgumentError):
        WeightedQuickUnionUF(n)


@pytest.mark.parametrize("p", [-1, 3])
def test_rejects_out_of_range_elements(p):
    uf = WeightedQuickUnionUF(3)
    with pytest.raises(OutOfRangeError):
        uf.find(p)
    with pytest.raises(OutOfRangeError):
        uf.union(0, p)
    assert uf.count == 3
