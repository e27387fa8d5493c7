import pytest

from judgekit.unionfind import (
    CableNetwork,
    UnionFind,
    answer_queries,
    count_suspects,
    run_network,
)


def test_fresh_union_find_has_singletons():
    sets = UnionFind(5)
    assert sets.num_disjoint_sets() == 5
    assert all(sets.size_of_set(i) == 1 for i in range(5))
    assert all(sets.find_set(i) == i for i in range(5))


def test_union_merges_and_counts():
    sets = UnionFind(6)
    sets.union_set(0, 1)
    sets.union_set(2, 3)
    sets.union_set(1, 3)
    assert sets.num_disjoint_sets() == 3
    assert sets.size_of_set(0) == 4
    assert sets.is_same_set(0, 2)
    assert not sets.is_same_set(0, 5)


def test_union_of_same_set_is_noop():
    sets = UnionFind(3)
    sets.union_set(0, 1)
    sets.union_set(1, 0)
    assert sets.num_disjoint_sets() == 2
    assert sets.size_of_set(1) == 2


def test_sizes_sum_over_representatives():
    sets = UnionFind(10)
    for a, b in [(0, 9), (1, 8), (9, 8), (4, 5)]:
        sets.union_set(a, b)
    roots = {sets.find_set(i) for i in range(10)}
    assert len(roots) == sets.num_disjoint_sets()
    assert sum(sets.size_of_set(r) for r in roots) == 10


def test_find_set_index_error():
    with pytest.raises(IndexError):
        UnionFind(2).find_set(5)


def test_answer_queries():
    queries = [("?", 0, 1), ("=", 0, 1), ("?", 0, 1), ("?", 1, 2), ("=", 1, 2), ("?", 0, 2)]
    assert answer_queries(3, queries) == [False, True, False, True]


def test_count_suspects_sample():
    groups = [[1, 2], [10, 13, 11, 12, 14], [0, 1], [99, 2]]
    assert count_suspects(100, groups) == 4


def test_count_suspects_without_groups():
    assert count_suspects(5, []) == 1


def test_cable_network_unlinked_is_zero():
    network = CableNetwork(3)
    assert network.length_to_center(2) == 0


def test_cable_network_lengths_accumulate_along_path():
    network = CableNetwork(4)
    network.connect(0, 1)
    network.connect(1, 3)
    assert network.length_to_center(0) == network.length_to_center(1) + 1


def test_run_network_sample():
    commands = [
        ("E", 3),
        ("I", 3, 1),
        ("E", 3),
        ("I", 1, 2),
        ("E", 3),
        ("I", 2, 4),
        ("E", 3),
        ("O",),
        ("E", 1),
    ]
    assert run_network(4, commands) == [0, 2, 3, 5]