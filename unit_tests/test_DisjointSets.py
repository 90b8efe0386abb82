import pytest
from pygraphforest.DisjointSets import ForestDisjointSets
from pygraphforest.GraphElements import GraphNode


def make_forest(elements):
    ds = ForestDisjointSets()
    for e in elements:
        ds.make_set(e)
    return ds


def parent_item(ds, e):
    return ds.items[ds.parent[ds.handles[e]]]


def test_new_forest_is_empty():
    ds = ForestDisjointSets()
    assert ds.get_current_representatives() == set()
    assert len(ds) == 0
    assert list(ds) == []


def test_is_present():
    ds = ForestDisjointSets()
    assert not ds.is_present(1)
    ds.make_set(1)
    assert ds.is_present(1)
    ds.make_set(2)
    assert ds.is_present(2)
    assert not ds.is_present(3)
    with pytest.raises(TypeError):
        ds.is_present(None)


def test_is_present_after_union():
    ds = make_forest([1, 2])
    ds.union(1, 2)
    assert ds.is_present(1)
    assert ds.is_present(2)
    assert not ds.is_present(3)
    ds.make_set(3)
    assert all(ds.is_present(e) for e in (1, 2, 3))


def test_make_set_errors():
    ds = ForestDisjointSets()
    with pytest.raises(TypeError):
        ds.make_set(None)
    ds.make_set(1)
    with pytest.raises(ValueError):
        ds.make_set(1)


def test_make_set_with_graph_nodes():
    ds = make_forest([GraphNode("a"), GraphNode("b")])
    assert ds.is_present(GraphNode("a"))
    ds.union(GraphNode("a"), GraphNode("b"))
    assert ds.find_set(GraphNode("a")) == GraphNode("b")


def test_find_set_singleton_and_absent():
    ds = make_forest([1])
    assert ds.find_set(1) == 1
    assert ds.find_set(42) is None
    with pytest.raises(TypeError):
        ds.find_set(None)


def test_union_tie_keeps_second_root():
    ds = make_forest([1, 2])
    ds.union(1, 2)
    assert ds.find_set(1) == 2
    assert ds.find_set(2) == 2
    assert ds.get_current_representatives() == {2}


def test_union_errors():
    ds = make_forest([1])
    with pytest.raises(TypeError):
        ds.union(1, None)
    with pytest.raises(TypeError):
        ds.union(None, 1)
    with pytest.raises(ValueError):
        ds.union(1, 2)
    with pytest.raises(ValueError):
        ds.union(3, 1)


def test_union_same_set_is_noop():
    ds = make_forest([1, 2])
    ds.union(1, 2)
    rank_before = list(ds.rank)
    ds.union(2, 1)
    ds.union(1, 1)
    assert ds.rank == rank_before
    assert ds.get_current_representatives() == {2}


def test_union_by_rank():
    ds = make_forest([1, 2, 3])
    ds.union(1, 2)
    assert ds.rank[ds.handles[2]] == 1
    ds.union(2, 3)
    # higher rank root survives regardless of argument order
    assert ds.find_set(3) == 2
    assert ds.rank[ds.handles[2]] == 1
    assert ds.rank[ds.handles[3]] == 0


def test_lower_rank_first_argument_goes_under():
    ds = make_forest([1, 2, 3])
    ds.union(1, 2)
    ds.union(3, 1)
    assert ds.find_set(3) == 2


def test_path_compression():
    ds = make_forest([1, 2, 3])
    ds.union(1, 2)
    ds.union(2, 3)
    assert ds.find_set(1) == 2
    assert ds.find_set(3) == 2
    assert parent_item(ds, 1) == 2
    assert parent_item(ds, 3) == 2


def test_path_compression_flattens_long_path():
    ds = make_forest(range(8))
    # build a tree of height 3 rooted at 7
    for a, b in [(0, 1), (2, 3), (4, 5), (6, 7), (1, 3), (5, 7), (3, 7)]:
        ds.union(a, b)
    assert parent_item(ds, 0) != 7
    assert ds.find_set(0) == 7
    for e in (0, 1, 3):
        assert parent_item(ds, e) == 7


def test_find_set_never_changes_roots():
    ds = make_forest(range(6))
    ds.union(0, 1)
    ds.union(2, 3)
    ds.union(1, 3)
    before = ds.get_current_representatives()
    for e in range(6):
        ds.find_set(e)
    assert ds.get_current_representatives() == before


def test_find_set_is_idempotent():
    ds = make_forest(range(10))
    for a, b in [(0, 1), (2, 3), (1, 3), (5, 6)]:
        ds.union(a, b)
    first = [ds.find_set(e) for e in range(10)]
    second = [ds.find_set(e) for e in range(10)]
    assert first == second


def test_stress_union_find():
    n = 10000
    ds = make_forest(range(1, n + 1))
    assert len(ds.get_current_representatives()) == n
    for i in range(2, n + 1):
        ds.union(1, i)
    root = ds.find_set(1)
    assert all(ds.find_set(i) == root for i in range(1, n + 1))
    assert len(ds.get_current_representatives()) == 1


def test_chain_union_leaves_one_representative():
    ds = make_forest(range(50))
    for i in range(49):
        ds.union(i, i + 1)
    assert len(ds.get_current_representatives()) == 1
    assert ds.number_of_sets() == 1


def test_current_elements_of_set_containing():
    ds = make_forest("abcde")
    ds.union("a", "b")
    ds.union("c", "b")
    ds.union("d", "e")
    assert ds.get_current_elements_of_set_containing("a") == {"a", "b", "c"}
    assert ds.get_current_elements_of_set_containing("e") == {"d", "e"}
    with pytest.raises(ValueError):
        ds.get_current_elements_of_set_containing("z")
    with pytest.raises(TypeError):
        ds.get_current_elements_of_set_containing(None)


def test_is_connected():
    ds = make_forest([1, 2, 3])
    ds.union(1, 2)
    assert ds.is_connected(1, 2)
    assert not ds.is_connected(1, 3)
    with pytest.raises(ValueError):
        ds.is_connected(1, 9)


def test_iteration_and_len():
    ds = make_forest(range(4))
    ds.union(0, 1)
    ds.union(2, 3)
    sets = list(ds)
    assert sorted(len(s) for s in sets) == [2, 2]
    assert set().union(*sets) == {0, 1, 2, 3}
    assert len(ds) == 4
    assert 3 in ds
    assert None not in ds


def test_clear():
    ds = make_forest([1, 2])
    ds.union(1, 2)
    ds.clear()
    assert ds.get_current_representatives() == set()
    assert not ds.is_present(1)
    assert ds.handles == {}
    ds.make_set(1)
    assert ds.find_set(1) == 1
