import pytest

from gvlayout.adt.dag import DAG


def _chain_graph():
    g = DAG()
    handles = [g.new_node() for _ in range(5)]
    h0, h1, h2, h3, h4 = handles
    g.add_edge(h0, h1)
    g.add_edge(h1, h2)
    g.add_edge(h0, h2)
    g.add_edge(h2, h3)
    g.add_edge(h3, h4)
    return g, handles


def test_simple_construction():
    g = DAG()
    h0 = g.new_node()
    g.verify()
    h1 = g.new_node()
    h2 = g.new_node()
    h3 = g.new_node()
    h4 = g.new_node()

    assert h0 != h1
    assert h1 != h2

    g.add_edge(h0, h1)
    g.add_edge(h1, h2)
    g.add_edge(h0, h2)
    g.add_edge(h2, h3)
    g.add_edge(h3, h4)
    g.verify()

    order = g.topological_sort()
    levels = g.compute_levels(order)
    assert len(order) == len(g)
    assert len(levels) == len(g)
    assert levels == [0, 1, 2, 3, 4]


def test_topological_sort_respects_edges():
    g, _ = _chain_graph()
    order = g.topological_sort()
    position = {node: i for i, node in enumerate(order)}
    assert sorted(order) == list(g)
    for src in g:
        for dest in g.successors(src):
            assert position[src] < position[dest]


def test_rank_api():
    g = DAG()
    h0 = g.new_node()
    h1 = g.new_node()
    h2 = g.new_node()
    g.add_edge(h0, h1)
    g.add_edge(h1, h2)

    g.recompute_node_ranks()
    g.verify()

    assert g.level(h0) == 0
    assert g.level(h1) == 1
    assert g.level(h2) == 2

    assert g.remove_edge(h0, h1) is True
    assert g.remove_edge(h0, h1) is False


def test_remove_edge_updates_both_sides():
    g = DAG()
    a, b = g.new_node(), g.new_node()
    g.add_edge(a, b)
    g.remove_edge(a, b)
    assert g.successors(a) == []
    assert g.predecessors(b) == []


def test_single_pred_and_succ():
    g, (h0, h1, h2, h3, _) = _chain_graph()
    assert g.single_succ(h2) == h3
    assert g.single_pred(h3) == h2
    assert g.single_succ(h0) is None
    assert g.single_pred(h2) is None
    assert g.single_pred(h0) is None


def test_reachability():
    g, (h0, _, _, _, h4) = _chain_graph()
    assert g.is_reachable(h0, h4)
    assert not g.is_reachable(h4, h0)
    assert g.is_reachable(h4, h4)


def test_cycle_is_detected():
    g = DAG()
    a, b, c = g.new_node(), g.new_node(), g.new_node()
    g.add_edge(a, b)
    g.add_edge(b, c)
    g.add_edge(c, a)
    with pytest.raises(ValueError, match="cycle"):
        g.verify()


def test_self_edge_is_allowed():
    g = DAG()
    a = g.new_node()
    g.add_edge(a, a)
    g.verify()
    g.recompute_node_ranks()
    assert g.level(a) == 0


def test_validation_can_be_disabled():
    g = DAG(validate=False)
    a, b = g.new_node(), g.new_node()
    g.add_edge(a, b)
    g.add_edge(b, a)
    g.verify()
    assert g.is_reachable(b, a)


def test_new_nodes_start_in_level_zero():
    g = DAG()
    g.new_nodes(3)
    assert len(g) == 3
    assert g.num_levels() == 1
    assert g.row(0) == [0, 1, 2]


def test_row_out_of_range():
    g = DAG()
    g.new_node()
    with pytest.raises(IndexError):
        g.row(5)


def test_first_and_last_in_row():
    g = DAG()
    g.new_nodes(3)
    assert g.is_first_in_row(0, 0)
    assert g.is_last_in_row(2, 0)
    assert not g.is_first_in_row(1, 0)
    assert not g.is_last_in_row(0, 3)


def test_update_node_rank_level_appends_and_inserts():
    g = DAG()
    g.new_nodes(4)
    g.update_node_rank_level(0, 2, None)
    assert g.level(0) == 2
    assert g.num_levels() == 3
    g.update_node_rank_level(1, 2, 0)
    assert g.row(2) == [1, 0]
    assert g.row(0) == [2, 3]


def test_update_node_rank_level_missing_marker():
    g = DAG()
    g.new_nodes(3)
    with pytest.raises(ValueError):
        g.update_node_rank_level(0, 1, 2)
    assert g.row(0) == [0, 1, 2]


def test_level_of_unknown_node():
    g = DAG()
    g.new_node()
    with pytest.raises(IndexError):
        g.level(7)


def test_recompute_empty_graph_raises():
    with pytest.raises(ValueError):
        DAG().recompute_node_ranks()


def test_compute_levels_rejects_short_order():
    g, _ = _chain_graph()
    with pytest.raises(ValueError):
        g.compute_levels([0, 1])


def test_clear_and_iteration():
    g, _ = _chain_graph()
    assert list(g) == [0, 1, 2, 3, 4]
    g.clear()
    assert g.is_empty()
    assert g.num_levels() == 0
    assert list(g) == []


def test_add_edge_to_unknown_node():
    g = DAG()
    a = g.new_node()
    with pytest.raises(IndexError):
        g.add_edge(a, 3)