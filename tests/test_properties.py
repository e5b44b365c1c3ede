import random

import networkx as nx
from hypothesis import given, settings, strategies as st

from cyclecheck import detect_cycle, detect_cycle_indexed
from cyclecheck.registry import DETECTORS

# small vertex range so cycles and repeated pairs show up often
edge_lists = st.lists(st.tuples(st.integers(-4, 8), st.integers(-4, 8)), max_size=14)


def reference_has_cycle(edges):
    g = nx.MultiGraph()
    g.add_edges_from(edges)
    return g.number_of_edges() > 0 and not nx.is_forest(g)


@settings(max_examples=300)
@given(edge_lists)
def test_agrees_with_networkx(edges):
    expected = reference_has_cycle(edges)
    for name in DETECTORS.names():
        assert DETECTORS.get(name)(edges) is expected, name


@given(edge_lists, st.randoms(use_true_random=False))
def test_order_independent(edges, rnd):
    expected = detect_cycle(edges)
    shuffled = list(edges)
    rnd.shuffle(shuffled)
    flipped = [(v, u) for u, v in shuffled]
    assert detect_cycle(shuffled) is expected
    assert detect_cycle(flipped) is expected
    assert detect_cycle_indexed(shuffled) is expected


@st.composite
def random_trees(draw):
    n = draw(st.integers(1, 12))
    # attach each new vertex to an earlier one
    return [(v, draw(st.integers(0, v - 1))) for v in range(1, n)]


def relabel(edges, offset):
    return [(u + offset, v + offset) for u, v in edges]


@given(st.lists(random_trees(), max_size=5))
def test_disjoint_union_of_trees_is_acyclic(trees):
    union = [e for i, t in enumerate(trees) for e in relabel(t, 100 * i)]
    assert detect_cycle(union) is False
    assert detect_cycle_indexed(union) is False


@given(st.lists(random_trees(), min_size=1, max_size=5), st.data())
def test_one_cyclic_component_makes_union_cyclic(trees, data):
    idx = data.draw(st.integers(0, len(trees) - 1))
    tree = trees[idx]
    n = len(tree) + 1
    present = {frozenset(e) for e in tree}
    candidates = [(u, v) for u in range(n) for v in range(u, n) if frozenset((u, v)) not in present]
    # self-loops and parallel edges count too
    extra = data.draw(st.sampled_from(candidates + tree))
    components = [t + [extra] if i == idx else t for i, t in enumerate(trees)]
    union = [e for i, t in enumerate(components) for e in relabel(t, 100 * i)]
    assert detect_cycle(union) is True
    assert detect_cycle_indexed(union) is True


def test_large_random_tree_then_one_more_edge():
    rng = random.Random(7)
    labels = list(range(-150, 150))
    rng.shuffle(labels)
    edges = [(labels[v], labels[rng.randrange(v)]) for v in range(1, len(labels))]
    rng.shuffle(edges)
    assert detect_cycle(edges) is False
    assert detect_cycle_indexed(edges) is False

    u, v = rng.sample(labels, 2)
    edges.append((u, v))
    assert detect_cycle(edges) is True
    assert detect_cycle_indexed(edges) is True
