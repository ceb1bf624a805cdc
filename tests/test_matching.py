from algokit.matching import max_bipartite_matching


def _check_consistent(match, left, right):
    matched = 0
    for u, v in enumerate(match):
        if v is None:
            continue
        if u < left:
            matched += 1
            assert left <= v < left + right
        else:
            assert 0 <= v < left
        assert match[v] == u
    return matched


def test_simple():
    ls, rs = 5, 4
    edges = [(5, 2), (1, 2), (4, 3), (3, 1), (2, 2), (4, 4)]
    adjacency = [[] for _ in range(ls + rs)]
    for a, b in edges:
        adjacency[a - 1].append(ls + b - 1)

    match = max_bipartite_matching(adjacency, 0, ls)
    assert len(match) == ls + rs
    assert _check_consistent(match, ls, rs) == 3


def test_needs_augmenting_path():
    # Greedy takes 0-2, leaving 1 to steal 2 and push 0 to 3.
    adjacency = [[2, 3], [2], [], []]
    match = max_bipartite_matching(adjacency, 0, 2)
    assert match == [3, 2, 1, 0]


def test_no_edges():
    match = max_bipartite_matching([[], [], []], 0, 2)
    assert match == [None, None, None]