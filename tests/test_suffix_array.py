import pytest

from algokit.suffix_array import kasai, manber_myers, skew


def test_skew_empty():
    assert skew("") == []


def test_skew_single():
    assert skew("a") == [0]


def test_skew_aaaa():
    assert skew("aaaa") == [3, 2, 1, 0]


@pytest.mark.parametrize("length", range(100))
def test_skew_same_letter(length):
    assert skew("a" * length) == list(range(length - 1, -1, -1))


def test_skew_classic():
    s = "mississippi"
    pos = skew(s)
    assert [s[p:] for p in pos] == [
        "i",
        "ippi",
        "issippi",
        "ississippi",
        "mississippi",
        "pi",
        "ppi",
        "sippi",
        "sissippi",
        "ssippi",
        "ssissippi",
    ]


def test_skew_bytes():
    assert skew(b"banana") == [5, 3, 1, 0, 4, 2]


@pytest.mark.parametrize("s", ["abracadabra", "yabbadabbado", "abcabcabcab", "zyxwvutsr"])
def test_skew_orders_suffixes(s):
    pos = skew(s)
    assert sorted(pos) == list(range(len(s)))
    suffixes = [s[p:] for p in pos]
    assert all(a < b for a, b in zip(suffixes, suffixes[1:]))


def test_manber_myers_empty():
    assert manber_myers("") == []


def test_manber_myers_with_sentinel():
    assert manber_myers("aaaa\0") == [4, 3, 2, 1, 0]


def test_manber_myers_cyclic():
    assert manber_myers("abbbbb") == [0, 5, 4, 3, 2, 1]


def test_manber_myers_classic():
    s = "mississippi"
    pos = manber_myers(s + "\0")
    assert [s[p:] for p in pos] == [
        "",
        "i",
        "ippi",
        "issippi",
        "ississippi",
        "mississippi",
        "pi",
        "ppi",
        "sippi",
        "sissippi",
        "ssippi",
        "ssissippi",
    ]


def test_manber_myers_and_kasai():
    s = "ababc\0"
    pos = manber_myers(s)
    assert [s[p:-1] if p < len(s) - 1 else "" for p in pos] == [
        "",
        "ababc",
        "abc",
        "babc",
        "bc",
        "c",
    ]
    rank, lcp = kasai(s, pos)
    assert lcp == [0, 2, 0, 1, 0]
    assert all(rank[p] == i for i, p in enumerate(pos))


def test_kasai_banana():
    rank, lcp = kasai("banana", skew("banana"))
    assert lcp == [1, 3, 0, 0, 2]
    assert rank == [3, 2, 5, 1, 4, 0]


def test_kasai_length_mismatch():
    with pytest.raises(ValueError):
        kasai("abc", [0, 1])