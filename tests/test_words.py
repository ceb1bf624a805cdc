import pytest

from algokit.words import Trie, word_rectangles


def _rows(columns, grid, height):
    return ["".join(columns[c][i] for c in grid) for i in range(height)]


def test_smoke_single_rectangle():
    words4 = ["abcd", "efgh", "ijkl"]
    words3 = ["dhl", "cgk", "bfj", "aei"]
    result = list(word_rectangles(words3, words4, 3, 4))
    assert result == [(3, 2, 1, 0)]


def test_smoke_two_rectangles():
    words5 = ["awoke", "slums", "stage", "tepid", "total", "using", "slums"]
    words6 = ["lowest", "making", "sledge", "status", "utopia"]
    result = list(word_rectangles(words5, words6, 5, 6))
    assert len(result) == 2
    for grid in result:
        assert len(grid) == 6
        assert all(row in words6 for row in _rows(words5, grid, 5))


def test_no_rectangle_when_rows_missing():
    assert list(word_rectangles(["ab", "cd"], ["zz"], 2, 2)) == []


def test_wrong_length_column_word_rejected():
    with pytest.raises(ValueError):
        word_rectangles(["ab"], ["abc"], 3, 3)


def test_upper_case_row_word_rejected():
    with pytest.raises(ValueError):
        word_rectangles(["ab"], ["Ab"], 2, 2)


def test_trie_shares_prefixes():
    trie = Trie()
    first = trie.add("abc")
    assert trie.add("abc") == first
    second = trie.add("abd")
    assert second != first
    assert len(trie) == 5


def test_trie_rejects_non_letters():
    with pytest.raises(ValueError):
        Trie().add("a1")