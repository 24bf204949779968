import pytest

from algokit.matrix import multiply, rank, spiral_order, staircase_search, transpose

A = [[1, 2, 3], [4, 5, 6]]
B = [[7, 8], [9, 10], [11, 12]]
C = [[1, -1], [2, 0]]


def identity(n):
    return [[int(i == j) for j in range(n)] for i in range(n)]


def test_multiply_pinned_value():
    assert multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[19, 22], [43, 50]]


def test_multiply_by_identity_returns_same_matrix():
    assert multiply(A, identity(3)) == A
    assert multiply(identity(2), A) == A


def test_multiply_shape():
    product = multiply(A, B)
    assert len(product) == len(A)
    assert all(len(row) == len(B[0]) for row in product)


def test_multiply_is_associative():
    assert multiply(multiply(A, B), C) == multiply(A, multiply(B, C))


def test_multiply_transpose_identity():
    assert transpose(multiply(A, B)) == multiply(transpose(B), transpose(A))


def test_multiply_rejects_mismatched_dimensions():
    with pytest.raises(ValueError):
        multiply(A, A)


def test_multiply_rejects_ragged_rows():
    with pytest.raises(ValueError):
        multiply([[1, 2], [3]], B)


SORTED = [[1, 4, 7, 11], [2, 5, 8, 12], [3, 6, 9, 16], [10, 13, 14, 17]]


def test_staircase_search_finds_every_element():
    assert all(staircase_search(SORTED, value) for row in SORTED for value in row)


@pytest.mark.parametrize("target", [-5, 15, 18, 100])
def test_staircase_search_missing(target):
    assert staircase_search(SORTED, target) is False


def test_staircase_search_empty():
    assert staircase_search([], 1) is False
    assert staircase_search([[]], 1) is False


def test_rank_source_example():
    assert rank([[10, 20, 10], [-20, -30, 10], [30, 50, 0]]) == 2


def test_rank_of_identity_is_size():
    for n in range(1, 6):
        assert rank(identity(n)) == n


def test_rank_of_zero_matrix():
    assert rank([[0, 0, 0], [0, 0, 0]]) == 0


def test_rank_unchanged_by_transpose():
    for matrix in (A, B, [[10, 20, 10], [-20, -30, 10], [30, 50, 0]]):
        assert rank(matrix) == rank(transpose(matrix))


def test_rank_unchanged_by_duplicate_row():
    assert rank(A + [A[0]]) == rank(A)


def test_rank_at_most_smaller_dimension():
    assert rank(B) <= min(len(B), len(B[0]))


def test_rank_does_not_modify_input():
    matrix = [[0, 2], [1, 3]]
    copy = [row[:] for row in matrix]
    rank(matrix)
    assert matrix == copy


def test_spiral_is_permutation_of_elements():
    matrix = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]]
    result = spiral_order(matrix)
    assert sorted(result) == sorted(v for row in matrix for v in row)
    assert result[:4] == matrix[0]


def test_spiral_single_row_and_column():
    assert spiral_order([[3, 1, 2]]) == [3, 1, 2]
    assert spiral_order([[3], [1], [2]]) == [3, 1, 2]


def test_spiral_does_not_modify_input():
    matrix = [[1, 2], [3, 4]]
    spiral_order(matrix)
    assert matrix == [[1, 2], [3, 4]]


def test_spiral_empty():
    assert spiral_order([]) == []


def test_transpose_twice_is_identity():
    assert transpose(transpose(A)) == A


def test_transpose_swaps_indices():
    result = transpose(A)
    assert all(result[j][i] == A[i][j] for i in range(len(A)) for j in range(len(A[0])))