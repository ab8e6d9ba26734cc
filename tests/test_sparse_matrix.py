import pytest

from algolab.sparse_matrix import MAX_TERMS, MatrixTerm, SparseMatrix

DENSE = [
    [15, 0, 0, 22, 0, -15],
    [0, 11, 3, 0, 0, 0],
    [0, 0, 0, -6, 0, 0],
    [0, 0, 0, 0, 0, 0],
    [91, 0, 0, 0, 0, 0],
    [0, 0, 28, 0, 0, 0],
]


def test_from_dense_keeps_nonzero_terms_row_major():
    matrix = SparseMatrix.from_dense(DENSE)
    assert (matrix.rows, matrix.cols) == (6, 6)
    assert [(t.row, t.col) for t in matrix.terms] == sorted((t.row, t.col) for t in matrix.terms)
    for term in matrix.terms:
        assert DENSE[term.row][term.col] == term.value
    assert len(matrix.terms) == sum(1 for row in DENSE for v in row if v)


def test_transpose_matches_transposed_dense():
    transposed = SparseMatrix.from_dense(DENSE).transpose()
    expected = SparseMatrix.from_dense(list(zip(*DENSE)))
    assert transposed.terms == expected.terms


def test_transpose_swaps_dimensions():
    matrix = SparseMatrix.from_dense([[0, 1, 0], [2, 0, 3]])
    transposed = matrix.transpose()
    assert (transposed.rows, transposed.cols) == (matrix.cols, matrix.rows)
    assert transposed.terms == SparseMatrix.from_dense([[0, 2], [1, 0], [0, 3]]).terms


def test_double_transpose_round_trip():
    matrix = SparseMatrix.from_dense(DENSE)
    assert matrix.transpose().transpose().terms == matrix.terms


def test_term_and_matrix_str():
    assert str(MatrixTerm(1, 2, 5)) == "[1][2]:5"
    matrix = SparseMatrix.from_dense([[0, 7], [0, 0]])
    assert str(matrix) == "{0}:[0][1]:7\n"


def test_empty_matrix():
    matrix = SparseMatrix(3, 2)
    transposed = matrix.transpose()
    assert transposed.terms == []
    assert (transposed.rows, transposed.cols) == (2, 3)
    assert str(matrix) == ""


def test_too_many_terms_raise():
    with pytest.raises(ValueError):
        SparseMatrix.from_dense([[1] * (MAX_TERMS + 1)])


def test_ragged_rows_raise():
    with pytest.raises(ValueError):
        SparseMatrix.from_dense([[1, 2], [3]])


def test_negative_dimensions_raise():
    with pytest.raises(ValueError):
        SparseMatrix(-1, 2)