"""Sparse matrices stored as row-major lists of non-zero terms."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import accumulate

MAX_TERMS = 20


@dataclass(frozen=True)
class MatrixTerm:
    """One non-zero entry of a sparse matrix."""

    row: int
    col: int
    value: int

    def __str__(self) -> str:
        return f"[{self.row}][{self.col}]:{self.value}"


class SparseMatrix:
    """Matrix of ``rows`` x ``cols`` keeping at most ``MAX_TERMS`` non-zero terms."""

    def __init__(self, rows: int = 0, cols: int = 0) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("dimensions must be non-negative")
        self.rows = rows
        self.cols = cols
        self.terms: list[MatrixTerm] = []

    @classmethod
    def from_dense(cls, rows: Iterable[Sequence[int]]) -> SparseMatrix:
        """Build a sparse matrix from rows of a dense matrix."""
        dense = [list(row) for row in rows]
        width = len(dense[0]) if dense else 0
        if any(len(row) != width for row in dense):
            raise ValueError("all rows must have the same length")
        matrix = cls(len(dense), width)
        terms = [
            MatrixTerm(i, j, value)
            for i, row in enumerate(dense)
            for j, value in enumerate(row)
            if value
        ]
        if len(terms) > MAX_TERMS:
            raise ValueError(f"at most {MAX_TERMS} non-zero terms are supported")
        matrix.terms = terms
        return matrix

    def transpose(self) -> SparseMatrix:
        """Return the transpose, its terms again in row-major order."""
        result = SparseMatrix(self.cols, self.rows)
        counts = [0] * self.cols
        for term in self.terms:
            counts[term.col] += 1
        starts = [0, *accumulate(counts)][:-1] if counts else []
        placed: list = [None] * len(self.terms)
        for term in self.terms:
            placed[starts[term.col]] = MatrixTerm(term.col, term.row, term.value)
            starts[term.col] += 1
        result.terms = placed
        return result

    def __str__(self) -> str:
        return "".join(f"{{{index}}}:{term}\n" for index, term in enumerate(self.terms))