"""Module describing a symmetric matrix with one value per pair of samples.

Only the values above the diagonal are stored, in the same condensed
row-major order as :func:`scipy.spatial.distance.squareform`, along with a
single value shared by the whole diagonal. Rows and columns may carry labels,
typically the names of the sequences being compared.
"""

import math
from collections.abc import Callable, Hashable, Sequence
from typing import Any

import numpy as np
import pandas as pd

from coaltime.mixins import PairwiseMatrixError


class PairwiseMatrix:
    """Symmetric pairwise matrix stored in condensed form.

    Args:
        values: Values for every unordered pair (i, j), i < j, in condensed
            order. Must have length n * (n - 1) / 2 for some integer n.
        diagonal: Value returned for every (i, i) entry.
        labels: Optional unique labels for the n rows/columns.

    Raises:
        PairwiseMatrixError: If the number of values does not describe a
            square matrix, or the labels do not match it.
    """

    def __init__(
        self,
        values: Sequence[Any],
        diagonal: Any = None,
        labels: Sequence[Hashable] | None = None,
    ):
        values = list(values)

        if labels is not None:
            labels = list(labels)
            n = len(labels)
            if n * (n - 1) // 2 != len(values):
                raise PairwiseMatrixError(
                    f"Expected {n * (n - 1) // 2} values for {n} labels, got {len(values)}."
                )
            if len(set(labels)) != n:
                raise PairwiseMatrixError("Labels must be unique.")
        else:
            n = self.__infer_size(len(values))

        self._values = values
        self._diagonal = diagonal
        self._labels = labels
        self._n = n

    @staticmethod
    def __infer_size(n_values: int) -> int:
        """Returns n such that n * (n - 1) / 2 == n_values."""
        n = (1 + math.isqrt(1 + 8 * n_values)) // 2
        if n * (n - 1) // 2 != n_values:
            raise PairwiseMatrixError(
                f"{n_values} values do not fill the upper triangle of a square matrix."
            )
        return n

    @classmethod
    def from_square(
        cls,
        matrix: pd.DataFrame | np.ndarray | Sequence[Sequence[Any]],
        diagonal: Any = None,
    ) -> "PairwiseMatrix":
        """Builds a PairwiseMatrix from the upper triangle of a square matrix.

        Entries below the diagonal and on the diagonal are ignored. If a
        DataFrame is given, its index is used as labels.

        Args:
            matrix: Square DataFrame, array or list of rows.
            diagonal: Value shared by the diagonal of the new matrix.

        Returns:
            A PairwiseMatrix with the same upper triangle.

        Raises:
            PairwiseMatrixError: If the matrix is not square.
        """
        labels = None
        if isinstance(matrix, pd.DataFrame):
            labels = list(matrix.index)
            rows = matrix.to_numpy(dtype=object).tolist()
        else:
            rows = [list(row) for row in matrix]

        n = len(rows)
        if any(len(row) != n for row in rows):
            raise PairwiseMatrixError("Pairwise matrix must be square.")

        values = [rows[i][j] for i in range(n) for j in range(i + 1, n)]
        return cls(values, diagonal=diagonal, labels=labels)

    @property
    def n(self) -> int:
        """Returns number of rows (and columns) of the matrix."""
        return self._n

    @property
    def labels(self) -> list[Hashable] | None:
        """Returns row/column labels, or None if the matrix is unlabeled."""
        return None if self._labels is None else list(self._labels)

    @property
    def diagonal(self) -> Any:
        """Returns the value shared by all diagonal entries."""
        return self._diagonal

    @property
    def values(self) -> list[Any]:
        """Returns the condensed list of off-diagonal values."""
        return list(self._values)

    def __len__(self) -> int:
        return self._n

    def __position(self, key: Hashable) -> int:
        if self._labels is not None:
            try:
                return self._labels.index(key)
            except ValueError:
                raise KeyError(key) from None
        if not 0 <= key < self._n:
            raise IndexError(f"Index {key} out of range for a {self._n}x{self._n} matrix.")
        return key

    def __getitem__(self, key: tuple[Hashable, Hashable]) -> Any:
        """Returns the value for a pair of labels (or positions if unlabeled)."""
        i, j = (self.__position(k) for k in key)
        if i == j:
            return self._diagonal
        if i > j:
            i, j = j, i
        return self._values[self._n * i - i * (i + 1) // 2 + (j - i - 1)]

    def map(self, func: Callable[[Any], Any], diagonal: Any = None) -> "PairwiseMatrix":
        """Applies a function to every off-diagonal value.

        Args:
            func: Function applied to each stored value.
            diagonal: Diagonal value of the new matrix.

        Returns:
            A new PairwiseMatrix of the same size and labels.
        """
        return PairwiseMatrix(
            [func(value) for value in self._values],
            diagonal=diagonal,
            labels=self._labels,
        )

    def to_frame(self) -> pd.DataFrame:
        """Expands the matrix into a square DataFrame.

        Returns:
            An object DataFrame indexed and columned by the labels, or by
            positions if the matrix is unlabeled.
        """
        labels = self._labels if self._labels is not None else list(range(self._n))
        rows = [[self[i, j] for j in labels] for i in labels]
        return pd.DataFrame(rows, index=labels, columns=labels, dtype=object)

    def __repr__(self) -> str:
        return (
            f"PairwiseMatrix(n={self._n}, labels={self._labels}, "
            f"diagonal={self._diagonal!r})"
        )
