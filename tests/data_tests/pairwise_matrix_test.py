"""
Tests for the PairwiseMatrix class.
"""

import numpy as np
import pytest
from scipy.spatial.distance import squareform

from coaltime.data import PairwiseMatrix
from coaltime.mixins import PairwiseMatrixError


@pytest.fixture
def labeled_matrix():
    # a-b, a-c, a-d, b-c, b-d, c-d
    return PairwiseMatrix([1, 2, 3, 4, 5, 6], diagonal=0, labels=["a", "b", "c", "d"])


def test_size_is_inferred():
    assert PairwiseMatrix([]).n == 1
    assert PairwiseMatrix([7]).n == 2
    assert len(PairwiseMatrix([1, 2, 3])) == 3
    assert PairwiseMatrix([], labels=[]).n == 0


@pytest.mark.parametrize("values", [[1, 2], [1, 2, 3, 4]])
def test_bad_number_of_values(values):
    with pytest.raises(PairwiseMatrixError):
        PairwiseMatrix(values)


def test_bad_labels():
    with pytest.raises(PairwiseMatrixError):
        PairwiseMatrix([1, 2, 3], labels=["a", "b"])
    with pytest.raises(PairwiseMatrixError):
        PairwiseMatrix([1, 2, 3], labels=["a", "b", "a"])


def test_getitem_is_symmetric(labeled_matrix):
    assert labeled_matrix["a", "b"] == 1
    assert labeled_matrix["b", "a"] == 1
    assert labeled_matrix["a", "d"] == 3
    assert labeled_matrix["d", "c"] == 6
    assert labeled_matrix["b", "b"] == 0

    with pytest.raises(KeyError):
        labeled_matrix["a", "z"]


def test_getitem_unlabeled():
    matrix = PairwiseMatrix([1, 2, 3])
    assert matrix[0, 2] == 2
    assert matrix[2, 1] == 3
    assert matrix[1, 1] is None

    with pytest.raises(IndexError):
        matrix[0, 3]


def test_condensed_order_matches_squareform(labeled_matrix):
    square = labeled_matrix.to_frame().to_numpy(dtype=float)
    assert np.array_equal(square, squareform(np.array([1, 2, 3, 4, 5, 6], dtype=float)))


def test_to_frame_and_back(labeled_matrix):
    frame = labeled_matrix.to_frame()
    assert list(frame.index) == ["a", "b", "c", "d"]
    assert list(frame.columns) == ["a", "b", "c", "d"]
    assert frame.loc["c", "a"] == 2

    rebuilt = PairwiseMatrix.from_square(frame, diagonal=0)
    assert rebuilt.values == labeled_matrix.values
    assert rebuilt.labels == labeled_matrix.labels


def test_from_square_ignores_lower_triangle():
    matrix = PairwiseMatrix.from_square([[0, 1, 2], [99, 0, 3], [99, 99, 0]])
    assert matrix.values == [1, 2, 3]
    assert matrix.labels is None

    with pytest.raises(PairwiseMatrixError):
        PairwiseMatrix.from_square([[0, 1], [1, 0, 2]])


def test_map_preserves_labels(labeled_matrix):
    doubled = labeled_matrix.map(lambda v: 2 * v, diagonal=-1)

    assert doubled.labels == labeled_matrix.labels
    assert doubled.values == [2, 4, 6, 8, 10, 12]
    assert doubled["a", "a"] == -1
    assert doubled["d", "b"] == 10
    # the source matrix is untouched
    assert labeled_matrix.values == [1, 2, 3, 4, 5, 6]
