"""Unit tests for vector helpers and the distance matrix."""

from __future__ import annotations

import math

import pytest
import numpy as np

from point_clouds.points import Point
from point_clouds.vectors import (
    InvalidInputError,
    add,
    dist,
    distance_matrix,
    normal_vector,
    resolve_rng,
    scale
)


class TestVectorHelpers:
    """Test dist, add, scale and normal_vector."""

    def test_dist_pythagorean(self):
        """dist matches the Pythagorean distance."""
        assert dist([0, 0], [3, 4]) == pytest.approx(5.0)
        assert dist([1, 2, 3], [1, 2, 3]) == 0.0

    def test_dist_length_mismatch(self):
        """Mismatched lengths raise InvalidInputError."""
        with pytest.raises(InvalidInputError):
            dist([0, 0], [1, 2, 3])

    def test_add_elementwise(self):
        """add sums element by element."""
        np.testing.assert_array_equal(add([1, 2], [3, 4]), [4, 6])

    def test_add_length_mismatch(self):
        """Mismatched lengths raise InvalidInputError."""
        with pytest.raises(InvalidInputError):
            add([1], [1, 2])

    def test_scale_is_pure(self):
        """scale returns a new array and leaves the input untouched."""
        v = [1.0, -2.0, 3.0]
        out = scale(v, 2)

        np.testing.assert_array_equal(out, [2.0, -4.0, 6.0])
        assert v == [1.0, -2.0, 3.0]

    def test_normal_vector_shape_and_seed(self):
        """normal_vector has length dim and is seed-reproducible."""
        a = normal_vector(5, rng=7)
        b = normal_vector(5, rng=7)

        assert a.shape == (5,)
        np.testing.assert_array_equal(a, b)

    def test_normal_vector_integral_float_dim(self):
        """An integral float dim is accepted like the generators accept it."""
        v = normal_vector(2.0, rng=0)

        assert v.shape == (2,)
        np.testing.assert_array_equal(v, normal_vector(2, rng=0))

    @pytest.mark.parametrize("dim", [2.5, -1, 'three'])
    def test_normal_vector_invalid_dim(self, dim):
        """Fractional, negative or non-numeric dims raise InvalidInputError."""
        with pytest.raises(InvalidInputError):
            normal_vector(dim, rng=0)

    def test_normal_vector_zero_dim(self):
        """dim=0 gives an empty vector."""
        assert normal_vector(0, rng=0).shape == (0,)

    def test_invalid_input_is_value_error(self):
        """InvalidInputError is a ValueError."""
        assert issubclass(InvalidInputError, ValueError)

    def test_resolve_rng_passthrough(self, rng):
        """Existing generators pass through; None builds a new one."""
        assert resolve_rng(rng) is rng
        assert isinstance(resolve_rng(None), np.random.Generator)


class TestDistanceMatrix:
    """Test flattened pairwise distances."""

    def test_size_diagonal_and_symmetry(self, square_points):
        """n**2 entries, zero diagonal and exact symmetry."""
        D = distance_matrix(square_points)
        n = len(square_points)

        assert len(D) == n * n
        for i in range(n):
            assert D[i * n + i] == 0.0
            for j in range(n):
                assert D[i * n + j] == D[j * n + i]

    def test_row_major_layout(self, square_points):
        """Entry i*n+j is the distance between points i and j in input order."""
        D = distance_matrix(square_points)

        assert D[1] == pytest.approx(1.0)  # (0,0) - (0,1)
        assert D[3] == pytest.approx(math.sqrt(2))  # (0,0) - (1,1)
        assert D[1 * 4 + 2] == pytest.approx(math.sqrt(2))  # (0,1) - (1,0)

    def test_accepts_raw_coordinates(self):
        """Raw coordinate rows work as well as Points."""
        D = distance_matrix([[0.0, 0.0], [0.0, 2.0]])
        assert D == [0.0, 2.0, 2.0, 0.0]

    def test_empty_and_single(self):
        """Empty input gives [] and one point gives [0.0]."""
        assert distance_matrix([]) == []
        assert distance_matrix([Point((1.0, 2.0))]) == [0.0]

    def test_mixed_dimensionality(self):
        """Mixed dimensionality raises InvalidInputError."""
        with pytest.raises(InvalidInputError):
            distance_matrix([Point((0.0, 0.0)), Point((0.0, 0.0, 0.0))])
