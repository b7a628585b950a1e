"""Unit tests for the Ball value object."""
import numpy as np
import pytest

from miniball_d.helper_classes import Ball


class TestBall:

    def test_from_list(self):
        """Centers given as lists are converted to float arrays."""
        ball = Ball([1, 2, 3], 4)
        assert isinstance(ball.center, np.ndarray)
        assert ball.center.dtype == float
        assert ball.dimension == 3
        assert ball.radius == pytest.approx(2.0)

    def test_row_vector_center(self):
        ball = Ball(np.array([[1.0, 2.0]]), 1.0)
        assert ball.center.shape == (2,)

    def test_invalid_center(self):
        with pytest.raises(TypeError):
            Ball("center", 1.0)
        with pytest.raises(ValueError):
            Ball(np.zeros((2, 2)), 1.0)

    def test_invalid_squared_radius(self):
        with pytest.raises(TypeError):
            Ball([0, 0], "1")
        with pytest.raises(ValueError):
            Ball([0, 0], -1.0)

    def test_contains(self):
        ball = Ball([0, 0], 1.0)
        assert ball.contains([1, 0])
        assert ball.contains([0.5, 0.5])
        assert not ball.contains([1, 1])
        assert ball.contains([1.0 + 1e-9, 0], tol=1e-6)
