"""Tests for mean module."""

import math
import warnings

import numpy as np
import pytest
from univstats.moments.central import FirstMoment, FourthMoment
from univstats.statistics.mean import Mean
from univstats.utils.validation import InvalidArgumentError


class TestMean:
    """Test cases for Mean class."""

    def test_streaming(self):
        """Test running mean with scalar inputs."""
        mean = Mean()
        assert math.isnan(mean.result())

        mean.add_batch([1.0, 2.0, 3.0, 4.0])

        assert mean.n == 4
        assert mean.result() == 2.5
        assert isinstance(mean.moment, FirstMoment)

    def test_evaluate(self):
        """Test array mean against NumPy."""
        np.random.seed(5)
        X = np.random.randn(1000) * 10.0 + 3.0

        np.testing.assert_allclose(Mean().evaluate(X), X.mean(), rtol=1e-13)

    def test_evaluate_subrange(self):
        """Test array mean over a window."""
        X = [100.0, 1.0, 2.0, 3.0, -100.0]

        assert Mean().evaluate(X, 1, 3) == 2.0
        assert Mean().evaluate(X, 3) == -48.5

    def test_evaluate_empty(self):
        """Test that an empty window gives NaN."""
        assert math.isnan(Mean().evaluate([]))
        assert math.isnan(Mean().evaluate([1.0, 2.0], 1, 0))

    def test_evaluate_errors(self):
        """Test argument error cases."""
        with pytest.raises(InvalidArgumentError):
            Mean().evaluate(None)

        with pytest.raises(InvalidArgumentError):
            Mean().evaluate([1.0, 2.0], 1, 2)

    def test_evaluate_non_finite_is_silent(self):
        """Test that overflow and infinities propagate without warnings."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert math.isnan(Mean().evaluate([1.0, float("inf"), 3.0]))
            assert math.isnan(Mean().evaluate([1e308, 1e308, -1e308]))

    def test_from_moment_takes_ownership(self):
        """Test building an owning mean over an existing moment."""
        m = FourthMoment()
        m.add(2.0)
        mean = Mean.from_moment(m)
        mean.add(4.0)

        assert mean.owns_moment
        assert m.n == 2
        assert mean.result() == 3.0

    def test_shared_moment(self):
        """Test a mean reading a moment owned by another statistic."""
        shared = FourthMoment()
        reader = Mean(shared)
        shared.add_batch([2.0, 4.0])

        reader.add(1000.0)
        reader.reset()

        assert not reader.owns_moment
        assert reader.n == 2
        assert reader.result() == 3.0

    def test_evaluate_does_not_touch_state(self):
        """Test that array evaluation leaves streaming state intact."""
        mean = Mean()
        mean.add(1.0)
        mean.evaluate([5.0, 6.0, 7.0])

        assert mean.n == 1
        assert mean.result() == 1.0
