"""Tests for HDF5 state persistence."""

import h5py
import numpy as np
import pytest
from univstats.io.hdf5 import (
    load_moment_from_hdf5,
    load_statistic_from_hdf5,
    save_moment_to_hdf5,
    save_statistic_to_hdf5,
)
from univstats.moments.central import FourthMoment, SecondMoment
from univstats.statistics.mean import Mean
from univstats.statistics.standard_deviation import StandardDeviation
from univstats.statistics.variance import Variance


class TestHDF5:
    """Test cases for HDF5 save/load functions."""

    def test_moment_round_trip(self, tmp_path):
        """Test saving and loading a moment preserves class and state."""
        np.random.seed(0)
        m = FourthMoment()
        m.add_batch(np.random.randn(30))
        path = tmp_path / "state.h5"

        save_moment_to_hdf5(m, str(path))
        loaded = load_moment_from_hdf5(str(path))

        assert type(loaded) is FourthMoment
        assert loaded.n == m.n
        for key, value in m.state().items():
            assert getattr(loaded, key) == value

    def test_overwrite_group(self, tmp_path):
        """Test that saving twice replaces the stored group."""
        path = str(tmp_path / "state.h5")
        m = SecondMoment()
        m.add(1.0)
        save_moment_to_hdf5(m, path)
        m.add(3.0)
        save_moment_to_hdf5(m, path)

        assert load_moment_from_hdf5(path).n == 2

    def test_missing_group(self, tmp_path):
        """Test loading a group that was never written."""
        path = str(tmp_path / "state.h5")
        save_moment_to_hdf5(SecondMoment(), path, group_name="a")

        with pytest.raises(KeyError):
            load_moment_from_hdf5(path, group_name="b")

    def test_unknown_moment_type(self, tmp_path):
        """Test loading a group with an unknown moment type."""
        path = str(tmp_path / "state.h5")
        with h5py.File(path, "w") as f:
            f.create_group("moment").attrs["moment_type"] = "FifthMoment"

        with pytest.raises(ValueError):
            load_moment_from_hdf5(path)

    @pytest.mark.parametrize("stat_cls", [Mean, Variance, StandardDeviation])
    def test_statistic_round_trip(self, tmp_path, stat_cls):
        """Test saving and loading an owning statistic."""
        path = str(tmp_path / "state.h5")
        stat = stat_cls()
        stat.add_batch([2, 4, 4, 4, 5, 5, 7, 9])

        save_statistic_to_hdf5(stat, path)
        loaded = load_statistic_from_hdf5(path)

        assert type(loaded) is stat_cls
        assert loaded.owns_moment
        assert loaded.n == 8
        assert loaded.result() == stat.result()

        # restored statistic keeps streaming
        loaded.add(5.0)
        stat.add(5.0)
        assert loaded.result() == pytest.approx(stat.result())

    def test_shared_statistic_restored_as_owner(self, tmp_path):
        """Test that a reader of a shared moment is restored with a warning."""
        path = str(tmp_path / "state.h5")
        shared = FourthMoment()
        shared.add_batch([1.0, 2.0, 3.0])
        save_statistic_to_hdf5(Variance(shared), path)

        with pytest.warns(UserWarning):
            loaded = load_statistic_from_hdf5(path)

        assert loaded.owns_moment
        assert type(loaded.moment) is FourthMoment
        assert loaded.moment is not shared
        assert loaded.result() == 1.0

    def test_multiple_groups(self, tmp_path):
        """Test that several statistics can live in one file."""
        path = str(tmp_path / "state.h5")
        mean = Mean()
        var = Variance()
        for x in [1.0, 2.0, 3.0]:
            mean.add(x)
            var.add(x)

        save_statistic_to_hdf5(mean, path, group_name="mean")
        save_statistic_to_hdf5(var, path, group_name="variance")

        assert load_statistic_from_hdf5(path, group_name="mean").result() == 2.0
        assert load_statistic_from_hdf5(path, group_name="variance").result() == 1.0
