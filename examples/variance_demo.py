#!/usr/bin/env python3
"""Example: streaming and array-based variance with univstats.

This script demonstrates running variance over a stream, array
evaluation over windows, sharing one moment accumulator between
statistics, and persisting state to HDF5.
"""

import os
import tempfile

import numpy as np
from univstats import FourthMoment, Mean, StandardDeviation, Variance
from univstats.io.hdf5 import load_statistic_from_hdf5, save_statistic_to_hdf5


def create_sample_stream(n_samples=1000, offset=1e9):
    """Create an AR(1) stream sitting on a large offset."""
    np.random.seed(42)
    ts = [0.0]
    for _ in range(n_samples - 1):
        ts.append(0.8 * ts[-1] + np.random.normal(0, 0.5))
    return np.array(ts) + offset


def example_streaming():
    """Example of incremental variance."""
    print("=== Streaming Variance Example ===")

    stream = create_sample_stream()
    var = Variance()
    for x in stream:
        var.add(x)

    naive = (np.sum(stream ** 2) - np.sum(stream) ** 2 / len(stream)) / (len(stream) - 1)
    print(f"Samples seen:         {var.n}")
    print(f"Streaming variance:   {var.result():.6f}")
    print(f"NumPy (ddof=1):       {stream.var(ddof=1):.6f}")
    print(f"Naive sum of squares: {naive:.6f}")
    print()


def example_windows():
    """Example of array evaluation over windows."""
    print("=== Windowed Evaluation Example ===")

    stream = create_sample_stream(n_samples=400, offset=0.0)
    var = Variance()
    window = 100
    for begin in range(0, len(stream), window):
        m = Mean().evaluate(stream, begin, window)
        v = var.evaluate(stream, begin, window, mean=m)
        print(f"[{begin:3d}, {begin + window:3d}) mean={m:+.4f} variance={v:.4f}")
    print()


def example_shared_moment():
    """Example of several statistics reading one accumulator."""
    print("=== Shared Moment Example ===")

    m4 = FourthMoment()
    mean = Mean(m4)
    var = Variance(m4)
    sd = StandardDeviation(m4)

    for x in create_sample_stream(n_samples=200, offset=10.0):
        m4.add(x)  # the owner feeds the moment exactly once

    print(f"n={m4.n} mean={mean.result():.4f} "
          f"variance={var.result():.4f} std={sd.result():.4f}")
    kurtosis = m4.n * m4.m4 / (m4.m2 ** 2)
    print(f"Sample kurtosis from the same moment: {kurtosis:.4f}")
    print()


def example_persistence():
    """Example of saving and restoring state."""
    print("=== HDF5 Persistence Example ===")

    var = Variance()
    var.add_batch(create_sample_stream(n_samples=50, offset=0.0))

    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "variance.h5")
        save_statistic_to_hdf5(var, path)
        restored = load_statistic_from_hdf5(path)

    print(f"Saved:    {var}")
    print(f"Restored: {restored}")


if __name__ == "__main__":
    example_streaming()
    example_windows()
    example_shared_moment()
    example_persistence()
