"""Input validation helpers for array-based statistic evaluation.

All batch entry points funnel their arguments through these helpers so
that argument errors are raised up front, before any arithmetic runs.
"""

import operator

import numpy as np
from typing import Optional, Sequence, Union

ArrayLike = Union[np.ndarray, Sequence[float]]


class InvalidArgumentError(ValueError):
    """Raised when an evaluation entry point receives an invalid argument."""


def check_values(values: Optional[ArrayLike]) -> np.ndarray:
    """Convert input values to a 1-D float64 array.

    Parameters
    ----------
    values : array_like or None
        Input observations.

    Returns
    -------
    np.ndarray
        The observations as a contiguous 1-D float array.

    Raises
    ------
    InvalidArgumentError
        If ``values`` is None, not numeric or not one-dimensional.
    """
    if values is None:
        raise InvalidArgumentError("input values array is null")

    try:
        arr = np.asarray(values, dtype=float)
    except (TypeError, ValueError) as err:
        raise InvalidArgumentError(f"input values are not numeric: {err}") from err
    if arr.ndim != 1:
        raise InvalidArgumentError(f"Expected 1D array, got {arr.ndim}D")
    return arr


def check_range(values: np.ndarray, begin: int, length: int) -> bool:
    """Validate a ``(begin, length)`` window over ``values``.

    Returns
    -------
    bool
        True if the window holds at least one element, False if it is empty.

    Raises
    ------
    InvalidArgumentError
        If ``values`` is None, or the window is negative or runs past
        the end of the array.
    """
    if values is None:
        raise InvalidArgumentError("input values array is null")

    if begin < 0:
        raise InvalidArgumentError(f"start position cannot be negative, got {begin}")

    if length < 0:
        raise InvalidArgumentError(f"length cannot be negative, got {length}")

    if begin + length > len(values):
        raise InvalidArgumentError(
            f"begin + length ({begin + length}) exceeds array size ({len(values)})"
        )

    return length > 0


def resolve_window(
    values: Optional[ArrayLike],
    begin: int = 0,
    length: Optional[int] = None
) -> tuple:
    """Validate arguments and return ``(window, non_empty)``.

    ``length=None`` selects everything from ``begin`` to the end of the
    array. The returned window is a view, never a copy.
    """
    arr = check_values(values)
    begin = _as_index(begin, "begin")
    if length is None:
        length = len(arr) - begin
    length = _as_index(length, "length")

    non_empty = check_range(arr, begin, length)
    return arr[begin:begin + length], non_empty


def _as_index(value, name: str) -> int:
    # int and numpy integers only
    try:
        return operator.index(value)
    except TypeError as err:
        raise InvalidArgumentError(
            f"{name} must be an integer, got {type(value).__name__}"
        ) from err
