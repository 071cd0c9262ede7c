"""Shared plumbing for statistics backed by a storeless moment."""

from __future__ import annotations
import numpy as np
from typing import Optional

from ..moments.central import FirstMoment
from ..utils.validation import ArrayLike


class StorelessStatistic:
    """Statistic computed from a running moment accumulator.

    A statistic either owns its moment, in which case it feeds and clears
    it, or reads a moment owned elsewhere. A reader never mutates the
    shared moment: ``add``, ``add_batch`` and ``reset`` are no-ops, and
    the owner is responsible for feeding it exactly once per observation.

    Parameters
    ----------
    moment : FirstMoment or None
        Externally owned moment to read from. If None, a fresh moment of
        ``moment_class`` is created and owned by this statistic.

    Attributes
    ----------
    moment : FirstMoment
        Underlying moment accumulator.
    owns_moment : bool
        True if this statistic created (and therefore mutates) ``moment``.
    """

    moment_class = FirstMoment

    def __init__(self, moment: Optional[FirstMoment] = None):
        if moment is None:
            self.moment = self.moment_class()
            self.owns_moment = True
        else:
            if not isinstance(moment, self.moment_class):
                raise TypeError(
                    f"{type(self).__name__} requires a {self.moment_class.__name__}, "
                    f"got {type(moment).__name__}"
                )
            self.moment = moment
            self.owns_moment = False

    @classmethod
    def from_moment(cls, moment: FirstMoment) -> "StorelessStatistic":
        """Build a statistic that takes ownership of an existing moment.

        Unlike ``cls(moment)``, the returned statistic feeds and clears
        ``moment``, so the caller must not feed it as well.
        """
        stat = cls(moment)
        stat.owns_moment = True
        return stat

    def add(self, x: float) -> None:
        """Incorporate a single observation.

        Has no effect when the moment is shared.
        """
        if self.owns_moment:
            self.moment.add(x)

    def add_batch(self, X: ArrayLike) -> None:
        """Incorporate each observation of ``X`` in order."""
        for x in np.asarray(X, dtype=float).ravel():
            self.add(x)

    @property
    def n(self) -> int:
        """Number of observations held by the underlying moment."""
        return self.moment.n

    def result(self) -> float:
        raise NotImplementedError

    def evaluate(self, values: ArrayLike, begin: int = 0,
                 length: Optional[int] = None) -> float:
        raise NotImplementedError

    def reset(self) -> None:
        """Clear the underlying moment if this statistic owns it."""
        if self.owns_moment:
            self.moment.reset()

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(n={self.n}, "
                f"result={self.result()}, owns_moment={self.owns_moment})")
