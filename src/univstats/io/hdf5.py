"""HDF5 I/O utilities for moment and statistic state persistence.

Moments are stored as a group whose attributes hold the moment class and
its fields; statistics add their type and ownership flag on top of a
nested ``moment`` group.
"""

import warnings
from typing import Union

import h5py

from ..moments.central import FirstMoment, SecondMoment, ThirdMoment, FourthMoment
from ..statistics.mean import Mean
from ..statistics.variance import Variance
from ..statistics.standard_deviation import StandardDeviation

MOMENT_TYPES = {
    cls.__name__: cls
    for cls in (FirstMoment, SecondMoment, ThirdMoment, FourthMoment)
}
STATISTIC_TYPES = {
    cls.__name__: cls
    for cls in (Mean, Variance, StandardDeviation)
}

Statistic = Union[Mean, Variance, StandardDeviation]


def _write_moment(group: h5py.Group, moment: FirstMoment) -> None:
    group.attrs['moment_type'] = type(moment).__name__
    for key, value in moment.state().items():
        group.attrs[key] = value


def _read_moment(group: h5py.Group) -> FirstMoment:
    moment_type = group.attrs['moment_type']
    if moment_type not in MOMENT_TYPES:
        raise ValueError(f"Unknown moment type: {moment_type}")

    moment = MOMENT_TYPES[moment_type]()
    for key in moment.state():
        if key == 'n':
            moment.n = int(group.attrs['n'])
        else:
            setattr(moment, key, float(group.attrs[key]))
    return moment


def save_moment_to_hdf5(
    moment: FirstMoment,
    filepath: str,
    group_name: str = "moment"
) -> None:
    """Save moment state to HDF5 file.

    Parameters
    ----------
    moment : FirstMoment
        Moment accumulator to save (any subclass).
    filepath : str
        Path to HDF5 file.
    group_name : str
        Group name within HDF5 file. An existing group is replaced.
    """
    with h5py.File(filepath, 'a') as f:
        if group_name in f:
            del f[group_name]
        _write_moment(f.create_group(group_name), moment)


def load_moment_from_hdf5(
    filepath: str,
    group_name: str = "moment"
) -> FirstMoment:
    """Load moment state from HDF5 file.

    Returns
    -------
    FirstMoment
        Moment of the stored class, holding the stored state.
    """
    with h5py.File(filepath, 'r') as f:
        if group_name not in f:
            raise KeyError(f"Group '{group_name}' not found in HDF5 file")
        return _read_moment(f[group_name])


def save_statistic_to_hdf5(
    stat: Statistic,
    filepath: str,
    group_name: str = "statistic"
) -> None:
    """Save a statistic and its moment to HDF5 file.

    Parameters
    ----------
    stat : Mean, Variance or StandardDeviation
        Statistic to save.
    filepath : str
        Path to HDF5 file.
    group_name : str
        Group name within HDF5 file. An existing group is replaced.
    """
    stat_type = type(stat).__name__
    if stat_type not in STATISTIC_TYPES:
        raise ValueError(f"Unsupported statistic type: {stat_type}")

    with h5py.File(filepath, 'a') as f:
        if group_name in f:
            del f[group_name]
        group = f.create_group(group_name)
        group.attrs['statistic_type'] = stat_type
        group.attrs['owns_moment'] = stat.owns_moment
        _write_moment(group.create_group('moment'), stat.moment)


def load_statistic_from_hdf5(
    filepath: str,
    group_name: str = "statistic"
) -> Statistic:
    """Load a statistic from HDF5 file.

    The restored statistic always owns its moment. A statistic that was
    saved as a reader of a shared moment cannot be re-attached to that
    moment, so it is restored over a private copy and a warning is issued.
    """
    with h5py.File(filepath, 'r') as f:
        if group_name not in f:
            raise KeyError(f"Group '{group_name}' not found in HDF5 file")

        group = f[group_name]
        stat_type = group.attrs['statistic_type']
        if stat_type not in STATISTIC_TYPES:
            raise ValueError(f"Unknown statistic type: {stat_type}")

        stat_cls = STATISTIC_TYPES[stat_type]
        moment = _read_moment(group['moment'])
        if not isinstance(moment, stat_cls.moment_class):
            raise ValueError(
                f"{stat_type} cannot be restored from a {type(moment).__name__}"
            )
        owned = bool(group.attrs['owns_moment'])

    if not owned:
        warnings.warn(
            f"{stat_type} was saved as a reader of a shared moment; "
            "restoring it as the owner of a private copy.",
            UserWarning
        )

    return stat_cls.from_moment(moment)
