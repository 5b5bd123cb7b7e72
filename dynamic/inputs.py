"""
dynfc.dynamic.inputs
====================

Input normalisation for dynamic connectivity analysis.

Cohort data arrives in one of two layouts:

* a uniform 3-D array indexed by ``(ROI, subject, time)``;
* an ordered collection with one ``(time, ROI)`` table per subject.
  Tables may be numpy arrays, nested sequences or
  :class:`pandas.DataFrame` objects with ROIs as columns.

Both are converted to a single dense float array of shape
``(N_ROI, N_SUBJECTS, T)`` before any computation runs.  The layout is
chosen by type: a :class:`numpy.ndarray` is the 3-D layout, anything
else is a collection.
"""

from __future__ import annotations

import logging
from typing import Sequence, Union

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

CohortInput = Union[np.ndarray, Sequence[Union[np.ndarray, pd.DataFrame]]]


class DimensionMismatch(ValueError):
    """Raised when input time series do not share a consistent shape."""


def _as_table(table) -> np.ndarray:
    if isinstance(table, pd.DataFrame):
        return table.to_numpy(dtype=float)
    return np.asarray(table, dtype=float)


def normalize_timeseries(data: CohortInput) -> np.ndarray:
    """Convert cohort data to a ``(N_ROI, N_SUBJECTS, T)`` float array.

    Parameters
    ----------
    data : np.ndarray or sequence
        Either a 3-D array already ordered as ``(ROI, subject, time)``
        or a sequence of per-subject ``(time, ROI)`` tables.  Only an
        :class:`numpy.ndarray` is read as the 3-D layout; any other
        sequence, including a nested list such as ``array.tolist()``,
        is read as a per-subject collection.  Wrap nested lists in
        :func:`numpy.asarray` to pass them as a 3-D array.

    Returns
    -------
    np.ndarray
        Freshly allocated float array of shape ``(N_ROI, N_SUBJECTS, T)``.

    Raises
    ------
    DimensionMismatch
        If the array is not 3-D, the collection is empty, or the
        per-subject tables are not 2-D or disagree in shape.
    """
    if isinstance(data, np.ndarray):
        if data.ndim != 3:
            raise DimensionMismatch(
                f"data array must be 3D (ROI, subject, time), got {data.ndim}D"
            )
        cohort = np.array(data, dtype=float)
    else:
        tables = [_as_table(table) for table in data]
        if not tables:
            raise DimensionMismatch("data collection contains no subjects")
        shape = tables[0].shape
        for idx, table in enumerate(tables):
            if table.ndim != 2:
                raise DimensionMismatch(
                    f"subject {idx}: expected a 2D (time, ROI) table, got {table.ndim}D"
                )
            if table.shape != shape:
                raise DimensionMismatch(
                    f"subject {idx}: shape {table.shape} does not match {shape}"
                )
        # (time, ROI) -> (ROI, time), then stack subjects on axis 1
        cohort = np.stack([table.T for table in tables], axis=1)
    logger.debug(
        "Normalised cohort: %d ROIs, %d subjects, %d time points", *cohort.shape
    )
    return cohort


__all__ = [
    'CohortInput',
    'DimensionMismatch',
    'normalize_timeseries',
]
