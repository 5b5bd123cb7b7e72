"""
dynfc.dynamic.window
====================

This module provides helper functions to compute time-resolved
connectivity matrices by sliding a window across ROI time series.
For each window the Pearson correlation between all pairs of ROIs
is computed and the diagonal is zeroed.  The window advances one
time point at a time.

Correlations that are undefined because a ROI signal has no variance
inside the window (typically zero padding at the end of a shorter
run) are left as NaN.  They are handled by the reduction in
:mod:`dynfc.dynamic.metrics`.

Functions
---------

``sliding_window_connectivity(roi_timeseries, window_length)``
    Compute correlation matrices for the sliding windows of one subject.

``window_fc(cohort, window_length)``
    Apply :func:`sliding_window_connectivity` to every subject of a
    normalised ``(ROI, subject, time)`` array.
"""

from __future__ import annotations

import warnings
from typing import List

import numpy as np


def sliding_window_connectivity(
    roi_timeseries: np.ndarray,
    window_length: int,
) -> np.ndarray:
    """Compute connectivity matrices for sliding windows.

    Parameters
    ----------
    roi_timeseries : np.ndarray
        Array of shape (T, N_ROI) containing the time series for each
        region of interest.  ``T`` is the number of time points and
        ``N_ROI`` is the number of ROIs.
    window_length : int
        Length of the sliding window in time points.  Must be
        positive.

    Returns
    -------
    np.ndarray
        Array of shape (T - window_length, N_ROI, N_ROI) holding one
        correlation matrix per window start, each with a zero
        diagonal.  Empty along the first axis when
        ``window_length >= T``.

    Raises
    ------
    ValueError
        If the specified window length is invalid or the input is not
        two-dimensional.
    """
    if roi_timeseries.ndim != 2:
        raise ValueError("roi_timeseries must be a 2D array of shape (T, N_ROI)")
    if window_length <= 0:
        raise ValueError("window_length must be a positive integer")
    T, N = roi_timeseries.shape
    n_windows = max(T - window_length, 0)
    windows = np.empty((n_windows, N, N), dtype=float)
    for start in range(n_windows):
        segment = roi_timeseries[start:start + window_length]
        # zero-variance columns produce NaN; keep them for the reducer
        with warnings.catch_warnings(), np.errstate(divide='ignore', invalid='ignore'):
            # single-sample windows warn about degrees of freedom
            warnings.simplefilter('ignore', RuntimeWarning)
            corr = np.corrcoef(segment, rowvar=False)
        corr = np.atleast_2d(corr)
        # remove self connections
        np.fill_diagonal(corr, 0.0)
        # enforce symmetry exactly (rounding errors)
        windows[start] = (corr + corr.T) / 2.0
    return windows


def window_fc(cohort: np.ndarray, window_length: int) -> List[np.ndarray]:
    """Compute windowed connectivity for every subject of a cohort.

    Parameters
    ----------
    cohort : np.ndarray
        Normalised array of shape (N_ROI, N_SUBJECTS, T).
    window_length : int
        Length of the sliding window in time points.

    Returns
    -------
    list of np.ndarray
        One ``(T - window_length, N_ROI, N_ROI)`` array per subject.
    """
    return [
        sliding_window_connectivity(cohort[:, subject, :].T, window_length)
        for subject in range(cohort.shape[1])
    ]


__all__ = [
    'sliding_window_connectivity',
    'window_fc',
]
