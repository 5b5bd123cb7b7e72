"""
dynfc
=====

This package computes sliding-window dynamic functional connectivity
measures from functional MRI time series extracted from regions of
interest (ROIs), for a cohort of subjects.

For every subject a window of fixed length is moved across the time
series one time point at a time and the ROI×ROI Pearson correlation
matrix of each window is computed.  Consecutive windows are then
compared after a Fisher z-transform to obtain two summary measures:

* ``network variation`` – how much the whole connectivity matrix
  changes from one window to the next;
* ``inter-hemispheric dynamics`` – how much the connectivity between
  homologous left/right ROI pairs changes.  This requires an even
  number of ROIs ordered as all regions of one hemisphere followed by
  their homologues.

Series that were zero-padded to a common length are detected and the
averages are restricted to the usable part of the series.

Example
-------
>>> from dynfc import compute_dynamic_fc
>>> nv, icdyn, win_fc = compute_dynamic_fc(cohort, window_length=20)

Note
----
This code relies on ``numpy`` and ``pandas``.
"""

from .dynamic import (
    DimensionMismatch,
    DynamicFCAnalyzer,
    DynamicFCConfig,
    DynamicFCResult,
    SubjectDynamics,
    compute_dynamic_fc,
    normalize_timeseries,
)

__all__ = [
    'DimensionMismatch',
    'DynamicFCAnalyzer',
    'DynamicFCConfig',
    'DynamicFCResult',
    'SubjectDynamics',
    'compute_dynamic_fc',
    'normalize_timeseries',
]
