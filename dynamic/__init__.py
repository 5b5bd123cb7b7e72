"""
dynfc.dynamic
=============

This subpackage provides tools for analysing time-varying functional
connectivity with a sliding window.  The code is broken into modules
that handle configuration, input normalisation, sliding window
construction and the reduction of windowed matrices to summary
measures of network dynamics.  The high level
:class:`DynamicFCAnalyzer` class orchestrates these components.

Modules
-------

config
    Defines the :class:`DynamicFCConfig` dataclass holding the window
    length.

inputs
    Converts array or per-subject collection input to a single
    ``(ROI, subject, time)`` array and defines :class:`DimensionMismatch`.

window
    Provides functions to compute connectivity matrices for sliding
    windows.

metrics
    Provides the Fisher z-transform and the per-subject computation of
    network variation and inter-hemispheric dynamics, including the
    correction for zero-padded series.

model
    Defines :class:`SubjectDynamics` and :class:`DynamicFCResult` to
    encapsulate the results.

analyzer
    Contains :class:`DynamicFCAnalyzer` and :func:`compute_dynamic_fc`.
"""

from .config import DynamicFCConfig
from .inputs import DimensionMismatch, normalize_timeseries
from .model import DynamicFCResult, SubjectDynamics
from .analyzer import DynamicFCAnalyzer, compute_dynamic_fc

__all__ = [
    'DynamicFCConfig',
    'DimensionMismatch',
    'normalize_timeseries',
    'DynamicFCResult',
    'SubjectDynamics',
    'DynamicFCAnalyzer',
    'compute_dynamic_fc',
]
