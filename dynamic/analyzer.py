"""
dynfc.dynamic.analyzer
======================

This module defines the :class:`DynamicFCAnalyzer` class, a high level
interface for sliding-window dynamic functional connectivity analysis
of a cohort.  It uses the configuration supplied via
:class:`dynfc.dynamic.config.DynamicFCConfig`, normalises the input
data, computes the windowed connectivity matrices of every subject and
then reduces them to network variation and inter-hemispheric dynamics.

The function :func:`compute_dynamic_fc` wraps the class and returns the
three outputs as a plain tuple.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

import numpy as np

from .config import DEFAULT_WINDOW_LENGTH, DynamicFCConfig
from .inputs import CohortInput, normalize_timeseries
from .metrics import reduce_subject
from .model import DynamicFCResult
from .window import window_fc

logger = logging.getLogger(__name__)


class DynamicFCAnalyzer:
    """High level wrapper for dynamic connectivity analysis.

    Parameters
    ----------
    config : DynamicFCConfig, optional
        Configuration specifying the window length.  Defaults to a
        window of 20 time points.

    Examples
    --------
    >>> from dynfc.dynamic import DynamicFCConfig, DynamicFCAnalyzer
    >>> analyzer = DynamicFCAnalyzer(DynamicFCConfig(window_length=20))
    >>> result = analyzer.analyse(cohort)  # (ROI, subject, time)
    >>> print(result.network_variation)
    """

    def __init__(self, config: DynamicFCConfig | None = None) -> None:
        self.config = config if config is not None else DynamicFCConfig()

    # --------------------------------------------------------------
    def analyse(self, data: CohortInput) -> DynamicFCResult:
        """Run dynamic analysis on cohort time series.

        Parameters
        ----------
        data : np.ndarray or sequence
            Either an array of shape (N_ROI, N_SUBJECTS, T) or a
            sequence of per-subject (T, N_ROI) tables.

        Returns
        -------
        DynamicFCResult
            Network variation and inter-hemispheric dynamics per
            subject, the windowed connectivity matrices and the
            detailed per-subject records.

        Raises
        ------
        DimensionMismatch
            If the input shapes are inconsistent.
        ValueError
            If the configured window length is invalid.
        """
        cohort = normalize_timeseries(data)
        n_roi, n_subjects, n_timepoints = cohort.shape
        self.config.validate(n_timepoints)
        window_length = int(self.config.window_length)

        win_fc = window_fc(cohort, window_length)

        include_ic = n_roi % 2 == 0
        if not include_ic:
            logger.warning(
                "Odd number of ROIs (%d); inter-hemispheric dynamics skipped", n_roi
            )
        subjects = []
        for idx, windows in enumerate(win_fc):
            subj = reduce_subject(windows, include_interhemispheric=include_ic)
            if subj.degenerate:
                logger.warning(
                    "subject %d has different length of fMRI timepoints "
                    "(first degenerate step %d)", idx, subj.first_degenerate_step,
                )
            subjects.append(subj)

        nv = np.array([subj.nv for subj in subjects], dtype=float)
        if include_ic:
            icdyn = np.array([subj.icdyn for subj in subjects], dtype=float)
        else:
            icdyn = np.zeros(0, dtype=float)
        logger.info("Dynamic FC done for %d subjects", n_subjects)
        return DynamicFCResult(
            network_variation=nv,
            interhemispheric_dynamics=icdyn,
            window_fc=win_fc,
            window_length=window_length,
            subjects=subjects,
        )


def compute_dynamic_fc(
    data: CohortInput,
    window_length: int = DEFAULT_WINDOW_LENGTH,
) -> Tuple[np.ndarray, np.ndarray, List[np.ndarray]]:
    """Compute network variation, inter-hemispheric dynamics and windowed FC.

    Parameters
    ----------
    data : np.ndarray or sequence
        Either an array of shape (N_ROI, N_SUBJECTS, T) or a sequence
        of per-subject (T, N_ROI) tables.
    window_length : int, optional
        Length of the sliding window in time points.  Defaults to 20.

    Returns
    -------
    nv : np.ndarray
        Network variation, one value per subject.
    icdyn : np.ndarray
        Inter-hemispheric dynamics, one value per subject, or empty if
        the number of ROIs is odd.
    win_fc : list of np.ndarray
        Windowed connectivity matrices per subject.
    """
    analyzer = DynamicFCAnalyzer(DynamicFCConfig(window_length=window_length))
    return analyzer.analyse(data).as_tuple()


__all__ = [
    'DynamicFCAnalyzer',
    'compute_dynamic_fc',
]
