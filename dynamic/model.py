"""
dynfc.dynamic.model
===================

This module defines dataclasses to encapsulate the results of dynamic
functional connectivity analyses.  Two primary objects are provided:

``SubjectDynamics``
    Stores the per-subject reduction of the windowed connectivity
    matrices: the network variation, the inter-hemispheric dynamics,
    the consecutive-window step values they were averaged from and
    the index of the first degenerate step, if any.

``DynamicFCResult``
    Represents the outcome for a whole cohort.  It holds the
    per-subject scalars as arrays, the windowed connectivity matrices
    of every subject and the list of :class:`SubjectDynamics` records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd


@dataclass
class SubjectDynamics:
    """Dynamics summary for a single subject.

    Attributes
    ----------
    nv : float
        Network variation: average summed absolute Fisher-z difference
        over the upper triangle between consecutive windows.  NaN when
        no usable window pair exists.
    icdyn : float | None
        Inter-hemispheric dynamics, or ``None`` when the ROI count is
        odd and the measure is not defined.
    nv_steps : np.ndarray
        Uncorrected network variation value for each consecutive
        window pair.  Length ``n_windows - 1``; may contain ``inf``.
    ic_steps : np.ndarray | None
        Uncorrected inter-hemispheric value for each consecutive window
        pair, or ``None`` when the ROI count is odd.
    first_degenerate_step : int | None
        Index of the first infinite entry in ``nv_steps``.  Equal to
        the number of usable steps the averages were divided by.
    """

    nv: float
    icdyn: Optional[float]
    nv_steps: np.ndarray
    ic_steps: Optional[np.ndarray] = None
    first_degenerate_step: Optional[int] = None

    @property
    def degenerate(self) -> bool:
        return self.first_degenerate_step is not None


@dataclass
class DynamicFCResult:
    """Encapsulate the result of a cohort dynamic connectivity analysis.

    Parameters
    ----------
    network_variation : np.ndarray
        One network variation value per subject.
    interhemispheric_dynamics : np.ndarray
        One inter-hemispheric dynamics value per subject, or an empty
        array when the ROI count is odd.
    window_fc : List[np.ndarray]
        Windowed connectivity matrices per subject, each of shape
        ``(n_windows, N_ROI, N_ROI)``.
    window_length : int
        Window length used to compute ``window_fc``.
    subjects : List[SubjectDynamics]
        Detailed per-subject records, in subject order.
    """

    network_variation: np.ndarray
    interhemispheric_dynamics: np.ndarray
    window_fc: List[np.ndarray]
    window_length: int
    subjects: List[SubjectDynamics] = field(default_factory=list)

    @property
    def degenerate_subjects(self) -> List[int]:
        """Indices of subjects whose windows include degenerate steps."""
        return [idx for idx, subj in enumerate(self.subjects) if subj.degenerate]

    def as_tuple(self) -> Tuple[np.ndarray, np.ndarray, List[np.ndarray]]:
        """Return ``(network_variation, interhemispheric_dynamics, window_fc)``."""
        return self.network_variation, self.interhemispheric_dynamics, self.window_fc

    def to_dataframe(self) -> pd.DataFrame:
        """Summarise the cohort as one row per subject.

        Missing inter-hemispheric values (odd ROI count) are NaN and
        subjects without degenerate steps have ``<NA>`` in the
        ``first_degenerate_step`` column.
        """
        rows = []
        for idx, (subj, windows) in enumerate(zip(self.subjects, self.window_fc)):
            rows.append({
                'subject': idx,
                'n_windows': int(windows.shape[0]),
                'network_variation': subj.nv,
                'interhemispheric_dynamics': np.nan if subj.icdyn is None else subj.icdyn,
                'first_degenerate_step': subj.first_degenerate_step,
            })
        df = pd.DataFrame(rows, columns=[
            'subject',
            'n_windows',
            'network_variation',
            'interhemispheric_dynamics',
            'first_degenerate_step',
        ])
        df['first_degenerate_step'] = pd.array(
            [subj.first_degenerate_step for subj in self.subjects], dtype='Int64'
        )
        return df.set_index('subject')
