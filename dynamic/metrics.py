"""
dynfc.dynamic.metrics
=====================

This module implements the reduction of a subject's windowed
connectivity matrices to scalar measures of network dynamics.  Each
matrix is Fisher z-transformed and consecutive windows are compared:

* the network variation step is the summed absolute difference over
  the upper triangle of the matrix;
* the inter-hemispheric step is the summed absolute difference over
  the entries pairing ROI ``i`` of the first half with ROI ``i`` of
  the second half.  This assumes the ROIs are ordered with all regions
  of one hemisphere first and their homologues in the same order
  afterwards.

Steps are summed ignoring NaN.  Infinite steps arise when a window's
correlations are +/-1 up to rounding, as happens once a zero-padded
series has a single real sample left in the window.  The first infinite step marks the end of the
usable series: infinite entries are zeroed and the averages are taken
over the usable steps only.

Functions
---------

``fisher_z(matrices)``
    Elementwise inverse hyperbolic tangent.

``network_variation_steps(z_matrices)``
    Per-step network variation values.

``interhemispheric_steps(z_matrices)``
    Per-step inter-hemispheric values.

``reduce_subject(window_matrices, include_interhemispheric)``
    Compute a :class:`SubjectDynamics` record for one subject.

See Also
--------
dynfc.dynamic.model.SubjectDynamics
    Dataclass encapsulating the values computed here.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from .model import SubjectDynamics


PERFECT_CORRELATION_TOL = 1e-12


def fisher_z(matrices: np.ndarray) -> np.ndarray:
    """Apply the Fisher z-transform elementwise.

    Correlations within ``PERFECT_CORRELATION_TOL`` of +/-1 are treated
    as perfect and map to +/-inf.  NaN stays NaN.
    """
    r = np.asarray(matrices, dtype=float)
    with np.errstate(invalid='ignore'):
        perfect = np.isclose(np.abs(r), 1.0, rtol=0, atol=PERFECT_CORRELATION_TOL)
    r = np.where(perfect, np.sign(r), r)
    with np.errstate(divide='ignore', invalid='ignore'):
        return np.arctanh(r)


def _step_differences(z_matrices: np.ndarray) -> np.ndarray:
    # inf - inf gives NaN, which the sums below skip
    with np.errstate(invalid='ignore'):
        return np.abs(z_matrices[:-1] - z_matrices[1:])


def network_variation_steps(z_matrices: np.ndarray) -> np.ndarray:
    """Summed absolute upper-triangle difference between consecutive windows.

    Parameters
    ----------
    z_matrices : np.ndarray
        Array of shape (n_windows, N_ROI, N_ROI) of z-transformed
        connectivity matrices.

    Returns
    -------
    np.ndarray
        One value per consecutive window pair, length
        ``max(n_windows - 1, 0)``.  NaN entries are ignored in the sum;
        infinite entries propagate.
    """
    if z_matrices.shape[0] < 2:
        return np.zeros(0, dtype=float)
    iu = np.triu_indices(z_matrices.shape[1])
    diffs = _step_differences(z_matrices)
    return np.nansum(diffs[:, iu[0], iu[1]], axis=1)


def interhemispheric_steps(z_matrices: np.ndarray) -> np.ndarray:
    """Summed absolute difference of homologous ROI pairs between windows.

    Raises
    ------
    ValueError
        If the number of ROIs is odd.
    """
    n_roi = z_matrices.shape[1]
    if n_roi % 2:
        raise ValueError("inter-hemispheric dynamics require an even number of ROIs")
    if z_matrices.shape[0] < 2:
        return np.zeros(0, dtype=float)
    half = n_roi // 2
    left = np.arange(half)
    diffs = _step_differences(z_matrices)
    return np.nansum(diffs[:, left, left + half], axis=1)


def _average(steps: np.ndarray, n_usable: int) -> float:
    if n_usable == 0:
        return float('nan')
    return float(np.nansum(steps) / n_usable)


def reduce_subject(
    window_matrices: np.ndarray,
    include_interhemispheric: Optional[bool] = None,
) -> SubjectDynamics:
    """Compute network variation and inter-hemispheric dynamics.

    Parameters
    ----------
    window_matrices : np.ndarray
        Windowed connectivity matrices of one subject, shape
        (n_windows, N_ROI, N_ROI).
    include_interhemispheric : bool | None, optional
        Whether to compute inter-hemispheric dynamics.  Defaults to
        True when the number of ROIs is even.

    Returns
    -------
    SubjectDynamics
        Averages over usable consecutive-window steps.  Without
        degenerate steps the divisor is ``n_windows - 1``; otherwise it
        is the index of the first infinite network variation step.
        The averages are NaN when there are no usable steps.
    """
    if include_interhemispheric is None:
        include_interhemispheric = window_matrices.shape[1] % 2 == 0
    z = fisher_z(window_matrices)
    nv_steps = network_variation_steps(z)
    ic_steps = interhemispheric_steps(z) if include_interhemispheric else None

    nv_corrected = nv_steps.copy()
    ic_corrected = None if ic_steps is None else ic_steps.copy()
    bad = np.isinf(nv_steps)
    if bad.any():
        first_bad: Optional[int] = int(np.argmax(bad))
        n_usable = first_bad
        nv_corrected[bad] = 0.0
        if ic_corrected is not None:
            ic_corrected[np.isinf(ic_corrected)] = 0.0
    else:
        first_bad = None
        n_usable = nv_steps.size

    icdyn = None if ic_corrected is None else _average(ic_corrected, n_usable)
    return SubjectDynamics(
        nv=_average(nv_corrected, n_usable),
        icdyn=icdyn,
        nv_steps=nv_steps,
        ic_steps=ic_steps,
        first_degenerate_step=first_bad,
    )


__all__ = [
    'fisher_z',
    'network_variation_steps',
    'interhemispheric_steps',
    'reduce_subject',
]
