"""
dynfc.dynamic.config
====================

This module defines the configuration data class for sliding-window
dynamic functional connectivity analysis.  The only tunable parameter
is the window length; the window always advances one time point at a
time.  Basic validation ensures the value is usable before any
computation starts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Integral
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_LENGTH = 20


@dataclass
class DynamicFCConfig:
    """Configuration options for dynamic connectivity analysis.

    Attributes
    ----------
    window_length : int, optional
        Length of the sliding window in time points.  Defaults to 20.
        Windows start at every time point from 0 up to
        ``T - window_length - 1``, so a window length equal to or
        larger than the number of time points yields no windows.
    """

    window_length: int = DEFAULT_WINDOW_LENGTH

    def validate(self, n_timepoints: Optional[int] = None) -> None:
        """Validate configuration parameters.

        Parameters
        ----------
        n_timepoints : int | None, optional
            Number of time points in the ROI time series.  A window
            length that leaves no windows is logged, not rejected.

        Raises
        ------
        ValueError
            If ``window_length`` is not a positive integer.
        """
        if isinstance(self.window_length, bool) or not isinstance(self.window_length, Integral):
            raise ValueError("window_length must be an integer")
        if self.window_length <= 0:
            raise ValueError("window_length must be a positive integer")
        if n_timepoints is not None and self.window_length >= n_timepoints:
            logger.warning(
                "window_length %d leaves no windows for %d time points",
                self.window_length, n_timepoints,
            )
