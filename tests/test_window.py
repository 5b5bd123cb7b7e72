import warnings

import numpy as np
import pytest

from dynfc.dynamic.window import sliding_window_connectivity, window_fc


def test_window_count_and_shape():
    rng = np.random.RandomState(1)
    ts = rng.randn(50, 6)
    windows = sliding_window_connectivity(ts, 20)
    assert windows.shape == (30, 6, 6)
    for mat in windows:
        assert np.all(np.diag(mat) == 0.0)
        assert np.array_equal(mat, mat.T)
        assert np.all(np.abs(mat) <= 1.0)


def test_window_matches_corrcoef():
    rng = np.random.RandomState(2)
    ts = rng.randn(30, 3)
    windows = sliding_window_connectivity(ts, 10)
    expected = np.corrcoef(ts[5:15], rowvar=False)
    np.fill_diagonal(expected, 0.0)
    assert np.allclose(windows[5], expected)


def test_window_length_not_shorter_than_series():
    ts = np.random.RandomState(3).randn(20, 4)
    assert sliding_window_connectivity(ts, 20).shape == (0, 4, 4)
    assert sliding_window_connectivity(ts, 25).shape == (0, 4, 4)


def test_constant_column_gives_nan():
    rng = np.random.RandomState(4)
    ts = rng.randn(30, 3)
    ts[:, 2] = 0.0
    windows = sliding_window_connectivity(ts, 10)
    assert np.all(np.isnan(windows[:, 0, 2]))
    assert np.all(np.isnan(windows[:, 2, 1]))
    assert np.all(np.isfinite(windows[:, 0, 1]))
    assert np.all(windows[:, 2, 2] == 0.0)


def test_single_roi():
    ts = np.random.RandomState(5).randn(15, 1)
    windows = sliding_window_connectivity(ts, 5)
    assert windows.shape == (10, 1, 1)
    assert np.all(windows == 0.0)


@pytest.mark.parametrize("window_length", [0, -1])
def test_invalid_window_length(window_length):
    with pytest.raises(ValueError):
        sliding_window_connectivity(np.zeros((10, 2)), window_length)


def test_window_fc_per_subject():
    rng = np.random.RandomState(6)
    cohort = rng.randn(4, 3, 40)
    win = window_fc(cohort, 15)
    assert len(win) == 3
    for s, windows in enumerate(win):
        assert windows.shape == (25, 4, 4)
        assert np.array_equal(windows, sliding_window_connectivity(cohort[:, s, :].T, 15))


def test_single_sample_window_is_silent():
    ts = np.random.RandomState(7).randn(12, 3)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        windows = sliding_window_connectivity(ts, 1)
    assert windows.shape == (11, 3, 3)
    assert np.all(np.isnan(windows[:, ~np.eye(3, dtype=bool)]))
