import math

import pytest

from linefit.regression import LineFit
from linefit.summary import summarize_fit


def test_perfect_fit():
    samples = [(0.0, 3.0), (1.0, 5.0), (2.0, 7.0)]
    summary = summarize_fit(samples, LineFit(2.0, 3.0))

    assert summary.mse == pytest.approx(0.0)
    assert summary.r2 == pytest.approx(1.0)
    assert summary.equation() == "y = 2 × x +3"


def test_mse_of_offset_line():
    samples = [(0.0, 1.0), (1.0, 1.0)]
    summary = summarize_fit(samples, LineFit(0.0, 0.0))
    assert summary.mse == pytest.approx(1.0)


def test_single_sample_has_no_r2():
    summary = summarize_fit([(0.0, 5.0)], LineFit(0.0, 0.1))
    assert summary.mse == pytest.approx(4.9 ** 2)
    assert math.isnan(summary.r2)


def test_diverged_fit_reports_nan():
    summary = summarize_fit([(1.0, 1.0), (2.0, 2.0)], LineFit(float("inf"), 0.0))
    assert math.isnan(summary.mse)
    assert math.isnan(summary.r2)


def test_empty_samples_rejected():
    with pytest.raises(ValueError):
        summarize_fit([], LineFit(0.0, 0.0))
