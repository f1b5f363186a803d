"""Goodness-of-fit figures reported after a run."""

from __future__ import annotations

from typing import NamedTuple, Sequence

import numpy as np
from sklearn.metrics import mean_squared_error, r2_score

from .regression import LineFit


class FitSummary(NamedTuple):
    slope: float
    intercept: float
    mse: float
    r2: float

    def equation(self) -> str:
        return f"y = {self.slope:.4g} × x {self.intercept:+.4g}"


def summarize_fit(samples: Sequence[Sequence[float]], line: LineFit) -> FitSummary:
    if len(samples) == 0:
        raise ValueError("Cannot summarize a fit over zero samples")
    data = np.asarray(samples, dtype=np.float64).reshape(len(samples), 2)
    x, y = data[:, 0], data[:, 1]
    y_hat = line.slope * x + line.intercept
    if not np.all(np.isfinite(y_hat)):
        # diverged fit; sklearn rejects non-finite predictions
        return FitSummary(line.slope, line.intercept, float("nan"), float("nan"))

    mse = float(mean_squared_error(y, y_hat))
    # R² is undefined for a single point
    r2 = float(r2_score(y, y_hat)) if len(samples) > 1 else float("nan")
    return FitSummary(line.slope, line.intercept, mse, r2)
