"""
regression.py – Fit y = m·x + c by batch gradient descent on the mean
squared error.

Every call starts from (m, c) = (0, 0) and runs exactly *iterations* steps;
there is no convergence check.  Each step emits an :class:`IterationRecord`
carrying the updated parameters and the cost evaluated at them.
"""

from __future__ import annotations

import math
from numbers import Integral
from typing import Callable, Iterator, NamedTuple, Optional, Protocol, Sequence, Tuple

import numpy as np

DEFAULT_ITERATIONS = 1000
DEFAULT_LEARNING_RATE = 0.01


class RegressionError(ValueError):
    """Base class for fit requests rejected before any iteration runs."""


class DegenerateInputError(RegressionError):
    """Raised when a fit is requested on zero samples."""


class InvalidHyperparameterError(RegressionError):
    """Raised for a negative iteration count or a non-positive learning rate."""


class CancelToken(Protocol):
    def is_set(self) -> bool: ...


class LineFit(NamedTuple):
    slope: float
    intercept: float


class IterationRecord(NamedTuple):
    iteration: int
    slope: float
    intercept: float
    cost: float

    def __str__(self) -> str:
        return f"cost({self.slope:.2f}, {self.intercept:.2f}) = {self.cost:.2f}"


def compute_cost(xs: np.ndarray, ys: np.ndarray, m: float, c: float) -> float:
    # 1/N * sum((y - (m*x + c))^2)
    residual = ys - (m * xs + c)
    return float(np.sum(residual * residual) / len(xs))


def compute_gradient(
    xs: np.ndarray, ys: np.ndarray, m: float, c: float
) -> Tuple[float, float]:
    # d/dm = 2/N * sum(-x * (y - (m*x + c)))
    # d/dc = 2/N * sum(-(y - (m*x + c)))
    residual = ys - (m * xs + c)
    n = len(xs)
    dm = 2 / n * float(np.sum(-xs * residual))
    dc = 2 / n * float(np.sum(-residual))
    return dm, dc


def _as_arrays(samples: Sequence[Sequence[float]]) -> Tuple[np.ndarray, np.ndarray]:
    if len(samples) == 0:
        raise DegenerateInputError("Cannot fit a line to zero samples")
    data = np.asarray(samples, dtype=np.float64).reshape(len(samples), 2)
    return data[:, 0], data[:, 1]


def _check_hyperparameters(iterations: int, learning_rate: float) -> None:
    if isinstance(iterations, bool) or not isinstance(iterations, Integral):
        raise InvalidHyperparameterError(
            f"iterations must be an integer, got {iterations!r}"
        )
    if iterations < 0:
        raise InvalidHyperparameterError(
            f"iterations must be non-negative, got {iterations}"
        )
    if not math.isfinite(learning_rate) or learning_rate <= 0:
        raise InvalidHyperparameterError(
            f"learning_rate must be a positive number, got {learning_rate!r}"
        )


def _steps(
    xs: np.ndarray, ys: np.ndarray, iterations: int, learning_rate: float
) -> Iterator[IterationRecord]:
    m, c = 0.0, 0.0
    for i in range(iterations):
        dm, dc = compute_gradient(xs, ys, m, c)
        m -= learning_rate * dm
        c -= learning_rate * dc
        yield IterationRecord(i, m, c, compute_cost(xs, ys, m, c))


def descend(
    samples: Sequence[Sequence[float]],
    iterations: int = DEFAULT_ITERATIONS,
    learning_rate: float = DEFAULT_LEARNING_RATE,
) -> Iterator[IterationRecord]:
    """Return a lazy iterator over the per-iteration telemetry of a fit.

    Inputs are validated immediately, so a bad request raises here rather
    than on the first ``next()``.  The iterator yields exactly *iterations*
    records and cannot be restarted.
    """
    _check_hyperparameters(iterations, learning_rate)
    xs, ys = _as_arrays(samples)
    return _steps(xs, ys, iterations, float(learning_rate))


def fit(
    samples: Sequence[Sequence[float]],
    iterations: int = DEFAULT_ITERATIONS,
    learning_rate: float = DEFAULT_LEARNING_RATE,
    on_iteration: Optional[Callable[[IterationRecord], None]] = None,
    cancel: Optional[CancelToken] = None,
) -> LineFit:
    """Fit a line to *samples* and return the final (slope, intercept).

    Parameters
    ----------
    samples
        Non-empty sequence of ``(x, y)`` pairs.
    iterations
        Number of gradient-descent steps; ``0`` returns ``(0, 0)``.
    learning_rate
        Step size α, must be positive.
    on_iteration
        Called with every :class:`IterationRecord`, in order.
    cancel
        Optional object with an ``is_set()`` method (e.g.
        :class:`threading.Event`), checked after every iteration.  When
        set, the parameters reached so far are returned.

    Raises
    ------
    DegenerateInputError
        If *samples* is empty.
    InvalidHyperparameterError
        If *iterations* is negative or *learning_rate* is not positive.
    """
    result = LineFit(0.0, 0.0)
    for record in descend(samples, iterations, learning_rate):
        result = LineFit(record.slope, record.intercept)
        if on_iteration is not None:
            on_iteration(record)
        if cancel is not None and cancel.is_set():
            break
    return result
