"""Fit a straight line to 2-D samples by gradient descent and plot it."""

from .regression import (
    DegenerateInputError,
    InvalidHyperparameterError,
    IterationRecord,
    LineFit,
    RegressionError,
    descend,
    fit,
)
from .samples import Sample, load_samples, parse_samples

__all__ = [
    "DegenerateInputError",
    "InvalidHyperparameterError",
    "IterationRecord",
    "LineFit",
    "RegressionError",
    "Sample",
    "descend",
    "fit",
    "load_samples",
    "parse_samples",
]
