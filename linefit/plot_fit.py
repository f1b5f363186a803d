#!/usr/bin/env python3
"""
plot_fit.py – Fit a line to ``x,y`` samples by gradient descent and plot it.

Usage
-----
$ python -m linefit -n 1000 -i data.txt -o out.png

Every line of the input file should hold one ``<x>,<y>`` pair; anything else
is logged and skipped.  One ``cost(m, c) = cost`` line is printed per
iteration, followed by the fitted equation, MSE and R².  The image shows the
samples as red crosses and the fitted line over x = 0 … 20.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .logging_config import LOGGER_NAME, setup_logging
from .regression import (
    DEFAULT_ITERATIONS,
    DEFAULT_LEARNING_RATE,
    IterationRecord,
    RegressionError,
    fit,
)
from .render import DEFAULT_SIZE, RenderError, render_fit
from .samples import load_samples
from .summary import summarize_fit

DEFAULT_INPUT = "data.txt"
DEFAULT_OUTPUT = "out.png"

logger = logging.getLogger(LOGGER_NAME)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plot-fit",
        description="Fit a line to x,y samples by gradient descent and plot it.",
    )
    parser.add_argument("-n", "--iterations", type=int, default=DEFAULT_ITERATIONS,
                        help="number of iterations (default: %(default)s)")
    parser.add_argument("-a", "--learning-rate", type=float, default=DEFAULT_LEARNING_RATE,
                        help="gradient-descent step size (default: %(default)s)")
    parser.add_argument("-i", "--input", default=DEFAULT_INPUT,
                        help="sample file, one x,y pair per line (default: %(default)s)")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT,
                        help="image to write (default: %(default)s)")
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE,
                        help="image width and height in pixels (default: %(default)s)")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="do not print per-iteration cost")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="enable debug logging")
    parser.add_argument("--log-file", default=None,
                        help="also write log records to this file")
    return parser


def _print_record(record: IterationRecord) -> None:
    print(record)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    # ---- load --------------------------------------------------------------
    try:
        samples = load_samples(args.input)
    except OSError as exc:
        logger.critical("Could not read file: %s", exc)
        return 1

    # ---- fit ---------------------------------------------------------------
    try:
        line = fit(
            samples,
            iterations=args.iterations,
            learning_rate=args.learning_rate,
            on_iteration=None if args.quiet else _print_record,
        )
    except RegressionError as exc:
        logger.critical("Could not fit data: %s", exc)
        return 1

    summary = summarize_fit(samples, line)
    print(f"Best‑fit line:\n  {summary.equation()}")
    print(f"MSE       : {summary.mse:.4f}")
    print(f"R²        : {summary.r2:.4f}")

    # ---- plotting ----------------------------------------------------------
    try:
        path = render_fit(args.output, samples, line.slope, line.intercept, size=args.size)
    except RenderError as exc:
        logger.critical("Could not plot data: %s", exc)
        return 1

    logger.info("Wrote %s", path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
