"""
samples.py – Read ``<x>,<y>`` sample points from text.

Lines that are not exactly two comma-separated numbers are logged and
skipped; the remaining samples keep their input order.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, NamedTuple, Union

import pandas as pd

logger = logging.getLogger(__name__)


class Sample(NamedTuple):
    x: float
    y: float


def parse_samples(lines: Iterable[str]) -> List[Sample]:
    raw = pd.Series([line.rstrip("\r\n") for line in lines], dtype=object)
    if raw.empty:
        return []

    # ---- split on the single comma ---------------------------------------
    text = raw.astype(str)
    two_fields = text.str.count(",") == 1
    parts = text.str.split(",", n=1, expand=True).reindex(columns=[0, 1]).fillna("")
    xs = pd.to_numeric(parts[0].str.strip(), errors="coerce")
    ys = pd.to_numeric(parts[1].str.strip(), errors="coerce")

    valid = two_fields & xs.notna() & ys.notna()
    for line in raw[~valid]:
        logger.warning("Discarding data point: %r", line)

    return [Sample(float(x), float(y)) for x, y in zip(xs[valid], ys[valid])]


def load_samples(path: Union[str, Path]) -> List[Sample]:
    path = Path(path)
    # undecodable bytes become U+FFFD so the line fails parsing like any other
    with path.open(encoding="utf-8", errors="replace") as fh:
        samples = parse_samples(fh)
    logger.debug("Loaded %d samples from %s", len(samples), path)
    return samples
