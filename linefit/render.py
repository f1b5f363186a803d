"""
render.py – Scatter the samples and overlay the fitted line.

The line preview always spans x = 0 … 20, whatever the data range.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, Union

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402

LINE_X_RANGE = (0.0, 20.0)
DEFAULT_SIZE = 256
DPI = 100


class RenderError(RuntimeError):
    """Raised when the plot cannot be written to disk."""


def build_figure(
    samples: Sequence[Sequence[float]],
    slope: float,
    intercept: float,
    size: int = DEFAULT_SIZE,
) -> Figure:
    fig, ax = plt.subplots(figsize=(size / DPI, size / DPI), dpi=DPI)

    if len(samples):
        xs, ys = zip(*samples)
        ax.scatter(xs, ys, marker="x", color="red", linewidths=1)

    x0, x1 = LINE_X_RANGE
    ax.plot([x0, x1], [slope * x0 + intercept, slope * x1 + intercept])
    return fig


def render_fit(
    path: Union[str, Path],
    samples: Sequence[Sequence[float]],
    slope: float,
    intercept: float,
    size: int = DEFAULT_SIZE,
) -> Path:
    """Write the scatter + line plot to *path* and return it.

    The image format follows the file suffix (PNG when there is none).
    """
    path = Path(path)
    fig = build_figure(samples, slope, intercept, size=size)
    try:
        fig.savefig(path, dpi=DPI, format=path.suffix.lstrip(".") or "png")
    except (OSError, ValueError) as exc:
        raise RenderError(f"Could not write {path}: {exc}") from exc
    finally:
        plt.close(fig)
    return path
