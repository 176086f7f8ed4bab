"""Rasterise a magnitude spectrogram as a scatter heatmap.

One filled point per (frame, bin) cell for the lower half of the spectrum,
coloured by :mod:`wavspec.colormap`.  Tick labels show the raw frame and bin
indices with "s" / "Hz" suffixes unless ``physical_units`` is requested.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.ticker import MaxNLocator

from wavspec.colormap import intensities_to_colors, magnitude_range, normalize
from wavspec.config import (
    BACKGROUND, CANVAS_SIZE, DPI, HOP_SIZE, LABEL_AREA, MARGIN, MARKER_SIZE
)
from wavspec.engine import bin_frequencies, frame_times
from wavspec.errors import RenderError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Layout helpers
# -----------------------------------------------------------------------------

def _axes_rect(canvas_size: tuple[int, int]) -> list[float]:
    """[left, bottom, width, height] in figure fractions."""
    w, h = canvas_size
    left = bottom = MARGIN + LABEL_AREA
    width = w - left - MARGIN
    height = h - bottom - MARGIN
    if width <= 0 or height <= 0:
        raise RenderError(f"Canvas {w}x{h} too small for margins")
    return [left / w, bottom / h, width / w, height / h]


def _integer_ticks(upper: int, nbins: int = 10) -> list[int]:
    ticks = MaxNLocator(nbins=nbins, integer=True).tick_values(0, max(upper, 1))
    return [int(t) for t in ticks if 0 <= t <= upper]


def _label_axes(ax, n_frames: int, window_size: int, *,
                sample_rate: float | None, hop_size: int,
                physical_units: bool) -> None:
    xticks = _integer_ticks(n_frames)
    yticks = _integer_ticks(window_size // 2)

    if physical_units:
        seconds = frame_times(n_frames + 1, sample_rate, hop_size)
        hz      = bin_frequencies(sample_rate, window_size)
        xlabels = [f"{seconds[t]:.2f} s" for t in xticks]
        ylabels = [f"{hz[t]:.0f} Hz" for t in yticks]
    else:
        xlabels = [f"{t} s" for t in xticks]
        ylabels = [f"{t} Hz" for t in yticks]

    ax.set_xticks(xticks)
    ax.set_xticklabels(xlabels)
    ax.set_yticks(yticks)
    ax.set_yticklabels(ylabels)
    ax.set_xlabel("Time (s)")
    ax.set_ylabel("Frequency (Hz)")

# -----------------------------------------------------------------------------
# Figure
# -----------------------------------------------------------------------------

def _draw(fig, spectrogram: np.ndarray, *, sample_rate, hop_size, physical_units,
          canvas_size) -> None:
    n_frames, window_size = spectrogram.shape
    half = window_size // 2

    ax = fig.add_axes(_axes_rect(canvas_size))
    ax.set_facecolor(BACKGROUND)
    ax.set_xlim(0, max(n_frames, 1))
    ax.set_ylim(0, max(half, 1))

    if n_frames and half:
        intensity = normalize(spectrogram)[:, :half]
        colors = intensities_to_colors(intensity).reshape(-1, 3) / 255.0
        frames, bins = np.meshgrid(np.arange(n_frames), np.arange(half), indexing="ij")
        ax.scatter(frames.ravel(), bins.ravel(), c=colors,
                   s=MARKER_SIZE, marker="o", linewidths=0)

    _label_axes(ax, n_frames, window_size, sample_rate=sample_rate,
                hop_size=hop_size, physical_units=physical_units)


def save_spectrogram_image(
    spectrogram: np.ndarray,
    output_path: str | Path,
    *,
    sample_rate: float | None = None,
    hop_size: int = HOP_SIZE,
    physical_units: bool = False,
    canvas_size: tuple[int, int] = CANVAS_SIZE,
) -> Path:
    """
    Render *spectrogram* (frames x bins) to *output_path*.

    The image is written to a temporary file next to *output_path* and moved
    into place once complete, so a failed render never leaves a partial file.
    The format follows the file suffix (anything matplotlib can save).

    Returns
    -------
    Path
        The written file.
    """
    spectrogram = np.asarray(spectrogram, dtype=np.float32)
    if spectrogram.ndim != 2:
        raise RenderError(f"Expected a 2-D spectrogram, got shape {spectrogram.shape}")
    if physical_units and not sample_rate:
        raise RenderError("physical_units requires a sample_rate")

    output_path = Path(output_path)
    min_value, max_value = magnitude_range(spectrogram)
    logger.debug("Rendering %s, magnitude range [%g, %g]",
                 spectrogram.shape, min_value, max_value)

    w, h = canvas_size
    fig = Figure(figsize=(w / DPI, h / DPI), dpi=DPI, facecolor=BACKGROUND)
    FigureCanvasAgg(fig)
    tmp_path = None
    try:
        _draw(fig, spectrogram, sample_rate=sample_rate, hop_size=hop_size,
              physical_units=physical_units, canvas_size=canvas_size)

        fd, tmp_name = tempfile.mkstemp(prefix=".wavspec-", suffix=output_path.suffix,
                                        dir=output_path.parent)
        os.close(fd)
        tmp_path = Path(tmp_name)
        fig.savefig(tmp_path, dpi=DPI, facecolor=BACKGROUND)
        os.replace(tmp_path, output_path)
        tmp_path = None
    except (OSError, ValueError) as e:
        raise RenderError(f"Could not write {output_path}: {e}") from e
    finally:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()

    logger.debug("Saved spectrogram image to %s", output_path)
    return output_path
