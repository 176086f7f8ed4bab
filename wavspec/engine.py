"""Short-time Fourier transform over a normalized sample buffer.

Windows are rectangular: each slice of the buffer is transformed as-is, so
spectral leakage around a tone is expected.  The full two-sided spectrum is
kept for every frame; consumers pick the half they need.
"""

from __future__ import annotations

import logging

import numpy as np
import scipy.fft as sp_fft
from numpy.lib.stride_tricks import sliding_window_view

from wavspec.config import HOP_SIZE, WINDOW_SIZE

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Framing
# -----------------------------------------------------------------------------

def _check_sizes(window_size: int, hop_size: int) -> None:
    if window_size <= 0:
        raise ValueError(f"window_size must be > 0, got {window_size}")
    if not 0 < hop_size <= window_size:
        raise ValueError(f"hop_size must be in (0, {window_size}], got {hop_size}")


def frame_offsets(n_samples: int,
                  window_size: int = WINDOW_SIZE,
                  hop_size: int = HOP_SIZE) -> np.ndarray:
    """
    Start offsets ``0, hop, 2*hop, ...`` of every window that fits entirely
    inside a buffer of *n_samples*.  Empty when the buffer is shorter than one
    window.
    """
    _check_sizes(window_size, hop_size)
    offsets = []
    start = 0
    while start + window_size <= n_samples:
        offsets.append(start)
        start += hop_size
    return np.array(offsets, dtype=np.int64)


def frame_count(n_samples: int,
                window_size: int = WINDOW_SIZE,
                hop_size: int = HOP_SIZE) -> int:
    _check_sizes(window_size, hop_size)
    if n_samples < window_size:
        return 0
    return (n_samples - window_size) // hop_size + 1

# -----------------------------------------------------------------------------
# Transform
# -----------------------------------------------------------------------------

def generate_spectrogram(samples: np.ndarray,
                         window_size: int = WINDOW_SIZE,
                         hop_size: int = HOP_SIZE) -> np.ndarray:
    """
    Magnitude spectrogram of *samples*.

    Returns
    -------
    spectrogram : np.ndarray
        float32 array of shape ``(n_frames, window_size)``; row *i* is the
        magnitude of the *window_size*-point DFT of
        ``samples[i*hop_size : i*hop_size + window_size]``.
    """
    samples = np.asarray(samples, dtype=np.float32)
    if samples.ndim != 1:
        raise ValueError(f"Expected a 1-D sample buffer, got shape {samples.shape}")

    offsets = frame_offsets(samples.size, window_size, hop_size)
    if offsets.size == 0:
        spectrogram = np.empty((0, window_size), dtype=np.float32)
    else:
        frames = sliding_window_view(samples, window_size)[offsets]
        buffer = frames.astype(np.complex64)       # imaginary part = 0
        spectrogram = np.abs(sp_fft.fft(buffer, n=window_size, axis=1)).astype(np.float32)

    logger.debug("STFT: %d samples -> %d frames x %d bins",
                 samples.size, spectrogram.shape[0], window_size)
    return spectrogram

# -----------------------------------------------------------------------------
# Axis helpers
# -----------------------------------------------------------------------------

def bin_frequencies(sample_rate: float, window_size: int = WINDOW_SIZE) -> np.ndarray:
    """Centre frequency in Hz of each of the *window_size* bins."""
    return np.arange(window_size) * (sample_rate / window_size)


def frame_times(n_frames: int, sample_rate: float, hop_size: int = HOP_SIZE) -> np.ndarray:
    """Start time in seconds of each frame."""
    return np.arange(n_frames) * (hop_size / sample_rate)


def peak_bins(spectrogram: np.ndarray, max_bin: int | None = None) -> np.ndarray:
    """Index of the strongest bin in every frame, searching ``[0, max_bin)``."""
    spectrogram = np.asarray(spectrogram)
    if max_bin is not None:
        spectrogram = spectrogram[:, :max_bin]
    if spectrogram.shape[0] == 0:
        return np.empty(0, dtype=np.int64)
    return np.argmax(spectrogram, axis=1)
