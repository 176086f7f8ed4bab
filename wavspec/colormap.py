"""Magnitude -> intensity -> RGB.

The transfer function below is tuned by eye for contrast on a white canvas.
It is not a perceptual colormap and most intensities push at least one
channel out of range, so every channel is saturated to [0, 255] after the
float result is truncated toward zero.
"""

from __future__ import annotations

import numpy as np

# (offset, gain) per channel: value = offset - gain * intensity * 255
RED_COEFFS   = (92.0, 5.0)
GREEN_COEFFS = (22.0, 3.0)
BLUE_COEFFS  = (127.0, 10.0)

# -----------------------------------------------------------------------------
# Normalisation
# -----------------------------------------------------------------------------

def magnitude_range(spectrogram: np.ndarray) -> tuple[float, float]:
    """Global ``(min, max)`` over every magnitude; ``(0.0, 0.0)`` when empty."""
    spectrogram = np.asarray(spectrogram)
    if spectrogram.size == 0:
        return 0.0, 0.0
    return float(spectrogram.min()), float(spectrogram.max())


def normalize(spectrogram: np.ndarray) -> np.ndarray:
    """
    Rescale magnitudes to intensities via the global min/max, without
    clamping.  A flat spectrogram (``max == min``, e.g. silence) maps every
    cell to intensity 0.
    """
    spectrogram = np.asarray(spectrogram, dtype=np.float32)
    min_value, max_value = magnitude_range(spectrogram)
    if max_value == min_value:
        return np.zeros_like(spectrogram)
    return (spectrogram - min_value) / (max_value - min_value)

# -----------------------------------------------------------------------------
# Transfer function
# -----------------------------------------------------------------------------

def _channel(intensity, offset: float, gain: float):
    value = np.trunc(offset - gain * intensity * 255.0)
    return np.clip(value, 0, 255)


def intensity_to_color(intensity: float) -> tuple[int, int, int]:
    """
    Map one intensity to an ``(r, g, b)`` triple of 8-bit channels.

    * ``0.0`` -> ``(92, 22, 127)``
    * ``1.0`` -> ``(0, 0, 0)`` (red is -1183 before saturation)
    * NaN is treated as ``0.0``
    """
    intensity = float(intensity)
    if np.isnan(intensity):
        intensity = 0.0
    return (int(_channel(intensity, *RED_COEFFS)),
            int(_channel(intensity, *GREEN_COEFFS)),
            int(_channel(intensity, *BLUE_COEFFS)))


def intensities_to_colors(intensities: np.ndarray) -> np.ndarray:
    """Vectorised :func:`intensity_to_color`; returns uint8 of shape ``(..., 3)``."""
    intensities = np.nan_to_num(np.asarray(intensities, dtype=np.float64), nan=0.0)
    rgb = np.stack([_channel(intensities, *RED_COEFFS),
                    _channel(intensities, *GREEN_COEFFS),
                    _channel(intensities, *BLUE_COEFFS)], axis=-1)
    return rgb.astype(np.uint8)
