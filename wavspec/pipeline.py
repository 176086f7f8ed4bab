"""Load -> STFT -> render for one configuration."""

from __future__ import annotations

import logging

import numpy as np

from wavspec.config import SpectrogramConfig
from wavspec.engine import generate_spectrogram, peak_bins
from wavspec.loader import read_audio_file
from wavspec.renderer import save_spectrogram_image

logger = logging.getLogger(__name__)


def run(config: SpectrogramConfig) -> np.ndarray:
    """
    Render ``config.input_path`` to ``config.output_path``.

    Any decode or render failure propagates and no image is written.
    Returns the magnitude spectrogram that was plotted.
    """
    clip = read_audio_file(config.input_path)
    logger.info("Audio data length: %d", clip.samples.size)

    spectrogram = generate_spectrogram(clip.samples, config.window_size, config.hop_size)
    if logger.isEnabledFor(logging.DEBUG) and spectrogram.shape[0]:
        peaks = peak_bins(spectrogram, max_bin=config.window_size // 2)
        logger.debug("Dominant bin: %d", int(np.bincount(peaks).argmax()))

    save_spectrogram_image(
        spectrogram,
        config.output_path,
        sample_rate=clip.sample_rate,
        hop_size=config.hop_size,
        physical_units=config.physical_units,
    )
    return spectrogram
