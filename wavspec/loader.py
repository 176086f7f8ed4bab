"""Decode a PCM recording into a normalized float32 sample buffer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NamedTuple

import numpy as np
import soundfile as sf

from wavspec.config import PCM_FULL_SCALE
from wavspec.errors import DecodeError

logger = logging.getLogger(__name__)


class AudioClip(NamedTuple):
    samples: np.ndarray      # float32, [-1.0, 1.0], read-only
    sample_rate: int


def read_audio_file(path: str | Path) -> AudioClip:
    """
    Read *path* as 16-bit PCM and keep channel 0 only.

    Samples are divided by 32767 so a full-scale positive sample maps to 1.0.
    Any failure to open or decode the file is raised as :class:`DecodeError`.
    """
    try:
        audio, sr = sf.read(str(path), dtype="int16")
    except (RuntimeError, OSError, TypeError) as e:   # sf.LibsndfileError is a RuntimeError
        raise DecodeError(f"Could not decode {path}: {e}") from e

    if audio.ndim > 1:
        audio = audio[:, 0]

    samples = audio.astype(np.float32) / np.float32(PCM_FULL_SCALE)
    samples.setflags(write=False)
    logger.debug("Loaded %s: %d samples @ %d Hz", path, samples.size, sr)
    return AudioClip(samples, int(sr))
