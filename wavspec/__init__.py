"""Render 16-bit PCM recordings as STFT spectrogram images."""

from wavspec.colormap import intensity_to_color, normalize
from wavspec.config import HOP_SIZE, WINDOW_SIZE, SpectrogramConfig
from wavspec.engine import generate_spectrogram
from wavspec.errors import ConfigError, DecodeError, RenderError, WavspecError
from wavspec.loader import AudioClip, read_audio_file
from wavspec.pipeline import run
from wavspec.renderer import save_spectrogram_image

__all__ = [
    "AudioClip",
    "ConfigError",
    "DecodeError",
    "HOP_SIZE",
    "RenderError",
    "SpectrogramConfig",
    "WINDOW_SIZE",
    "WavspecError",
    "generate_spectrogram",
    "intensity_to_color",
    "normalize",
    "read_audio_file",
    "run",
    "save_spectrogram_image",
]
