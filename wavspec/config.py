"""
Save configuration options here
"""
from __future__ import annotations

from dataclasses import dataclass

from wavspec.errors import ConfigError

# === FFT Parameters ===
WINDOW_SIZE           = 1024
HOP_SIZE              = WINDOW_SIZE // 2     # 50 % overlap

# === Audio Options ===
PCM_FULL_SCALE        = 32767                # i16::MAX, int16 -> [-1, 1]

# === Canvas ===
CANVAS_SIZE           = (1024, 768)          # pixels
DPI                   = 100
MARGIN                = 40                   # pixels around the chart
LABEL_AREA            = 30                   # pixels for tick labels, x and y
MARKER_SIZE           = 4.0                  # scatter area in points^2, ~3 px dot at DPI 100
BACKGROUND            = "white"

# === Paths ===
INPUT_PATH            = "input.wav"
OUTPUT_PATH           = "spectrogram.png"

# === Internal options ===
PHYSICAL_UNITS = False # label axes in seconds / Hz instead of frame / bin index
DEBUG_MODE = False     # in debug mode, enable debug logs


@dataclass(frozen=True)
class SpectrogramConfig:
    """Runtime parameters for one pipeline invocation."""

    input_path: str
    output_path: str
    window_size: int = WINDOW_SIZE
    hop_size: int = HOP_SIZE
    physical_units: bool = PHYSICAL_UNITS

    def __post_init__(self):
        if not self.input_path:
            raise ConfigError("input_path must not be empty")
        if not self.output_path:
            raise ConfigError("output_path must not be empty")
        if self.window_size <= 0:
            raise ConfigError(f"window_size must be > 0, got {self.window_size}")
        if not 0 < self.hop_size <= self.window_size:
            raise ConfigError(
                f"hop_size must be in (0, {self.window_size}], got {self.hop_size}"
            )

    @classmethod
    def from_defaults(cls, **overrides) -> "SpectrogramConfig":
        params = dict(
            input_path=INPUT_PATH,
            output_path=OUTPUT_PATH,
            window_size=WINDOW_SIZE,
            hop_size=HOP_SIZE,
            physical_units=PHYSICAL_UNITS,
        )
        params.update(overrides)
        return cls(**params)
