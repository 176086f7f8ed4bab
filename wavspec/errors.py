"""Exceptions raised by the wavspec pipeline."""


class WavspecError(Exception):
    """Base class for every pipeline failure."""


class ConfigError(WavspecError, ValueError):
    """Invalid runtime parameters."""


class DecodeError(WavspecError):
    """The input audio file could not be opened or decoded."""


class RenderError(WavspecError):
    """The image could not be drawn or written."""
