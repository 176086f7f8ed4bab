"""Tests for WAV decoding into the normalized sample buffer."""

import numpy as np
import pytest
import scipy.io.wavfile as wav

from wavspec.errors import DecodeError
from wavspec.loader import read_audio_file

from audio_helpers import sine_wave, write_wav


class TestReadAudioFile:
    def test_normalises_by_int16_max(self, tmp_path):
        path = tmp_path / "pcm.wav"
        wav.write(str(path), 8000, np.array([32767, 0, -16384, 1], dtype=np.int16))

        clip = read_audio_file(path)
        assert clip.sample_rate == 8000
        assert clip.samples.dtype == np.float32
        assert clip.samples[0] == 1.0
        assert clip.samples[1] == 0.0
        assert clip.samples[2] == pytest.approx(-16384 / 32767)
        assert clip.samples[3] == pytest.approx(1 / 32767)

    def test_keeps_channel_zero(self, tmp_path):
        path = tmp_path / "stereo.wav"
        frames = np.column_stack([np.full(100, 0.5), np.full(100, -0.5)])
        write_wav(path, frames, 22050)

        clip = read_audio_file(path)
        assert clip.samples.shape == (100,)
        np.testing.assert_allclose(clip.samples, 0.5, atol=1e-4)

    def test_round_trip_sine(self, tmp_path):
        path = tmp_path / "tone.wav"
        tone = sine_wave(440, 0.25, 44100)
        write_wav(path, tone, 44100)

        clip = read_audio_file(str(path))
        assert clip.samples.size == tone.size
        np.testing.assert_allclose(clip.samples, tone, atol=1e-4)

    def test_samples_are_read_only(self, tmp_path):
        path = tmp_path / "ro.wav"
        write_wav(path, np.zeros(16), 8000)
        clip = read_audio_file(path)
        with pytest.raises(ValueError):
            clip.samples[0] = 1.0

    def test_missing_file(self, tmp_path):
        with pytest.raises(DecodeError):
            read_audio_file(tmp_path / "nope.wav")

    def test_garbage_file(self, tmp_path):
        path = tmp_path / "bad.wav"
        path.write_bytes(b"this is not a wav file")
        with pytest.raises(DecodeError) as exc:
            read_audio_file(path)
        assert exc.value.__cause__ is not None

    def test_headerless_raw_file(self, tmp_path):
        # soundfile needs samplerate/channels/subtype for RAW and raises TypeError
        path = tmp_path / "clip.raw"
        path.write_bytes(np.zeros(64, dtype=np.int16).tobytes())
        with pytest.raises(DecodeError) as exc:
            read_audio_file(path)
        assert isinstance(exc.value.__cause__, TypeError)
