"""Shared pytest fixtures for av_icon tests."""

import gc
import wave

import numpy as np
import pytest
from PIL import Image

from av_icon.ffmpeg.common import live_resources
from av_icon.ffmpeg.libavcodec import CompressedUnit, DecoderContext
from av_icon.ffmpeg.libavformat import ContainerHandle
from av_icon.ffmpeg.libavutil import DecodedFrame


def gradient(width, height, channels):
    """Deterministic test pattern, distinct in every channel."""
    y, x = np.mgrid[0:height, 0:width]
    planes = [(x * 3 + y + 40 * c) % 256 for c in range(channels)]
    return np.stack(planes, axis=-1).astype(np.uint8)


@pytest.fixture
def make_image(tmp_path):
    """Write a Pillow image into tmp_path and return its path.

    Args:
        name: file name; the extension picks the container format.
        mode: Pillow mode of the image ("RGBA", "RGB", "L", "P").
        size: (width, height).
    """

    def make(name, mode="RGBA", size=(256, 256), **save_kwargs):
        width, height = size
        if mode in ("RGBA", "RGB"):
            image = Image.fromarray(gradient(width, height, len(mode)), mode)
        elif mode == "L":
            image = Image.fromarray(gradient(width, height, 1)[..., 0], "L")
        else:
            image = Image.fromarray(gradient(width, height, 3), "RGB").convert(mode)
        path = tmp_path / name
        image.save(path, **save_kwargs)
        return str(path)

    return make


@pytest.fixture
def wav_file(tmp_path):
    """An audio-only container: opens fine but holds no image stream."""
    path = tmp_path / "tone.wav"
    with wave.open(str(path), "wb") as w:
        w.setnchannels(1)
        w.setsampwidth(2)
        w.setframerate(8000)
        w.writeframes(b"\x00\x01" * 8000)
    return str(path)


@pytest.fixture
def no_leaks():
    """Fail the test if it leaves more decode resources alive than it found."""
    gc.collect()
    before = live_resources()
    yield
    gc.collect()
    assert live_resources() == before


@pytest.fixture
def releases(monkeypatch):
    """Record the kind of every resource as it is actually released, in order."""
    order = []

    for cls in (ContainerHandle, DecoderContext, CompressedUnit, DecodedFrame):
        original = cls._release

        def _release(self, original=original):
            order.append(self.kind)
            original(self)

        monkeypatch.setattr(cls, "_release", _release)

    return order
