"""End-to-end tests of load() / destroy()."""

import numpy as np
import pytest

import av_icon
from av_icon.ffmpeg.libavutil import DecodedFrame
from av_icon.paths import ICON_PATH_ENV


def test_load_uses_environment_override(make_image, monkeypatch, no_leaks):
    monkeypatch.setenv(ICON_PATH_ENV, make_image("icon.png", "RGBA", (256, 256)))

    icon = av_icon.load()
    assert icon is not None
    assert (icon.width, icon.height) == (256, 256)
    assert icon.format == av_icon.PixelFormat.RGBA32
    assert icon.pitch == 1024
    av_icon.destroy(icon)


def test_load_missing_icon_is_not_fatal(tmp_path, monkeypatch, caplog, no_leaks):
    monkeypatch.setenv(ICON_PATH_ENV, str(tmp_path / "missing.png"))

    assert av_icon.load() is None
    assert "ContainerOpenError" in caplog.text


def test_load_unresolvable_path(monkeypatch, caplog):
    monkeypatch.delenv(ICON_PATH_ENV, raising=False)
    monkeypatch.setattr("sys.argv", [])

    assert av_icon.load(portable=True) is None
    assert "IconPathError" in caplog.text


def test_load_non_rgb_returns_none(make_image, caplog, no_leaks):
    assert av_icon.load_from_path(make_image("photo.jpg", "RGB", (64, 64))) is None
    assert "UnsupportedLayoutError" in caplog.text


def test_audio_file_returns_none(wav_file, caplog, no_leaks):
    assert av_icon.load_from_path(wav_file) is None
    assert "NoSuitableStreamError" in caplog.text


@pytest.mark.parametrize(
    "name, mode, size",
    [
        ("a.png", "RGBA", (256, 256)),
        ("b.png", "RGB", (17, 5)),
        ("c.png", "RGBA", (1, 1)),
        ("d.bmp", "RGB", (33, 9)),
    ],
)
def test_pitch_covers_a_row(make_image, name, mode, size, no_leaks):
    icon = av_icon.load_from_path(make_image(name, mode, size))
    assert (icon.width, icon.height) == size
    assert icon.pitch >= icon.width * icon.bytes_per_pixel
    av_icon.destroy(icon)


def test_destroy_frees_frame_once(make_image, monkeypatch, no_leaks):
    calls = []
    original = DecodedFrame._release

    def _release(self):
        calls.append(self)
        original(self)

    monkeypatch.setattr(DecodedFrame, "_release", _release)

    icon = av_icon.load_from_path(make_image("icon.png"))
    frame = icon.frame
    av_icon.destroy(icon)
    assert calls == [frame]
    assert icon.frame is None

    with pytest.raises(AssertionError):
        av_icon.destroy(icon)
    assert calls == [frame]


def test_surfaces_are_independent(make_image, no_leaks):
    first = av_icon.load_from_path(make_image("first.png", "RGB", (8, 8)))
    second = av_icon.load_from_path(make_image("second.png", "RGBA", (8, 8)))
    expected = second.pixels.copy()

    av_icon.destroy(first)
    np.testing.assert_array_equal(second.pixels, expected)
    av_icon.destroy(second)


def test_pixels_are_zero_copy(make_image, no_leaks):
    icon = av_icon.load_from_path(make_image("icon.png", "RGBA", (4, 4)))
    view = icon.pixels
    assert view.__array_interface__["data"][0] == icon.pixels_ptr
    av_icon.destroy(icon)

    # the view holds the buffer on its own
    assert view.shape == (4, 4, 4)
    del view


def test_to_image_round_trip(make_image, no_leaks):
    from PIL import Image

    path = make_image("icon.png", "RGBA", (12, 6))
    icon = av_icon.load_from_path(path)
    image = icon.to_image()
    av_icon.destroy(icon)

    assert image.mode == "RGBA"
    np.testing.assert_array_equal(np.asarray(image), np.asarray(Image.open(path)))


def test_destroyed_surface_has_no_pixels(make_image):
    icon = av_icon.load_from_path(make_image("icon.png", "RGBA", (4, 4)))
    av_icon.destroy(icon)
    with pytest.raises(ValueError):
        icon.pixels
