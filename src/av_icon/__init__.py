"""Load a still image as an icon surface, using FFmpeg through PyAV.

This package decodes an arbitrary image file (anything FFmpeg can demux and
decode) into a packed-RGB pixel buffer that a windowing layer can use as a
window or taskbar icon, without copying the decoded pixels.

Quick Start:
    import av_icon

    icon = av_icon.load()          # resolves the icon path itself
    if icon is not None:
        window.set_icon(icon.pixels, icon.format)
        av_icon.destroy(icon)

    icon = av_icon.load_from_path('/path/to/icon.png')

A missing or undecodable icon is never fatal: load() logs the failing stage
and returns None.

Pipeline:
    ContainerProbe   open the file and pick the best image stream
    CodecNegotiator  find and open a decoder for that stream
    FrameDecoder     decode exactly one frame from the first packet
    SurfaceAdapter   check the frame is packed RGB and wrap it as a Surface

Exceptions (raised by the stages, caught by load):
    IconPathError: no icon path could be resolved.
    ContainerOpenError: the file could not be opened as a media container.
    NoStreamInfoError: the container exposes no stream.
    NoSuitableStreamError: the container holds no image-like stream.
    CodecNotSupportedError: FFmpeg has no decoder for the stream's codec.
    DecoderInitError: the decoder could not be configured or opened.
    NoFrameError: the single decode attempt did not yield a frame.
    UnsupportedLayoutError: the frame is planar, paletted or not RGB.
    UnmappedFormatError: packed RGB, but no surface format matches it.
    SurfaceError: a surface could not be built over the frame.
"""

class IconError(Exception):
    """Base class of every icon loading failure."""
    pass

class IconPathError(IconError):
    """Raised when no icon path could be resolved."""
    pass

class ContainerOpenError(IconError):
    """Raised when the file cannot be opened as a media container."""
    pass

class NoStreamInfoError(IconError):
    """Raised when the container does not expose any stream."""
    pass

class NoSuitableStreamError(IconError):
    """Raised when the container has no image-bearing stream."""
    pass

class CodecNotSupportedError(IconError):
    """Raised when FFmpeg has no decoder for the stream's codec."""
    pass

class DecoderInitError(IconError):
    """Raised when the decoder cannot be configured or opened."""
    pass

class NoFrameError(IconError):
    """Raised when no frame could be decoded from the image."""
    pass

class UnsupportedLayoutError(IconError):
    """Raised when the decoded frame is not packed RGB."""
    pass

class UnmappedFormatError(IconError):
    """Raised when a packed RGB format has no surface format counterpart."""
    pass

class SurfaceError(IconError):
    """Raised when a surface cannot be built over a decoded frame."""
    pass

from .formats import PixelFormat
from .surface import Surface
from .icon import load, load_from_path, destroy
