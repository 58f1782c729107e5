from .. import UnsupportedLayoutError
from .common import Resource

import logging
log = logging.getLogger(__name__)


class PixelFormatDescriptor:
    '''
    Read-only classification of a frame's pixel format, taken from FFmpeg's
    AVPixFmtDescriptor (exposed by PyAV as av.VideoFormat).
    '''
    def __init__(self, fmt):
        self.av = fmt

    @classmethod
    def of(cls, frame):
        fmt = getattr(frame, 'format', None)
        if fmt is None or not getattr(fmt, 'name', None):
            raise UnsupportedLayoutError('Could not get icon format descriptor')
        return cls(fmt)

    @property
    def name(self):
        return self.av.name

    @property
    def is_rgb(self):
        return bool(self.av.is_rgb)

    @property
    def is_planar(self):
        return bool(self.av.is_planar)

    @property
    def has_palette(self):
        return bool(self.av.has_palette)

    @property
    def is_packed_rgb(self):
        # palette formats carry indices, not interleaved channels
        return self.is_rgb and not self.is_planar and not self.has_palette

    @property
    def bits_per_pixel(self):
        return self.av.bits_per_pixel

    def __repr__(self):
        layout = 'planar' if self.is_planar else 'packed'
        model = 'rgb' if self.is_rgb else 'non-rgb'
        return f'<PixelFormatDescriptor {self.name} {layout} {model} {self.bits_per_pixel}bpp>'


class DecodedFrame(Resource):
    '''
    Owns one decoded frame: its pixel memory plus width, height, per-plane
    row stride and pixel format.

    Starts empty; FrameDecoder fills it with receive(). Dropping the frame
    (free()) releases the pixel memory once nothing else references it.
    '''
    kind = 'frame'

    def receive(self, frame):
        assert self._owned and self.av is None, 'frame already populated'
        self.av = frame

    @property
    def width(self):
        return self.av.width

    @property
    def height(self):
        return self.av.height

    @property
    def format(self):
        return PixelFormatDescriptor.of(self.av)

    @property
    def planes(self):
        return self.av.planes

    def linesize(self, plane = 0):
        return self.av.planes[plane].line_size

    def data_ptr(self, plane = 0):
        return self.av.planes[plane].buffer_ptr

    def __repr__(self):
        if self.av is None:
            return f'<DecodedFrame {"freed" if self.freed else "empty"}>'
        return f'<DecodedFrame {self.width}x{self.height} {self.av.format.name} linesize={self.linesize()}>'
