import numpy as np

from . import SurfaceError
from .formats import PixelFormat, bytes_per_pixel

import logging

log = logging.getLogger(__name__)

# surface format -> (Pillow mode, Pillow raw mode)
_PIL_MODES = {
    PixelFormat.RGB24 : ('RGB', 'RGB'),
    PixelFormat.BGR24 : ('RGB', 'BGR'),
    PixelFormat.ARGB32 : ('RGBA', 'ARGB'),
    PixelFormat.RGBA32 : ('RGBA', 'RGBA'),
    PixelFormat.ABGR32 : ('RGBA', 'ABGR'),
    PixelFormat.BGRA32 : ('RGBA', 'BGRA'),
}

class Surface:
    '''
    Pixel buffer description handed to the presentation layer: the first plane
    of a decoded frame, its width, height, row stride (pitch) and format.

    The surface does not copy the pixels; it co-owns the DecodedFrame they
    live in. free() (or av_icon.destroy) releases that frame exactly once.
    '''

    def __init__(self, frame, format : PixelFormat, bits_per_pixel : int):
        """
        DO NOT call this by yourself; use av_icon.load() instead
        """
        pitch = frame.linesize(0)
        row = frame.width * bytes_per_pixel(format)
        if frame.width <= 0 or frame.height <= 0 or pitch < row:
            raise SurfaceError(f'Could not create icon surface: {frame.width}x{frame.height} pitch={pitch} row={row}')

        self.width = frame.width
        self.height = frame.height
        self.pitch = pitch
        self.format = format
        self.bits_per_pixel = bits_per_pixel
        self.frame = frame # the frame owns the data

    @property
    def bytes_per_pixel(self):
        return bytes_per_pixel(self.format)

    def _plane(self):
        if self.frame is None:
            raise ValueError('surface has been destroyed')
        return self.frame.planes[0]

    @property
    def pixels_ptr(self):
        """address of the first pixel, for handing the buffer to C"""
        return self._plane().buffer_ptr

    @property
    def pixels(self):
        """
        the pixels as a (height, width, bytes_per_pixel) uint8 array, without copying

        the array keeps the frame's buffer alive on its own
        """
        rows = np.frombuffer(self._plane(), dtype=np.uint8)
        rows = rows[:self.pitch * self.height].reshape(self.height, self.pitch)
        bpp = self.bytes_per_pixel
        return rows[:, :self.width * bpp].reshape(self.height, self.width, bpp)

    def to_image(self):
        '''
        copy the pixels into a Pillow image (24 and 32-bit formats only)
        '''
        from PIL import Image

        try:
            mode, rawmode = _PIL_MODES[self.format]
        except KeyError:
            raise SurfaceError(f'no Pillow mode for surface format {self.format}') from None
        data = np.ascontiguousarray(self.pixels).tobytes()
        return Image.frombytes(mode, (self.width, self.height), data, 'raw', rawmode)

    def free(self):
        """release the frame backing this surface; later calls do nothing"""
        frame, self.frame = getattr(self, 'frame', None), None
        if frame is not None:
            frame.free()

    def __del__(self):
        self.free()

    def __repr__(self):
        state = '' if self.frame is not None else ' destroyed'
        return f'<Surface {self.width}x{self.height} {self.format} pitch={self.pitch}{state}>'
