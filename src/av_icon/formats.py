# pixel formats of the presentation layer, and how FFmpeg formats map onto them

import sys
from ctypes import c_uint32

from .common import TypedCEnumeration

# SDL_DEFINE_PIXELFORMAT(type, order, layout, bits, bytes)
def _define(type, order, layout, bits, bytes):
    return (1 << 28) | (type << 24) | (order << 20) | (layout << 16) | (bits << 8) | bytes

_PACKED16 = 5
_PACKED32 = 6
_ARRAYU8 = 7

_ORDER_XRGB, _ORDER_ARGB, _ORDER_RGBA, _ORDER_XBGR, _ORDER_ABGR, _ORDER_BGRA = 1, 3, 4, 5, 7, 8
_ARRAY_RGB, _ARRAY_BGR = 1, 4

_LAYOUT_4444, _LAYOUT_1555, _LAYOUT_565, _LAYOUT_8888 = 2, 3, 5, 6

_ARGB8888 = _define(_PACKED32, _ORDER_ARGB, _LAYOUT_8888, 32, 4)
_RGBA8888 = _define(_PACKED32, _ORDER_RGBA, _LAYOUT_8888, 32, 4)
_ABGR8888 = _define(_PACKED32, _ORDER_ABGR, _LAYOUT_8888, 32, 4)
_BGRA8888 = _define(_PACKED32, _ORDER_BGRA, _LAYOUT_8888, 32, 4)

_LITTLE = sys.byteorder == 'little'

class PixelFormat(TypedCEnumeration(c_uint32)):
    '''
    SDL_PixelFormatEnum values. The 32-bit tags name the byte order in memory,
    so they resolve to a different packed value on each host endianness.
    '''
    UNKNOWN = 0
    RGB444 = _define(_PACKED16, _ORDER_XRGB, _LAYOUT_4444, 12, 2)
    BGR444 = _define(_PACKED16, _ORDER_XBGR, _LAYOUT_4444, 12, 2)
    RGB555 = _define(_PACKED16, _ORDER_XRGB, _LAYOUT_1555, 15, 2)
    BGR555 = _define(_PACKED16, _ORDER_XBGR, _LAYOUT_1555, 15, 2)
    RGB565 = _define(_PACKED16, _ORDER_XRGB, _LAYOUT_565, 16, 2)
    BGR565 = _define(_PACKED16, _ORDER_XBGR, _LAYOUT_565, 16, 2)
    RGB24 = _define(_ARRAYU8, _ARRAY_RGB, 0, 24, 3)
    BGR24 = _define(_ARRAYU8, _ARRAY_BGR, 0, 24, 3)
    ARGB32 = _BGRA8888 if _LITTLE else _ARGB8888
    RGBA32 = _ABGR8888 if _LITTLE else _RGBA8888
    ABGR32 = _RGBA8888 if _LITTLE else _ABGR8888
    BGRA32 = _ARGB8888 if _LITTLE else _BGRA8888


def bits_per_pixel(fmt):
    return (int(fmt) >> 8) & 0xFF

def bytes_per_pixel(fmt):
    return int(fmt) & 0xFF


# FFmpeg pixel format name -> surface format
AV_TO_SURFACE_FORMAT = {
    'rgb24': PixelFormat.RGB24,
    'bgr24': PixelFormat.BGR24,
    'argb': PixelFormat.ARGB32,
    'rgba': PixelFormat.RGBA32,
    'abgr': PixelFormat.ABGR32,
    'bgra': PixelFormat.BGRA32,
    'rgb565be': PixelFormat.RGB565,
    'rgb555be': PixelFormat.RGB555,
    'bgr565be': PixelFormat.BGR565,
    'bgr555be': PixelFormat.BGR555,
    'rgb444be': PixelFormat.RGB444,
    'bgr444be': PixelFormat.BGR444,
}

def to_surface_format(av_format : str):
    '''
    the surface format for an FFmpeg pixel format name, PixelFormat.UNKNOWN if there is none
    '''
    return AV_TO_SURFACE_FORMAT.get(av_format, PixelFormat.UNKNOWN)
