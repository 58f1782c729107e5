"""Owned wrappers around the FFmpeg objects the icon pipeline acquires.

Modules:
    common: Resource base class, live resource accounting, error rendering
    libavformat: ContainerHandle and StreamDescriptor
    libavcodec: DecoderContext and CompressedUnit
    libavutil: DecodedFrame and PixelFormatDescriptor
"""
