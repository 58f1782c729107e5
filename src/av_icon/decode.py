'''
The icon pipeline: ContainerProbe -> CodecNegotiator -> FrameDecoder -> SurfaceAdapter.

Each stage owns what it acquires through a Resource, and every acquisition is
entered into an ExitStack. A failing stage simply raises; unwinding frees the
decoder before the container, and the packet and frame before the decoder.
Only the decoded frame leaves the pipeline, wrapped in the Surface.
'''
from contextlib import ExitStack

from . import UnsupportedLayoutError, UnmappedFormatError
from .ffmpeg.libavformat import probe_container
from .ffmpeg.libavcodec import DecoderContext, decode_frame
from .ffmpeg.libavutil import DecodedFrame
from .formats import PixelFormat, to_surface_format
from .surface import Surface

import logging
log = logging.getLogger(__name__)


def decode_image(path : str) -> DecodedFrame:
    '''
    decode the first frame of the image at path

    the caller owns the returned frame
    '''
    with ExitStack() as stack:
        container, stream = probe_container(path)
        stack.enter_context(container)

        decoder = stack.enter_context(DecoderContext.negotiate(stream))

        return decode_frame(container, decoder)


def adapt_surface(frame : DecodedFrame) -> Surface:
    '''
    wrap a packed RGB frame as a Surface, without copying its pixels

    takes ownership of frame: it ends up owned by the surface, or freed
    '''
    with ExitStack() as stack:
        stack.enter_context(frame)

        desc = frame.format
        if not desc.is_packed_rgb:
            raise UnsupportedLayoutError(f'Could not load non-RGB icon: {desc.name}')

        format = to_surface_format(desc.name)
        if format == PixelFormat.UNKNOWN:
            raise UnmappedFormatError(f'Unsupported icon pixel format: {desc.name}')

        surface = Surface(frame, format, desc.bits_per_pixel)
        stack.pop_all()

    log.debug(f'created {surface} from {desc}')
    return surface
