# container side of the pipeline: open the file, pick the image stream

import av
import av.error

from .. import ContainerOpenError, NoStreamInfoError, NoSuitableStreamError
from .common import Resource, describe

import logging
log = logging.getLogger(__name__)


class StreamDescriptor:
    '''
    Borrowed view of one stream of a ContainerHandle.
    Valid only while the container is open.
    '''
    def __init__(self, stream):
        self.av = stream

    @property
    def index(self):
        return self.av.index

    @property
    def type(self):
        return self.av.type

    @property
    def codec_context(self):
        """the decoder context FFmpeg prepared for this stream, None if no decoder exists"""
        return self.av.codec_context

    @property
    def codec_name(self):
        ctx = self.av.codec_context
        return ctx.name if ctx is not None else None

    @property
    def width(self):
        ctx = self.av.codec_context
        return ctx.width if ctx is not None else 0

    @property
    def height(self):
        ctx = self.av.codec_context
        return ctx.height if ctx is not None else 0

    def __repr__(self):
        return f'<StreamDescriptor #{self.index} {self.type} codec={self.codec_name} {self.width}x{self.height}>'


class ContainerHandle(Resource):
    kind = 'container'

    def __init__(self, container, path):
        super().__init__(container)
        self.path = path

    @classmethod
    def open(cls, path : str):
        '''
        open path as a generic media container and read its stream info
        '''
        try:
            container = av.open(path)
        except (av.error.FFmpegError, OSError) as e:
            raise ContainerOpenError(f'Could not open image container {path}: {describe(e)}') from e
        return cls(container, path)

    def _release(self):
        self.av.close()

    def best_stream(self):
        '''
        the stream FFmpeg considers the best video-capable one
        '''
        if len(self.av.streams) == 0:
            raise NoStreamInfoError(f'Could not find image stream info in {self.path}')

        stream = self.av.streams.best('video')
        if stream is None:
            raise NoSuitableStreamError(f'Could not find best image stream in {self.path}')
        return StreamDescriptor(stream)

    def demux(self):
        return self.av.demux()


def probe_container(path : str):
    '''
    open path and select its image stream

    returns (ContainerHandle, StreamDescriptor); the caller owns the handle.
    On failure the handle, if it was allocated, is freed before raising.
    '''
    container = ContainerHandle.open(path)
    try:
        stream = container.best_stream()
    except BaseException:
        container.free()
        raise
    log.debug(f'{path}: picked {stream}')
    return container, stream
