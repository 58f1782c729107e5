from contextlib import ExitStack

import av.error

from .. import CodecNotSupportedError, DecoderInitError, NoFrameError
from .common import Resource, describe
from .libavutil import DecodedFrame

import logging
log = logging.getLogger(__name__)


class CompressedUnit(Resource):
    '''
    One packet of encoded bytes, read from a container.
    Starts empty; read() fills it with the first readable packet.
    '''
    kind = 'packet'

    def read(self, container):
        '''
        read the first packet of the container, whatever stream it belongs to
        '''
        packets = container.demux()
        try:
            pkt = next(packets, None)
        except (av.error.FFmpegError, OSError) as e:
            raise NoFrameError(f'Could not read frame: {describe(e)}') from e
        finally:
            packets.close()

        # demux ends with empty flush packets; an empty first one means no data
        if pkt is None or pkt.size == 0:
            raise NoFrameError('Could not read frame: container has no packet')
        log.debug(f'read packet stream={pkt.stream_index} size={pkt.size} pts={pkt.pts}')
        self.av = pkt


class DecoderContext(Resource):
    '''
    Decoder state for one stream: allocated, configured with the stream's
    encoded parameters and opened, as one unit.

    PyAV ties the codec context's lifetime to the container: free() drops
    this reference, and the context is closed when the container closes.
    '''
    kind = 'decoder'

    @classmethod
    def negotiate(cls, stream):
        '''
        find a decoder for the stream's codec and open it

        the context is owned (and will be freed) even when opening fails
        '''
        codec_ctx = stream.codec_context
        if codec_ctx is None:
            raise CodecNotSupportedError(f'Could not find image decoder for stream #{stream.index}')

        decoder = cls(codec_ctx)
        try:
            decoder.open()
        except BaseException:
            decoder.free()
            raise
        log.debug(f'opened decoder {decoder.name} for stream #{stream.index}')
        return decoder

    @property
    def name(self):
        return self.av.name

    def open(self):
        try:
            self.av.open(strict = False)
        except (av.error.FFmpegError, ValueError) as e:
            raise DecoderInitError(f'Could not open image codec {self.name}: {describe(e)}') from e

    def decode(self, packet : CompressedUnit, frame : DecodedFrame):
        '''
        submit one packet and receive one frame into `frame`

        A single attempt: no retry, no draining. Any failure, including the
        decoder wanting more input first, is a NoFrameError.
        '''
        try:
            frames = self.av.decode(packet.av)
        except (av.error.FFmpegError, ValueError) as e:
            raise NoFrameError(f'Could not send icon packet: {describe(e)}') from e

        if not frames:
            raise NoFrameError('Could not receive icon frame: decoder needs more input')
        if len(frames) > 1:
            log.debug(f'decoder produced {len(frames)} frames from one packet, keeping the first')
        frame.receive(frames[0])


def decode_frame(container, decoder : DecoderContext):
    '''
    decode one frame from the first packet of the container

    The packet is freed as soon as it was consumed. On success the caller owns
    the returned DecodedFrame; on failure packet and frame are both freed.
    '''
    with ExitStack() as stack:
        frame = stack.enter_context(DecodedFrame())
        packet = stack.enter_context(CompressedUnit())

        packet.read(container)
        try:
            decoder.decode(packet, frame)
        finally:
            packet.free()

        stack.pop_all()
    log.debug(f'decoded {frame}')
    return frame
