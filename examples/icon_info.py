import av_icon
from av_icon.ffmpeg.common import live_resources

import logging
import faulthandler

faulthandler.enable()

log = logging.getLogger(__name__)

logging.basicConfig(level=logging.DEBUG)

def test(path):
    '''
    decode an icon and print the surface the presentation layer would get
    '''
    if path is None:
        surface = av_icon.load()
    else:
        surface = av_icon.load_from_path(path)

    if surface is None:
        print('no icon')
    else:
        print(f'{surface.width}x{surface.height} format={surface.format} '
              f'bpp={surface.bits_per_pixel} pitch={surface.pitch} pixels=0x{surface.pixels_ptr:x}')
        av_icon.destroy(surface)

    log.info(f'live resources after destroy: {live_resources()}')

if __name__ == '__main__':
    import sys
    path = sys.argv[1] if len(sys.argv) > 1 else None
    test(path)
