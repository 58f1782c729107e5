from . import IconError
from .decode import decode_image, adapt_surface
from .paths import DEFAULT_ICON_NAME, get_icon_path

import logging
log = logging.getLogger(__name__)


def load_from_path(path : str):
    '''
    decode the image at path into a Surface

    Returns:
        Surface, or None if the image could not be loaded (the reason is logged)
    '''
    try:
        frame = decode_image(path)
        return adapt_surface(frame)
    except IconError as e:
        log.error(f'{type(e).__name__}: {e}')
        return None


def load(name = DEFAULT_ICON_NAME, portable = None):
    '''
    load the application icon, wherever get_icon_path() finds it

    A missing icon is not an error for the caller: None is returned and the
    reason logged.
    '''
    try:
        path = get_icon_path(name, portable = portable)
    except IconError as e:
        log.error(f'{type(e).__name__}: {e}')
        return None
    return load_from_path(path)


def destroy(surface):
    '''
    release a Surface returned by load(); call it exactly once per surface
    '''
    assert surface.frame is not None, 'surface has no frame attached'
    surface.free()
