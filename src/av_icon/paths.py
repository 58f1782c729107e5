import os
import sys

from . import IconPathError

import logging
log = logging.getLogger(__name__)

ICON_PATH_ENV = 'AV_ICON_PATH'
DEFAULT_ICON_NAME = 'av-icon'
PORTABLE_ICON_FILENAME = 'icon.png'
ICON_SIZE = 256

def default_icon_path(name = DEFAULT_ICON_NAME, prefix = None):
    '''
    where an installed application keeps its icon, under the install prefix
    '''
    if prefix is None:
        prefix = sys.prefix
    return os.path.join(prefix, 'share', 'icons', 'hicolor', f'{ICON_SIZE}x{ICON_SIZE}', 'apps', f'{name}.png')

def executable_dir():
    '''
    directory of the running executable: the bundle when frozen, else the main script
    '''
    if getattr(sys, 'frozen', False):
        exe = sys.executable
    else:
        exe = sys.argv[0] if sys.argv and sys.argv[0] else None
    if not exe:
        return None
    return os.path.dirname(os.path.abspath(exe))

def local_file_path(filename):
    d = executable_dir()
    if d is None:
        return None
    return os.path.join(d, filename)

def is_portable():
    return bool(getattr(sys, 'frozen', False))

def get_icon_path(name = DEFAULT_ICON_NAME, portable = None, environ = None, prefix = None):
    '''
    resolve the icon to load, in priority order:
        1. the AV_ICON_PATH environment variable
        2. the icon installed under the prefix
        3. in portable mode, icon.png next to the executable instead of 2.

    Raises:
        IconPathError: no path could be determined
    '''
    if environ is None:
        environ = os.environ
    if portable is None:
        portable = is_portable()

    path = environ.get(ICON_PATH_ENV)
    if path:
        log.debug(f'Using {ICON_PATH_ENV}: {path}')
        return path

    if not portable:
        path = default_icon_path(name, prefix)
        log.debug(f'Using icon: {path}')
        return path

    path = local_file_path(PORTABLE_ICON_FILENAME)
    if not path:
        raise IconPathError('Could not get icon path')
    log.debug(f'Using icon (portable): {path}')
    return path
