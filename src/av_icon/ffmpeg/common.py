from collections import Counter
from errno import errorcode

import logging
log = logging.getLogger(__name__)

# kind -> number of live resources of that kind, across all pipelines
_live = Counter()

def live_resources():
    '''
    the resources currently owned by someone, as {kind: count}
    kinds with nothing alive are omitted
    '''
    return {kind: n for kind, n in _live.items() if n}

def describe(e):
    '''
    render an FFmpeg (or OS) error for a log line
    '''
    errno = getattr(e, 'errno', None)
    strerror = getattr(e, 'strerror', None)
    if strerror is None:
        return str(e) or type(e).__name__
    # FFmpeg's own error tags (AVERROR_INVALIDDATA, ...) are not OS errnos
    if errno is None or errno not in errorcode:
        return strerror
    return f'{strerror} ({errno})'

class Resource:
    '''
    Owns one object of the decode framework, kept in `av`.

    free() releases it exactly once; later calls do nothing. free() is also
    called on garbage collection and when leaving a `with` block, so a
    pipeline can rely on scoped unwinding instead of cleanup labels.
    '''
    kind = 'resource'

    def __init__(self, av = None):
        self.av = av
        self._owned = True
        _live[self.kind] += 1

    def _release(self):
        # the framework object goes away with its last reference
        pass

    def free(self):
        if not getattr(self, '_owned', False):
            return
        self._owned = False
        try:
            self._release()
        finally:
            self.av = None
            _live[self.kind] -= 1
            log.debug(f'freed {self.kind}')

    @property
    def freed(self):
        return not self._owned

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.free()
        return False

    def __del__(self):
        self.free()
