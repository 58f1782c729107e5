import av_icon

import logging

logging.basicConfig(level=logging.WARNING)

import sys

_, path, out = sys.argv
surface = av_icon.load_from_path(path)
if surface is None:
    sys.exit(f'could not load {path}')

surface.to_image().save(out)
av_icon.destroy(surface)
