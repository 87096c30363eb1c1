#!/usr/bin/env python3
'''
Dump strings, sprites and textures of a FORM archive

 $ formunpack.py data.win [output directory]

the textures are written as 0000.png, 0001.png, ... in the output
directory (the current one if not indicated).
'''
import logging
import sys
import os

from formdump.gamemaker import FormFile
from formdump.sinks import BlobSink
from formdump.streams import Stream


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)


def main(argv):
    if len(argv) < 2:
        return 0

    form = FormFile(sink=BlobSink(argv[2] if len(argv) > 2 else '.'))

    with Stream(argv[1]) as stream:
        form.unpack(stream)

    logger.info(f'{len(form.chunks)} chunks, {len(form.strings)} strings, {len(form.sprites)} sprites, {len(form.textures)} textures')

    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
