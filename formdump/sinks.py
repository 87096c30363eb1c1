import logging
import os


logger = logging.getLogger(__name__)


def make_directory(filepath):
    '''Create all the directories leading to filepath'''
    dirname = os.path.dirname(filepath)

    if dirname:
        os.makedirs(dirname, exist_ok=True)


class BlobSink(object):
    '''Write byte blobs as standalone files below a given directory.'''

    def __init__(self, path='.'):
        self.path = path
        self.written = []

    def __repr__(self):
        return '<%s(%r)>' % (self.__class__.__name__, self.path)

    def write(self, filename, data):
        filepath = os.path.join(self.path, filename)
        make_directory(filepath)

        with open(filepath, 'wb') as f:
            f.write(data)

        logger.debug('written %d bytes to \'%s\'' % (len(data), filepath))
        self.written.append(filepath)

        return filepath
