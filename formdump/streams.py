import io
import logging
import struct
from collections import namedtuple
from contextlib import contextmanager

from .exceptions import UnpackException, OutOfBoundsException


logger = logging.getLogger(__name__)


class ByteRange(namedtuple('ByteRange', ['start', 'end'])):
    '''Half-open interval [start, end) of absolute offsets into a stream.'''
    __slots__ = ()

    @property
    def length(self):
        return self.end - self.start

    def __str__(self):
        return '0x%08x-0x%08x' % (self.start, self.end)


class Stream(object):
    '''This is a simple wrapper around bytes/file objects to
    uniform their properties: every read is exact and every position
    is an absolute offset from the start of the data.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self.obj = obj
        self.history = []
        self._owned = False

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, self.init_file)

        init_method()

        self.size = self._get_size()

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def __repr__(self):
        return '<%s(%r)>' % (self.__class__.__name__, self.obj)

    def init_str(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\'' % self.obj)
        self.obj = open(self.obj, 'rb')
        self._owned = True

    init_PosixPath = init_WindowsPath = init_str

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    init_bytearray = init_memoryview = init_bytes

    def init_file(self):
        '''Anything else must already behave like a binary file'''
        if not hasattr(self.obj, 'read') or not hasattr(self.obj, 'seek'):
            raise ValueError('\'%s\' can\'t be used as a stream' % self.obj.__class__.__name__)

    def _get_size(self):
        position = self.obj.tell()
        size = self.obj.seek(0, io.SEEK_END)
        self.obj.seek(position)

        return size

    def close(self):
        if self._owned:
            self.obj.close()
            self._owned = False

    def tell(self):
        return self.obj.tell()

    def seek(self, offset):
        if not isinstance(offset, int):
            raise ValueError('\'%s\' is the wrong kind of offset to use' % offset.__class__.__name__)

        if offset < 0:
            raise UnpackException('cannot seek at negative offset %d' % offset)

        self.obj.seek(offset)

    def skip(self, amount):
        self.seek(self.tell() + amount)

    def read_exact(self, n):
        if n < 0:
            raise UnpackException('cannot read a negative amount of bytes (%d)' % n)

        offset = self.tell()
        data = self.obj.read(n)

        if len(data) != n:
            raise UnpackException('short read at 0x%08x: wanted %d bytes, got %d' % (offset, n, len(data)))

        return data

    def read_struct(self, fmt):
        return struct.unpack(fmt, self.read_exact(struct.calcsize(fmt)))[0]

    def read_u32(self):
        return self.read_struct('<I')

    def read_i32(self):
        return self.read_struct('<i')

    def read_string(self):
        '''Read a string prefixed by its length as unsigned 32 bits'''
        length = self.read_u32()

        return self.read_exact(length).decode('utf-8', errors='backslashreplace')

    def read_range(self, byte_range):
        if byte_range.start < 0 or byte_range.end < byte_range.start or byte_range.end > self.size:
            raise OutOfBoundsException('range %s outside of the stream (size 0x%08x)' % (byte_range, self.size))

        self.seek(byte_range.start)

        return self.read_exact(byte_range.length)

    def save(self):
        self.history.append(self.tell())

    def restore(self):
        old_seek = self.history.pop()
        self.seek(old_seek)

    @contextmanager
    def jump(self, offset):
        '''Move to offset for the duration of the block and then come back'''
        self.save()
        self.seek(offset)
        try:
            yield self
        finally:
            self.restore()
