"""
Core module for the abstraction of a record inside a file format

"""
import logging
from typing import Tuple, List, Dict

from .fields import Field
from .meta import MetaChunk
from .streams import Stream
from .exceptions import FormdumpException


logger = logging.getLogger(__name__)


class Chunk(Field, metaclass=MetaChunk):
    """
    Together with Field is the main class that defines a format: its main attributes
    are offset and size that identify a Chunk.

    A Chunk can contain sub-chunks, declared as class attributes in the
    order they appear in the stream.
    """

    def __init__(self, filepath=None, **kwargs):
        self.stream = Stream(filepath) if filepath is not None else None
        super().__init__(**kwargs)

        # now we have setup all the fields necessary and we can unpack if
        # some data is passed with the constructor
        if self.stream is not None:
            logger.debug('unpacking \'%s\' from %s' % (self.__class__.__name__, self.stream))
            self.unpack(self.stream)

    def get_ordered_fields_name(self) -> List[str]:
        return self._meta.fields

    def get_fields(self) -> List[Tuple[str, Field]]:
        '''It returns a list of couples (name, instance) for each field.'''
        return [(_, getattr(self, _)) for _ in self.get_ordered_fields_name()]

    def __repr__(self):
        msg = []
        for field_name, field in self.get_fields():
            msg.append('%s=%s' % (field_name, repr(field)))
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(msg))

    def __str__(self):
        msg = ''
        for field_name, field in self.get_fields():
            msg += '%s: %s\n' % (field_name, repr(field))
        return msg

    def init(self):
        # fields are created lazily by their descriptors
        pass

    def _get_size(self):
        '''the size MUST be derived from the subchunks'''
        size = 0
        for _, field in self.get_fields():
            size += field.size

        return size

    @property
    def layout(self) -> Dict[str, Tuple[int, int]]:
        result = {}
        for name, field in self.get_fields():
            result[name] = (field.offset, field.size)

        return result

    def unpack(self, stream):
        '''Read each field in order starting from the actual position of the stream.

        The offset of each field is recorded while unpacking, so that after
        the fact is possible to know where everything was.
        '''
        self.offset = stream.tell()

        for field_name, field in self.get_fields():
            field.offset = stream.tell()
            logger.debug('unpacking %s.%s at offset 0x%08x' % (self.__class__.__name__, field_name, field.offset))

            try:
                field.unpack(stream)
            except FormdumpException as e:
                e.chain.append(field_name)
                raise
