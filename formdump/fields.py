"""
A Field is "fundamental" datatype from the format point of view, something directly
unpackable from a stream without knowing anything about what surrounds it.
"""
import logging
import struct

from .meta import FieldBase, Endianess
from .properties import Dependency, PropertyDescriptor
from .exceptions import UnpackException, MagicException


logger = logging.getLogger(__name__)


class Field(FieldBase):
    """Base class to subclass from"""

    def __init__(self, name=None, father=None, default=None, offset=None,
                 endianess=Endianess.LITTLE_ENDIAN, is_magic=False):
        super().__init__()
        self.name = name
        self.father = father
        self.default = default
        self.offset = offset
        self.endianess = endianess
        self.is_magic = is_magic

        self.init()

    def init(self):
        self.value = self.value_from_default()

    def value_from_default(self):
        return self.default

    def __str__(self):
        return str(self.value)

    def _get_size(self):
        raise NotImplementedError(f"method {self.__class__.__name__}._get_size() not implemented")

    size = property(
        fget=lambda self: self._get_size(),
    )

    def check_magic(self):
        if self.is_magic and self.value != self.default:
            logger.warning('the magic doesn\'t correspond: %r instead of %r', self.value, self.default)
            raise MagicException('expected magic %r, found %r' % (self.default, self.value))

    def unpack(self, stream):
        raise NotImplementedError('you need to implement this in the subclass')


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module unpacking
    integers from bytes.
    """

    def __init__(self, format, default=0, **kw):
        self.format = format
        super().__init__(default=default, **kw)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, hex(self.value))

    def get_format(self):
        return '%s%s' % ('<' if self.endianess == Endianess.LITTLE_ENDIAN else '>', self.format)

    def _get_size(self):
        return struct.calcsize(self.get_format())

    def unpack(self, stream):
        self.value = stream.read_struct(self.get_format())
        self.check_magic()


class StringField(Field):
    """Represent a contiguous chunk of bytes."""

    length = PropertyDescriptor('length', int)

    def __init__(self, n=None, **kw):
        if n is None and 'default' not in kw:
            raise ValueError(f"StringField must have 'n' or 'default' indicated!")

        self.length = n if n is not None else len(kw['default'])

        super().__init__(**kw)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, repr(self.value))

    def value_from_default(self):
        return self.default if self.default is not None else b''

    def _get_size(self):
        return self.length

    def unpack(self, stream):
        self.value = stream.read_exact(self.length)
        self.check_magic()


class ArrayField(Field):
    '''Unpack an array of elements, all built from the same prototype field.

    The number of elements is indicated via the parameter named "n", usually
    a Dependency on a counter read before.
    '''

    n = PropertyDescriptor('n', int)

    def __init__(self, field_cls, n=0, **kw):
        if not isinstance(field_cls, FieldBase):
            raise ValueError('the element of an ArrayField must be a field instance, not \'%s\'' % field_cls.__class__.__name__)

        self.field_cls = field_cls
        self.n = n

        super().__init__(default=[], **kw)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.value!r})>'

    def __getitem__(self, item):
        return self.value[item]

    def __iter__(self):
        return iter(self.value)

    def __len__(self):
        return len(self.value)

    def value_from_default(self):
        return list(self.default)

    def _get_size(self):
        size = 0
        for element in self.value:
            size += element.size

        return size

    def instance_element(self):
        return self.field_cls.create(father=self)  # pass the father so that we don't lose the hierarchy

    def unpack(self, stream):
        n = self.n
        logger.debug('unpacking %d elements for \'%s\'' % (n, self.name))

        self.value = []
        for idx in range(n):
            element = self.instance_element()
            element.offset = stream.tell()
            try:
                element.unpack(stream)
            except UnpackException as e:
                e.chain.append('%d' % idx)
                raise

            self.value.append(element)
