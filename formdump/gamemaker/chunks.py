'''
Records found inside a FORM archive.

All the integers are little endian; offsets are absolute with respect
to the start of the file.
'''
from .. import fields
from ..core import Chunk
from ..properties import Dependency


class FormHeader(Chunk):
    magic  = fields.StringField(4, default=b'FORM', is_magic=True)
    length = fields.StructField('I')


class ChunkHeader(Chunk):
    tag    = fields.StringField(4)
    length = fields.StructField('I')

    @property
    def label(self):
        return self.tag.value.decode('latin1')


class OffsetTable(Chunk):
    '''Count-prefixed list of absolute offsets, one for each record of a chunk.'''
    count   = fields.StructField('I')
    offsets = fields.ArrayField(fields.StructField('I'), n=Dependency('.count'))

    @property
    def values(self):
        return [_.value for _ in self.offsets]


class SpriteRecord(Chunk):
    '''The name is referenced by the offset of its characters, the length
    prefix is the 4 bytes before.

    The textures are offsets of texture page items (TPAG).'''
    name_offset = fields.StructField('I')
    width       = fields.StructField('i')
    height      = fields.StructField('i')
    margins     = fields.StringField(64)  # margins, other stuff
    count       = fields.StructField('I')
    textures    = fields.ArrayField(fields.StructField('I'), n=Dependency('.count'))


class TextureInfo(Chunk):
    unknown1    = fields.StructField('I')
    unknown2    = fields.StructField('I')
    data_offset = fields.StructField('I')
