import io
import logging
from collections import namedtuple

from PIL import Image

from ..streams import ByteRange
from ..exceptions import MalformedOffsetTableException
from .chunks import OffsetTable, SpriteRecord, TextureInfo


logger = logging.getLogger(__name__)

TEXTURE_FILENAME = '%04d.png'

Sprite = namedtuple('Sprite', ['offset', 'name', 'width', 'height', 'textures'])
Texture = namedtuple('Texture', ['index', 'path', 'offset', 'length'])


def read_offset_table(stream):
    table = OffsetTable()
    table.unpack(stream)

    return table.values


def unpack_string(stream, offset):
    '''The table offset points at the length prefix, not at the characters'''
    stream.seek(offset)
    value = stream.read_string()
    logger.info('string %08x %s', offset, value)

    return value


def unpack_sprite(stream, offset):
    stream.seek(offset)
    record = SpriteRecord()
    record.unpack(stream)

    with stream.jump(record.name_offset.value - 4):
        name = stream.read_string()

    textures = [_.value for _ in record.textures]

    logger.info('sprite %s with %u textures of %dx%d:', name, record.count.value, record.width.value, record.height.value)
    for texture in textures:
        logger.debug('tpag @ %u', texture)

    return Sprite(offset, name, record.width.value, record.height.value, textures)


def texture_data_offset(stream, offset):
    stream.seek(offset)
    info = TextureInfo()
    info.unpack(stream)

    logger.info('fileinfo @ 0x%08x (%u, %u, 0x%08x)', offset, info.unknown1.value, info.unknown2.value, info.data_offset.value)

    return info.data_offset.value


def infer_ranges(offsets, end):
    '''The size of a blob is not stored anywhere: it extends until the start of the
    next one in table order, the last one until the end of the chunk.'''
    bounds = list(offsets) + [end]

    for idx, (start, stop) in enumerate(zip(bounds, bounds[1:])):
        if stop <= start:
            raise MalformedOffsetTableException(
                'offset #%d (0x%08x) is not followed by a greater one (0x%08x)' % (idx, start, stop))

    return [ByteRange(start, stop) for start, stop in zip(bounds, bounds[1:])]


def identify(data):
    '''Return the format and the dimensions of an encoded image, only its header is parsed.'''
    try:
        with Image.open(io.BytesIO(data)) as image:
            return image.format, image.size
    except (OSError, ValueError, Image.DecompressionBombError):  # UnidentifiedImageError is an OSError
        return None


def extract_texture(stream, sink, index, byte_range):
    data = stream.read_range(byte_range)
    path = sink.write(TEXTURE_FILENAME % index, data)

    kind = identify(data)
    if kind is None:
        logger.warning('texture %04d: %u bytes @ 0x%08x, unknown format', index, byte_range.length, byte_range.start)
    else:
        logger.info('texture %04d: %u bytes @ 0x%08x, %s %dx%d', index, byte_range.length, byte_range.start, kind[0], *kind[1])

    return Texture(index, path, byte_range.start, byte_range.length)
