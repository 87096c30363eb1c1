'''
# FORM archive

Container used by GameMaker runtimes (usually named `data.win`) to bundle
all the assets of a game. It's an IFF-like format, little endian:

  .-------------------------------.
  | 'FORM' | length               |
  |   .---------------------------|
  |   | tag | length | body       |
  |   | tag | length | body       |
  |   ...                         |
  '-------------------------------'

every chunk body is followed immediately by the next chunk header. Almost
every chunk starts with a count-prefixed table of absolute offsets, each
pointing to a record that can live anywhere in the file.

We extract the string table (STRG), the sprites' metadata (SPRT) and the
encoded images of the texture pages (TXTR); everything else is skipped.
'''
import logging
from collections import namedtuple

from ..core import Chunk
from ..sinks import BlobSink
from .chunks import FormHeader, ChunkHeader
from .enum import ChunkKind
from . import utils


logger = logging.getLogger(__name__)

ChunkEntry = namedtuple('ChunkEntry', ['kind', 'offset', 'length'])


class FormFile(Chunk):
    '''The whole archive: the header is unpacked as a normal Chunk, then
    the chunks are read one after the other until the end of the body.

    Whatever a handler does with the stream, after each chunk the stream
    is positioned at its end.'''
    header = FormHeader()

    HANDLERS = {
        ChunkKind.STRG: 'unpack_strings',
        ChunkKind.SPRT: 'unpack_sprites',
        ChunkKind.TXTR: 'unpack_textures',
    }

    def __init__(self, filepath=None, sink=None, **kwargs):
        self.sink = sink if sink is not None else BlobSink()
        self.chunks = []
        self.strings = []
        self.sprites = []
        self.textures = []

        super().__init__(filepath=filepath, **kwargs)

    def unpack(self, stream):
        super().unpack(stream)

        end = stream.tell() + self.header.length.value

        while stream.tell() < end:
            self.unpack_chunk(stream)

    def unpack_chunk(self, stream):
        chunk_header = ChunkHeader()
        chunk_header.unpack(stream)

        start = stream.tell()
        length = chunk_header.length.value
        tag = chunk_header.tag.value

        logger.info('%4.4s %08x %u @ 0x%08x', chunk_header.label, int.from_bytes(tag, 'little'), length, chunk_header.offset)

        kind = ChunkKind.from_tag(tag)
        self.chunks.append(ChunkEntry(kind, start, length))

        handler_name = self.HANDLERS.get(kind)

        if handler_name is None:
            stream.skip(length)
            return

        getattr(self, handler_name)(stream, start + length)
        stream.seek(start + length)

    def unpack_strings(self, stream, end):
        for offset in utils.read_offset_table(stream):
            self.strings.append(utils.unpack_string(stream, offset))

    def unpack_sprites(self, stream, end):
        for offset in utils.read_offset_table(stream):
            self.sprites.append(utils.unpack_sprite(stream, offset))

    def unpack_textures(self, stream, end):
        offsets = [utils.texture_data_offset(stream, _) for _ in utils.read_offset_table(stream)]

        for index, byte_range in enumerate(utils.infer_ranges(offsets, end)):
            self.textures.append(utils.extract_texture(stream, self.sink, index, byte_range))
