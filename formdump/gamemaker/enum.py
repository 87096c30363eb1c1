'''
This module contains the closed vocabulary of chunk kinds a FORM archive can contain.

The value of each member is the tag as it appears in the file.
'''
from enum import Enum

from ..exceptions import UnknownChunkException


class ChunkKind(Enum):
    GEN8 = b'GEN8'  # general information
    OPTN = b'OPTN'
    LANG = b'LANG'
    EXTN = b'EXTN'
    SOND = b'SOND'
    AGRP = b'AGRP'  # audio groups
    SPRT = b'SPRT'
    BGND = b'BGND'
    PATH = b'PATH'
    SCPT = b'SCPT'
    GLOB = b'GLOB'
    SHDR = b'SHDR'
    FONT = b'FONT'
    TMLN = b'TMLN'
    OBJT = b'OBJT'
    ROOM = b'ROOM'
    DAFL = b'DAFL'
    EMBI = b'EMBI'
    TPAG = b'TPAG'  # texture page items
    TGIN = b'TGIN'
    CODE = b'CODE'
    VARI = b'VARI'
    FUNC = b'FUNC'
    STRG = b'STRG'
    TXTR = b'TXTR'
    AUDO = b'AUDO'

    @classmethod
    def from_tag(cls, tag):
        try:
            return cls(tag)
        except ValueError:
            raise UnknownChunkException(tag) from None
