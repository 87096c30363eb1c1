import struct

import pytest


def pack_u32s(values):
    return struct.pack('<%dI' % len(values), *values)


def strings_body(strings):
    '''STRG: the table points to the length prefix of each string'''
    def build(base):
        n = len(strings)
        cursor = base + 4 + 4 * n
        offsets = []
        payload = b''
        for string in strings:
            raw = string.encode('utf-8')
            offsets.append(cursor + len(payload))
            payload += struct.pack('<I', len(raw)) + raw + b'\x00'

        return struct.pack('<I', n) + pack_u32s(offsets) + payload

    return build


def sprites_body(sprites):
    '''SPRT: sprites are tuples (name, width, height, tpag offsets), the names
    are stored after all the records and referenced by their characters'''
    def build(base):
        n = len(sprites)
        records_start = base + 4 + 4 * n
        names_start = records_start + sum(80 + 4 * len(_[3]) for _ in sprites)
        offsets = []
        records = b''
        names = b''
        for name, width, height, tpags in sprites:
            offsets.append(records_start + len(records))
            raw = name.encode('utf-8')
            name_offset = names_start + len(names) + 4
            names += struct.pack('<I', len(raw)) + raw + b'\x00'
            records += struct.pack('<Iii', name_offset, width, height)
            records += b'\xaa' * 64
            records += struct.pack('<I', len(tpags)) + pack_u32s(tpags)

        return struct.pack('<I', n) + pack_u32s(offsets) + records + names

    return build


def textures_body(blobs, data_offsets=None):
    '''TXTR: info records then the blobs, the last one ends with the chunk.

    Passing data_offsets overrides the offsets written in the info records.'''
    def build(base):
        n = len(blobs)
        infos_start = base + 4 + 4 * n
        blobs_start = infos_start + 12 * n
        offsets = [infos_start + 12 * _ for _ in range(n)]
        infos = b''
        data = b''
        for idx, blob in enumerate(blobs):
            data_offset = blobs_start + len(data) if data_offsets is None else data_offsets[idx]
            infos += struct.pack('<III', idx + 1, 0xcafe, data_offset)
            data += blob

        return struct.pack('<I', n) + pack_u32s(offsets) + infos + data

    return build


class FormBuilder(object):
    '''Build a FORM archive in memory: a body can be raw bytes or a callable
    that receives the absolute offset where the body will start.'''

    def __init__(self, magic=b'FORM'):
        self.magic = magic
        self.chunks = []

    def add(self, tag, body):
        self.chunks.append((tag, body))
        return self

    def layout(self):
        '''Return the list of (start, end) of the bodies'''
        return self._build()[1]

    def build(self):
        return self._build()[0]

    def _build(self):
        data = b''
        layout = []
        for tag, body in self.chunks:
            base = 8 + len(data) + 8
            raw = body(base) if callable(body) else body
            data += tag + struct.pack('<I', len(raw)) + raw
            layout.append((base, base + len(raw)))

        return self.magic + struct.pack('<I', len(data)) + data, layout


@pytest.fixture
def form_builder():
    return FormBuilder


@pytest.fixture
def bodies():
    return {
        'strings': strings_body,
        'sprites': sprites_body,
        'textures': textures_body,
    }


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    '''The textures are written in the current directory'''
    monkeypatch.chdir(tmp_path)
    return tmp_path
