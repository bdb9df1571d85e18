"""
Builds small but well-formed PE images so tests need no binary fixtures.

Layout of every image (FileAlignment 0x200, SectionAlignment 0x1000):

    0x000  DOS header, e_lfanew = 0x80
    0x080  PE signature, file header, optional header, section table
    0x200  .text   (RVA 0x1000)
    0x400  .idata  (RVA 0x2000) holding the import directory
"""
import struct
from pathlib import Path

import pytest

MACHINE_I386 = 0x14C
MACHINE_AMD64 = 0x8664

E_LFANEW = 0x80
FILE_ALIGNMENT = 0x200
SECTION_ALIGNMENT = 0x1000

TEXT_RVA, TEXT_RAW = 0x1000, 0x200
IDATA_RVA, IDATA_RAW = 0x2000, 0x400
IMAGE_END = 0x600

TEXT_CHARACTERISTICS = 0x60000020   # CODE | EXECUTE | READ
IDATA_CHARACTERISTICS = 0xC0000040  # INITIALIZED_DATA | READ | WRITE

DEFAULT_IMPORTS = (
    ('KERNEL32.dll', ('GetProcAddress', 'LoadLibraryA')),
    ('USER32.dll', ('MessageBoxA',)),
)


def _section_header(name, virtual_size, rva, raw_size, raw_ptr, characteristics):
    return struct.pack(
        '<8sIIIIIIHHI',
        name, virtual_size, rva, raw_size, raw_ptr, 0, 0, 0, 0, characteristics
    )


def _build_idata(imports, pe64):
    """Import descriptors, lookup tables and names inside .idata."""
    idata = bytearray(FILE_ALIGNMENT)
    thunk_fmt = '<Q' if pe64 else '<I'

    def put(rva, blob):
        offset = rva - IDATA_RVA
        idata[offset:offset + len(blob)] = blob

    descriptor_rva = IDATA_RVA
    table_rva = IDATA_RVA + 20 * (len(imports) + 1)
    string_rva = IDATA_RVA + 0x100

    for dll, functions in imports:
        name_rva = string_rva
        put(name_rva, dll.encode('ascii') + b'\x00')
        string_rva += 0x10 * ((len(dll) + 0x10) // 0x10)

        hint_rvas = []
        for function in functions:
            hint_rvas.append(string_rva)
            put(string_rva, struct.pack('<H', 0) + function.encode('ascii') + b'\x00')
            string_rva += 0x10 * ((len(function) + 3 + 0x0F) // 0x10)

        thunks = b''.join(struct.pack(thunk_fmt, rva) for rva in hint_rvas)
        thunks += struct.pack(thunk_fmt, 0)
        ilt_rva = table_rva
        iat_rva = ilt_rva + len(thunks)
        put(ilt_rva, thunks)
        put(iat_rva, thunks)
        table_rva = iat_rva + len(thunks)

        put(descriptor_rva, struct.pack('<IIIII', ilt_rva, 0, 0, name_rva, iat_rva))
        descriptor_rva += 20

    assert table_rva <= IDATA_RVA + 0x100, "import tables overflow into names"
    assert string_rva <= IDATA_RVA + FILE_ALIGNMENT, "import names overflow .idata"

    directory_size = 20 * (len(imports) + 1)
    return bytes(idata), directory_size


def build_pe(machine=MACHINE_I386, pe64=False, imports=DEFAULT_IMPORTS):
    """Return the bytes of a minimal PE image."""
    dos_header = bytearray(E_LFANEW)
    dos_header[0:2] = b'MZ'
    struct.pack_into('<I', dos_header, 0x3C, E_LFANEW)

    if imports:
        idata, import_size = _build_idata(imports, pe64)
        import_rva = IDATA_RVA
    else:
        idata, import_size, import_rva = bytes(FILE_ALIGNMENT), 0, 0

    data_directories = [(0, 0)] * 16
    data_directories[1] = (import_rva, import_size)
    directories = b''.join(struct.pack('<II', rva, size) for rva, size in data_directories)

    if pe64:
        optional_header = struct.pack(
            '<HBBIIIIIQIIHHHHHHIIIIHHQQQQII',
            0x20B, 14, 0, FILE_ALIGNMENT, FILE_ALIGNMENT, 0, TEXT_RVA, TEXT_RVA,
            0x140000000, SECTION_ALIGNMENT, FILE_ALIGNMENT,
            6, 0, 0, 0, 6, 0,
            0, 0x3000, FILE_ALIGNMENT, 0,
            3, 0x8160,
            0x100000, 0x1000, 0x100000, 0x1000,
            0, 16
        )
    else:
        optional_header = struct.pack(
            '<HBBIIIIIIIIIHHHHHHIIIIHHIIIIII',
            0x10B, 14, 0, FILE_ALIGNMENT, FILE_ALIGNMENT, 0, TEXT_RVA, TEXT_RVA, IDATA_RVA,
            0x400000, SECTION_ALIGNMENT, FILE_ALIGNMENT,
            6, 0, 0, 0, 6, 0,
            0, 0x3000, FILE_ALIGNMENT, 0,
            3, 0x8140,
            0x100000, 0x1000, 0x100000, 0x1000,
            0, 16
        )
    optional_header += directories

    characteristics = 0x0022 if pe64 else 0x0102
    file_header = struct.pack('<HHIIIHH', machine, 2, 0, 0, 0, len(optional_header), characteristics)

    sections = (
        _section_header(b'.text', 0x10, TEXT_RVA, FILE_ALIGNMENT, TEXT_RAW, TEXT_CHARACTERISTICS)
        + _section_header(b'.idata', FILE_ALIGNMENT, IDATA_RVA, FILE_ALIGNMENT, IDATA_RAW, IDATA_CHARACTERISTICS)
    )

    headers = bytes(dos_header) + b'PE\x00\x00' + file_header + optional_header + sections
    assert len(headers) <= TEXT_RAW, "headers overflow the first section"
    headers = headers.ljust(TEXT_RAW, b'\x00')

    text = (b'\x31\xc0\xc3' if not pe64 else b'\x48\x31\xc0\xc3').ljust(FILE_ALIGNMENT, b'\xcc')

    image = headers + text + idata
    assert len(image) == IMAGE_END
    return image


@pytest.fixture
def pe32_bytes():
    return build_pe()


@pytest.fixture
def pe64_bytes():
    return build_pe(machine=MACHINE_AMD64, pe64=True)


@pytest.fixture
def pe32_file(tmp_path, pe32_bytes):
    path = tmp_path / 'sample32.exe'
    path.write_bytes(pe32_bytes)
    return path


@pytest.fixture
def pe64_file(tmp_path, pe64_bytes):
    path = tmp_path / 'sample64.exe'
    path.write_bytes(pe64_bytes)
    return path


@pytest.fixture
def corrupt_file(tmp_path, pe32_bytes):
    """Valid DOS header but a broken PE signature."""
    data = bytearray(pe32_bytes)
    data[E_LFANEW:E_LFANEW + 4] = b'PX\x00\x00'
    path = tmp_path / 'corrupt.exe'
    path.write_bytes(bytes(data))
    return path


@pytest.fixture
def template_file(tmp_path):
    """Copy of the shipped HTML template."""
    source = Path(__file__).resolve().parent.parent / 'binpage.html'
    target = tmp_path / 'binpage.html'
    target.write_text(source.read_text(encoding='utf-8'), encoding='utf-8')
    return target
