"""PE file parsing functionality."""

from .pe_loader import (
    load_pe,
    get_machine,
    get_optional_magic,
    IMAGE_FILE_MACHINE_I386,
    IMAGE_FILE_MACHINE_AMD64,
    OPTIONAL_HEADER_MAGIC_PE,
    OPTIONAL_HEADER_MAGIC_PE_PLUS
)
from .imports import collect_libraries, collect_symbols
from .sections import collect_sections, decode_section_flags, section_name

__all__ = [
    'load_pe',
    'get_machine',
    'get_optional_magic',
    'IMAGE_FILE_MACHINE_I386',
    'IMAGE_FILE_MACHINE_AMD64',
    'OPTIONAL_HEADER_MAGIC_PE',
    'OPTIONAL_HEADER_MAGIC_PE_PLUS',
    'collect_libraries',
    'collect_symbols',
    'collect_sections',
    'decode_section_flags',
    'section_name'
]
