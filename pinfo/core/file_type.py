"""
Maps header codes to the labels shown in reports.
"""
from pinfo.log import get_logger
from pinfo.parsing.pe_loader import (
    IMAGE_FILE_MACHINE_I386,
    IMAGE_FILE_MACHINE_AMD64,
    OPTIONAL_HEADER_MAGIC_PE,
    OPTIONAL_HEADER_MAGIC_PE_PLUS
)

logger = get_logger(__name__)

WIN32_EXE = 'Win32 Exe'
WIN64_EXE = 'Win64 Exe'
MAGIC_PE32 = 'PE32'
MAGIC_PE32_PLUS = 'PE32P'
UNKNOWN = 'Unknown'

FILE_TYPES = {
    IMAGE_FILE_MACHINE_I386: WIN32_EXE,
    IMAGE_FILE_MACHINE_AMD64: WIN64_EXE
}

MAGIC_LABELS = {
    OPTIONAL_HEADER_MAGIC_PE: MAGIC_PE32,
    OPTIONAL_HEADER_MAGIC_PE_PLUS: MAGIC_PE32_PLUS
}


def classify_file_type(machine):
    """File type label for a COFF machine code. Never raises."""
    file_type = FILE_TYPES.get(machine)
    if file_type is None:
        logger.warning(f"Unrecognised machine type 0x{machine:X}, file type reported as {UNKNOWN}")
        return UNKNOWN
    return file_type


def classify_magic(magic):
    """Label for the optional header magic. Never raises."""
    return MAGIC_LABELS.get(magic, UNKNOWN)
