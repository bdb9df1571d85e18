"""
Loads PE images with pefile and reports why a file is not one.
"""
import pefile

from pinfo.errors import PEParseError
from pinfo.log import get_logger

logger = get_logger(__name__)

IMAGE_FILE_MACHINE_I386 = 0x14C
IMAGE_FILE_MACHINE_AMD64 = 0x8664
OPTIONAL_HEADER_MAGIC_PE = 0x10B
OPTIONAL_HEADER_MAGIC_PE_PLUS = 0x20B


def load_pe(data, name=None):
    """Parse PE content already read into memory.

    Only the headers, the section table and the import directory are
    parsed. Raises PEParseError when the bytes are not a PE image.
    """
    try:
        pe = pefile.PE(data=data, fast_load=True)
    except pefile.PEFormatError as e:
        raise PEParseError(f"Not a valid PE file: {e.value}", name) from e

    try:
        pe.parse_data_directories(directories=[
            pefile.DIRECTORY_ENTRY['IMAGE_DIRECTORY_ENTRY_IMPORT']
        ])
    except pefile.PEFormatError as e:
        # Headers are fine, only the imports are damaged; callers see no
        # DIRECTORY_ENTRY_IMPORT and fall back to empty import lists.
        logger.warning(f"Import directory of {name or 'input'} could not be parsed: {e.value}")

    for warning in pe.get_warnings():
        logger.debug(f"pefile: {warning}")

    return pe


def get_machine(pe):
    """Target CPU code from the COFF file header."""
    return pe.FILE_HEADER.Machine


def get_optional_magic(pe):
    """PE32 / PE32+ marker from the optional header."""
    return pe.OPTIONAL_HEADER.Magic
