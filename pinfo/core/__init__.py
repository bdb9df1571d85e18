"""Core analysis functionality."""

from .hashes import FileHashes, compute_hashes, hash_bytes, compute_file_size
from .file_type import (
    classify_file_type,
    classify_magic,
    WIN32_EXE,
    WIN64_EXE,
    MAGIC_PE32,
    MAGIC_PE32_PLUS,
    UNKNOWN
)

__all__ = [
    'FileHashes',
    'compute_hashes',
    'hash_bytes',
    'compute_file_size',
    'classify_file_type',
    'classify_magic',
    'WIN32_EXE',
    'WIN64_EXE',
    'MAGIC_PE32',
    'MAGIC_PE32_PLUS',
    'UNKNOWN'
]
