"""
File digests and size.
"""
import hashlib
import os
from collections import namedtuple

from pinfo.errors import FileSizeError, HashError

CHUNK_SIZE = 64 * 1024

FileHashes = namedtuple('FileHashes', ['md5', 'sha1', 'sha256'])


def _new_digests():
    return hashlib.md5(), hashlib.sha1(), hashlib.sha256()


def _finish(digests):
    return FileHashes(*(digest.hexdigest() for digest in digests))


def hash_bytes(data):
    """MD5, SHA1 and SHA256 of an in-memory buffer."""
    digests = _new_digests()
    for digest in digests:
        digest.update(data)
    return _finish(digests)


def compute_hashes(stream, name=None):
    """MD5, SHA1 and SHA256 of a seekable binary stream.

    One pass feeds all three digests. The stream is rewound to the start
    before and after, so callers can keep reading from offset 0.
    """
    digests = _new_digests()
    try:
        stream.seek(0)
        while True:
            chunk = stream.read(CHUNK_SIZE)
            if not chunk:
                break
            for digest in digests:
                digest.update(chunk)
        stream.seek(0)
    except OSError as e:
        raise HashError(f"Could not read file while hashing: {e}", name) from e

    return _finish(digests)


def compute_file_size(target, name=None):
    """Size in bytes as a decimal string.

    `target` is either a path or an open file object.
    """
    try:
        if hasattr(target, 'fileno'):
            size = os.fstat(target.fileno()).st_size
        else:
            size = os.stat(target).st_size
    except OSError as e:
        raise FileSizeError(f"Could not stat file: {e}", name or str(target)) from e

    return str(size)
