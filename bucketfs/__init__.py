"""bucketfs — a hierarchical filesystem view over flat object stores.

Re-exports the public surface of the interfaces, errors and filesystem modules.
"""

from bucketfs.errors import BucketFSError, NotFound, Unsupported
from bucketfs.filesystem import ObjectFileSystem
from bucketfs.interfaces import DirEntry, File, FileSystem
from bucketfs.paths import resolve
from bucketfs.streams import ObjectFile

__all__ = [
    # Filesystem
    "FileSystem",
    "ObjectFileSystem",
    "File",
    "ObjectFile",
    "DirEntry",
    "resolve",
    # Errors
    "BucketFSError",
    "NotFound",
    "Unsupported",
]
