"""Host file adapter for fakefs.

Wraps a real on-disk file so it can sit in a fake tree next to in-memory
files. Metadata comes from ``os.fstat`` on the open descriptor; content
access goes straight to the file object.
"""

import io
import os
import stat
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Optional, Union

from ..core.info import FileInfo
from ..core.node import FakeNode
from ..errors import NotDirectoryError

if TYPE_CHECKING:
    from ..core.listing import Listing


class HostFile(FakeNode, FileInfo):
    """A real file placed in a fake tree.

    Unlike the in-memory File, ``close()`` really closes the underlying
    file; a closed HostFile can no longer be stat'ed or read.
    """

    def __init__(self, fileobj: BinaryIO, name: Optional[str] = None):
        """Initialize from an open binary file.

        Args:
            fileobj: File opened in binary mode
            name: Name to list the file under (defaults to the base name
                  of ``fileobj.name``)
        """
        self.fileobj = fileobj
        self._name = name if name is not None else Path(fileobj.name).name
        self._stat_result: Optional[os.stat_result] = None

    @classmethod
    def from_path(cls, path: Union[str, Path], name: Optional[str] = None) -> 'HostFile':
        """Open ``path`` for reading and wrap it."""
        return cls(open(path, "rb"), name=name)

    # FakeNode

    def stat(self) -> FileInfo:
        """Refresh metadata from the open descriptor.

        Raises:
            ValueError: If the file has been closed
            OSError: If the descriptor cannot be stat'ed
        """
        self._stat_result = os.fstat(self.fileobj.fileno())
        return self

    def readdir(self, count: int = 0) -> 'Listing':
        raise NotDirectoryError(self._name)

    def read(self, size: int = -1) -> bytes:
        return self.fileobj.read(size)

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return self.fileobj.seek(offset, whence)

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return self.fileobj.seekable()

    def close(self) -> None:
        self.fileobj.close()

    # FileInfo

    def _stat(self) -> os.stat_result:
        if self._stat_result is None:
            self.stat()
        return self._stat_result

    def name(self) -> str:
        return self._name

    def is_dir(self) -> bool:
        return stat.S_ISDIR(self._stat().st_mode)

    def size(self) -> int:
        return self._stat().st_size

    def mod_time(self) -> datetime:
        return datetime.fromtimestamp(self._stat().st_mtime, tz=timezone.utc)

    def mode(self) -> int:
        return self._stat().st_mode

    def sys(self) -> os.stat_result:
        return self._stat()

    def __repr__(self) -> str:
        return f"HostFile(name={self._name!r}, closed={self.fileobj.closed})"
