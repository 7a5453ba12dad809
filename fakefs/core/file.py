"""File leaf for fakefs.

A File owns an immutable byte sequence and a cursor into it. Opening the
same path twice returns the same File, so every holder shares that cursor.
"""

import io
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from ..config import DEFAULT_CONFIG, ModeConfig
from ..errors import FatalFakeFSError, NotDirectoryError
from .info import FileInfo, ZERO_TIME
from .node import FakeNode

if TYPE_CHECKING:
    from .listing import Listing


class File(FakeNode, FileInfo):
    """In-memory regular file.

    Reads and seeks go straight to an ``io.BytesIO`` over the content.
    ``close()`` does not release anything; it rewinds to the start so the
    next reader sees the whole file again.
    """

    def __init__(self,
                 name: str,
                 content: bytes,
                 modified: Optional[datetime] = None,
                 modes: ModeConfig = DEFAULT_CONFIG.modes):
        """Initialize a file.

        Args:
            name: Base name of the file
            content: File content
            modified: Last modification time (ZERO_TIME when None)
            modes: Mode bits to report
        """
        self._name = name
        self._content = bytes(content)
        self._reader = io.BytesIO(self._content)
        self._modified = modified
        self._modes = modes

    @property
    def content(self) -> bytes:
        """The complete content, independent of the read position."""
        return self._content

    # FakeNode

    def stat(self) -> FileInfo:
        return self

    def readdir(self, count: int = 0) -> 'Listing':
        raise NotDirectoryError(self._name)

    def read(self, size: int = -1) -> bytes:
        return self._reader.read(size)

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return self._reader.seek(offset, whence)

    def tell(self) -> int:
        return self._reader.tell()

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def close(self) -> None:
        try:
            self.seek(0)
        except (OSError, ValueError) as e:
            raise FatalFakeFSError(f"cannot rewind {self!r}: {e}") from e

    # FileInfo

    def name(self) -> str:
        return self._name

    def is_dir(self) -> bool:
        return False

    def size(self) -> int:
        """Return the number of bytes not yet read.

        This shrinks as the file is read and grows back on ``close()``.
        """
        return len(self._content) - min(self._reader.tell(), len(self._content))

    def mod_time(self) -> datetime:
        return self._modified if self._modified is not None else ZERO_TIME

    def mode(self) -> int:
        return self._modes.file_mode

    def __repr__(self) -> str:
        return f"File(name={self._name!r}, size={len(self._content)})"
