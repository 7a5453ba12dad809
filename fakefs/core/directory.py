"""Directory container for fakefs."""

import io
from datetime import datetime
from typing import Iterable, List, Tuple

from ..config import DEFAULT_CONFIG, ModeConfig
from ..errors import NotFoundError, NotRegularFileError, UnsupportedAccessorError
from .info import FileInfo
from .listing import DirectoryCursor, Listing
from .node import FakeContainer, FakeNode
from .resolver import resolve


class Directory(FakeContainer, FileInfo):
    """In-memory directory.

    Children keep their insertion order, which is also the listing order.
    Names are expected to be unique within one directory but this is not
    checked; lookups return the first match.

    The listing cursor is shared by everyone holding this directory. Paged
    ``readdir`` calls advance it and ``close()`` rewinds it.
    """

    def __init__(self,
                 name: str,
                 children: Iterable[FakeNode] = (),
                 modes: ModeConfig = DEFAULT_CONFIG.modes,
                 separator: str = "/"):
        """Initialize a directory.

        Args:
            name: Base name of the directory ("" for a root)
            children: Child nodes in listing order
            modes: Mode bits to report
            separator: Path separator used by ``open``
        """
        self._name = name
        self._children: List[FakeNode] = list(children)
        self._cursor = DirectoryCursor(name)
        self._modes = modes
        self._separator = separator

    @property
    def position(self) -> int:
        """Current listing position."""
        return self._cursor.position

    def open(self, path: str) -> FakeNode:
        """Open the node at ``path`` relative to this directory.

        Raises:
            NotFoundError: If the path does not name a node
        """
        return resolve(self, path, self._separator)

    # FakeContainer

    def find(self, name: str) -> FakeNode:
        for child in self._children:
            if child.stat().name() == name:
                return child
        raise NotFoundError(name, name)

    def children(self) -> Tuple[FakeNode, ...]:
        return tuple(self._children)

    # FakeNode

    def stat(self) -> FileInfo:
        return self

    def readdir(self, count: int = 0) -> Listing:
        """List children.

        Args:
            count: 0 for every child from the start (cursor untouched);
                   otherwise the next ``count`` children from the cursor

        Returns:
            Listing; ``exhausted`` is set once the cursor hits the end

        Raises:
            ListingError: If a child's metadata cannot be read
        """
        return self._cursor.next_page(self._children, count)

    def read(self, size: int = -1) -> bytes:
        raise NotRegularFileError(self._name)

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        raise NotRegularFileError(self._name)

    def close(self) -> None:
        self._cursor.rewind()

    # FileInfo

    def name(self) -> str:
        return self._name

    def is_dir(self) -> bool:
        return True

    def size(self) -> int:
        return 0

    def mod_time(self) -> datetime:
        raise UnsupportedAccessorError("mod_time", self)

    def mode(self) -> int:
        return self._modes.dir_mode

    def __repr__(self) -> str:
        return f"Directory(name={self._name!r}, children={len(self._children)})"
