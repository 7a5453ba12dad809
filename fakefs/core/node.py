"""FakeNode abstraction for fakefs.

FakeNode is the capability set every entry in a fake tree offers: metadata,
content access or listing (whichever applies), repositioning, and close.
Anything implementing it can be placed in a directory, including wrappers
around real files.
"""

import io
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Tuple

from .info import FileInfo

if TYPE_CHECKING:
    from .listing import Listing


class FakeNode(ABC):
    """Abstract base class for entries in a fake tree.

    Concrete nodes implement either the content half (``read``/``seek``) or
    the listing half (``readdir``) and raise ``WrongKindError`` for the other.
    """

    @abstractmethod
    def stat(self) -> FileInfo:
        """Return metadata for this node."""
        pass

    @abstractmethod
    def readdir(self, count: int = 0) -> 'Listing':
        """List directory entries.

        Args:
            count: Page size; 0 lists everything from the start

        Returns:
            Listing of entries plus an exhaustion flag
        """
        pass

    @abstractmethod
    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes (all remaining when negative)."""
        pass

    @abstractmethod
    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        """Move the read position and return the new absolute position."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release or rewind the node."""
        pass

    def readable(self) -> bool:
        return False

    def seekable(self) -> bool:
        return False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return None


class FakeContainer(FakeNode):
    """A node that holds named children and can be descended into."""

    @abstractmethod
    def find(self, name: str) -> FakeNode:
        """Return the immediate child called ``name``.

        Raises:
            NotFoundError: If no child has that name
        """
        pass

    @abstractmethod
    def children(self) -> Tuple[FakeNode, ...]:
        """Return the children in listing order."""
        pass
