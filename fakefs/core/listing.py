"""Directory listing protocol for fakefs.

Listing a directory is stateful, like reading a real directory handle: each
paged call picks up where the previous one stopped, and the position belongs
to the directory itself, not to the caller. Rewinding (``close()`` on the
directory) starts over.
"""

from typing import List, NamedTuple, Sequence

from ..errors import FatalFakeFSError, ListingError
from .info import FileInfo
from .node import FakeNode


class Listing(NamedTuple):
    """One page of directory entries.

    ``exhausted`` is set once a paged read reaches the last child, whether
    the page came back full, short or empty. It is a normal end-of-sequence
    signal, not an error.
    """
    entries: List[FileInfo]
    exhausted: bool


class DirectoryCursor:
    """Persistent read position into a directory's children."""

    def __init__(self, owner: str = ""):
        """Initialize a cursor at the first child.

        Args:
            owner: Name of the owning directory, used in error messages
        """
        self.owner = owner
        self.position = 0

    def next_page(self, children: Sequence[FakeNode], count: int) -> Listing:
        """Return the next page of entries.

        Args:
            children: The directory's children in listing order
            count: Page size; 0 (or less) lists every child from the start
                   without touching the cursor

        Returns:
            Listing with the entries read and the exhaustion flag

        Raises:
            ListingError: If a child's metadata cannot be read. The entries
                          read before it are attached to the error.
        """
        if count <= 0:
            return Listing(self._stat_all(children), False)

        entries: List[FileInfo] = []
        for _ in range(count):
            if self.position >= len(children):
                return Listing(entries, True)
            entries.append(self._stat(children[self.position], entries))
            self.position += 1
        return Listing(entries, self.position >= len(children))

    def rewind(self) -> None:
        self.position = 0

    def _stat_all(self, children: Sequence[FakeNode]) -> List[FileInfo]:
        entries: List[FileInfo] = []
        for child in children:
            entries.append(self._stat(child, entries))
        return entries

    def _stat(self, child: FakeNode, entries: List[FileInfo]) -> FileInfo:
        try:
            return child.stat()
        except FatalFakeFSError:
            raise
        except Exception as e:
            raise ListingError(self.owner, entries, e) from e

    def __repr__(self) -> str:
        return f"DirectoryCursor(owner={self.owner!r}, position={self.position})"
