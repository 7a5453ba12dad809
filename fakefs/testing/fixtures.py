"""Test fixtures for fakefs consumers.

Small helpers that make assertions about fake trees read naturally.
"""

from typing import Iterable, List

from ..core.info import FileInfo
from ..core.listing import Listing
from ..core.node import FakeNode


def names(infos: Iterable[FileInfo]) -> List[str]:
    """Return the names of ``infos`` in order."""
    return [info.name() for info in infos]


def drain(directory: FakeNode, count: int) -> List[Listing]:
    """Page through ``directory`` until it reports exhaustion.

    The directory's cursor is left at the end; call ``close()`` to rewind.

    Args:
        directory: Directory to list
        count: Page size (must be positive)

    Returns:
        Every page read, the last one carrying the exhaustion flag

    Raises:
        ValueError: If count is not positive
    """
    if count <= 0:
        raise ValueError("count must be positive")

    pages = []
    while True:
        page = directory.readdir(count)
        pages.append(page)
        if page.exhausted:
            return pages


def read_all(node: FakeNode) -> bytes:
    """Read a file from its start to the end, then close it.

    Closing an in-memory File rewinds it; closing a HostFile releases it.
    """
    with node:
        node.seek(0)
        return node.read()
