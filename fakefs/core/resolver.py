"""Path resolution for fakefs.

Paths are resolved literally, one segment at a time. There is no cleaning:
``..`` is an ordinary (and never present) name, and a trailing separator
leaves an empty final segment that never names a child. The one concession
is that empty and ``.`` segments at the very start of a path stand for the
starting directory. That lets ``/hello`` and ``./hello`` behave like
``hello`` and lets ``""``, ``"."`` and ``"/"`` name the root.
"""

from typing import Optional, Tuple

from ..errors import NotFoundError
from .node import FakeContainer, FakeNode


SELF_SEGMENTS = frozenset(("", "."))


def split_path(path: str, separator: str = "/") -> Tuple[str, Optional[str]]:
    """Split a path on its first separator.

    Args:
        path: Path to split
        separator: Segment separator

    Returns:
        (head, rest) where rest is None if the path had no separator

    Example:
        >>> split_path("foo/bar/baz")
        ('foo', 'bar/baz')
        >>> split_path("foo")
        ('foo', None)
    """
    head, sep, rest = path.partition(separator)
    return head, (rest if sep else None)


def is_self_segment(segment: str) -> bool:
    return segment in SELF_SEGMENTS


def resolve(container: FakeContainer, path: str, separator: str = "/") -> FakeNode:
    """Resolve ``path`` relative to ``container``.

    Args:
        container: Directory to start from
        path: Slash-delimited path
        separator: Segment separator

    Returns:
        The node named by the path (the very object stored in the tree)

    Raises:
        NotFoundError: If a segment is missing or a non-directory would
                       have to be descended into
    """
    return _resolve(container, path, path, separator, leading=True)


def _resolve(container: FakeContainer, path: str, full_path: str,
             separator: str, leading: bool) -> FakeNode:
    head, rest = split_path(path, separator)

    # Self segments only count before the first named child
    if leading and is_self_segment(head):
        if rest is None:
            return container
        return _resolve(container, rest, full_path, separator, leading=True)

    try:
        node = container.find(head)
    except NotFoundError:
        raise NotFoundError(full_path, head) from None

    if rest is None:
        return node

    if isinstance(node, FakeContainer):
        return _resolve(node, rest, full_path, separator, leading=False)

    # Cannot descend into a file
    raise NotFoundError(full_path, head)
