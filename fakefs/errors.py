"""Error taxonomy for fakefs.

Two families live here:

- Recoverable errors derive from ``FakeFSError`` and from the matching
  builtin ``OSError`` subclass, so code written against a real filesystem
  (``except FileNotFoundError``) handles them unchanged.
- Fatal errors derive from ``FatalFakeFSError``, which is deliberately NOT a
  ``FakeFSError``. They signal misuse of the fake (asking a directory for its
  modification time, passing an unknown option to a builder) and should abort
  the test rather than be handled.

Running out of directory entries is not an error at all; it is reported
through ``Listing.exhausted``.
"""

import errno
from typing import Any, List, Optional


class FakeFSError(Exception):
    """Base class for recoverable fakefs errors."""
    pass


class NotFoundError(FakeFSError, FileNotFoundError):
    """Raised when a path does not name a node in the tree.

    Covers both a missing segment and an attempt to descend into a
    node that is not a directory.
    """

    def __init__(self, path: str, segment: Optional[str] = None):
        self.segment = segment
        super().__init__(errno.ENOENT, "file does not exist", path)


class WrongKindError(FakeFSError, OSError):
    """Raised when an operation is used on the wrong kind of node."""
    pass


class NotDirectoryError(WrongKindError, NotADirectoryError):
    """Raised when listing is requested from something that is not a directory."""

    def __init__(self, name: str):
        super().__init__(errno.ENOTDIR, "not a directory", name)


class NotRegularFileError(WrongKindError, IsADirectoryError):
    """Raised when content access is requested from a directory."""

    def __init__(self, name: str):
        super().__init__(errno.EISDIR, "not a regular file", name)


class ListingError(FakeFSError):
    """Raised when a child's metadata cannot be read during listing.

    The entries gathered before the failure are kept on ``entries`` and the
    child's own exception is chained as ``__cause__``.
    """

    def __init__(self, directory: str, entries: List[Any], error: BaseException):
        self.directory = directory
        self.entries = entries
        self.error = error
        super().__init__(
            f"listing {directory!r} stopped after {len(entries)} entries: {error}"
        )


class ConfigurationError(FakeFSError, ValueError):
    """Raised when a FileSystemConfig fails validation."""

    def __init__(self, problems: List[str]):
        self.problems = problems
        super().__init__(f"Invalid configuration: {'; '.join(problems)}")


class FatalFakeFSError(Exception):
    """Base class for misuse of the fake. Not meant to be caught."""
    pass


class UnsupportedAccessorError(FatalFakeFSError, NotImplementedError):
    """Raised when an attribute that a node kind does not implement is queried."""

    def __init__(self, accessor: str, node: Any):
        self.accessor = accessor
        super().__init__(f"{accessor}() is not implemented for {node!r}")


class InvalidOptionError(FatalFakeFSError, TypeError):
    """Raised when a builder receives an option of an unknown type."""

    def __init__(self, option: Any):
        self.option = option
        super().__init__(f"Unknown option type {type(option).__name__}")
