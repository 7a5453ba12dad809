"""fakefs - In-memory filesystem trees for tests.

fakefs stands in for a real filesystem in tests of code that opens paths
and reads file-like handles. Trees are described with three builders:

    from fakefs import make_filesystem, make_dir, make_file

    fs = make_filesystem(
        make_dir("foo",
            make_file("bar", "BAR"),
        ),
        make_file("hello", "hello"),
    )

    with fs.open("foo/bar") as f:
        assert f.read() == b"BAR"

The fake is deliberately literal:
━━━━━━━━━━━━━━━━━━━━━━━━━━
- Paths are not cleaned: "../hello" and "hello/" do not resolve.
- Opening a path twice returns the same object, so read positions and
  directory listing positions are shared.
- Directory listing is paged and stateful; close() rewinds it.
- Nothing is safe for concurrent use.
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .config import FileSystemConfig, ModeConfig, DEFAULT_CONFIG
from .errors import (
    FakeFSError,
    NotFoundError,
    WrongKindError,
    NotDirectoryError,
    NotRegularFileError,
    ListingError,
    ConfigurationError,
    FatalFakeFSError,
    UnsupportedAccessorError,
    InvalidOptionError,
)
from .core import (
    FileInfo,
    NodeKind,
    ZERO_TIME,
    FakeNode,
    FakeContainer,
    File,
    Directory,
    FileSystem,
    Listing,
    DirectoryCursor,
    resolve,
    split_path,
)
from .adapters import HostFile
from .api import make_filesystem, make_file, make_dir

__all__ = [
    "__version__",
    # Config
    'FileSystemConfig',
    'ModeConfig',
    'DEFAULT_CONFIG',
    # Errors
    'FakeFSError',
    'NotFoundError',
    'WrongKindError',
    'NotDirectoryError',
    'NotRegularFileError',
    'ListingError',
    'ConfigurationError',
    'FatalFakeFSError',
    'UnsupportedAccessorError',
    'InvalidOptionError',
    # Core
    'FileInfo',
    'NodeKind',
    'ZERO_TIME',
    'FakeNode',
    'FakeContainer',
    'File',
    'Directory',
    'FileSystem',
    'Listing',
    'DirectoryCursor',
    'resolve',
    'split_path',
    # Adapters
    'HostFile',
    # API
    'make_filesystem',
    'make_file',
    'make_dir',
]
