"""High-level builders for fakefs.

These are the functions test authors call to describe a tree. They take
plain values (names, strings, datetimes) and produce nodes ready to be
nested:

    fs = make_filesystem(
        make_file("robots.txt", "User-agent: *\\nDisallow: /"),
        make_dir("misc",
            make_file("hello.txt", "Hello", datetime(2014, 1, 1)),
            HostFile.from_path("/path/to/some/real/file.txt"),
        ),
    )

    fs.open("/robots.txt")
    fs.open("misc/hello.txt")
"""

from datetime import datetime
from typing import Optional, Union

from .config import DEFAULT_CONFIG, FileSystemConfig
from .core.directory import Directory
from .core.file import File
from .core.filesystem import FileSystem
from .core.node import FakeNode
from .errors import InvalidOptionError


def make_filesystem(*nodes: FakeNode,
                    config: Optional[FileSystemConfig] = None) -> FileSystem:
    """Create a fake filesystem whose root holds ``nodes``.

    Args:
        *nodes: Top-level files and directories, in listing order
        config: Filesystem configuration

    Returns:
        FileSystem root

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    return FileSystem(nodes, config=config)


def make_file(name: str,
              contents: Union[str, bytes, bytearray, memoryview],
              *options: datetime,
              config: Optional[FileSystemConfig] = None) -> File:
    """Create a fake file.

    Options are recognised by type. A ``datetime`` sets the modification
    time (the last one wins). Anything else is a mistake in the test and is
    rejected immediately.

    Args:
        name: Base name of the file
        contents: Text (encoded as UTF-8) or bytes
        *options: Extra attributes, recognised by type
        config: Filesystem configuration (for mode bits)

    Returns:
        File node

    Raises:
        InvalidOptionError: If an option has an unknown type
    """
    config = config or DEFAULT_CONFIG
    data = contents.encode("utf-8") if isinstance(contents, str) else bytes(contents)

    modified = None
    for option in options:
        if isinstance(option, datetime):
            modified = option
        else:
            raise InvalidOptionError(option)

    return File(name, data, modified=modified, modes=config.modes)


def make_dir(name: str,
             *nodes: FakeNode,
             config: Optional[FileSystemConfig] = None) -> Directory:
    """Create a fake directory holding ``nodes`` in listing order.

    Args:
        name: Base name of the directory
        *nodes: Child files and directories
        config: Filesystem configuration (for mode bits and separator)

    Returns:
        Directory node
    """
    config = config or DEFAULT_CONFIG
    return Directory(name, nodes, modes=config.modes, separator=config.separator)
