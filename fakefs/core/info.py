"""FileInfo abstraction for fakefs.

FileInfo is the metadata facet of a node: the descriptive attributes a
directory listing returns for each entry. Nodes in the fake tree are their
own FileInfo, so ``node.stat()`` simply returns ``node``.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict


# Modification time reported for files created without one
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


class NodeKind(Enum):
    """What a node is."""
    FILE = "file"
    DIRECTORY = "directory"


class FileInfo(ABC):
    """Abstract base class for node metadata.

    Mirrors what ``os.stat`` exposes for a path, reduced to the fields a
    file-serving abstraction actually looks at.
    """

    @abstractmethod
    def name(self) -> str:
        """Return the base name of the node (no separators)."""
        pass

    @abstractmethod
    def is_dir(self) -> bool:
        """Check if this node is a directory."""
        pass

    @abstractmethod
    def size(self) -> int:
        """Return the size in bytes (0 for directories)."""
        pass

    @abstractmethod
    def mod_time(self) -> datetime:
        """Return the last modification time."""
        pass

    @abstractmethod
    def mode(self) -> int:
        """Return ``st_mode``-style mode bits."""
        pass

    def sys(self) -> Any:
        """Return the underlying data source, if any."""
        return None

    def kind(self) -> NodeKind:
        return NodeKind.DIRECTORY if self.is_dir() else NodeKind.FILE

    def metadata(self) -> Dict[str, Any]:
        """Return the metadata as a dictionary.

        Fields:
        - name: Base name of the node
        - kind: NodeKind value ("file" or "directory")
        - size: Size in bytes
        - mode: Mode bits
        - mtime: Modification time (files only)

        Returns:
            Dict[str, Any]: Metadata dictionary
        """
        metadata = {
            'name': self.name(),
            'kind': self.kind().value,
            'size': self.size(),
            'mode': self.mode(),
        }
        if not self.is_dir():
            metadata['mtime'] = self.mod_time()
        return metadata
