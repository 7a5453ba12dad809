"""Root of a fake tree.

The FileSystem is the directory callers hand to code under test. On top of
plain directory behavior it can remember successful path resolutions. This
is an optional lookup aid, not part of the filesystem semantics: ``open``
returns exactly what ``Directory.open`` would, cached or not, because the
tree never changes after it is built. Failed lookups are never remembered.
Set ``resolution_cache_size=0`` to turn it off.
"""

from typing import Any, Dict, Iterable, Optional

from cachetools import LRUCache

from ..config import DEFAULT_CONFIG, FileSystemConfig
from ..errors import ConfigurationError
from .directory import Directory
from .node import FakeNode


class FileSystem(Directory):
    """Root directory of a fake filesystem.

    Example:
        fs = FileSystem([
            Directory("misc", [File("hello.txt", b"Hello")]),
        ])
        with fs.open("/misc/hello.txt") as f:
            assert f.read() == b"Hello"
    """

    def __init__(self,
                 children: Iterable[FakeNode] = (),
                 config: Optional[FileSystemConfig] = None):
        """Initialize the root.

        Args:
            children: Top-level nodes
            config: Filesystem configuration (defaults to DEFAULT_CONFIG)

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config or DEFAULT_CONFIG
        problems = self.config.validate()
        if problems:
            raise ConfigurationError(problems)

        super().__init__("", children, modes=self.config.modes,
                         separator=self.config.separator)

        self._cache: Optional[LRUCache] = None
        if self.config.resolution_cache_size > 0:
            self._cache = LRUCache(maxsize=self.config.resolution_cache_size)

        # Statistics
        self.cache_hits = 0
        self.cache_misses = 0

    def open(self, path: str) -> FakeNode:
        """Open the node at ``path``, consulting the resolution cache first.

        Raises:
            NotFoundError: If the path does not name a node
        """
        if self._cache is None:
            return super().open(path)

        node = self._cache.get(path)
        if node is not None:
            self.cache_hits += 1
            return node

        self.cache_misses += 1
        node = super().open(path)
        self._cache[path] = node
        return node

    def cache_info(self) -> Dict[str, Any]:
        """Return resolution cache statistics.

        Returns:
            Dictionary containing:
            - hits: Lookups answered from the cache
            - misses: Lookups that walked the tree
            - size: Paths currently remembered
            - maxsize: Capacity (0 when caching is disabled)
        """
        return {
            'hits': self.cache_hits,
            'misses': self.cache_misses,
            'size': len(self._cache) if self._cache is not None else 0,
            'maxsize': self._cache.maxsize if self._cache is not None else 0,
        }

    def clear_cache(self) -> None:
        if self._cache is not None:
            self._cache.clear()
        self.cache_hits = 0
        self.cache_misses = 0

    def __repr__(self) -> str:
        return f"FileSystem(children={len(self._children)})"
