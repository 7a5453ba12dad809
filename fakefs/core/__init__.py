"""Core node types, resolver and listing protocol for fakefs."""

from .info import FileInfo, NodeKind, ZERO_TIME
from .node import FakeNode, FakeContainer
from .file import File
from .listing import Listing, DirectoryCursor
from .resolver import resolve, split_path
from .directory import Directory
from .filesystem import FileSystem

__all__ = [
    'FileInfo',
    'NodeKind',
    'ZERO_TIME',
    'FakeNode',
    'FakeContainer',
    'File',
    'Listing',
    'DirectoryCursor',
    'resolve',
    'split_path',
    'Directory',
    'FileSystem',
]
