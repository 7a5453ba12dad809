"""Configuration system for fakefs.

A fake tree needs very little configuration: the placeholder mode bits it
reports for files and directories, and how many resolved paths the root
remembers. Defaults match what a freshly created file (0644) and directory
(0755) look like on a typical Unix system.
"""

import stat
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class ModeConfig:
    """Placeholder mode bits reported by ``FileInfo.mode()``.

    Only the directory bit is load-bearing; the permission bits are never
    enforced.
    """

    file_mode: int = 0o644
    dir_mode: int = 0o755 | stat.S_IFDIR


@dataclass(frozen=True)
class FileSystemConfig:
    """Complete configuration for a fake filesystem."""

    modes: ModeConfig = field(default_factory=ModeConfig)

    # Number of successful path resolutions the root remembers (0 disables)
    resolution_cache_size: int = 128

    # Path segment separator
    separator: str = "/"

    @classmethod
    def uncached(cls) -> 'FileSystemConfig':
        """Create a config that resolves every path from scratch."""
        return cls(resolution_cache_size=0)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.resolution_cache_size < 0:
            errors.append("resolution_cache_size cannot be negative")

        if len(self.separator) != 1:
            errors.append("separator must be a single character")
        elif self.separator == ".":
            errors.append("separator cannot be '.'")

        if not stat.S_ISDIR(self.modes.dir_mode):
            errors.append("dir_mode must carry the directory bit")

        if stat.S_ISDIR(self.modes.file_mode):
            errors.append("file_mode cannot carry the directory bit")

        return errors


DEFAULT_CONFIG = FileSystemConfig()
