"""Shared fixtures for the fakefs test suite."""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from fakefs import make_dir, make_file, make_filesystem


MODIFIED = datetime(2014, 3, 1, 12, 30, tzinfo=timezone.utc)


@pytest.fixture
def modified():
    return MODIFIED


@pytest.fixture
def fs():
    """Standard tree used across the resolver tests.

    Tree structure:
    (root)
    ├── foo/
    │   ├── bar            "BAR" (modified)
    │   └── baz/
    │       └── baz/
    │           └── baz/
    │               └── baz   "BAZ"
    └── hello              "hello"
    """
    return make_filesystem(
        make_dir("foo",
            make_file("bar", "BAR", MODIFIED),
            make_dir("baz",
                make_dir("baz",
                    make_dir("baz",
                        make_file("baz", "BAZ"),
                    ),
                ),
            ),
        ),
        make_file("hello", "hello"),
    )


@pytest.fixture
def five():
    """Flat directory with five empty files."""
    return make_dir("foo",
        make_file("one", ""),
        make_file("two", ""),
        make_file("three", ""),
        make_file("four", ""),
        make_file("five", ""),
    )
