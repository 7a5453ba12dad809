"""Testing utilities for fakefs consumers."""

from .fixtures import names, drain, read_all

__all__ = ['names', 'drain', 'read_all']
