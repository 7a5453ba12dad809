"""Adapters that let outside objects live in a fake tree."""

from .host import HostFile

__all__ = ['HostFile']
