"""Heading Sync - Keep Markdown note filenames in sync with their first heading."""

from ._version import __version__
from .cli import main

__all__ = ['main', '__version__']
