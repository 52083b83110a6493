"""Adapters implementing the path ports on top of the standard OS interfaces."""

from .clock import LocalClockDecoder
from .encoding import FsPathEncoder
from .os_stat import OsStatProvider, kind_from_mode

__all__ = ["FsPathEncoder", "LocalClockDecoder", "OsStatProvider", "kind_from_mode"]
