"""Process and module inspection through /proc, with geometry and range value types."""

__version__ = "0.1.0"
__all__ = ["geometry", "ranges", "module", "procmaps", "process"]