"""Track allocated buffers, report those never released, and load tracked level layouts."""

__version__ = "0.1.0"

__all__ = ["fileutil", "guid", "memory", "memory_system", "level_layout", "demo"]