"""Copy files or standard input to a descriptor using page- and block-aligned buffers."""

__version__ = "0.1.0"
__all__ = ["buffers", "cat"]