"""Small Unix userland tools, a shell parser, a heap allocator, and kernel data layouts."""

__version__ = "0.1.0"