"""Red-black tree course registry, Prim's spanning tree and string matching."""

__version__ = "0.1.0"