"""Character, memory, string, conversion, output, linked-list, 3D rotation, word-splitting and colour-packing helpers."""

__version__ = "0.1.0"