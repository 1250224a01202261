"""Colors, text attributes, cell buffers, drawing characters and character sets for terminal applications."""

__version__ = "0.1.0"