"""Cell buffers, constraint layout, styled text, widgets and a double-buffered terminal."""

__version__ = "0.1.0"