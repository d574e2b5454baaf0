"""A small raster image editor with colour filters, blur, brightness, contrast and undo/redo."""

__version__ = "0.1.0"

__all__ = ["__version__"]