"""HTML node trees, a terminal progress bar, an inline text editor and a tiny HTTP server."""

__version__ = "0.1.0"

__all__ = ["editor", "html", "progress", "server"]