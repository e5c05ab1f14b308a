"""Render Edra editor JSON documents as text-only PDF files."""

__version__ = "0.1.2"

__all__ = ["document", "fonts", "pdf", "styles", "text", "writer"]