"""Build and inspect PDF document object graphs in memory: objects, text strings,
content streams, pages, bookmarks, named destinations, dates and barcodes."""

__version__ = "0.1.0"