"""vodcat: read-only media catalog API over JSON entry files."""

__version__ = "0.1.0"
