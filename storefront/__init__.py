"""In-memory jewellery catalog API."""

__version__ = "0.1.0"
