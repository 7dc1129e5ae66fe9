"""In-memory task store served over HTTP with FastAPI."""

__version__ = "1.0.0"
