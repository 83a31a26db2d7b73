"""Calendar events API with file attachments and threaded notes."""

__version__ = "1.0.0"
