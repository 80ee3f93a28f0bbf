"""signchooser - pick the most visible sign for a photo and blend it in."""

__version__ = "0.1.0"
