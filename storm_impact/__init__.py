"""Storm event impact analysis."""

__version__ = "1.0.0"
