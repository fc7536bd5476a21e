"""Personal side-project tracking dashboard."""

__version__ = "0.1.0"
