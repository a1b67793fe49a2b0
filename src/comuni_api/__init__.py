"""Italian comuni reference-data lookup service."""

__version__ = "0.1.0"
