"""Travel schedule search and registration."""

__version__ = "0.1.0"
