"""List a directory's contents as a tree."""

__version__ = "0.1.0"
