"""String, linked-list and line-reading helpers with a shell syntax-tree model."""

__version__ = "0.1.0"