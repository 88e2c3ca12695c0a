"""Create campaign projects from templates: placeholders, vertical pruning, relative dates."""

__version__ = "0.1.0"
