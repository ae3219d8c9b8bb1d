"""eradicate - find files with a glob pattern and delete the ones you mark."""

__version__ = "0.1.0"
