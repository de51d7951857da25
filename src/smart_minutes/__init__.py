"""Smart Minutes: recorded meetings in, shared minutes-of-meeting documents out."""

__version__ = "0.1.0"
