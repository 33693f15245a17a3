"""forumgate - permission evaluation core for discussion forums."""

__version__ = "0.1.0"
