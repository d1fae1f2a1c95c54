"""Spooky Bitch Show feed pipeline.

Fetches the podcast RSS feed, normalizes and merges its episodes and
serves them to the static site build.
"""

__version__ = "0.1.0"
