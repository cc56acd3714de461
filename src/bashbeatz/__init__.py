"""
BashBeatz - terminal browser and player for a remote music catalog.
"""

__version__ = "0.1.0"
