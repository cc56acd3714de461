"""
Textual-based UI for BashBeatz
"""

from .app import BashBeatzApp, populate_tree, run_app

__all__ = ["BashBeatzApp", "populate_tree", "run_app"]
