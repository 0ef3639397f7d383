"""
diffview: a text and JSON diff viewer.

Compares two text bodies, groups the line changes into navigable blocks with
word-level sub-diffs, and renders JSON content as expandable trees.

Components:
    - diff_engine: block assembly, inline pairing, rendering, navigation
    - tui: Textual terminal viewer
    - main: command line interface
"""

# Importing the logging utilities drops loguru's default stderr handler
from diffview.utils import logging as _logging  # noqa: F401

__version__ = "0.1.0"
