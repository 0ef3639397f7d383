"""
TUI Diff Viewer.

A Textual-based terminal UI for comparing two text or JSON files with
navigable difference blocks.

Usage:
    python -m diffview.tui.app old.json new.json

Components:
    - DiffViewerApp: Main application class
    - DiffScreen: Block list with navigation and view toggles
    - DiffBlockView: One rendered diff block
    - JsonTreePanel: Expandable JSON tree of a block
"""
