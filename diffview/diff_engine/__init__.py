"""
Diff engine: block assembly, inline pairing, JSON tree rendering and navigation.

Usage:
    from diffview.diff_engine import ComparisonSession, compute_blocks

    blocks = compute_blocks("a\\nb\\nc", "a\\nx\\nc")
    session = ComparisonSession(old_text, new_text)
    session.navigate("next")
    view = session.render(session.current_block)
"""

from diffview.diff_engine.assembler import BlockAssembler, compute_blocks, normalize_whitespace
from diffview.diff_engine.base import LineDiffer, WordDiffer
from diffview.diff_engine.differ import (
    SequenceLineDiffer,
    SequenceWordDiffer,
    diff_lines,
    diff_words,
)
from diffview.diff_engine.errors import DiffViewError, FileTooLarge, InvalidJson
from diffview.diff_engine.format_detector import (
    EXTENSION_MAP,
    SUPPORTED_FORMATS,
    detect_format,
    is_json_file,
)
from diffview.diff_engine.inline import InlineDiffPairer
from diffview.diff_engine.ingest import (
    MAX_CONTENT_SIZE,
    FileContent,
    IngestOptions,
    is_json_pair,
    load_file,
    prepare_content,
)
from diffview.diff_engine.json_tree import (
    MAX_TREE_DEPTH,
    ExpansionSet,
    JsonRenderNode,
    JsonTreeRenderer,
    parse_json,
)
from diffview.diff_engine.models import (
    ChangeKind,
    ChangeRun,
    DiffBlock,
    DiffOptions,
    InlineSpan,
    JsonParseScope,
    LineKind,
    LineRecord,
    ViewMode,
)
from diffview.diff_engine.navigation import Direction, NavigationController
from diffview.diff_engine.normalizer import LineChangeNormalizer
from diffview.diff_engine.render import FlatView, JsonView, RenderedRow, render, render_flat
from diffview.diff_engine.session import IDENTICAL_MESSAGE, ComparisonSession

__all__ = [
    # Data model
    "ChangeKind",
    "ChangeRun",
    "DiffBlock",
    "DiffOptions",
    "InlineSpan",
    "JsonParseScope",
    "LineKind",
    "LineRecord",
    "ViewMode",
    # Differs
    "LineDiffer",
    "WordDiffer",
    "SequenceLineDiffer",
    "SequenceWordDiffer",
    "diff_lines",
    "diff_words",
    # Pipeline
    "LineChangeNormalizer",
    "InlineDiffPairer",
    "BlockAssembler",
    "compute_blocks",
    "normalize_whitespace",
    # Rendering
    "ExpansionSet",
    "JsonRenderNode",
    "JsonTreeRenderer",
    "MAX_TREE_DEPTH",
    "parse_json",
    "FlatView",
    "JsonView",
    "RenderedRow",
    "render",
    "render_flat",
    # Navigation and session
    "Direction",
    "NavigationController",
    "ComparisonSession",
    "IDENTICAL_MESSAGE",
    # Ingestion
    "EXTENSION_MAP",
    "SUPPORTED_FORMATS",
    "MAX_CONTENT_SIZE",
    "FileContent",
    "IngestOptions",
    "detect_format",
    "is_json_file",
    "is_json_pair",
    "load_file",
    "prepare_content",
    # Errors
    "DiffViewError",
    "FileTooLarge",
    "InvalidJson",
]
