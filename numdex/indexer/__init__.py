"""Numbered folder indexing - classify, build the tree, render the document."""

from .classifier import is_numbered_folder_path, is_numbered_name, is_numbered_segment
from .folder_notes import folder_note_candidate, resolve_folder_note
from .generator import EMPTY_INDEX_CONTENT, generate_index_content, get_numbered_folders
from .tree import Tree, TreeNode, build_folder_tree, numeric_sort_key, render_tree

__all__ = [
    "EMPTY_INDEX_CONTENT",
    "Tree",
    "TreeNode",
    "build_folder_tree",
    "folder_note_candidate",
    "generate_index_content",
    "get_numbered_folders",
    "is_numbered_folder_path",
    "is_numbered_name",
    "is_numbered_segment",
    "numeric_sort_key",
    "render_tree",
    "resolve_folder_note",
]
