"""Nested folder tree - building from flat paths and markdown rendering."""

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from .classifier import is_numbered_segment

logger = logging.getLogger(__name__)

_NUMERIC_PREFIX = re.compile(r"[0-9]+(?:\.[0-9]+)*")


@dataclass
class TreeNode:
    """One numbered path segment in the folder tree."""

    segment_key: str
    path: str
    folder_note_path: str | None = None
    children: dict[str, "TreeNode"] = field(default_factory=dict)


Tree = dict[str, TreeNode]


def build_folder_tree(
    folders: Iterable[str],
    resolve_folder_note: Callable[[str], str | None],
) -> Tree:
    """Build a nested tree from a flat list of folder paths.

    Each segment that passes the segment-level check gets a node (created
    once, reused afterwards). Segments that fail are skipped and the next
    qualifying segment attaches to the last node that was entered, so a
    numbered folder under a plain "Archive" folder lands at the top level.

    Args:
        folders: Folder paths, ideally sorted for stable input.
        resolve_folder_note: Called once per created node with the cumulative
            path; returns the folder note path or None.
    """
    tree: Tree = {}

    for folder_path in folders:
        parts = folder_path.split("/")
        current = tree

        for index, part in enumerate(parts):
            if not is_numbered_segment(part):
                continue

            node = current.get(part)
            if node is None:
                current_path = "/".join(parts[: index + 1])
                node = TreeNode(
                    segment_key=part,
                    path=current_path,
                    folder_note_path=resolve_folder_note(current_path),
                )
                current[part] = node

            current = node.children

    logger.debug(f"Built folder tree with {count_nodes(tree)} nodes")
    return tree


def numeric_sort_key(name: str) -> tuple[int, ...]:
    """Sort key from the leading run of digits and dots.

    "2.10 - Foo" -> (2, 10). Trailing zero parts are dropped so that missing
    parts compare as 0: "2" and "2.0" tie, and "2" sorts before "2.1".
    Names without a leading number sort like 0.
    """
    match = _NUMERIC_PREFIX.match(name)
    parts = [int(p) for p in match.group(0).split(".")] if match else [0]

    while parts and parts[-1] == 0:
        parts.pop()

    return tuple(parts)


def sorted_nodes(tree: Tree) -> list[TreeNode]:
    """Siblings in numeric order. sorted() is stable, ties keep mapping order."""
    return sorted(tree.values(), key=lambda node: numeric_sort_key(node.segment_key))


def render_node_line(node: TreeNode, level: int = 0) -> str:
    """Render a single list item, linked when the folder has a note."""
    indent = "  " * level
    if node.folder_note_path:
        return f"{indent}- [[{node.folder_note_path}|{node.segment_key}]]\n"
    return f"{indent}- {node.segment_key}\n"


def render_tree(tree: Tree, level: int = 0) -> str:
    """Render the tree as an indented markdown list, two spaces per level."""
    output = ""

    for node in sorted_nodes(tree):
        output += render_node_line(node, level)
        if node.children:
            output += render_tree(node.children, level + 1)

    return output


def count_nodes(tree: Tree) -> int:
    """Total number of nodes in the tree."""
    return sum(1 + count_nodes(node.children) for node in tree.values())
