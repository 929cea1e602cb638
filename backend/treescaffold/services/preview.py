from __future__ import annotations

from collections.abc import Iterable

from treescaffold.models.tree_models import ParseResult, PreviewResult, TreeNode, TreeStats
from treescaffold.services.tree_config import DEFAULT_ROOT_NAME, VIRTUAL_ROOT_PATH


def compute_stats(structure: list[TreeNode]) -> TreeStats:
    files = sum(1 for node in structure if node.is_file)
    return TreeStats(
        files=files,
        directories=len(structure) - files,
        max_depth=max((node.level for node in structure), default=0),
    )


def _with_virtual_root(result: ParseResult, root_name: str | None) -> list[TreeNode]:
    root = (root_name or "").strip() or result.root_dir or DEFAULT_ROOT_NAME
    virtual = TreeNode(name=f"{root}/", level=0, is_file=False, full_path=VIRTUAL_ROOT_PATH)
    shifted = [node.model_copy(update={"level": node.level + 1}) for node in result.structure]
    return [virtual, *shifted]


def visible_nodes(nodes: list[TreeNode], collapsed: Iterable[str]) -> list[TreeNode]:
    """Drop every node nested under a collapsed directory.

    ``full_path`` identifies directories; a collapsed directory itself
    stays visible.
    """
    collapsed_paths = set(collapsed)
    visible: list[TreeNode] = []
    skip_below: int | None = None
    for node in nodes:
        if skip_below is not None:
            if node.level > skip_below:
                continue
            skip_below = None
        if not node.is_file and node.full_path in collapsed_paths:
            skip_below = node.level
        visible.append(node)
    return visible


def build_preview(
    result: ParseResult,
    root_name: str | None = None,
    collapsed: Iterable[str] = (),
) -> PreviewResult:
    """Outline for display: virtual root when needed, collapse applied."""
    nodes = result.structure
    has_virtual_root = bool(nodes) and not result.has_root_wrapper
    if has_virtual_root:
        nodes = _with_virtual_root(result, root_name)
    return PreviewResult(
        nodes=visible_nodes(nodes, collapsed),
        stats=compute_stats(result.structure),
        has_virtual_root=has_virtual_root,
    )
