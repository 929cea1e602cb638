"""Build an LLM-ready description of a parsed tree."""

from __future__ import annotations

from treescaffold.models.tree_models import TreeNode
from treescaffold.services.tree_config import DEFAULT_ROOT_NAME

_INSTRUCTIONS = (
    "Please create the project structure below. Create every directory "
    "listed, then every file. Where a file has a content hint, use it as the "
    "starting point for that file; otherwise write sensible boilerplate for "
    "its type and location."
)


def render_listing(structure: list[TreeNode]) -> str:
    lines: list[str] = []
    for node in structure:
        indent = "  " * node.level
        if node.is_file:
            line = f"{indent}📄 {node.name}"
            if node.content:
                line += f"  # content: {node.content}"
        else:
            name = node.name if node.name.endswith("/") else f"{node.name}/"
            line = f"{indent}📁 {name}"
        lines.append(line)
    return "\n".join(lines)


def generate_ai_prompt(structure: list[TreeNode], root_name: str | None = None) -> str:
    root = (root_name or "").strip() or DEFAULT_ROOT_NAME
    files = sum(1 for node in structure if node.is_file)
    directories = len(structure) - files
    return "\n".join([
        f"# Project: {root}",
        "",
        _INSTRUCTIONS,
        "",
        f"Structure ({directories} directories, {files} files):",
        "",
        "```",
        render_listing(structure),
        "```",
        "",
        "Keep names and nesting exactly as shown.",
    ]) + "\n"
