from __future__ import annotations

import logging

from treescaffold.models.tree_models import LineToken, ParseResult, TreeNode
from treescaffold.services.line_tokenizer import tokenize_line

logger = logging.getLogger(__name__)


class EmptyInputError(ValueError):
    """Raised when the tree text is empty or whitespace-only."""


def _tokenize(lines: list[str]) -> list[LineToken]:
    """Tokenize every line, threading the discovered indentation unit."""
    tokens: list[LineToken] = []
    indent_unit: int | None = None
    for line in lines:
        token, indent_unit = tokenize_line(line, indent_unit)
        if token is not None:
            tokens.append(token)
    return tokens


def _has_root_wrapper(structure: list[TreeNode]) -> bool:
    """True when the first node is a level-0 directory with no level-0 sibling."""
    if not structure:
        return False
    first = structure[0]
    if first.is_file or first.level != 0:
        return False
    return sum(1 for node in structure if node.level == 0) == 1


def parse_tree(text: str) -> ParseResult:
    """Parse a textual tree diagram into directories, files and an outline.

    Each entry's level decides how much of the directory stack is kept:
    the stack is popped down to the level, never padded up to it, so an
    over-indented entry simply attaches to the deepest open directory.
    Duplicate paths collapse onto their first occurrence.
    """
    if not text.strip():
        raise EmptyInputError("Input cannot be empty")

    lines = [line for line in text.splitlines() if line.strip()]
    tokens = _tokenize(lines)

    stack: list[str] = []
    structure: list[TreeNode] = []
    # dicts double as insertion-ordered sets
    directories: dict[str, None] = {}
    files: dict[str, None] = {}
    file_contents: dict[str, str] = {}
    root_dir: str | None = None

    for token in tokens:
        component = token.name.strip("/")
        if not component:
            logger.debug("Skipping entry without a usable name: %r", token.name)
            continue

        if root_dir is None:
            root_dir = component
            if token.level == 0 and not token.is_file:
                directories[component] = None
                stack.append(component)
                structure.append(
                    TreeNode(
                        name=token.name,
                        level=0,
                        is_file=False,
                        full_path=component,
                        content=token.content,
                    )
                )
                continue

        del stack[token.level:]
        if token.level > len(stack):
            logger.debug(
                "Entry %r is over-indented (level %d, depth %d)",
                token.name,
                token.level,
                len(stack),
            )

        full_path = "/".join([*stack, component])
        if token.is_file:
            files.setdefault(full_path, None)
            if token.content:
                file_contents.setdefault(full_path, token.content)
            structure.append(
                TreeNode(
                    name=token.name,
                    level=token.level,
                    is_file=True,
                    full_path=full_path,
                    content=token.content,
                )
            )
        else:
            directories.setdefault(full_path, None)
            stack.append(component)
            structure.append(
                TreeNode(
                    name=token.name,
                    level=token.level,
                    is_file=False,
                    full_path=full_path,
                )
            )

    result = ParseResult(
        structure=structure,
        directories=list(directories),
        files=list(files),
        file_contents=file_contents,
        root_dir=root_dir or "",
        has_root_wrapper=_has_root_wrapper(structure),
    )
    logger.debug(
        "Parsed %d lines into %d directories and %d files",
        len(lines),
        len(result.directories),
        len(result.files),
    )
    return result
