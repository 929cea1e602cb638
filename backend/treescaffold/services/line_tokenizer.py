"""Turn one line of a tree diagram into a ``LineToken``.

Two ways of reading depth are supported:

* box-drawing prefixes (``│   ├── name``), where each vertical glyph is one
  level, every two other prefix characters add one more, and the branch
  glyph itself opens the entry's own level;
* plain indentation, where the first indented line of the document fixes
  the indentation unit for every line after it.

The indentation unit is passed in and handed back so the caller owns that
state; ``tokenize_line`` itself keeps nothing between calls.
"""

from __future__ import annotations

import logging
import re

from treescaffold.models.tree_models import LineToken
from treescaffold.services.entry_classifier import is_file_entry
from treescaffold.services.tree_config import (
    BRANCH_GLYPHS,
    COMMENT_MARKERS,
    DASH_GLYPHS,
    DRAWING_GLYPHS,
    VERTICAL_GLYPHS,
)

logger = logging.getLogger(__name__)


def _char_class(chars: frozenset[str]) -> str:
    return "".join(re.escape(c) for c in sorted(chars))


_TREE_PREFIX_RE = re.compile(
    rf"^([\s{_char_class(VERTICAL_GLYPHS)}]*)([{_char_class(BRANCH_GLYPHS)}])"
)
_LEADING_GLYPHS_RE = re.compile(rf"^[\s{_char_class(DRAWING_GLYPHS)}]*")
_LEADING_DASHES_RE = re.compile(rf"^[\s{_char_class(DASH_GLYPHS)}]*")
_CONTENT_RE = re.compile(r"\[(.*?)\]$")


def _tree_level(prefix: str) -> int:
    verticals = sum(1 for c in prefix if c in VERTICAL_GLYPHS)
    others = len(prefix) - verticals
    return verticals + others // 2 + 1


def _indent_level(line: str, indent_unit: int | None) -> tuple[int, int | None]:
    """Level from leading spaces, discovering the unit on first use."""
    leading = len(line) - len(line.lstrip(" "))
    if leading == 0:
        return 0, indent_unit
    if not indent_unit:
        indent_unit = leading
    # Round half up: 6 spaces with a unit of 4 is level 2
    return int(leading / indent_unit + 0.5), indent_unit


def _strip_comment(text: str) -> str:
    cut = len(text)
    for marker in COMMENT_MARKERS:
        idx = text.find(marker)
        if idx != -1:
            cut = min(cut, idx)
    return text[:cut].strip()


def clean_name(line: str) -> str:
    """Strip drawing glyphs, dashes and trailing comments from a line."""
    text = _LEADING_GLYPHS_RE.sub("", line, count=1)
    text = _LEADING_DASHES_RE.sub("", text, count=1).rstrip()
    return _strip_comment(text)


def tokenize_line(
    line: str, indent_unit: int | None = None
) -> tuple[LineToken | None, int | None]:
    """Tokenize ``line``; returns the token (or None to skip) and the unit."""
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None, indent_unit

    match = _TREE_PREFIX_RE.match(line)
    if match:
        level = _tree_level(match.group(1))
    else:
        level, indent_unit = _indent_level(line, indent_unit)

    name = clean_name(line)
    if not name:
        logger.debug("Dropping line with no name: %r", line)
        return None, indent_unit

    content = ""
    content_match = _CONTENT_RE.search(name)
    if content_match:
        content = content_match.group(1)
        name = name[: content_match.start()].strip()
        if not name:
            logger.debug("Dropping content annotation with no name: %r", line)
            return None, indent_unit

    token = LineToken(
        name=name,
        level=level,
        is_file=is_file_entry(name),
        content=content,
    )
    return token, indent_unit
