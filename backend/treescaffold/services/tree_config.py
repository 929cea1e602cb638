"""Static glyph and filename tables used by the tree parser.

Kept as data so new glyph families or extensions can be added without
touching the tokenizer or classifier control flow.
"""

from __future__ import annotations

# Glyphs that continue an ancestor's column ("│   ├── child").
VERTICAL_GLYPHS: frozenset[str] = frozenset({"│"})

# Glyphs that introduce an entry one level below their prefix.
BRANCH_GLYPHS: frozenset[str] = frozenset({"├", "└", "╣", "╚", "╬", "║"})

# Everything stripped from the front of a line before reading the name.
DRAWING_GLYPHS: frozenset[str] = frozenset(
    {"├", "└", "│", "╣", "║", "╚", "╬", "─", "═", "┌", "┐", "┘", "┴", "┬", "┤"}
)

# Decorative dashes that may separate the branch glyph from the name.
DASH_GLYPHS: frozenset[str] = frozenset({"─", "═"})

COMMENT_MARKERS: tuple[str, ...] = ("#", "//")

KNOWN_FILE_EXTENSIONS: frozenset[str] = frozenset({
    ".py", ".js", ".json", ".txt", ".md", ".html", ".css", ".xml",
    ".yml", ".yaml", ".conf", ".ini", ".ts", ".jsx", ".tsx", ".php",
    ".rb", ".go", ".rs", ".cpp", ".c", ".java", ".kt", ".swift",
})

# Compared lower-cased against the whole name.
EXTENSIONLESS_FILES: frozenset[str] = frozenset({
    "dockerfile",
    "makefile",
    "readme",
    "license",
    ".env",
    ".gitignore",
    ".dockerignore",
})

# Bounds (inclusive, dot included) for the "looks like an extension" fallback.
MIN_EXTENSION_LENGTH = 2
MAX_EXTENSION_LENGTH = 6

DEFAULT_ROOT_NAME = "project"
VIRTUAL_ROOT_PATH = "$$VIRTUAL_ROOT$$"
