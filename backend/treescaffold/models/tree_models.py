from __future__ import annotations

from pydantic import BaseModel


class TextRequest(BaseModel):
    text: str


class LineToken(BaseModel):
    name: str
    level: int
    is_file: bool
    content: str = ""


class TreeNode(BaseModel):
    name: str
    level: int
    is_file: bool
    full_path: str
    content: str = ""


class ParseResult(BaseModel):
    structure: list[TreeNode] = []
    directories: list[str] = []  # unique, document order
    files: list[str] = []  # unique, document order
    file_contents: dict[str, str] = {}  # path -> scaffold content
    root_dir: str = ""
    has_root_wrapper: bool = False


class TreeStats(BaseModel):
    files: int = 0
    directories: int = 0
    max_depth: int = 0


class PreviewRequest(BaseModel):
    text: str
    root_name: str | None = None
    collapsed: list[str] = []


class PreviewResult(BaseModel):
    nodes: list[TreeNode]
    stats: TreeStats
    has_virtual_root: bool = False
