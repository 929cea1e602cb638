from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ScriptTarget(str, Enum):
    PYTHON = "python"
    BASH = "bash"
    WINDOWS = "windows"
    POWERSHELL = "powershell"
    NODEJS = "nodejs"


class ScriptRequest(BaseModel):
    text: str
    target: ScriptTarget = ScriptTarget.PYTHON
    root_name: str | None = None


class ArchiveRequest(BaseModel):
    text: str
    root_name: str | None = None


class PromptRequest(BaseModel):
    text: str
    root_name: str | None = None


class PromptResponse(BaseModel):
    prompt: str


class TemplateInfo(BaseModel):
    key: str
    text: str
