"""Scaffold generators: Python, Bash, Batch, PowerShell, Node.js scripts and ZIP."""

from __future__ import annotations

import io
import json
import logging
import re
import zipfile

from treescaffold.models.generate_models import ScriptTarget
from treescaffold.models.tree_models import ParseResult
from treescaffold.services.tree_config import DEFAULT_ROOT_NAME

logger = logging.getLogger(__name__)

_HEADER = "Generated by Tree Scaffold"
_DONE = "Directory structure created successfully!"


class UnsupportedTargetError(ValueError):
    """Raised for a script target with no generator."""


def resolve_root_dir(result: ParseResult, root_name: str | None = None) -> str:
    """Pick the folder every generated path is created under.

    An explicit name wins. A tree that already wraps everything in one
    top-level folder needs no extra prefix; otherwise fall back to the
    first entry's name.
    """
    if root_name and root_name.strip():
        return root_name.strip()
    if result.has_root_wrapper:
        return ""
    return result.root_dir or DEFAULT_ROOT_NAME


def _join(root: str, path: str) -> str:
    joined = f"{root}/{path}" if root else path
    return re.sub(r"/+", "/", joined)


def _expand_content(content: str) -> str:
    """Annotations spell newlines and tabs as ``\\n`` / ``\\t``."""
    return content.replace("\\n", "\n").replace("\\t", "\t")


def _entries(result: ParseResult, root: str) -> tuple[list[str], list[tuple[str, str]]]:
    """Return (directories, [(file, content)]) with the root prefix applied."""
    dirs = [_join(root, d) for d in result.directories]
    files = [
        (_join(root, f), _expand_content(result.file_contents.get(f, "")))
        for f in result.files
    ]
    return dirs, files


# --- Python ---


def generate_python(result: ParseResult, root: str) -> str:
    dirs, files = _entries(result, root)
    lines = ["import os", "", "# Create directory structure", f"# {_HEADER}", ""]
    if dirs:
        lines.append("# Create directories")
        lines.extend(f"os.makedirs({d!r}, exist_ok=True)" for d in dirs)
        lines.append("")
    if files:
        lines.append("# Create files")
        for path, content in files:
            lines.append(f"with open({path!r}, 'w', encoding='utf-8') as f:")
            lines.append(f"    f.write({content!r})" if content else "    pass")
        lines.append("")
    lines.append(f"print({_DONE!r})")
    return "\n".join(lines) + "\n"


# --- Bash ---


def _sh_quote(s: str) -> str:
    return "'" + s.replace("'", "'\\''") + "'"


def generate_bash(result: ParseResult, root: str) -> str:
    dirs, files = _entries(result, root)
    lines = [
        "#!/bin/bash",
        "# Create directory structure",
        f"# {_HEADER}",
        "",
        "set -e",
        'echo "Creating directory structure..."',
        "",
    ]
    if dirs:
        lines.append("# Create directories")
        lines.extend(f"mkdir -p {_sh_quote(d)}" for d in dirs)
        lines.append("")
    if files:
        lines.append("# Create files")
        for path, content in files:
            if content:
                lines.append(f"printf '%s\\n' {_sh_quote(content)} > {_sh_quote(path)}")
            else:
                lines.append(f"touch {_sh_quote(path)}")
        lines.append("")
    lines.append(f'echo "{_DONE}"')
    return "\n".join(lines) + "\n"


# --- Windows batch ---

_BATCH_SPECIAL = re.compile(r"([\^&|<>])")


def _batch_escape(line: str) -> str:
    return _BATCH_SPECIAL.sub(r"^\1", line.replace("%", "%%"))


def _win_path(path: str) -> str:
    return re.sub(r"\\+", r"\\", path.replace("/", "\\"))


def generate_windows(result: ParseResult, root: str) -> str:
    dirs, files = _entries(result, root)
    lines = [
        "@echo off",
        "REM Create directory structure",
        f"REM {_HEADER}",
        "",
        "echo Creating directory structure...",
        "",
    ]
    if dirs:
        lines.append("REM Create directories")
        for d in dirs:
            p = _win_path(d)
            lines.append(f'if not exist "{p}" mkdir "{p}"')
        lines.append("")
    if files:
        lines.append("REM Create files")
        for path, content in files:
            p = _win_path(path)
            if content:
                lines.append(f'type nul > "{p}"')
                # echo( prints empty lines too
                lines.extend(
                    f'>> "{p}" echo({_batch_escape(text)}' for text in content.split("\n")
                )
            else:
                lines.append(f'if not exist "{p}" type nul > "{p}"')
        lines.append("")
    lines.append(f"echo {_DONE}")
    lines.append("pause")
    return "\r\n".join(lines) + "\r\n"


# --- PowerShell ---


def _ps_quote(s: str) -> str:
    return "'" + s.replace("'", "''") + "'"


def generate_powershell(result: ParseResult, root: str) -> str:
    dirs, files = _entries(result, root)
    lines = [
        "# Create directory structure",
        f"# {_HEADER}",
        "",
        '$ErrorActionPreference = "Stop"',
        'Write-Host "Creating directory structure..."',
        "",
    ]
    if dirs:
        lines.append("# Create directories")
        lines.extend(
            f"New-Item -ItemType Directory -Force -Path {_ps_quote(d)} | Out-Null" for d in dirs
        )
        lines.append("")
    if files:
        lines.append("# Create files")
        for path, content in files:
            if content:
                lines.append(f"Set-Content -Path {_ps_quote(path)} -Value {_ps_quote(content)}")
            else:
                lines.append(f"New-Item -ItemType File -Force -Path {_ps_quote(path)} | Out-Null")
        lines.append("")
    lines.append(f'Write-Host "{_DONE}"')
    return "\n".join(lines) + "\n"


# --- Node.js ---


def generate_nodejs(result: ParseResult, root: str) -> str:
    dirs, files = _entries(result, root)
    lines = [
        "const fs = require('fs');",
        "",
        "// Create directory structure",
        f"// {_HEADER}",
        "",
    ]
    if dirs:
        lines.append("// Create directories")
        lines.extend(f"fs.mkdirSync({json.dumps(d)}, {{ recursive: true }});" for d in dirs)
        lines.append("")
    if files:
        lines.append("// Create files")
        lines.extend(
            f"fs.writeFileSync({json.dumps(path)}, {json.dumps(content)});"
            for path, content in files
        )
        lines.append("")
    lines.append(f"console.log({json.dumps(_DONE)});")
    return "\n".join(lines) + "\n"


SCRIPT_GENERATORS = {
    ScriptTarget.PYTHON: generate_python,
    ScriptTarget.BASH: generate_bash,
    ScriptTarget.WINDOWS: generate_windows,
    ScriptTarget.POWERSHELL: generate_powershell,
    ScriptTarget.NODEJS: generate_nodejs,
}


def generate_script(
    result: ParseResult, target: ScriptTarget | str, root_name: str | None = None
) -> str:
    """Render a script that recreates ``result`` for the given target.

    Every directory is created before any file, in the order the parser
    first saw them.
    """
    try:
        generator = SCRIPT_GENERATORS[ScriptTarget(target)]
    except ValueError:
        raise UnsupportedTargetError(f"Unsupported script target: {target}") from None
    root = resolve_root_dir(result, root_name)
    script = generator(result, root)
    logger.info(
        "Generated %s script: %d directories, %d files",
        ScriptTarget(target).value,
        len(result.directories),
        len(result.files),
    )
    return script


# --- ZIP archive ---


def generate_zip(result: ParseResult, root_name: str | None = None) -> bytes:
    """Build an in-memory ZIP holding the tree, annotated files with content."""
    root = resolve_root_dir(result, root_name)
    dirs, files = _entries(result, root)
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
        if root:
            zf.writestr(f"{root}/", "")
        for d in dirs:
            zf.writestr(f"{d}/", "")
        for path, content in files:
            zf.writestr(path, content)
    logger.info("Generated ZIP archive with %d entries", len(dirs) + len(files))
    return buffer.getvalue()
