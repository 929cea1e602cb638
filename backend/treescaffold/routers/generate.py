import re
from urllib.parse import quote

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import Response

from treescaffold.models.generate_models import (
    ArchiveRequest,
    PromptRequest,
    PromptResponse,
    ScriptRequest,
    ScriptTarget,
)
from treescaffold.models.tree_models import PreviewRequest, PreviewResult
from treescaffold.rate_limit import limiter
from treescaffold.services.preview import build_preview
from treescaffold.services.prompt_generator import generate_ai_prompt
from treescaffold.services.script_generator import (
    generate_script,
    generate_zip,
    resolve_root_dir,
)
from treescaffold.services.tree_parser import parse_tree

router = APIRouter(prefix="/api", tags=["generate"])

# target -> (mime type, extension)
SCRIPT_FORMATS: dict[ScriptTarget, tuple[str, str]] = {
    ScriptTarget.PYTHON: ("text/x-python", ".py"),
    ScriptTarget.BASH: ("application/x-sh", ".sh"),
    ScriptTarget.WINDOWS: ("application/x-msdos-program", ".bat"),
    ScriptTarget.POWERSHELL: ("application/x-powershell", ".ps1"),
    ScriptTarget.NODEJS: ("application/javascript", ".js"),
}


def _attachment_headers(filename: str) -> dict[str, str]:
    """Content-Disposition with an ASCII fallback plus the RFC 5987 UTF-8 name."""
    fallback = re.sub(r"[^\x20-\x7e]|[\"\\]", "_", filename)
    return {
        "Content-Disposition": (
            f'attachment; filename="{fallback}"; '
            f"filename*=UTF-8''{quote(filename, safe='')}"
        )
    }


def _parse_or_400(text: str):
    try:
        return parse_tree(text)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/generate/script")
@limiter.limit("60/minute")
async def generate_script_file(request: Request, body: ScriptRequest) -> Response:
    parsed = _parse_or_400(body.text)
    script = generate_script(parsed, body.target, body.root_name)
    mime_type, extension = SCRIPT_FORMATS[body.target]
    filename = f"create_structure{extension}"
    return Response(
        content=script,
        media_type=mime_type,
        headers=_attachment_headers(filename),
    )


@router.post("/generate/zip")
@limiter.limit("30/minute")
async def generate_zip_file(request: Request, body: ArchiveRequest) -> Response:
    parsed = _parse_or_400(body.text)
    data = generate_zip(parsed, body.root_name)
    filename = f"{resolve_root_dir(parsed, body.root_name) or parsed.root_dir}.zip"
    return Response(
        content=data,
        media_type="application/zip",
        headers=_attachment_headers(filename),
    )


@router.post("/generate/prompt", response_model=PromptResponse)
async def generate_prompt(body: PromptRequest) -> PromptResponse:
    parsed = _parse_or_400(body.text)
    root = body.root_name or parsed.root_dir
    return PromptResponse(prompt=generate_ai_prompt(parsed.structure, root))


@router.post("/preview", response_model=PreviewResult)
async def preview(body: PreviewRequest) -> PreviewResult:
    """Outline of the tree with collapsed directories folded away."""
    parsed = _parse_or_400(body.text)
    return build_preview(parsed, body.root_name, body.collapsed)
