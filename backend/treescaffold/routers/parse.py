import logging

from fastapi import APIRouter, HTTPException, Request, UploadFile

from treescaffold.models.tree_models import ParseResult, TextRequest
from treescaffold.rate_limit import limiter
from treescaffold.services.tree_parser import parse_tree

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/parse", tags=["parse"])

MAX_FILE_SIZE = 1 * 1024 * 1024  # 1 MB
_CHUNK_SIZE = 8 * 1024  # 8 KB


@router.post("/text", response_model=ParseResult)
@limiter.limit("60/minute")
async def parse_text_input(request: Request, body: TextRequest) -> ParseResult:
    try:
        return parse_tree(body.text)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/file", response_model=ParseResult)
@limiter.limit("10/minute")
async def upload_file(request: Request, file: UploadFile) -> ParseResult:
    if not file.filename:
        raise HTTPException(status_code=400, detail="No filename provided")

    # Stream file in chunks to enforce size limit without full buffering
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(_CHUNK_SIZE)
        if not chunk:
            break
        total += len(chunk)
        if total > MAX_FILE_SIZE:
            raise HTTPException(
                status_code=413,
                detail=f"File too large. Maximum size is {MAX_FILE_SIZE // (1024 * 1024)}MB.",
            )
        chunks.append(chunk)

    try:
        text = b"".join(chunks).decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="File is not valid UTF-8 text")

    try:
        result = parse_tree(text)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.info("Parsed uploaded tree %s (%d nodes)", file.filename, len(result.structure))
    return result
