from fastapi import APIRouter, HTTPException

from treescaffold.models.generate_models import TemplateInfo
from treescaffold.services.templates import get_template, list_templates

router = APIRouter(prefix="/api/templates", tags=["templates"])


@router.get("", response_model=list[str])
async def templates_index() -> list[str]:
    return list_templates()


@router.get("/{key}", response_model=TemplateInfo)
async def template_detail(key: str) -> TemplateInfo:
    try:
        return TemplateInfo(key=key, text=get_template(key))
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown template: {key}")
