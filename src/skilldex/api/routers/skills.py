"""Skill resource router."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from skilldex.api.deps import get_context, get_registry
from skilldex.api.schemas import ReloadResult, SkillSummary
from skilldex.core.context import SharedContext
from skilldex.core.document import SkillDocument
from skilldex.core.exceptions import NotFoundError, SkillRegistryError
from skilldex.core.registry import SkillRegistry

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list[SkillSummary])
def list_skills(registry: SkillRegistry = Depends(get_registry)) -> list[SkillSummary]:
    """List all skills."""
    return [SkillSummary.from_document(doc) for doc in registry.list()]


@router.post("/reload", response_model=ReloadResult)
def reload_skills(ctx: SharedContext = Depends(get_context)) -> ReloadResult:
    """Reload skills from the configured directory."""
    try:
        count = ctx.load()
    except SkillRegistryError as e:
        logger.warning(f"Reload failed, keeping previous skills: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    return ReloadResult(count=count, source=ctx.config.skills_path)


# Identifiers come from the `name` header and may contain slashes.
@router.get("/{identifier:path}", response_model=SkillDocument)
def get_skill(
    identifier: str, registry: SkillRegistry = Depends(get_registry)
) -> SkillDocument:
    """Get skill by identifier."""
    try:
        return registry.get(identifier)
    except NotFoundError:
        raise HTTPException(status_code=404, detail=f"Skill not found: {identifier}")
