"""FastAPI dependencies for API routers."""

from fastapi import Depends, Request

from skilldex.core.context import SharedContext
from skilldex.core.registry import SkillRegistry


def get_context(request: Request) -> SharedContext:
    """Get SharedContext from app state."""
    return request.app.state.context


def get_registry(ctx: SharedContext = Depends(get_context)) -> SkillRegistry:
    """Get the context's skill registry."""
    return ctx.registry
