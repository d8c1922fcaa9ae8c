from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from ..schemas import GenerateIn
from ..services.dispatcher import dispatch


router = APIRouter(prefix="/api", tags=["generation"])


@router.post("/ai-generate")
async def ai_generate(payload: GenerateIn) -> Dict[str, Any]:
    """Generate a game manual; failures are rendered by the app's error handlers."""
    result = await dispatch(payload.word, payload.provider)
    return result.to_dict()
