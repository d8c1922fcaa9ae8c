from __future__ import annotations

from fastapi import APIRouter

from ..schemas import ProviderSnapshot
from ..services.registry import list_configured


router = APIRouter(prefix="/api", tags=["providers"])


@router.get("/ai-providers", response_model=ProviderSnapshot)
def ai_providers() -> ProviderSnapshot:
    return list_configured()
