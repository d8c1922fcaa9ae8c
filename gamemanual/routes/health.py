from __future__ import annotations

from typing import Dict, Union

from fastapi import APIRouter

from ..services.registry import configured_providers


router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> Dict[str, Union[str, int]]:
    """Liveness plus how many providers this deployment can reach."""
    return {"status": "ok", "providers_configured": len(configured_providers())}
