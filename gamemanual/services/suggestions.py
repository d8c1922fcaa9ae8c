from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..schemas import ErrorBody, ErrorDetail, Suggestion
from ..utils.exceptions import GameManualError, ProviderError, ProviderUnavailableError
from .registry import configured_providers, get_provider

REASON_UNAVAILABLE = "provider_unavailable"
REASON_ERROR = "provider_error"


def build_suggestion(
    error: Exception, env: Optional[Mapping[str, str]] = None
) -> Optional[Suggestion]:
    """Recommend another configured provider when the failing one is unusable.

    Only provider-specific failures qualify: an unconfigured request or an
    adapter error. The recommendation is the highest-priority configured
    provider other than the failing one.
    """
    if isinstance(error, ProviderUnavailableError):
        reason = REASON_UNAVAILABLE
    elif isinstance(error, ProviderError) and error.provider_id:
        reason = REASON_ERROR
    else:
        return None

    failing_id = error.provider_id
    remaining = [s for s in configured_providers(env) if s.id != failing_id]
    if not remaining:
        return None
    recommended = remaining[0]

    failing = get_provider(failing_id)
    failing_name = failing.name if failing else failing_id
    if reason == REASON_UNAVAILABLE:
        message = f"{failing_name} is unavailable. Switch to {recommended.name} and try again?"
    else:
        message = (
            f"{failing_name} failed to generate a manual. "
            f"Switch to {recommended.name} and try again?"
        )
    return Suggestion(recommended=recommended.id, message=message, reason=reason)


def build_error_body(
    error: GameManualError, env: Optional[Mapping[str, str]] = None
) -> Dict[str, Any]:
    body = ErrorBody(error=ErrorDetail(message=error.message))
    if isinstance(error, ProviderUnavailableError):
        body.available = error.available
    body.suggestion = build_suggestion(error, env)
    return body.model_dump(exclude_none=True)
