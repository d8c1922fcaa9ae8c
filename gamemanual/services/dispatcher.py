from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import httpx

from ..config import GenerationSettings
from ..llm.adapters import generate_manual
from ..llm.providers import ProviderSpec
from ..utils.exceptions import (
    InvalidInputError,
    NoProviderConfiguredError,
    ProviderError,
    ProviderUnavailableError,
)
from .registry import (
    configured_providers,
    credentials_for,
    describe_config_keys,
    recognized_config_keys,
    resolve_alias,
)

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """A game manual plus the name of the provider that produced it."""

    manual: Dict[str, Any]
    provider: str
    provider_id: str

    def to_dict(self) -> Dict[str, Any]:
        return {**self.manual, "provider": self.provider}


def select_provider(
    requested_provider_id: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> ProviderSpec:
    """Pick the adapter for a request.

    A recognised but unconfigured request fails instead of being substituted.
    An empty or unrecognised request falls back to priority order.
    """
    env = os.environ if env is None else env
    configured = configured_providers(env)

    if requested_provider_id and requested_provider_id.strip():
        spec = resolve_alias(requested_provider_id)
        if spec is not None:
            if spec not in configured:
                raise ProviderUnavailableError(
                    spec.id, spec.name, available=[s.id for s in configured]
                )
            return spec
        logger.info(
            f"Unknown provider '{requested_provider_id}' requested; using priority order"
        )

    if not configured:
        raise NoProviderConfiguredError(
            "No AI provider API key configured. Please set "
            f"{describe_config_keys()} in your environment variables.",
            config_keys=recognized_config_keys(),
        )
    return configured[0]


async def dispatch(
    word: Optional[str],
    requested_provider_id: Optional[str] = None,
    *,
    env: Optional[Mapping[str, str]] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> GenerationResult:
    """Generate one game manual with exactly one provider call."""
    if not isinstance(word, str) or not word.strip():
        raise InvalidInputError(
            "Word is required and must be a non-empty string.", field="word"
        )
    word = word.strip()
    env = os.environ if env is None else env

    spec = select_provider(requested_provider_id, env)
    credentials = credentials_for(spec, env)
    settings = GenerationSettings.from_env(env)

    logger.info(f"Generating game manual for '{word}' with {spec.name}")
    try:
        manual = await generate_manual(
            spec, word, credentials, settings=settings, client=client
        )
    except ProviderError as e:
        logger.warning(f"{spec.name} failed for '{word}': {e.message}")
        raise

    return GenerationResult(manual=manual, provider=spec.name, provider_id=spec.id)
