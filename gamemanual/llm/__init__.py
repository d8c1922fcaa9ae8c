"""
LLM module - prompt template, backend table and provider adapters.
"""

from .adapters import generate_manual
from .prompts import (
    GAME_MANUAL_RESPONSE_SCHEMA,
    PromptPair,
    build_prompt,
    combined_prompt,
)
from .providers import PROVIDERS, ProviderCredentials, ProviderSpec, WireFormat

__all__ = [
    "generate_manual",
    "GAME_MANUAL_RESPONSE_SCHEMA",
    "PromptPair",
    "build_prompt",
    "combined_prompt",
    "PROVIDERS",
    "ProviderCredentials",
    "ProviderSpec",
    "WireFormat",
]
