"""
The closed set of text-generation backends.

Table order is the default-selection priority.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class WireFormat(str, Enum):
    CHAT_COMPLETIONS = "chat_completions"
    GENERATE_CONTENT = "generate_content"


@dataclass(frozen=True)
class ProviderSpec:
    """Static description of one backend."""

    id: str
    name: str
    model: str
    wire_format: WireFormat
    default_base_url: str
    path: str
    key_envs: Tuple[str, ...]
    base_url_envs: Tuple[str, ...] = ()
    aliases: Tuple[str, ...] = ()
    temperature: Optional[float] = None


@dataclass(frozen=True)
class ProviderCredentials:
    api_key: str
    base_url: str


GLM = ProviderSpec(
    id="glm",
    name="GLM-4.5-Air",
    model="glm-4.5-air",
    wire_format=WireFormat.CHAT_COMPLETIONS,
    default_base_url="https://open.bigmodel.cn/api/paas/v4",
    path="/chat/completions",
    key_envs=("GLM_API_KEY", "ZHIPU_API_KEY"),
    base_url_envs=("GLM_BASE_URL", "ZHIPU_BASE_URL"),
    aliases=("glm", "zhipu", "glm-4.5-air", "glm_4.5_air"),
    temperature=0.2,
)

DEEPSEEK = ProviderSpec(
    id="deepseek",
    name="DeepSeek",
    model="deepseek-chat",
    wire_format=WireFormat.CHAT_COMPLETIONS,
    default_base_url="https://api.deepseek.com",
    path="/v1/chat/completions",
    key_envs=("DEEPSEEK_API_KEY",),
    base_url_envs=("DEEPSEEK_BASE_URL",),
    aliases=("deepseek", "deepseek-chat"),
)

GEMINI = ProviderSpec(
    id="gemini",
    name="Gemini",
    model="gemini-2.0-flash-exp",
    wire_format=WireFormat.GENERATE_CONTENT,
    default_base_url="https://generativelanguage.googleapis.com/v1beta",
    path="/models/{model}:generateContent",
    key_envs=("GEMINI_API_KEY",),
    aliases=("gemini",),
)

OPENAI = ProviderSpec(
    id="openai",
    name="OpenAI",
    model="gpt-4o",
    wire_format=WireFormat.CHAT_COMPLETIONS,
    default_base_url="https://api.openai.com/v1",
    path="/chat/completions",
    key_envs=("OPENAI_API_KEY",),
    aliases=("openai", "gpt-4o"),
)

PROVIDERS: Tuple[ProviderSpec, ...] = (GLM, DEEPSEEK, GEMINI, OPENAI)


def endpoint_url(spec: ProviderSpec, base_url: str) -> str:
    return base_url.rstrip("/") + spec.path.format(model=spec.model)
