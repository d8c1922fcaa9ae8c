from __future__ import annotations

import os
from typing import Iterable, List, Mapping, Optional

from ..llm.providers import PROVIDERS, ProviderCredentials, ProviderSpec
from ..schemas import ProviderDescriptor, ProviderSnapshot


def _first_set(names: Iterable[str], env: Mapping[str, str]) -> Optional[str]:
    for name in names:
        value = (env.get(name) or "").strip()
        if value:
            return value
    return None


def is_configured(spec: ProviderSpec, env: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if env is None else env
    return _first_set(spec.key_envs, env) is not None


def configured_providers(env: Optional[Mapping[str, str]] = None) -> List[ProviderSpec]:
    """Configured providers in priority order."""
    env = os.environ if env is None else env
    return [spec for spec in PROVIDERS if is_configured(spec, env)]


def list_configured(env: Optional[Mapping[str, str]] = None) -> ProviderSnapshot:
    specs = configured_providers(env)
    return ProviderSnapshot(
        providers=[ProviderDescriptor(id=s.id, name=s.name) for s in specs],
        default=specs[0].id if specs else None,
    )


def resolve_alias(requested: Optional[str]) -> Optional[ProviderSpec]:
    """Match a caller-supplied provider id against each provider's aliases."""
    key = (requested or "").strip().lower()
    if not key:
        return None
    for spec in PROVIDERS:
        if key in spec.aliases:
            return spec
    return None


def get_provider(provider_id: str) -> Optional[ProviderSpec]:
    for spec in PROVIDERS:
        if spec.id == provider_id:
            return spec
    return None


def credentials_for(spec: ProviderSpec, env: Optional[Mapping[str, str]] = None) -> ProviderCredentials:
    env = os.environ if env is None else env
    api_key = _first_set(spec.key_envs, env)
    if api_key is None:
        raise KeyError(f"No credential configured for provider '{spec.id}'")
    base_url = _first_set(spec.base_url_envs, env) or spec.default_base_url
    return ProviderCredentials(api_key=api_key, base_url=base_url)


def recognized_config_keys() -> List[str]:
    return [name for spec in PROVIDERS for name in spec.key_envs]


def describe_config_keys() -> str:
    """Human list of credential variables, e.g. 'A (or B), C, or D'."""
    parts = []
    for spec in PROVIDERS:
        primary, *alternates = spec.key_envs
        parts.append(primary + "".join(f" (or {a})" for a in alternates))
    if len(parts) == 1:
        return parts[0]
    return ", ".join(parts[:-1]) + ", or " + parts[-1]
