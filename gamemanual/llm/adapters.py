from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, Optional, Tuple

import httpx
from pydantic import ValidationError

from ..config import GenerationSettings
from ..schemas import GameManual
from ..utils.exceptions import MalformedResponseError, UpstreamError
from ..utils.json_parser import decode_json_object
from .prompts import GAME_MANUAL_RESPONSE_SCHEMA, PromptPair, build_prompt, combined_prompt
from .providers import ProviderCredentials, ProviderSpec, WireFormat, endpoint_url

logger = logging.getLogger(__name__)


def _chat_completions_body(spec: ProviderSpec, pair: PromptPair) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "model": spec.model,
        "messages": [
            {"role": "system", "content": pair.system},
            {"role": "user", "content": pair.user},
        ],
        "response_format": {"type": "json_object"},
    }
    if spec.temperature is not None:
        body["temperature"] = spec.temperature
    return body


def _generate_content_body(spec: ProviderSpec, pair: PromptPair) -> Dict[str, Any]:
    return {
        "contents": [
            {"role": "user", "parts": [{"text": combined_prompt(pair)}]},
        ],
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": GAME_MANUAL_RESPONSE_SCHEMA,
        },
    }


def _chat_completions_text(data: Any) -> Optional[str]:
    """choices[0].message.content"""
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or len(choices) == 0:
        return None
    msg = choices[0].get("message") if isinstance(choices[0], dict) else None
    if not isinstance(msg, dict):
        return None
    content = msg.get("content")
    return content if isinstance(content, str) else None


def _generate_content_text(data: Any) -> Optional[str]:
    """candidates[0].content.parts[0].text"""
    if not isinstance(data, dict):
        return None
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or len(candidates) == 0:
        return None
    content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
    if not isinstance(content, dict):
        return None
    parts = content.get("parts")
    if not isinstance(parts, list) or len(parts) == 0 or not isinstance(parts[0], dict):
        return None
    text = parts[0].get("text")
    return text if isinstance(text, str) else None


_WIRE_FORMATS: Dict[
    WireFormat,
    Tuple[Callable[[ProviderSpec, PromptPair], Dict[str, Any]], Callable[[Any], Optional[str]]],
] = {
    WireFormat.CHAT_COMPLETIONS: (_chat_completions_body, _chat_completions_text),
    WireFormat.GENERATE_CONTENT: (_generate_content_body, _generate_content_text),
}


def _auth(spec: ProviderSpec, credentials: ProviderCredentials) -> Tuple[Dict[str, str], Dict[str, str]]:
    """Return (headers, query params) carrying the credential."""
    headers = {"Content-Type": "application/json"}
    if spec.wire_format is WireFormat.GENERATE_CONTENT:
        return headers, {"key": credentials.api_key}
    headers["Authorization"] = f"Bearer {credentials.api_key}"
    return headers, {}


def _upstream_error_message(spec: ProviderSpec, resp: httpx.Response) -> str:
    try:
        error_data = resp.json()
    except ValueError:
        error_data = {"error": {"message": "Could not parse error response."}}
    backend_msg = None
    if isinstance(error_data, dict) and isinstance(error_data.get("error"), dict):
        backend_msg = error_data["error"].get("message")
    return (
        f"{spec.name} API Error: {resp.status_code} {resp.reason_phrase} - "
        f"{backend_msg or 'Unknown API error'}"
    )


async def _post(
    spec: ProviderSpec,
    url: str,
    body: Dict[str, Any],
    headers: Dict[str, str],
    params: Dict[str, str],
    timeout: float,
    client: Optional[httpx.AsyncClient],
) -> httpx.Response:
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as owned:
                return await owned.post(url, json=body, headers=headers, params=params)
        return await client.post(url, json=body, headers=headers, params=params, timeout=timeout)
    except httpx.TimeoutException as e:
        raise UpstreamError(
            f"{spec.name} API request failed: timed out after {timeout:g}s",
            provider_id=spec.id,
            provider_name=spec.name,
        ) from e
    except httpx.RequestError as e:
        raise UpstreamError(
            f"{spec.name} API request failed: {e}",
            provider_id=spec.id,
            provider_name=spec.name,
        ) from e


def _to_manual(spec: ProviderSpec, text: str, strict: bool) -> Dict[str, Any]:
    data = decode_json_object(text)
    if data is None:
        raise MalformedResponseError(
            f"{spec.name} returned non-JSON content",
            provider_id=spec.id,
            provider_name=spec.name,
        )
    if not strict:
        return data
    try:
        manual = GameManual.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        where = ".".join(str(p) for p in first.get("loc", ())) or "<root>"
        raise MalformedResponseError(
            f"{spec.name} returned a document that does not match the game manual shape "
            f"({e.error_count()} problem(s), first at {where}: {first.get('msg')})",
            provider_id=spec.id,
            provider_name=spec.name,
        ) from e
    return manual.model_dump(by_alias=True)


async def generate_manual(
    spec: ProviderSpec,
    word: str,
    credentials: ProviderCredentials,
    *,
    settings: Optional[GenerationSettings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Dict[str, Any]:
    """Ask one backend for a game manual and return it in canonical shape.

    Raises UpstreamError for transport failures and non-2xx replies, and
    MalformedResponseError when the reply cannot be decoded (or, in strict
    mode, does not validate as a GameManual).
    """
    settings = settings or GenerationSettings()
    build_body, extract_text = _WIRE_FORMATS[spec.wire_format]

    pair = build_prompt(word)
    body = build_body(spec, pair)
    headers, params = _auth(spec, credentials)
    url = endpoint_url(spec, credentials.base_url)

    logger.info(f"Calling {spec.name} API with model: {spec.model}")
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Request data: {json.dumps(body, ensure_ascii=False)[:500]}")

    resp = await _post(spec, url, body, headers, params, settings.timeout_sec, client)

    if not resp.is_success:
        raise UpstreamError(
            _upstream_error_message(spec, resp),
            upstream_status=resp.status_code,
            provider_id=spec.id,
            provider_name=spec.name,
        )

    try:
        data = resp.json()
    except ValueError:
        data = None
    text = extract_text(data)
    if text is None:
        raise MalformedResponseError(
            f"{spec.name} API returned an unexpected response format.",
            provider_id=spec.id,
            provider_name=spec.name,
        )

    return _to_manual(spec, text, settings.strict)
