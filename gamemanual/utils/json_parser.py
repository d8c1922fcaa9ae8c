"""
JSON recovery for LLM responses.

Models do not reliably honour "JSON only" instructions, so a reply is run
through an ordered list of decoding strategies. The first strategy that yields
a JSON object wins.
"""

import json
import re
from typing import Any, Callable, Dict, Optional, Tuple

_FENCE_RE = re.compile(r"```[a-zA-Z0-9_-]*\s*([\s\S]*?)```")


def _parse_direct(text: str) -> Any:
    return json.loads(text)


def _parse_fenced(text: str) -> Any:
    m = _FENCE_RE.search(text)
    if not m:
        raise ValueError("no fenced code block")
    return json.loads(m.group(1).strip())


def _parse_outer_braces(text: str) -> Any:
    first = text.find("{")
    last = text.rfind("}")
    if first == -1 or last == -1 or last <= first:
        raise ValueError("no brace-delimited object")
    return json.loads(text[first:last + 1])


DECODE_STRATEGIES: Tuple[Tuple[str, Callable[[str], Any]], ...] = (
    ("direct", _parse_direct),
    ("fenced", _parse_fenced),
    ("outer_braces", _parse_outer_braces),
)


def decode_json_object(text: str) -> Optional[Dict[str, Any]]:
    """Return the first JSON object any strategy recovers from ``text``, else None."""
    if not text or text.strip() == "":
        return None

    s = text.strip()
    for _name, strategy in DECODE_STRATEGIES:
        try:
            data = strategy(s)
        except ValueError:
            continue
        if isinstance(data, dict):
            return data
    return None
