from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

SYSTEM_PROMPT = """
You are a "Language Game Designer," a philosopher deeply versed in Wittgenstein's concept of "language-games." Your sole purpose is to create a "game manual" for any given word. You do not define words; you explain how to *use* them in different contexts.

Your response MUST be a single, valid JSON object. Do not include any text, markdown formatting, or explanations outside of the JSON structure.

For every text field in the JSON response, you MUST provide an object with two keys:
1. "en": The English text.
2. "zh": A high-quality, natural-sounding translation of the English text into Simplified Chinese.

The structure you must follow is:
{
  "targetWord": { "en": "...", "zh": "..." },
  "coreGame": { "title": { "en": "...", "zh": "..." }, "description": { "en": "...", "zh": "..." } },
  "gameBoards": {
    "title": { "en": "...", "zh": "..." },
    "boardA": { "name": { "en": "...", "zh": "..." }, "usage": { "en": "...", "zh": "..." } },
    "boardB": { "name": { "en": "...", "zh": "..." }, "usage": { "en": "...", "zh": "..." } }
  },
  "originAndTeardown": {
    "title": { "en": "...", "zh": "..." },
    "teardown": { "en": "...", "zh": "..." },
    "story": { "en": "...", "zh": "..." }
  },
  "foulWarning": { "title": { "en": "...", "zh": "..." }, "description": { "en": "...", "zh": "..." } },
  "masteryTip": { "title": { "en": "...", "zh": "..." }, "description": { "en": "...", "zh": "..." } }
}

Follow these content guidelines for each section:
1.  **Core Game**: A single, concise sentence that captures the essence of the "situation" or "language-game" where this word is played.
2.  **Game Boards**: Two distinct contexts ("boards") where the word is used. One abstract/formal, one concrete/informal.
3.  **Game Origin & Teardown**: Break the word down into its etymological parts and narrate how they formed its current "rules of play."
4.  **Foul Warning**: A common misuse or confusion.
5.  **Mastery Tip**: A clever and memorable mnemonic or analogy.
""".strip()

USER_PROMPT = 'Generate the game manual for the word: "{word}"'


@dataclass(frozen=True)
class PromptPair:
    system: str
    user: str


def build_prompt(word: str) -> PromptPair:
    """Build the instruction pair sent to every provider.

    ``word`` is expected to be trimmed by the caller.
    """
    if not word:
        raise ValueError("word must be a non-empty string")
    return PromptPair(system=SYSTEM_PROMPT, user=USER_PROMPT.format(word=word))


def combined_prompt(pair: PromptPair) -> str:
    """Single-instruction form for backends without a system role."""
    return f"{pair.system}\n\n{pair.user}"


def _bilingual() -> Dict[str, Any]:
    return {
        "type": "OBJECT",
        "properties": {
            "en": {"type": "STRING", "description": "The English text."},
            "zh": {"type": "STRING", "description": "The Simplified Chinese translation."},
        },
        "required": ["en", "zh"],
    }


def _section(*fields: str) -> Dict[str, Any]:
    return {
        "type": "OBJECT",
        "properties": {f: _bilingual() for f in fields},
        "required": list(fields),
    }


GAME_MANUAL_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "targetWord": _bilingual(),
        "coreGame": _section("title", "description"),
        "gameBoards": {
            "type": "OBJECT",
            "properties": {
                "title": _bilingual(),
                "boardA": _section("name", "usage"),
                "boardB": _section("name", "usage"),
            },
            "required": ["title", "boardA", "boardB"],
        },
        "originAndTeardown": _section("title", "teardown", "story"),
        "foulWarning": _section("title", "description"),
        "masteryTip": _section("title", "description"),
    },
    "required": [
        "targetWord",
        "coreGame",
        "gameBoards",
        "originAndTeardown",
        "foulWarning",
        "masteryTip",
    ],
}
