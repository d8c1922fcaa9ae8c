from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BilingualString(BaseModel):
    en: str
    zh: str

    @field_validator("en", "zh")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must be a non-empty string")
        return v


class TitledText(_CamelModel):
    title: BilingualString
    description: BilingualString


class GameBoard(_CamelModel):
    name: BilingualString
    usage: BilingualString


class GameBoards(_CamelModel):
    title: BilingualString
    board_a: GameBoard
    board_b: GameBoard


class OriginAndTeardown(_CamelModel):
    title: BilingualString
    teardown: BilingualString
    story: BilingualString


class GameManual(_CamelModel):
    """The bilingual language-game manual every provider must produce."""

    target_word: BilingualString
    core_game: TitledText
    game_boards: GameBoards
    origin_and_teardown: OriginAndTeardown
    foul_warning: TitledText
    mastery_tip: TitledText


# --- HTTP payloads ---

class GenerateIn(BaseModel):
    word: Optional[str] = None
    provider: Optional[str] = None


class ProviderDescriptor(BaseModel):
    id: str
    name: str


class ProviderSnapshot(BaseModel):
    providers: List[ProviderDescriptor]
    default: Optional[str] = None


class Suggestion(BaseModel):
    action: str = "switch_provider"
    recommended: str
    message: str
    reason: str


class ErrorDetail(BaseModel):
    message: str


class ErrorBody(BaseModel):
    error: ErrorDetail
    available: Optional[List[str]] = None
    suggestion: Optional[Suggestion] = None
