"""
Shared fixtures.

Only the provider backends are faked (httpx.MockTransport or a patched
adapter); everything between the HTTP route and the wire is real code.
"""

import copy

import httpx
import pytest
from fastapi.testclient import TestClient

from gamemanual.services.registry import recognized_config_keys
from tests.utils.backends import Recorder

BASE_URL_KEYS = ["GLM_BASE_URL", "ZHIPU_BASE_URL", "DEEPSEEK_BASE_URL"]

SAMPLE_MANUAL = {
    "targetWord": {"en": "ephemeral", "zh": "短暂的"},
    "coreGame": {
        "title": {"en": "The Core Game", "zh": "核心游戏"},
        "description": {
            "en": "Played whenever something beautiful is about to vanish.",
            "zh": "每当美好的事物即将消失时，这个游戏就开始了。",
        },
    },
    "gameBoards": {
        "title": {"en": "Game Boards", "zh": "游戏棋盘"},
        "boardA": {
            "name": {"en": "Philosophy", "zh": "哲学"},
            "usage": {"en": "All fame is ephemeral.", "zh": "一切名声都是短暂的。"},
        },
        "boardB": {
            "name": {"en": "Social media", "zh": "社交媒体"},
            "usage": {"en": "Stories are ephemeral posts.", "zh": "快拍是短暂的帖子。"},
        },
    },
    "originAndTeardown": {
        "title": {"en": "Origin & Teardown", "zh": "起源与拆解"},
        "teardown": {"en": "epi- (on) + hemera (day)", "zh": "epi-（在……之上）+ hemera（日）"},
        "story": {"en": "Lasting only a single day.", "zh": "只持续一天。"},
    },
    "foulWarning": {
        "title": {"en": "Foul Warning", "zh": "犯规警告"},
        "description": {"en": "Not the same as 'ethereal'.", "zh": "不要与“空灵的”混淆。"},
    },
    "masteryTip": {
        "title": {"en": "Mastery Tip", "zh": "精通技巧"},
        "description": {"en": "A mayfly lives one day.", "zh": "蜉蝣只活一天。"},
    },
}


@pytest.fixture
def manual():
    return copy.deepcopy(SAMPLE_MANUAL)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Every test starts with no provider credentials in the process environment."""
    for key in recognized_config_keys() + BASE_URL_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("GAME_MANUAL_STRICT", raising=False)
    monkeypatch.delenv("GAME_MANUAL_TIMEOUT_SEC", raising=False)
    return monkeypatch


@pytest.fixture
def mock_backend():
    """Factory returning (recorder, AsyncClient) wired to httpx.MockTransport."""
    clients = []

    def _make(**kwargs):
        recorder = Recorder(**kwargs)
        client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
        clients.append(client)
        return recorder, client

    return _make


@pytest.fixture
def client():
    from gamemanual.main import app

    with TestClient(app) as test_client:
        yield test_client
