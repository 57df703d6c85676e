"""Pytest configuration and fixtures."""

import os
from pathlib import Path

import pytest

from vnscript.config import VNScriptSettings, reset_settings, set_settings
from vnscript.labels.recording import (
    RecordingAudio,
    RecordingEngine,
    RecordingNotifier,
    StaticCharacterRegistry,
)

# Import CLI fixtures to make them available globally
from tests.cli_fixtures import clean_runner, cli_invoke  # noqa: F401

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "scenarios"

SAMPLE_SCENARIO = """タイトル：テストシナリオ
章：テスト章『テスト』

---

【背景】テスト背景
【BGM】テストBGM

主人公（モノローグ）
これはテストです。

主人公
「こんにちは」
"""


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Give every test default settings, unaffected by the host environment."""
    for key in list(os.environ):
        if key.startswith("VNSCRIPT_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    settings = VNScriptSettings(_env_file=None)
    set_settings(settings)
    yield settings
    reset_settings()


@pytest.fixture
def sample_scenario():
    """The scenario used across parser and label tests."""
    return SAMPLE_SCENARIO


@pytest.fixture
def prologue_path():
    """Path to the longer prologue fixture."""
    return FIXTURES_DIR / "prologue.txt"


@pytest.fixture
def scenario_file(tmp_path, sample_scenario):
    """Write the sample scenario to a file."""
    path = tmp_path / "scenario.txt"
    path.write_text(sample_scenario, encoding="utf-8")
    return path


@pytest.fixture
def engine():
    return RecordingEngine()


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def registry():
    return StaticCharacterRegistry(
        {"protagonist": "ユウ", "nanatau": "ななたう", "system": "システム"}
    )
