"""CLI テスト共通フィクスチャ。"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """.git ディレクトリを持つリポジトリルートを作成して返す。"""
    repo = tmp_path / "MyGitRepo"
    (repo / ".git").mkdir(parents=True)
    return repo


@pytest.fixture
def working_dir(git_repo: Path) -> Path:
    """リポジトリ配下の作業ディレクトリを作成して返す。"""
    working = git_repo / "Working"
    working.mkdir()
    return working


@pytest.fixture(autouse=True)
def _clear_config_envvars(monkeypatch: pytest.MonkeyPatch) -> None:
    """実行環境の環境変数がテストに影響しないようにする。"""
    monkeypatch.delenv("VERCALC_CONFIG", raising=False)
    monkeypatch.delenv("VERCALC_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def _restore_root_log_level():
    """configure_logging によるルートロガーのレベル変更を元に戻す。"""
    root = logging.getLogger()
    original_level = root.level
    yield
    root.setLevel(original_level)
