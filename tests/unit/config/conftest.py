"""設定ファイル探索テスト共通フィクスチャ。"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from pathlib import Path

import pytest

from vercalc.config import FileSystem, InMemoryFileSystem
from vercalc.config._paths import combine, normalize

SetupConfigFile = Callable[[Path | None, str], AbstractContextManager[Path]]


@contextmanager
def _setup_config_file(
    file_system: FileSystem, directory: Path | None, file_name: str
) -> Iterator[Path]:
    """directory/file_name に設定ファイルを作成し、終了時に必ず削除する。

    directory が None の場合はカレントディレクトリを使う。
    """
    path = normalize(combine(directory if directory is not None else Path.cwd(), file_name))
    file_system.write_text(path, "next-version: 1.0.0\n")
    try:
        yield path
    finally:
        file_system.delete(path)


@pytest.fixture
def file_system() -> InMemoryFileSystem:
    return InMemoryFileSystem()


@pytest.fixture
def setup_config_file(file_system: InMemoryFileSystem) -> SetupConfigFile:
    """file_system 上に一時的な設定ファイルを作るコンテキストマネージャーを返す。"""

    def _factory(directory: Path | None, file_name: str) -> AbstractContextManager[Path]:
        return _setup_config_file(file_system, directory, file_name)

    return _factory


@pytest.fixture
def repo_path(tmp_path: Path) -> Path:
    return tmp_path / "MyGitRepo"


@pytest.fixture
def working_path(repo_path: Path) -> Path:
    return repo_path / "Working"
