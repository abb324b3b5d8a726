"""リポジトリルート探索のテスト。"""

from __future__ import annotations

from pathlib import Path

from vercalc.config import find_repository_root


class TestFindRepositoryRootInCurrent:
    """カレントディレクトリに .git がある場合。"""

    def test_git_directory(self, tmp_path: Path) -> None:
        (tmp_path / ".git").mkdir()
        assert find_repository_root(tmp_path) == tmp_path

    def test_git_file_for_worktree(self, tmp_path: Path) -> None:
        """worktree の .git ファイルも認識する。"""
        (tmp_path / ".git").write_text("gitdir: /elsewhere\n", encoding="utf-8")
        assert find_repository_root(tmp_path) == tmp_path


class TestFindRepositoryRootInParent:
    """親ディレクトリに .git がある場合。"""

    def test_returns_parent_directory(self, tmp_path: Path) -> None:
        (tmp_path / ".git").mkdir()
        child = tmp_path / "src" / "Working"
        child.mkdir(parents=True)
        assert find_repository_root(child) == tmp_path

    def test_nearest_repository_wins(self, tmp_path: Path) -> None:
        """ネストしたリポジトリでは最も近いものを返す。"""
        (tmp_path / ".git").mkdir()
        inner = tmp_path / "vendor" / "lib"
        (inner / ".git").mkdir(parents=True)
        assert find_repository_root(inner / "src") == inner


class TestFindRepositoryRootNotFound:
    def test_returns_none(self, tmp_path: Path) -> None:
        """tmp_path 配下に .git が無く、上位にも無い想定。"""
        result = find_repository_root(tmp_path)
        assert result is None or not str(result).startswith(str(tmp_path))
