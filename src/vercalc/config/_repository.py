"""リポジトリルート探索。

作業ディレクトリから親方向に .git を探索し、リポジトリディレクトリを決定する。
worktree / submodule では .git がファイルになるため、種別は問わない。
"""

from __future__ import annotations

from pathlib import Path

from vercalc.config._paths import normalize

_GIT_ENTRY_NAME: str = ".git"


def find_repository_root(start: Path) -> Path | None:
    """start ディレクトリから親方向に .git を探索しリポジトリルートを返す。

    ファイルシステムルートまで遡っても見つからない場合は None を返す。

    Args:
        start: 探索開始ディレクトリ。

    Returns:
        .git を含むディレクトリ。見つからなければ None。

    Raises:
        OSError: 探索パス上のアクセス権限エラー等。
    """
    current = normalize(start)
    while True:
        candidate = current / _GIT_ENTRY_NAME
        try:
            candidate.stat()
        except FileNotFoundError:
            pass
        else:
            return current
        parent = current.parent
        if parent == current:
            return None
        current = parent
