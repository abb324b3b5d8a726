"""InitHandler -- init サブコマンドのビジネスロジック。

リポジトリルートに既定の設定ファイルを生成する。
既存の設定ファイルはスキップし、--force で上書きする。
"""

from __future__ import annotations

from pathlib import Path

from vercalc.config import (
    DEFAULT_CONFIGURATION_TEXT,
    DEFAULT_FILE_NAME,
    DEFAULT_FILE_NAMES,
    FileSystem,
    LocalFileSystem,
)
from vercalc.models._base import VercalcBaseModel


class InitError(Exception):
    """init コマンドのエラー。

    Git リポジトリ外での実行等。
    エラーメッセージは解決方法のヒントを含む。
    """


class InitResult(VercalcBaseModel):
    """init コマンドの実行結果。

    Attributes:
        created: 新規作成されたファイルのパスタプル。
        skipped: 既存のためスキップされたファイルのパスタプル。
    """

    created: tuple[Path, ...] = ()
    skipped: tuple[Path, ...] = ()


def _ensure_git_repository(repo_root: Path) -> None:
    """Git リポジトリのルートであることを確認する。

    worktree では .git がファイルになるため、存在のみを確認する。

    Args:
        repo_root: リポジトリルートディレクトリ。

    Raises:
        InitError: .git が存在しない場合。
    """
    if not (repo_root / ".git").exists():
        raise InitError(
            f"Not a Git repository: {repo_root}\n"
            "Run 'git init' to initialize a Git repository first."
        )


def run_init(
    repo_root: Path,
    *,
    force: bool = False,
    file_system: FileSystem | None = None,
) -> InitResult:
    """init コマンドのビジネスロジックを実行する。

    手順:
    1. Git リポジトリ確認（.git の存在）
    2. 既定ファイル名のいずれかが既に存在すればスキップ（force 時は上書き）
    3. GitVersion.yml にコメント付きテンプレートを書き込む

    Args:
        repo_root: リポジトリルートディレクトリ。
        force: True の場合、既存ファイルを上書きする。
        file_system: 書き込みに使う FileSystem。None の場合は LocalFileSystem。

    Returns:
        InitResult: 作成・スキップされたファイル情報。

    Raises:
        InitError: Git リポジトリ外での実行、ファイルシステム操作エラー等。
    """
    _ensure_git_repository(repo_root)
    fs = file_system if file_system is not None else LocalFileSystem()

    existing = [
        repo_root / name for name in DEFAULT_FILE_NAMES if fs.exists(repo_root / name)
    ]
    if existing and not force:
        return InitResult(skipped=tuple(existing))

    # 上書き時は既存ファイルに書き込み、既定ファイル名の重複を作らない
    config_path = existing[0] if existing else repo_root / DEFAULT_FILE_NAME
    try:
        fs.write_text(config_path, DEFAULT_CONFIGURATION_TEXT)
    except OSError as e:
        raise InitError(
            f"Failed to write {config_path}: {e}\n"
            "Check directory permissions and available disk space."
        ) from e

    return InitResult(created=(config_path,))
