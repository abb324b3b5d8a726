"""設定ファイル選択の警告例外。

CLI 層で捕捉され、メッセージを stderr に出力して非ゼロで終了する。
"""

from __future__ import annotations

from pathlib import Path

from vercalc.models.locator import AMBIGUOUS_MESSAGE_FORMAT, NOT_FOUND_MESSAGE_FORMAT


class ConfigurationWarning(Exception):
    """設定ファイル選択に関する警告の基底クラス。"""


class AmbiguousConfigurationFileError(ConfigurationWarning):
    """作業ディレクトリとリポジトリディレクトリの双方に別の設定ファイルがある。"""

    def __init__(self, working_candidate: Path, repo_candidate: Path) -> None:
        self.working_candidate = working_candidate
        self.repo_candidate = repo_candidate
        super().__init__(
            AMBIGUOUS_MESSAGE_FORMAT.format(
                working=working_candidate, repo=repo_candidate
            )
        )


class ConfigurationFileNotFoundError(ConfigurationWarning):
    """明示指定された設定ファイルがどちらのディレクトリにも存在しない。"""

    def __init__(self, working_candidate: Path, repo_candidate: Path) -> None:
        self.working_candidate = working_candidate
        self.repo_candidate = repo_candidate
        super().__init__(
            NOT_FOUND_MESSAGE_FORMAT.format(
                working=working_candidate, repo=repo_candidate
            )
        )
