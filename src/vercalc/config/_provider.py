"""ConfigurationProvider -- 実効設定テキストの取得。

ロケーターで選択された設定ファイルを読み込み、見つからない場合は
組み込み既定値にフォールバックする。設定ファイルの不在・曖昧さでは
例外を送出しない（厳格な検証は ConfigurationFileLocator.verify が担当）。
"""

from __future__ import annotations

import logging
from typing import Final, assert_never

from vercalc.config._filesystem import FileSystem
from vercalc.config._locator import ConfigurationFileLocator
from vercalc.config._paths import StrPath
from vercalc.models.locator import (
    LocateAmbiguous,
    LocateFound,
    LocateNotFound,
    ProvidedConfiguration,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIGURATION_TEXT: Final[str] = """\
# vercalc configuration
# Uncomment and modify settings as needed.

# --- Versioning ---

# Workflow preset used to derive branch settings
# workflow: GitFlow/v1

# Prefix stripped from tags before parsing a version
# tag-prefix: '[vV]?'

# Version used when no tag can be found
# next-version: 0.1.0

# --- Commit Messages ---

# Honor +semver: bump/skip messages in commits
# commit-message-incrementing: Enabled
"""


class ConfigurationProvider:
    """ロケーターを用いてディレクトリの実効設定を提供する。

    Args:
        locator: create_locator() で選択されたロケーター。
        file_system: 設定ファイルの読み込みに使う FileSystem。
    """

    def __init__(
        self, locator: ConfigurationFileLocator, file_system: FileSystem
    ) -> None:
        self._locator = locator
        self._file_system = file_system

    def provide_for_directory(self, directory: StrPath) -> ProvidedConfiguration:
        """directory の実効設定を返す。

        設定ファイルが無い・曖昧な場合は組み込み既定値を返す（警告は出さない）。

        Raises:
            OSError: 設定ファイルは存在するが読み込めない場合（権限エラー等）。
        """
        outcome = self._locator.locate(directory)
        if isinstance(outcome, LocateFound):
            path = outcome.candidate.full_path
            try:
                text = self._file_system.read_text(path)
            except FileNotFoundError:
                # 存在確認から読み込みまでの間に削除された
                logger.debug("Configuration file '%s' disappeared", path)
                return _defaults()
            return ProvidedConfiguration(source=path, text=text)
        if isinstance(outcome, (LocateNotFound, LocateAmbiguous)):
            logger.debug(
                "No configuration file for '%s'; using built-in defaults", directory
            )
            return _defaults()
        assert_never(outcome)


def _defaults() -> ProvidedConfiguration:
    return ProvidedConfiguration(source=None, text=DEFAULT_CONFIGURATION_TEXT)
