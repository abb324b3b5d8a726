"""設定ファイルロケーター。

作業ディレクトリとリポジトリディレクトリの組から、バージョン計算を支配する
設定ファイルを高々1つ決定する。

- DefaultConfigurationFileLocator: 既定ファイル名 2 種を探索する。
- NamedConfigurationFileLocator: 明示指定されたファイル名/パスを探索する。

verify() と locate() は同じ解決ルーチン _resolve() を共有する。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Final, assert_never

from vercalc.config._errors import (
    AmbiguousConfigurationFileError,
    ConfigurationFileNotFoundError,
)
from vercalc.config._filesystem import FileSystem
from vercalc.config._paths import StrPath, combine, normalize, paths_equal
from vercalc.models.locator import (
    ConfigurationFileCandidate,
    ConfigurationInfo,
    LocateAmbiguous,
    LocateFound,
    LocateNotFound,
    LocateOutcome,
    RepositoryPaths,
    VerifyAmbiguous,
    VerifyNotFound,
    VerifyOk,
    VerifyResult,
)

logger = logging.getLogger(__name__)

DEFAULT_FILE_NAME: Final[str] = "GitVersion.yml"
DEFAULT_ALTERNATIVE_FILE_NAME: Final[str] = "GitVersion.yaml"
DEFAULT_FILE_NAMES: Final[tuple[str, ...]] = (
    DEFAULT_FILE_NAME,
    DEFAULT_ALTERNATIVE_FILE_NAME,
)


def _make_candidate(directory: StrPath, file_name: str) -> ConfigurationFileCandidate:
    return ConfigurationFileCandidate(
        directory=normalize(directory),
        file_name=file_name,
        full_path=normalize(combine(directory, file_name)),
    )


class ConfigurationFileLocator(ABC):
    """設定ファイルロケーターの共通インターフェース。

    状態は FileSystem のみで、呼び出しごとに存在確認をやり直す。
    """

    def __init__(self, file_system: FileSystem) -> None:
        self._file_system = file_system

    @abstractmethod
    def _candidate_for(self, directory: Path) -> ConfigurationFileCandidate:
        """directory における候補を返す。存在しない候補を返してもよい。"""

    @abstractmethod
    def _verify_not_found(self, outcome: LocateNotFound) -> VerifyResult:
        """どちらにも見つからなかった場合の検証結果。"""

    def _exists(self, candidate: ConfigurationFileCandidate) -> bool:
        return self._file_system.exists(candidate.full_path)

    def _resolve(self, paths: RepositoryPaths) -> LocateOutcome:
        """作業/リポジトリディレクトリの組から候補を解決する。

        同一ディレクトリ（大文字小文字非依存）の場合は作業ディレクトリのみを評価し、
        曖昧性チェックは行わない。
        """
        working = self._candidate_for(paths.working_path)
        working_exists = self._exists(working)

        if paths_equal(paths.working_path, paths.repo_path):
            if working_exists:
                return LocateFound(candidate=working)
            return LocateNotFound(working_candidate=working, repo_candidate=working)

        repo = self._candidate_for(paths.repo_path)
        repo_exists = self._exists(repo)

        if working_exists and repo_exists:
            if paths_equal(working.full_path, repo.full_path):
                return LocateFound(candidate=working)
            return LocateAmbiguous(working_candidate=working, repo_candidate=repo)
        if working_exists:
            return LocateFound(candidate=working)
        if repo_exists:
            return LocateFound(candidate=repo)
        return LocateNotFound(working_candidate=working, repo_candidate=repo)

    def locate(self, directory: StrPath) -> LocateOutcome:
        """directory 単独で設定ファイルを探索する。

        ConfigurationProvider から呼ばれ、例外は送出しない。
        """
        path = Path(directory)
        outcome = self._resolve(RepositoryPaths(working_path=path, repo_path=path))
        if isinstance(outcome, LocateFound):
            logger.info(
                "Found configuration file at '%s'", outcome.candidate.full_path
            )
        return outcome

    def verify(self, working_path: StrPath, repo_path: StrPath) -> VerifyResult:
        """作業ディレクトリとリポジトリディレクトリの設定ファイル選択を検証する。

        Args:
            working_path: ツールを起動したディレクトリ。
            repo_path: リポジトリのルートディレクトリ。

        Returns:
            VerifyOk（選択されたパス、または None）、VerifyAmbiguous、
            VerifyNotFound のいずれか。
        """
        outcome = self._resolve(
            RepositoryPaths(working_path=Path(working_path), repo_path=Path(repo_path))
        )
        if isinstance(outcome, LocateFound):
            logger.info(
                "Found configuration file at '%s'", outcome.candidate.full_path
            )
            return VerifyOk(path=outcome.candidate.full_path)
        if isinstance(outcome, LocateAmbiguous):
            return VerifyAmbiguous(
                working_candidate=outcome.working_candidate.full_path,
                repo_candidate=outcome.repo_candidate.full_path,
            )
        if isinstance(outcome, LocateNotFound):
            return self._verify_not_found(outcome)
        assert_never(outcome)

    def verify_or_raise(self, working_path: StrPath, repo_path: StrPath) -> Path | None:
        """verify() の失敗結果を例外に変換する。

        Returns:
            選択された設定ファイルのパス。既定値を使う場合は None。

        Raises:
            AmbiguousConfigurationFileError: 選択が曖昧な場合。
            ConfigurationFileNotFoundError: 明示指定のファイルが見つからない場合。
        """
        result = self.verify(working_path, repo_path)
        if isinstance(result, VerifyOk):
            return result.path
        if isinstance(result, VerifyAmbiguous):
            raise AmbiguousConfigurationFileError(
                result.working_candidate, result.repo_candidate
            )
        if isinstance(result, VerifyNotFound):
            raise ConfigurationFileNotFoundError(
                result.working_candidate, result.repo_candidate
            )
        assert_never(result)


class DefaultConfigurationFileLocator(ConfigurationFileLocator):
    """既定ファイル名（GitVersion.yml / GitVersion.yaml）を探索するロケーター。

    ディレクトリごとに DEFAULT_FILE_NAME → DEFAULT_ALTERNATIVE_FILE_NAME の順で
    最初に存在したものを候補とする。どちらも無いことはエラーではない。
    """

    def _candidate_for(self, directory: Path) -> ConfigurationFileCandidate:
        found: ConfigurationFileCandidate | None = None
        for file_name in DEFAULT_FILE_NAMES:
            candidate = _make_candidate(directory, file_name)
            logger.debug(
                "Trying to find configuration file %s at '%s'",
                file_name,
                candidate.directory,
            )
            if not self._exists(candidate):
                continue
            if found is None:
                found = candidate
            else:
                logger.debug(
                    "Ignoring '%s' in favor of '%s'",
                    candidate.full_path,
                    found.full_path,
                )
        if found is None:
            return _make_candidate(directory, DEFAULT_FILE_NAME)
        return found

    def _verify_not_found(self, outcome: LocateNotFound) -> VerifyResult:
        return VerifyOk(path=None)


class NamedConfigurationFileLocator(ConfigurationFileLocator):
    """明示指定されたファイル名・相対パス・絶対パスを探索するロケーター。

    絶対パスの場合は両ディレクトリの候補が一致するため、曖昧にはならない。
    """

    def __init__(self, file_system: FileSystem, configuration_file: str) -> None:
        super().__init__(file_system)
        self._configuration_file = configuration_file

    @property
    def configuration_file(self) -> str:
        return self._configuration_file

    def _candidate_for(self, directory: Path) -> ConfigurationFileCandidate:
        candidate = _make_candidate(directory, self._configuration_file)
        logger.debug(
            "Trying to find configuration file %s at '%s'",
            self._configuration_file,
            candidate.directory,
        )
        return candidate

    def _verify_not_found(self, outcome: LocateNotFound) -> VerifyResult:
        return VerifyNotFound(
            working_candidate=outcome.working_candidate.full_path,
            repo_candidate=outcome.repo_candidate.full_path,
        )


def create_locator(
    info: ConfigurationInfo, file_system: FileSystem
) -> ConfigurationFileLocator:
    """ConfigurationInfo に応じてロケーターを選択する。

    configuration_file が指定されていれば NamedConfigurationFileLocator、
    そうでなければ DefaultConfigurationFileLocator を返す。
    """
    if info.configuration_file is not None:
        return NamedConfigurationFileLocator(file_system, info.configuration_file)
    return DefaultConfigurationFileLocator(file_system)
