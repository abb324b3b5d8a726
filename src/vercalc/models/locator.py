"""設定ファイル探索のドメインモデル。

作業ディレクトリとリポジトリディレクトリの組、探索候補、
探索結果（LocateOutcome）と検証結果（VerifyResult）を定義する。
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Final, Literal, Union

from pydantic import Field

from vercalc.models._base import VercalcBaseModel

AMBIGUOUS_MESSAGE_FORMAT: Final[str] = (
    "Ambiguous configuration file selection from '{working}' and '{repo}'"
)
NOT_FOUND_MESSAGE_FORMAT: Final[str] = (
    "The configuration file was not found at '{working}' or '{repo}'"
)


class ConfigurationInfo(VercalcBaseModel):
    """呼び出し側から渡される設定ファイル指定。

    configuration_file が指定されていれば NamedLocator、
    None であれば DefaultLocator が選択される。
    """

    configuration_file: str | None = Field(default=None, min_length=1)


class RepositoryPaths(VercalcBaseModel):
    """検証対象となる2つのディレクトリ。

    Attributes:
        working_path: ツールを起動したディレクトリ。
        repo_path: 対象リポジトリのルートディレクトリ。
    """

    working_path: Path
    repo_path: Path


class ConfigurationFileCandidate(VercalcBaseModel):
    """設定ファイルの候補位置。存在チェックは呼び出しごとに行う。"""

    directory: Path
    file_name: str = Field(min_length=1)
    full_path: Path


# --- 探索結果（単一ディレクトリまたはディレクトリ組） ---


class LocateFound(VercalcBaseModel):
    """設定ファイルが1つに定まった。"""

    outcome: Literal["found"] = "found"
    candidate: ConfigurationFileCandidate


class LocateNotFound(VercalcBaseModel):
    """どちらのディレクトリにも設定ファイルが存在しない。

    同一ディレクトリの場合は working_candidate と repo_candidate が同じ候補になる。
    """

    outcome: Literal["not_found"] = "not_found"
    working_candidate: ConfigurationFileCandidate
    repo_candidate: ConfigurationFileCandidate


class LocateAmbiguous(VercalcBaseModel):
    """異なる2つのディレクトリにそれぞれ別の設定ファイルが存在する。"""

    outcome: Literal["ambiguous"] = "ambiguous"
    working_candidate: ConfigurationFileCandidate
    repo_candidate: ConfigurationFileCandidate


LocateOutcome = Annotated[
    Union[LocateFound, LocateNotFound, LocateAmbiguous],
    Field(discriminator="outcome"),
]
"""探索結果の共用体型。"""


# --- 検証結果 ---


class VerifyOk(VercalcBaseModel):
    """検証成功。path が None の場合は既定値で処理を続ける。"""

    status: Literal["ok"] = "ok"
    path: Path | None = None


class VerifyAmbiguous(VercalcBaseModel):
    """設定ファイルの選択が曖昧で検証に失敗した。"""

    status: Literal["ambiguous"] = "ambiguous"
    working_candidate: Path
    repo_candidate: Path

    @property
    def message(self) -> str:
        return AMBIGUOUS_MESSAGE_FORMAT.format(
            working=self.working_candidate, repo=self.repo_candidate
        )


class VerifyNotFound(VercalcBaseModel):
    """明示指定された設定ファイルがどちらのディレクトリにも無い。"""

    status: Literal["not_found"] = "not_found"
    working_candidate: Path
    repo_candidate: Path

    @property
    def message(self) -> str:
        return NOT_FOUND_MESSAGE_FORMAT.format(
            working=self.working_candidate, repo=self.repo_candidate
        )


VerifyResult = Annotated[
    Union[VerifyOk, VerifyAmbiguous, VerifyNotFound],
    Field(discriminator="status"),
]
"""検証結果の共用体型。"""


class ProvidedConfiguration(VercalcBaseModel):
    """ConfigurationProvider が返す実効設定。

    Attributes:
        source: 読み込んだ設定ファイルのパス。None の場合は組み込み既定値。
        text: 設定ファイルの内容（未解析のテキスト）。
    """

    source: Path | None = None
    text: str
