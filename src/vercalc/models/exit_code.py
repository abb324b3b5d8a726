"""ExitCode -- 終了コードの定義。"""

from enum import IntEnum


class ExitCode(IntEnum):
    """プロセス終了コード。

    1 は設定ファイル選択の警告（曖昧・未検出）、2 は CLI 層固有の入力エラー。
    """

    SUCCESS = 0
    CONFIGURATION_ERROR = 1
    INPUT_ERROR = 2
