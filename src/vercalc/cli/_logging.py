"""CLI プロセスのロギング設定。

ライブラリ側はハンドラーを設定しない。CLI 起動時にのみ呼び出す。
"""

from __future__ import annotations

import logging

DEFAULT_LOG_LEVEL: str = "WARNING"


def configure_logging(level: str | None = None) -> None:
    """ルートロガーを stderr 出力で設定する。

    Args:
        level: ログレベル名（大文字小文字非依存）。None の場合は WARNING。

    Raises:
        ValueError: 不明なログレベル名の場合。
    """
    log_level = (level or DEFAULT_LOG_LEVEL).upper()
    if log_level not in logging.getLevelNamesMapping():
        raise ValueError(f"Unknown log level: {level}")
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    # ハンドラー設定済みで basicConfig が無視された場合もレベルは反映する
    logging.getLogger().setLevel(log_level)
