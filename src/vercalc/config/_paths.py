"""パス結合・正規化・比較のユーティリティ。

パスの同一性判定はホスト OS の大文字小文字の扱いに依存させず、
常に paths_equal() の case-insensitive 比較に統一する。
"""

from __future__ import annotations

import os
from pathlib import Path

StrPath = str | os.PathLike[str]


def combine(base: StrPath, *parts: StrPath) -> Path:
    """base に parts を順に結合する。

    絶対パスの要素はそれ以前の要素を置き換える（pathlib と同じ規則）。
    """
    return Path(base).joinpath(*parts)


def normalize(path: StrPath) -> Path:
    """絶対パスに変換し ``.`` / ``..`` を畳み込む。

    シンボリックリンクの解決やファイルシステムへのアクセスは行わない。
    """
    return Path(os.path.abspath(os.fspath(path)))


def paths_equal(left: StrPath, right: StrPath) -> bool:
    """正規化後のパス文字列を大文字小文字を区別せずに比較する。"""
    return str(normalize(left)).casefold() == str(normalize(right)).casefold()

