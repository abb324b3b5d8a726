"""ファイルシステム抽象。

ロケーターとプロバイダーはファイルの存在確認と読み込みのみを
FileSystem 経由で行う。実 OS 実装とインメモリ実装を提供する。
"""

from __future__ import annotations

import errno
import os
from typing import Protocol

from vercalc.config._paths import StrPath, normalize

_ENCODING: str = "utf-8"


class FileSystem(Protocol):
    """ロケーターが利用するファイルシステム操作。"""

    def exists(self, path: StrPath) -> bool:
        """path に通常ファイルが存在するか。"""
        ...

    def read_text(self, path: StrPath) -> str:
        """path のテキストを読み込む。

        Raises:
            OSError: 読み込めない場合（存在しない場合は FileNotFoundError、
                UTF-8 として解釈できない場合も OSError）。
        """
        ...

    def write_text(self, path: StrPath, text: str) -> None:
        """path にテキストを書き込む。親ディレクトリは必要に応じて作成する。"""
        ...

    def delete(self, path: StrPath) -> None:
        """path を削除する。存在しない場合は何もしない。"""
        ...


class LocalFileSystem:
    """OS のファイルシステムに対する実装。"""

    def exists(self, path: StrPath) -> bool:
        return os.path.isfile(path)

    def read_text(self, path: StrPath) -> str:
        try:
            with open(path, encoding=_ENCODING) as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise OSError(
                errno.EILSEQ, f"Not valid {_ENCODING} text: {e.reason}", os.fspath(path)
            ) from e

    def write_text(self, path: StrPath, text: str) -> None:
        target = normalize(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding=_ENCODING)

    def delete(self, path: StrPath) -> None:
        normalize(path).unlink(missing_ok=True)


class InMemoryFileSystem:
    """正規化済みパス文字列 → 内容 の辞書によるテスト用実装。

    キーは normalize() 済みのパス文字列で、大文字小文字は区別して保持する。
    """

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self._files: dict[str, str] = {}
        for path, text in (files or {}).items():
            self.write_text(path, text)

    @staticmethod
    def _key(path: StrPath) -> str:
        return str(normalize(path))

    def exists(self, path: StrPath) -> bool:
        return self._key(path) in self._files

    def read_text(self, path: StrPath) -> str:
        key = self._key(path)
        try:
            return self._files[key]
        except KeyError:
            raise FileNotFoundError(
                errno.ENOENT, os.strerror(errno.ENOENT), key
            ) from None

    def write_text(self, path: StrPath, text: str) -> None:
        self._files[self._key(path)] = text

    def delete(self, path: StrPath) -> None:
        self._files.pop(self._key(path), None)

    @property
    def paths(self) -> tuple[str, ...]:
        """登録済みのパス（ソート済み）。"""
        return tuple(sorted(self._files))
