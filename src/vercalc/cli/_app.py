"""CliApp -- Typer アプリケーション定義。

verify: 作業ディレクトリとリポジトリディレクトリの設定ファイル選択を検証する。
show-config: ディレクトリの実効設定を stdout に出力する。
init: リポジトリルートに既定の設定ファイルを生成する。

stdout には結果のみを出力し、診断メッセージは stderr に出力する。
"""

from __future__ import annotations

import importlib.metadata
import sys
from pathlib import Path
from typing import Annotated, assert_never

import typer
from pydantic import ValidationError

from vercalc.cli._init_handler import InitError, run_init
from vercalc.cli._logging import configure_logging
from vercalc.config import (
    ConfigurationFileLocator,
    ConfigurationProvider,
    LocalFileSystem,
    create_locator,
    find_repository_root,
)
from vercalc.models.exit_code import ExitCode
from vercalc.models.locator import (
    ConfigurationInfo,
    VerifyAmbiguous,
    VerifyNotFound,
    VerifyOk,
)

_CONFIG_ENVVAR = "VERCALC_CONFIG"
_LOG_LEVEL_ENVVAR = "VERCALC_LOG_LEVEL"

app = typer.Typer(
    name="vercalc",
    help="Locate the configuration file that governs version calculation.",
    add_completion=False,
    no_args_is_help=True,
)

ConfigOption = Annotated[
    str | None,
    typer.Option(
        "--config",
        "-c",
        help="Explicit configuration file (name, relative or absolute path).",
        envvar=_CONFIG_ENVVAR,
    ),
]


def _version_callback(value: bool) -> None:
    """--version 指定時にバージョン番号を出力して終了する。"""
    if value:
        print(importlib.metadata.version("vercalc"))
        raise typer.Exit()


def main() -> None:
    """CLI エントリポイント。pyproject.toml の [project.scripts] から呼び出される。"""
    app()


@app.callback()
def root_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG, INFO, WARNING, ...).",
            envvar=_LOG_LEVEL_ENVVAR,
        ),
    ] = None,
) -> None:
    """Locate the configuration file that governs version calculation."""
    try:
        configure_logging(log_level)
    except ValueError as e:
        print(
            f"Error: {e}\nUse one of DEBUG, INFO, WARNING, ERROR, CRITICAL.",
            file=sys.stderr,
        )
        raise typer.Exit(code=ExitCode.INPUT_ERROR) from None


def _build_locator(config_file: str | None) -> ConfigurationFileLocator:
    """CLI オプションからロケーターを構築する。不正な指定は INPUT_ERROR で終了。"""
    try:
        info = ConfigurationInfo(configuration_file=config_file)
    except ValidationError:
        print(
            "Error: --config must not be empty.\n"
            f"Pass a file name or unset {_CONFIG_ENVVAR}.",
            file=sys.stderr,
        )
        raise typer.Exit(code=ExitCode.INPUT_ERROR) from None
    return create_locator(info, LocalFileSystem())


@app.command()
def verify(
    working_dir: Annotated[
        Path | None,
        typer.Option(
            "--working-dir",
            help="Working directory (defaults to the current directory).",
            file_okay=False,
        ),
    ] = None,
    repo_dir: Annotated[
        Path | None,
        typer.Option(
            "--repo-dir",
            help="Repository root (defaults to the enclosing Git repository).",
            file_okay=False,
        ),
    ] = None,
    config_file: ConfigOption = None,
) -> None:
    """Verify that exactly one configuration file can be selected."""
    working = working_dir if working_dir is not None else Path.cwd()
    if repo_dir is not None:
        repo = repo_dir
    else:
        repo = find_repository_root(working) or working

    locator = _build_locator(config_file)
    result = locator.verify(working, repo)

    if isinstance(result, VerifyOk):
        if result.path is None:
            print("No configuration file found; using defaults.", file=sys.stderr)
        else:
            print(f"Configuration file: {result.path}", file=sys.stderr)
        raise typer.Exit(code=ExitCode.SUCCESS)
    if isinstance(result, VerifyAmbiguous):
        print(
            f"Error: {result.message}\n"
            "Remove one of the files or pass --config to select one explicitly.",
            file=sys.stderr,
        )
        raise typer.Exit(code=ExitCode.CONFIGURATION_ERROR)
    if isinstance(result, VerifyNotFound):
        print(
            f"Error: {result.message}\n"
            "Check the --config value or create the file.",
            file=sys.stderr,
        )
        raise typer.Exit(code=ExitCode.CONFIGURATION_ERROR)
    assert_never(result)


@app.command("show-config")
def show_config(
    directory: Annotated[
        Path | None,
        typer.Argument(
            help="Directory to look up (defaults to the current directory).",
            file_okay=False,
        ),
    ] = None,
    config_file: ConfigOption = None,
) -> None:
    """Print the effective configuration text for a directory."""
    target = directory if directory is not None else Path.cwd()
    file_system = LocalFileSystem()
    provider = ConfigurationProvider(_build_locator(config_file), file_system)
    try:
        provided = provider.provide_for_directory(target)
    except OSError as e:
        print(
            f"Error: Cannot read configuration file: {e}\n"
            "Check file permissions.",
            file=sys.stderr,
        )
        raise typer.Exit(code=ExitCode.CONFIGURATION_ERROR) from None

    source = provided.source if provided.source is not None else "(built-in defaults)"
    print(f"Source: {source}", file=sys.stderr)
    print(provided.text, end="" if provided.text.endswith("\n") else "\n")


@app.command()
def init(
    repo_dir: Annotated[
        Path | None,
        typer.Option(
            "--repo-dir",
            help="Repository root (defaults to the enclosing Git repository).",
            file_okay=False,
        ),
    ] = None,
    force: Annotated[
        bool, typer.Option("--force", help="Overwrite an existing configuration file.")
    ] = False,
) -> None:
    """Create a default configuration file in the repository root."""
    cwd = Path.cwd()
    root = repo_dir if repo_dir is not None else find_repository_root(cwd) or cwd
    try:
        result = run_init(root, force=force)
    except InitError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise typer.Exit(code=ExitCode.INPUT_ERROR) from None

    for path in result.created:
        print(f"  Created: {path}", file=sys.stderr)
    for path in result.skipped:
        print(f"  Skipped (already exists): {path}", file=sys.stderr)

    if not result.created:
        print(
            "\nConfiguration file already exists. Use --force to overwrite.",
            file=sys.stderr,
        )
