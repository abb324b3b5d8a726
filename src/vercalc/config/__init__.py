"""設定ファイル探索モジュール。"""

from vercalc.config._errors import (
    AmbiguousConfigurationFileError,
    ConfigurationFileNotFoundError,
    ConfigurationWarning,
)
from vercalc.config._filesystem import FileSystem, InMemoryFileSystem, LocalFileSystem
from vercalc.config._locator import (
    DEFAULT_ALTERNATIVE_FILE_NAME,
    DEFAULT_FILE_NAME,
    DEFAULT_FILE_NAMES,
    ConfigurationFileLocator,
    DefaultConfigurationFileLocator,
    NamedConfigurationFileLocator,
    create_locator,
)
from vercalc.config._paths import combine, normalize, paths_equal
from vercalc.config._provider import DEFAULT_CONFIGURATION_TEXT, ConfigurationProvider
from vercalc.config._repository import find_repository_root

__all__ = [
    "DEFAULT_ALTERNATIVE_FILE_NAME",
    "DEFAULT_CONFIGURATION_TEXT",
    "DEFAULT_FILE_NAME",
    "DEFAULT_FILE_NAMES",
    "AmbiguousConfigurationFileError",
    "ConfigurationFileLocator",
    "ConfigurationFileNotFoundError",
    "ConfigurationProvider",
    "ConfigurationWarning",
    "DefaultConfigurationFileLocator",
    "FileSystem",
    "InMemoryFileSystem",
    "LocalFileSystem",
    "NamedConfigurationFileLocator",
    "combine",
    "create_locator",
    "find_repository_root",
    "normalize",
    "paths_equal",
]
