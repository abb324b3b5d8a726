"""vercalc ドメインモデルパッケージ。"""

from vercalc.models._base import VercalcBaseModel
from vercalc.models.exit_code import ExitCode
from vercalc.models.locator import (
    ConfigurationFileCandidate,
    ConfigurationInfo,
    LocateAmbiguous,
    LocateFound,
    LocateNotFound,
    LocateOutcome,
    ProvidedConfiguration,
    RepositoryPaths,
    VerifyAmbiguous,
    VerifyNotFound,
    VerifyOk,
    VerifyResult,
)

__all__ = [
    "ConfigurationFileCandidate",
    "ConfigurationInfo",
    "ExitCode",
    "LocateAmbiguous",
    "LocateFound",
    "LocateNotFound",
    "LocateOutcome",
    "ProvidedConfiguration",
    "RepositoryPaths",
    "VercalcBaseModel",
    "VerifyAmbiguous",
    "VerifyNotFound",
    "VerifyOk",
    "VerifyResult",
]
