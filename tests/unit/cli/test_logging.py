"""configure_logging のテスト。"""

from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

import pytest

from vercalc.cli._logging import DEFAULT_LOG_LEVEL, configure_logging

PATCH_BASIC_CONFIG = "vercalc.cli._logging.logging.basicConfig"


class TestConfigureLogging:
    @patch(PATCH_BASIC_CONFIG)
    def test_default_level(self, mock_basic_config: MagicMock) -> None:
        configure_logging()
        assert mock_basic_config.call_args.kwargs["level"] == DEFAULT_LOG_LEVEL

    @patch(PATCH_BASIC_CONFIG)
    def test_level_is_case_insensitive(self, mock_basic_config: MagicMock) -> None:
        configure_logging("debug")
        assert mock_basic_config.call_args.kwargs["level"] == "DEBUG"
        assert logging.getLevelName("DEBUG") == logging.DEBUG

    @patch(PATCH_BASIC_CONFIG)
    def test_unknown_level_raises(self, mock_basic_config: MagicMock) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("loud")
        mock_basic_config.assert_not_called()

    def test_level_applied_when_root_already_has_handlers(self) -> None:
        """既存ハンドラーで basicConfig が何もしなくてもレベルは変わる。"""
        root = logging.getLogger()
        handler = logging.NullHandler()
        root.addHandler(handler)
        try:
            configure_logging("ERROR")
            assert root.level == logging.ERROR
        finally:
            root.removeHandler(handler)
