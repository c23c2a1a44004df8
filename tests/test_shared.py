"""
Tests for shared cross-cutting concerns (logging configuration).
"""

import logging

from spot_gateway.shared.logging import QUIET_LOGGERS, configure_logging


class TestConfigureLogging:
    def test_sets_root_level(self) -> None:
        configure_logging("debug")

        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_logging("chatty")

        assert logging.getLogger().level == logging.INFO

    def test_connector_loggers_quieted(self) -> None:
        configure_logging("DEBUG")

        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING
