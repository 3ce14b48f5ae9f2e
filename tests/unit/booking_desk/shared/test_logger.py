import logging

from booking_desk.shared.utils.logger import get_logger


class TestGetLogger:
    def test_defaults_to_warning(self, monkeypatch):
        """環境変数が無ければ WARNING 以上のみ出力すること"""
        monkeypatch.delenv("POWERTOOLS_LOG_LEVEL", raising=False)

        logger = get_logger("test-default-level")

        assert logger.log_level == logging.WARNING

    def test_level_from_environment(self, monkeypatch):
        """POWERTOOLS_LOG_LEVEL が指定されていればそれに従うこと"""
        monkeypatch.setenv("POWERTOOLS_LOG_LEVEL", "DEBUG")

        logger = get_logger("test-env-level")

        assert logger.log_level == logging.DEBUG
