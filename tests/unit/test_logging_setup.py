"""Unit tests for CLI logging configuration.

Tests for --log-level, --log-file, --trace and TEXTDELTA_LOG_LEVEL handling.
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from textdelta.logging_utils import configure_logging, resolve_log_level


@pytest.mark.unit
class TestResolveLogLevel:
    """Test resolve_log_level()."""

    def test_default(self):
        """Test WARNING is used when nothing is set."""
        assert resolve_log_level(environ={}) == logging.WARNING

    def test_trace_wins(self):
        """Test trace mode always resolves to DEBUG."""
        assert resolve_log_level("ERROR", trace_mode=True, environ={"TEXTDELTA_LOG_LEVEL": "ERROR"}) == logging.DEBUG

    @pytest.mark.parametrize(
        "level,expected", [("debug", logging.DEBUG), ("ERROR", logging.ERROR), ("bogus", logging.WARNING)]
    )
    def test_level_names(self, level, expected):
        """Test string level names are resolved case-insensitively."""
        assert resolve_log_level(level, environ={}) == expected

    def test_numeric_level(self):
        """Test numeric levels pass through."""
        assert resolve_log_level(logging.INFO, environ={}) == logging.INFO

    def test_environment(self):
        """Test the environment variable is used without an explicit level."""
        assert resolve_log_level(environ={"TEXTDELTA_LOG_LEVEL": " info "}) == logging.INFO

    def test_explicit_beats_environment(self):
        """Test an explicit level overrides the environment variable."""
        assert resolve_log_level("ERROR", environ={"TEXTDELTA_LOG_LEVEL": "DEBUG"}) == logging.ERROR

    def test_invalid_environment(self):
        """Test an unknown level name in the environment falls back to WARNING."""
        assert resolve_log_level(environ={"TEXTDELTA_LOG_LEVEL": "loud"}) == logging.WARNING


@pytest.mark.unit
class TestConfigureLogging:
    """Test configure_logging()."""

    def test_basic(self):
        """Test the level is applied and a console handler is added."""
        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = MagicMock()
            mock_get_logger.return_value = mock_logger

            configure_logging(logging.INFO)

            mock_get_logger.assert_called_once_with("textdelta")
            mock_logger.setLevel.assert_called_once_with(logging.INFO)
            assert mock_logger.addHandler.call_count == 1

    def test_configures_package_logger_only(self, restore_package_logger):
        """Test handlers go on the textdelta logger and the root logger is left alone."""
        root = logging.getLogger()
        root_handlers = list(root.handlers)

        package_logger = configure_logging("INFO")

        assert package_logger.name == "textdelta"
        assert package_logger.propagate is False
        assert len(package_logger.handlers) == 1
        assert root.handlers == root_handlers

    def test_module_loggers_reach_handlers(self, tmp_path, restore_package_logger):
        """Test records from textdelta submodules are written by the configured handlers."""
        log_file = tmp_path / "textdelta.log"
        package_logger = configure_logging("DEBUG", log_file=str(log_file))

        assert len(package_logger.handlers) == 2
        logging.getLogger("textdelta.render.inline").debug("hello from a module")
        logging.getLogger("other.library").warning("not ours")
        for handler in package_logger.handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        assert "hello from a module" in content
        assert "not ours" not in content

    def test_unwritable_file(self, tmp_path, restore_package_logger):
        """Test an unusable log file path falls back to console only."""
        package_logger = configure_logging("INFO", log_file=str(tmp_path / "missing" / "dir" / "x.log"))
        assert len(package_logger.handlers) == 1

    def test_trace_format(self):
        """Test trace mode uses a detailed format with timestamps."""
        with patch("logging.getLogger") as mock_get_logger, patch("logging.Formatter") as mock_formatter:
            mock_get_logger.return_value = MagicMock()

            configure_logging(logging.WARNING, trace_mode=True)

            format_str = mock_formatter.call_args_list[0][0][0]
            assert "asctime" in format_str
            assert "name" in format_str
            mock_get_logger.return_value.setLevel.assert_called_once_with(logging.DEBUG)

    def test_normal_format(self):
        """Test normal mode uses a simple format."""
        with patch("logging.getLogger") as mock_get_logger, patch("logging.Formatter") as mock_formatter:
            mock_get_logger.return_value = MagicMock()

            configure_logging(logging.WARNING)

            format_str = mock_formatter.call_args_list[0][0][0]
            assert format_str == "%(levelname)s: %(message)s"

    def test_replaces_existing_handlers(self, tmp_path, restore_package_logger):
        """Test repeated configuration does not stack handlers and closes the old ones."""
        first = configure_logging("INFO", log_file=str(tmp_path / "first.log"))
        old_handlers = list(first.handlers)
        package_logger = configure_logging("INFO")

        assert len(package_logger.handlers) == 1
        assert not any(handler in package_logger.handlers for handler in old_handlers)
        assert old_handlers[1].stream is None
