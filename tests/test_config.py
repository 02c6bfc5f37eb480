"""Tests for config loading and logging setup."""

import logging

import pytest

import config
from logging_config import setup_logging


class TestLoadConfig:
    def test_defaults_when_file_missing(self, tmp_path):
        loaded = config.load_config(tmp_path / "missing.yaml", environ={})
        assert loaded == config.DEFAULTS
        assert loaded is not config.DEFAULTS

    def test_yaml_overrides_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("server:\n  port: 8080\nstore:\n  ttl_seconds: 5\n")
        loaded = config.load_config(path, environ={})
        assert loaded["server"]["port"] == 8080
        assert loaded["server"]["host"] == "127.0.0.1"
        assert loaded["store"] == {"max_entries": 1000, "ttl_seconds": 5}

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert config.load_config(path, environ={}) == config.DEFAULTS

    def test_environment_overrides(self, tmp_path):
        environ = {
            "ALGOTRACE_HOST": "0.0.0.0",
            "ALGOTRACE_PORT": "9000",
            "ALGOTRACE_DEBUG": "true",
            "ALGOTRACE_LOG_LEVEL": "debug",
            "ALGOTRACE_MAX_STEPS": "none",
        }
        loaded = config.load_config(tmp_path / "missing.yaml", environ=environ)
        assert loaded["server"] == {"host": "0.0.0.0", "port": 9000, "debug": True}
        assert loaded["logging"]["level"] == "DEBUG"
        assert loaded["execution"]["max_steps"] is None

    def test_bad_port_raises(self, tmp_path):
        with pytest.raises(ValueError):
            config.load_config(tmp_path / "missing.yaml", environ={"ALGOTRACE_PORT": "eighty"})

    def test_shipped_config_file(self):
        loaded = config.load_config(environ={})
        assert loaded["execution"]["max_steps"] == 10000
        assert loaded["logging"]["level"] == "INFO"

    def test_get_config_is_loaded_once(self):
        assert config.get_config() is config.get_config()


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_string_level(self):
        setup_logging("debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_no_duplicate_handlers(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "algotrace.log"
        setup_logging(logging.INFO, str(log_file))
        logging.getLogger("engine.recorder").info("hello file")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello file" in log_file.read_text(encoding="utf-8")

    def test_unknown_level_name_falls_back_to_info(self):
        setup_logging("chatty")
        assert logging.getLogger().level == logging.INFO
