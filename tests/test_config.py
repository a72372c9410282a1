import importlib

import config


class TestLogLevel:
    def test_valid_level_is_kept(self, monkeypatch):
        monkeypatch.setenv("MINISHELL_LOG_LEVEL", "debug")
        try:
            assert importlib.reload(config).LOG_LEVEL == "DEBUG"
        finally:
            monkeypatch.delenv("MINISHELL_LOG_LEVEL")
            importlib.reload(config)

    def test_unknown_level_falls_back_to_warning(self, monkeypatch):
        monkeypatch.setenv("MINISHELL_LOG_LEVEL", "chatty")
        try:
            assert importlib.reload(config).LOG_LEVEL == "WARNING"
        finally:
            monkeypatch.delenv("MINISHELL_LOG_LEVEL")
            importlib.reload(config)
