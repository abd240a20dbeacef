"""Tests for configuration, tools file loading and log formatting."""

import json
import logging
import sys
from unittest.mock import patch

import pytest

from toolgate.config import Settings, get_settings
from toolgate.logging_setup import JSONFormatter
from toolgate.tools.errors import ToolConfigError
from toolgate.tools.loader import load_tool_definitions


class TestSettings:
    """Tests for get_settings()."""

    @pytest.fixture(autouse=True)
    def no_dotenv(self):
        """Keep a developer's .env out of the tests."""
        with patch("toolgate.config.load_dotenv"):
            yield

    def test_defaults(self, monkeypatch):
        for var in ("TOOLGATE_TOOLS_FILE", "TOOLGATE_LOG_LEVEL", "TOOLGATE_HOST", "TOOLGATE_PORT"):
            monkeypatch.delenv(var, raising=False)

        assert get_settings() == Settings()

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("TOOLGATE_TOOLS_FILE", "/etc/tools.json")
        monkeypatch.setenv("TOOLGATE_LOG_LEVEL", "debug")
        monkeypatch.setenv("TOOLGATE_HOST", "127.0.0.1")
        monkeypatch.setenv("TOOLGATE_PORT", "9000")

        settings = get_settings()

        assert settings.tools_file == "/etc/tools.json"
        assert settings.log_level == "DEBUG"
        assert settings.host == "127.0.0.1"
        assert settings.port == 9000

    def test_bad_port(self, monkeypatch):
        monkeypatch.setenv("TOOLGATE_PORT", "eighty")
        with pytest.raises(ToolConfigError, match="TOOLGATE_PORT"):
            get_settings()


class TestLoadToolDefinitions:
    """Tests for load_tool_definitions()."""

    def test_loads_object(self, tmp_path):
        path = tmp_path / "tools.json"
        path.write_text(json.dumps({"search": {"description": "Finds things"}}), encoding="utf-8")

        assert load_tool_definitions(path) == {"search": {"description": "Finds things"}}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ToolConfigError, match="not found"):
            load_tool_definitions(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "tools.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ToolConfigError, match="not valid JSON"):
            load_tool_definitions(path)

    def test_top_level_must_be_object(self, tmp_path):
        path = tmp_path / "tools.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(ToolConfigError, match="got list"):
            load_tool_definitions(path)


class TestJSONFormatter:
    """Tests for the structured log formatter."""

    def _record(self, **kwargs):
        record = logging.LogRecord("toolgate", logging.ERROR, __file__, 10, "Tool validation failed for: %s", ("x",), None)
        for key, value in kwargs.items():
            setattr(record, key, value)
        return record

    def test_basic_fields(self):
        out = json.loads(JSONFormatter("toolgate").format(self._record()))
        assert out["level"] == "ERROR"
        assert out["service"] == "toolgate"
        assert out["message"] == "Tool validation failed for: x"

    def test_extra_data_merged_and_unserializable_tolerated(self):
        """extra_data fields are merged; odd values are stringified."""
        record = self._record(extra_data={"tool_name": "x", "invalid_data": {"when": object()}})
        out = json.loads(JSONFormatter("toolgate").format(record))
        assert out["tool_name"] == "x"
        assert isinstance(out["invalid_data"]["when"], str)

    def test_exception(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = self._record(exc_info=sys.exc_info())
        out = json.loads(JSONFormatter("toolgate").format(record))
        assert "RuntimeError: boom" in out["exception"]
