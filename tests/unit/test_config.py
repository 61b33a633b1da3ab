"""Tests for configuration loading and validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from interview_tool import APP_NAME
from interview_tool.config.loader import CONFIG_ENV_VAR, _deep_merge, load_config
from interview_tool.config.schema import (
    CommandConfig,
    FetchConfig,
    InterviewToolConfig,
    LoggingConfig,
    ServerConfig,
)
from interview_tool.core.errors import ConfigError


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    """No user, project, or env config files visible."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("INTERVIEW_TOOL_CONFIG", raising=False)
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    return tmp_path


# ─── Schema Defaults ──────────────────────────────────────────


class TestSchemaDefaults:
    def test_all_defaults(self):
        cfg = InterviewToolConfig()
        assert cfg.server.name == "interview-tool"
        assert "interviews" in cfg.server.instructions
        assert cfg.logging.level == "INFO"
        assert cfg.tools.command.shell == "/bin/sh"
        assert cfg.tools.fetch.timeout is None
        assert cfg.tools.fetch.follow_redirects is True

    def test_logging_config_defaults(self):
        cfg = LoggingConfig()
        assert cfg.level == "INFO"
        assert cfg.file == ""

    def test_section_defaults(self):
        assert ServerConfig().name == "interview-tool"
        assert CommandConfig().shell == "/bin/sh"
        assert FetchConfig().timeout is None


# ─── Schema Validation ────────────────────────────────────────


class TestSchemaValidation:
    def test_from_dict(self):
        cfg = InterviewToolConfig.model_validate(
            {"tools": {"fetch": {"timeout": 12.5}}, "logging": {"level": "DEBUG"}}
        )
        assert cfg.tools.fetch.timeout == 12.5
        assert cfg.logging.level == "DEBUG"
        assert cfg.tools.command.shell == "/bin/sh"

    def test_invalid_type_raises(self):
        with pytest.raises(ValidationError):
            InterviewToolConfig.model_validate({"tools": {"fetch": {"timeout": "soon"}}})

    def test_logging_level_normalized(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_unknown_logging_level_raises(self):
        with pytest.raises(ValidationError, match="Unknown logging level"):
            LoggingConfig(level="VERBOSE")

    def test_names_derive_from_app_name(self):
        assert ServerConfig().name == APP_NAME
        assert CONFIG_ENV_VAR == "INTERVIEW_TOOL_CONFIG"

    def test_extra_fields_ignored_by_default(self):
        cfg = InterviewToolConfig.model_validate({"unknown_section": {"foo": "bar"}})
        assert cfg.logging.level == "INFO"


# ─── Deep Merge ───────────────────────────────────────────────


class TestDeepMerge:
    def test_nested_merge(self):
        base = {"tools": {"command": {"shell": "sh"}, "fetch": {"timeout": 1}}}
        override = {"tools": {"fetch": {"timeout": 2}}}
        result = _deep_merge(base, override)
        assert result["tools"]["fetch"]["timeout"] == 2
        assert result["tools"]["command"]["shell"] == "sh"

    def test_base_unchanged(self):
        base = {"a": 1}
        _deep_merge(base, {"a": 2})
        assert base["a"] == 1


# ─── TOML Loading ─────────────────────────────────────────────


class TestLoadConfig:
    def test_defaults_when_no_files(self, isolated):
        cfg = load_config()
        assert cfg == InterviewToolConfig()

    def test_load_from_explicit_path(self, tmp_path):
        toml_file = tmp_path / "test.toml"
        toml_file.write_text('[tools.command]\nshell = "/bin/bash"\n')
        cfg = load_config(path=toml_file)
        assert cfg.tools.command.shell == "/bin/bash"
        assert cfg.tools.fetch.follow_redirects is True

    def test_explicit_path_not_found_raises(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(path=tmp_path / "nonexistent.toml")

    def test_invalid_toml_raises(self, tmp_path):
        bad = tmp_path / "bad.toml"
        bad.write_text("[invalid\n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(path=bad)

    def test_validation_failure_raises(self, tmp_path):
        bad = tmp_path / "bad.toml"
        bad.write_text('[tools.fetch]\ntimeout = "soon"\n')
        with pytest.raises(ConfigError, match="validation failed"):
            load_config(path=bad)

    def test_overrides_applied(self, isolated):
        cfg = load_config(overrides={"logging": {"level": "WARNING"}})
        assert cfg.logging.level == "WARNING"

    def test_project_config_discovered(self, isolated):
        (isolated / "interview-tool.toml").write_text('[logging]\nlevel = "DEBUG"\n')
        assert load_config().logging.level == "DEBUG"

    def test_user_config_discovered(self, isolated, monkeypatch):
        xdg = isolated / "xdg"
        (xdg / "interview-tool").mkdir(parents=True)
        (xdg / "interview-tool" / "config.toml").write_text(
            '[server]\nname = "custom"\n'
        )
        monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))
        assert load_config().server.name == "custom"

    def test_project_overrides_user(self, isolated, monkeypatch):
        xdg = isolated / "xdg"
        (xdg / "interview-tool").mkdir(parents=True)
        (xdg / "interview-tool" / "config.toml").write_text(
            '[logging]\nlevel = "ERROR"\n'
        )
        monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))
        (isolated / "interview-tool.toml").write_text('[logging]\nlevel = "DEBUG"\n')
        assert load_config().logging.level == "DEBUG"

    def test_env_var_path(self, isolated, monkeypatch):
        env_file = isolated / "env.toml"
        env_file.write_text("[tools.fetch]\ntimeout = 3.0\n")
        monkeypatch.setenv("INTERVIEW_TOOL_CONFIG", str(env_file))
        assert load_config().tools.fetch.timeout == 3.0

    def test_env_var_missing_file_raises(self, isolated, monkeypatch):
        monkeypatch.setenv("INTERVIEW_TOOL_CONFIG", str(isolated / "missing.toml"))
        with pytest.raises(ConfigError, match="non-existent"):
            load_config()

    def test_unknown_logging_level_is_config_error(self, tmp_path):
        bad = tmp_path / "bad.toml"
        bad.write_text('[logging]\nlevel = "VERBOSE"\n')
        with pytest.raises(ConfigError, match="Unknown logging level"):
            load_config(path=bad)
