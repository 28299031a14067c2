"""Tests for policy configuration module."""

import pytest
import tempfile
from pathlib import Path

import yaml

from aclkit.common.config import (
    AclConfig,
    LoggingConfig,
    RoleConfig,
    parse_logging_config,
    parse_role_config,
    parse_config,
    load_config,
    load_typed_config,
)


class TestLoggingConfig:
    """Tests for LoggingConfig parsing."""

    def test_parse_logging_defaults(self):
        """Test logging config defaults."""
        config = parse_logging_config({})

        assert config.level == "INFO"
        assert config.log_dir == "/var/log/aclkit"
        assert not config.file_logging
        assert config.console_logging

    def test_parse_logging_custom(self):
        """Test custom logging config."""
        config = parse_logging_config(
            {"level": "DEBUG", "log_dir": "/tmp/acl", "file_logging": True}
        )

        assert config.level == "DEBUG"
        assert config.log_dir == "/tmp/acl"
        assert config.file_logging


class TestRoleConfig:
    """Tests for RoleConfig parsing."""

    def test_parse_full_role(self):
        """Test parsing a role with every field."""
        role = parse_role_config(
            "administrator",
            {
                "allow": ["blog.edit", "blog.create"],
                "deny": ["blog.delete"],
                "inherits": ["guest"],
            },
        )

        assert role.name == "administrator"
        assert role.allow == ["blog.edit", "blog.create"]
        assert role.deny == ["blog.delete"]
        assert role.inherits == ["guest"]

    def test_parse_single_names(self):
        """Test single names are wrapped in lists."""
        role = parse_role_config("editor", {"allow": "blog.edit", "inherits": "guest"})

        assert role.allow == ["blog.edit"]
        assert role.deny == []
        assert role.inherits == ["guest"]

    def test_parse_bare_role(self):
        """Test a role without a body."""
        assert parse_role_config("banned", None) == RoleConfig(name="banned")

    def test_parse_invalid_role(self):
        """Test a role body that is not a mapping."""
        with pytest.raises(TypeError):
            parse_role_config("guest", ["blog.view"])


class TestParseConfig:
    """Tests for full config parsing."""

    def test_parse_empty_config(self):
        """Test parsing empty config."""
        config = parse_config({})

        assert isinstance(config, AclConfig)
        assert config.roles == []
        assert config.logging == LoggingConfig()

    def test_parse_sample_config(self, sample_config):
        """Test parsing the sample policy."""
        config = parse_config(sample_config)

        assert [role.name for role in config.roles] == ["guest", "administrator", "banned"]
        assert config.logging.level == "DEBUG"
        assert not config.logging.console_logging
        assert config.roles[1].deny == ["blog.delete"]

    def test_null_roles(self):
        """Test an empty roles section."""
        assert parse_config({"roles": None}).roles == []


class TestLoadConfig:
    """Tests for loading config from YAML files."""

    def test_load_config_file(self, sample_config):
        """Test loading config from file."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            yaml.dump(sample_config, f)
            f.flush()

            config = load_config(f.name)

            assert config["roles"]["guest"]["allow"] == ["blog.view"]

        Path(f.name).unlink()

    def test_load_typed_config(self, tmp_path, sample_config):
        """Test loading typed config from file."""
        config_file = tmp_path / "policy.yaml"
        config_file.write_text(yaml.dump(sample_config, sort_keys=False))

        config = load_typed_config(config_file)

        assert isinstance(config, AclConfig)
        assert config.roles[0].name == "guest"
        assert config.roles[1].inherits == ["guest"]

    def test_load_missing_file(self):
        """Test loading missing config file."""
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/policy.yaml")

    def test_load_empty_file(self, tmp_path):
        """Test loading an empty file."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        assert load_config(config_file) == {}

    def test_load_non_mapping_root(self, tmp_path):
        """Test a document root that is not a mapping."""
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- guest\n- admin\n")

        with pytest.raises(TypeError):
            load_config(config_file)

    def test_load_invalid_yaml(self, tmp_path):
        """Test invalid YAML."""
        config_file = tmp_path / "broken.yaml"
        config_file.write_text("roles: [unclosed\n")

        with pytest.raises(yaml.YAMLError):
            load_config(config_file)

    def test_env_var_expansion(self, tmp_path, monkeypatch):
        """Test environment variables are expanded."""
        monkeypatch.setenv("ACL_LOG_DIR", "/srv/logs")
        config_file = tmp_path / "policy.yaml"
        config_file.write_text("logging:\n  log_dir: $ACL_LOG_DIR/acl\n")

        config = load_typed_config(config_file)

        assert config.logging.log_dir == "/srv/logs/acl"

    def test_role_names_not_expanded(self, tmp_path, monkeypatch):
        """Test role and resource names containing $ are kept exact."""
        monkeypatch.setenv("price", "X")
        monkeypatch.setenv("ROLE", "admin")
        config_file = tmp_path / "policy.yaml"
        config_file.write_text(
            "roles:\n"
            "  shopper:\n"
            "    allow: ['cart.$price']\n"
            "    inherits: ['$ROLE']\n"
        )

        config = load_typed_config(config_file)

        assert config.roles[0].allow == ["cart.$price"]
        assert config.roles[0].inherits == ["$ROLE"]
