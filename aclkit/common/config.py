"""Configuration management for aclkit.

Handles loading and validation of YAML policy files that seed an
access control list with roles, their resources and inheritance.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml


@dataclass
class LoggingConfig:
    """Configuration for library logging."""

    level: str = "INFO"
    log_dir: str = "/var/log/aclkit"
    file_logging: bool = False
    console_logging: bool = True


@dataclass
class RoleConfig:
    """Configuration for a single role."""

    name: str
    allow: List[str] = field(default_factory=list)
    deny: List[str] = field(default_factory=list)
    inherits: List[str] = field(default_factory=list)


@dataclass
class AclConfig:
    """Top-level configuration for aclkit."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    roles: List[RoleConfig] = field(default_factory=list)


def _as_list(value: Any) -> Any:
    # Single names are accepted for convenience; anything else is passed
    # through unchanged so the Acl reports the offending type.
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return value


def parse_logging_config(logging_dict: Dict[str, Any]) -> LoggingConfig:
    """Parse logging configuration dictionary.

    Args:
        logging_dict: Logging configuration dictionary

    Returns:
        LoggingConfig instance
    """
    return LoggingConfig(
        level=logging_dict.get("level", "INFO"),
        log_dir=logging_dict.get("log_dir", "/var/log/aclkit"),
        file_logging=logging_dict.get("file_logging", False),
        console_logging=logging_dict.get("console_logging", True),
    )


def parse_role_config(name: str, role_dict: Optional[Dict[str, Any]]) -> RoleConfig:
    """Parse a role configuration dictionary.

    Args:
        name: Name of the role
        role_dict: Role configuration dictionary, may be None for a bare role

    Returns:
        RoleConfig instance

    Raises:
        TypeError: If role_dict is neither a mapping nor None
    """
    if role_dict is None:
        role_dict = {}

    if not isinstance(role_dict, dict):
        raise TypeError(
            f"Role '{name}' must be a mapping, got {type(role_dict).__name__}"
        )

    return RoleConfig(
        name=name,
        allow=_as_list(role_dict.get("allow")),
        deny=_as_list(role_dict.get("deny")),
        inherits=_as_list(role_dict.get("inherits")),
    )


def parse_config(config_dict: Dict[str, Any]) -> AclConfig:
    """Parse the full configuration dictionary.

    Args:
        config_dict: Full configuration dictionary

    Returns:
        AclConfig instance
    """
    logging_config = LoggingConfig()
    if config_dict.get("logging"):
        logging_config = parse_logging_config(config_dict["logging"])

    roles = []
    for name, role_dict in (config_dict.get("roles") or {}).items():
        roles.append(parse_role_config(str(name), role_dict))

    return AclConfig(logging=logging_config, roles=roles)


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
        TypeError: If the document root is not a mapping
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with config_file.open("r") as f:
        config = yaml.safe_load(f)

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise TypeError(
            f"Configuration root must be a mapping, got {type(config).__name__}"
        )

    # Role and resource names are exact strings, so only the logging
    # section is expanded.
    if "logging" in config:
        config["logging"] = _expand_env_vars(config["logging"])

    return config


def _expand_env_vars(obj: Any) -> Any:
    """Recursively expand environment variables in configuration.

    Args:
        obj: Configuration object (dict, list, str, etc.)

    Returns:
        Configuration with expanded environment variables
    """
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    elif isinstance(obj, str):
        return os.path.expandvars(obj)
    else:
        return obj


def load_typed_config(config_path: Union[str, Path]) -> AclConfig:
    """Load and parse configuration into typed dataclass.

    Args:
        config_path: Path to configuration file

    Returns:
        AclConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
    """
    return parse_config(load_config(config_path))
