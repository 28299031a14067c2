"""Build an access control list from a policy configuration."""

from pathlib import Path
from typing import Union

from ..common.config import AclConfig, load_typed_config
from ..common.logger import get_logger, setup_from_config
from .acl import Acl

logger = get_logger("aclkit.loader")


def build_acl(config: AclConfig) -> Acl:
    """Create an Acl from a typed configuration.

    Roles are created in file order with their allow and deny lists
    applied. Inheritance is applied afterwards so a role may inherit from
    a role declared later in the file.

    Args:
        config: AclConfig instance

    Returns:
        Populated Acl
    """
    acl = Acl()

    for role in config.roles:
        acl.add_role(role.name)
        if role.allow:
            acl.allow(role.name, role.allow)
        if role.deny:
            acl.deny(role.name, role.deny)

    for role in config.roles:
        if role.inherits:
            acl.inherit(role.name, role.inherits)

    return acl


def load_acl(config_path: Union[str, Path], configure_logging: bool = True) -> Acl:
    """Load a policy file and build an Acl from it.

    Args:
        config_path: Path to the YAML policy file
        configure_logging: Set up the aclkit logger from the logging section

    Returns:
        Populated Acl
    """
    config = load_typed_config(config_path)

    if configure_logging:
        setup_from_config(config.logging)

    acl = build_acl(config)
    logger.info(f"Loaded {len(config.roles)} roles from {config_path}")
    return acl
