"""aclkit: an in-memory access control list.

Tracks named roles, the resources each role may or may not access, and
role-to-role inheritance of permissions.
"""

from .acl import (
    Acl,
    AclError,
    AclInterface,
    InvalidArgumentError,
    ResourceAccess,
    Role,
    build_acl,
    load_acl,
)

__version__ = "1.0.0"

__all__ = [
    "Acl",
    "AclError",
    "AclInterface",
    "InvalidArgumentError",
    "ResourceAccess",
    "Role",
    "build_acl",
    "load_acl",
]
